from __future__ import annotations

import pytest

from typedhttp.core.validation import (
    validate_buffer_size,
    validate_multipart_parts,
    validate_retry_params,
    validate_timeout,
)
from typedhttp.exceptions import MultipartPartError
from typedhttp.models import MultipartPart

######################################
#     Tests for validate_timeout     #
######################################


@pytest.mark.parametrize("timeout", [1, 6000, 20000])
def test_validate_timeout_valid(timeout: int) -> None:
    validate_timeout(timeout)


@pytest.mark.parametrize("timeout", [0, -1])
def test_validate_timeout_invalid(timeout: int) -> None:
    with pytest.raises(ValueError, match="connect_timeout must be > 0"):
        validate_timeout(timeout, name="connect_timeout")


##########################################
#     Tests for validate_buffer_size     #
##########################################


def test_validate_buffer_size_valid() -> None:
    validate_buffer_size(1024)


def test_validate_buffer_size_invalid() -> None:
    with pytest.raises(ValueError, match="buffer_size must be > 0, got 0"):
        validate_buffer_size(0)


###########################################
#     Tests for validate_retry_params     #
###########################################


@pytest.mark.parametrize(("count", "delay"), [(0, 0.0), (3, 0.5)])
def test_validate_retry_params_valid(count: int, delay: float) -> None:
    validate_retry_params(retry_count=count, retry_delay=delay)


def test_validate_retry_params_negative_count() -> None:
    with pytest.raises(ValueError, match="retry_count must be >= 0, got -1"):
        validate_retry_params(retry_count=-1, retry_delay=1.0)


def test_validate_retry_params_negative_delay() -> None:
    with pytest.raises(ValueError, match="retry_delay must be >= 0, got -0.5"):
        validate_retry_params(retry_count=1, retry_delay=-0.5)


##############################################
#     Tests for validate_multipart_parts     #
##############################################


def test_validate_multipart_parts_valid() -> None:
    validate_multipart_parts(
        [MultipartPart(name="data", body={"a": 1}), MultipartPart(name="f", file_path="a.txt")]
    )


def test_validate_multipart_parts_empty() -> None:
    with pytest.raises(ValueError, match="at least one part"):
        validate_multipart_parts([])


def test_validate_multipart_parts_invalid_part() -> None:
    with pytest.raises(MultipartPartError):
        validate_multipart_parts(
            [MultipartPart(name="data", body={"a": 1}), MultipartPart(name="empty")]
        )
