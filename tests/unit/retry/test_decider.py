r"""Unit tests for retry decider."""

from __future__ import annotations

import httpx
import pytest

from typedhttp.exceptions import DeserializationError
from typedhttp.models import RawResponse, Response
from typedhttp.retry import RetryDecider, RetryPolicy
from typedhttp.status import HttpStatusInterval


@pytest.fixture
def decider() -> RetryDecider:
    return RetryDecider(
        RetryPolicy(
            retry_count=3,
            retry_delay=0,
            retry_on_status=HttpStatusInterval.SERVER_ERROR,
            retry_on_exceptions=(httpx.TimeoutException,),
        )
    )


def test_retry_decider_creation() -> None:
    """Test RetryDecider initialization."""
    policy = RetryPolicy()
    assert RetryDecider(policy).policy is policy


@pytest.mark.parametrize("status_code", [200, 201, 204, 301, 404])
def test_should_retry_success_no_retry(decider: RetryDecider, status_code: int) -> None:
    """Test that a status outside the range does not retry."""
    assert decider.should_retry(Response(status_code=status_code)) == (False, "success")


@pytest.mark.parametrize("status_code", [500, 503, 599])
def test_should_retry_status_in_range(decider: RetryDecider, status_code: int) -> None:
    """Test that a status in the range retries."""
    assert decider.should_retry(Response(status_code=status_code)) == (
        True,
        f"status {status_code}",
    )


def test_should_retry_raw_response(decider: RetryDecider) -> None:
    """Test that raw responses are supported."""
    assert decider.should_retry(RawResponse(status_code=502)) == (True, "status 502")


def test_should_retry_retryable_exception(decider: RetryDecider) -> None:
    """Test that a configured exception type retries."""
    response = Response(exception=httpx.ReadTimeout("slow"))
    assert decider.should_retry(response) == (True, "ReadTimeout")


def test_should_retry_non_retryable_exception(decider: RetryDecider) -> None:
    """Test that any other exception is terminal, whatever the status."""
    response = Response(status_code=500, exception=httpx.RemoteProtocolError("bad frame"))
    assert decider.should_retry(response) == (False, "non-retryable RemoteProtocolError")


def test_should_retry_undecodable_body_in_range(decider: RetryDecider) -> None:
    """Test that a 500 whose body could not be decoded is retried."""
    response = Response(status_code=500, exception=DeserializationError("bad body"))
    assert decider.should_retry(response) == (True, "status 500")


def test_should_retry_undecodable_body_out_of_range(decider: RetryDecider) -> None:
    """Test that a 200 whose body could not be decoded is not retried."""
    response = Response(status_code=200, exception=DeserializationError("bad body"))
    assert decider.should_retry(response) == (False, "success")


def test_should_retry_no_status_code(decider: RetryDecider) -> None:
    """Test that a response without status and exception retries."""
    assert decider.should_retry(Response()) == (True, "no status code")
