r"""Parameter validation utilities for the client configuration.

This module provides validation functions for the configuration values
and the multipart parts to ensure they meet the required constraints
before a request is sent. All the functions raise synchronously.
"""

from __future__ import annotations

__all__ = [
    "validate_buffer_size",
    "validate_multipart_parts",
    "validate_retry_params",
    "validate_timeout",
]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from typedhttp.models import MultipartPart


def validate_timeout(timeout: int, name: str = "timeout") -> None:
    """Validate a timeout expressed in milliseconds.

    Args:
        timeout: Maximum milliseconds to wait. Must be > 0.
        name: The parameter name used in the error message.

    Raises:
        ValueError: If timeout is <= 0.

    Example:
        ```pycon
        >>> from typedhttp.core.validation import validate_timeout
        >>> validate_timeout(6000)
        >>> validate_timeout(0, name="read_timeout")
        Traceback (most recent call last):
        ...
        ValueError: read_timeout must be > 0, got 0

        ```
    """
    if timeout <= 0:
        msg = f"{name} must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_buffer_size(buffer_size: int) -> None:
    """Validate the chunk size used to stream files.

    Args:
        buffer_size: The chunk size in bytes. Must be > 0.

    Raises:
        ValueError: If buffer_size is <= 0.
    """
    if buffer_size <= 0:
        msg = f"buffer_size must be > 0, got {buffer_size}"
        raise ValueError(msg)


def validate_retry_params(retry_count: int, retry_delay: float) -> None:
    """Validate retry parameters.

    Args:
        retry_count: Number of retries after the first attempt.
            Must be >= 0. A value of 0 means no retry.
        retry_delay: Fixed delay in seconds between two attempts.
            Must be >= 0.

    Raises:
        ValueError: If retry_count or retry_delay is negative.

    Example:
        ```pycon
        >>> from typedhttp.core.validation import validate_retry_params
        >>> validate_retry_params(retry_count=3, retry_delay=0.5)
        >>> validate_retry_params(retry_count=-1, retry_delay=0.5)
        Traceback (most recent call last):
        ...
        ValueError: retry_count must be >= 0, got -1

        ```
    """
    if retry_count < 0:
        msg = f"retry_count must be >= 0, got {retry_count}"
        raise ValueError(msg)
    if retry_delay < 0:
        msg = f"retry_delay must be >= 0, got {retry_delay}"
        raise ValueError(msg)


def validate_multipart_parts(parts: Sequence[MultipartPart]) -> None:
    """Validate the parts of a multipart request.

    Args:
        parts: The parts to send.

    Raises:
        ValueError: If there is no part.
        MultipartPartError: If a part has both or none of its payloads.
    """
    if not parts:
        msg = "a multipart request needs at least one part"
        raise ValueError(msg)
    for part in parts:
        part.validate()
