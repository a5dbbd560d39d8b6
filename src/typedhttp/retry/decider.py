r"""Retry decision logic for determining whether to retry requests.

This module provides the RetryDecider class that encapsulates the logic
for deciding whether a response should be retried based on its status
code and on the exception it carries.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

import logging
from typing import TYPE_CHECKING

from typedhttp.exceptions import DeserializationError

if TYPE_CHECKING:
    from typedhttp.models import RawResponse, Response
    from typedhttp.retry.policy import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether a response should be retried.

    Args:
        policy: The retry policy.

    Example:
        ```pycon
        >>> from typedhttp.models import Response
        >>> from typedhttp.retry import RetryDecider, RetryPolicy
        >>> decider = RetryDecider(RetryPolicy(retry_on_status=range(500, 600)))
        >>> decider.should_retry(Response(status_code=503))
        (True, 'status 503')
        >>> decider.should_retry(Response(status_code=200))
        (False, 'success')

        ```
    """

    def __init__(self, policy: RetryPolicy) -> None:
        self.policy = policy

    def should_retry(self, response: Response | RawResponse) -> tuple[bool, str]:
        """Determine if a response should trigger a retry.

        An exception whose type is not configured is terminal and is
        never retried, whatever the status code. A body that could not
        be decoded is not a transport failure: the status code decides.

        Args:
            response: The response of the last attempt.

        Returns:
            Tuple of (should_retry, reason).
        """
        exception = response.exception
        if exception is not None and not isinstance(exception, DeserializationError):
            if self.policy.triggers_exception(exception):
                return (True, type(exception).__name__)
            logger.debug(f"Non-retryable exception: {exception!r}")
            return (False, f"non-retryable {type(exception).__name__}")

        if response.status_code is None:
            return (True, "no status code")
        if self.policy.triggers_status(response.status_code):
            return (True, f"status {response.status_code}")
        return (False, "success")
