r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs a blocking
request function with the bounded retry loop of a ``RetryPolicy``.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, TypeVar

from typedhttp.retry.decider import RetryDecider

if TYPE_CHECKING:
    from collections.abc import Callable

    from typedhttp.models import RawResponse, Response
    from typedhttp.retry.policy import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)

R = TypeVar("R", bound="Response | RawResponse")


class RetryExecutor:
    """Executes blocking requests with the retry loop of a policy.

    The loop never raises on exhaustion: the response of the last
    attempt is returned and the caller inspects its status code and
    exception.

    Attributes:
        policy: The retry policy.
        decider: Logic for deciding whether to retry.

    Example:
        ```pycon
        >>> from typedhttp.models import Response
        >>> from typedhttp.retry import RetryExecutor, RetryPolicy
        >>> responses = iter([Response(status_code=500), Response(status_code=200)])
        >>> executor = RetryExecutor(
        ...     RetryPolicy(retry_count=3, retry_delay=0, retry_on_status=range(500, 600))
        ... )
        >>> executor.execute(lambda: next(responses), label="GET").status_code
        200

        ```
    """

    def __init__(self, policy: RetryPolicy) -> None:
        self.policy = policy
        self.decider = RetryDecider(policy)

    def execute(self, request_func: Callable[[], R], label: str = "request") -> R:
        """Execute the request function until it succeeds or the policy
        is exhausted.

        Args:
            request_func: Function performing one attempt.
            label: Name used in the log messages (e.g. the HTTP method).

        Returns:
            The first response that should not be retried, or the
            response of the last attempt.
        """
        max_attempts = self.policy.max_attempts
        for attempt in range(max_attempts):
            response = request_func()
            should_retry, reason = self.decider.should_retry(response)
            if not should_retry:
                return response
            remaining = max_attempts - attempt - 1
            if remaining == 0:
                logger.error(
                    f"{label}: maximum attempts exceeded ({max_attempts}), last reason: {reason}"
                )
                return response
            logger.debug(f"{label}: will retry ({reason}), remaining attempts: {remaining}")
            time.sleep(self.policy.retry_delay)
        return response  # pragma: no cover
