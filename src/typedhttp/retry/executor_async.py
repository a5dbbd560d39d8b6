r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that awaits a
non-blocking request with the bounded retry loop of a ``RetryPolicy``.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
from typing import TYPE_CHECKING, TypeVar

from typedhttp.retry.decider import RetryDecider

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from typedhttp.models import RawResponse, Response
    from typedhttp.retry.policy import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)

R = TypeVar("R", bound="Response | RawResponse")


class AsyncRetryExecutor:
    """Executes async requests with the retry loop of a policy.

    Note:
        This class uses asyncio.sleep() between attempts, allowing other
        tasks to run during the wait.

    Attributes:
        policy: The retry policy.
        decider: Logic for deciding whether to retry.

    Example:
        ```pycon
        >>> import asyncio
        >>> from typedhttp.models import Response
        >>> from typedhttp.retry import AsyncRetryExecutor, RetryPolicy
        >>>
        >>> async def attempt():
        ...     return Response(status_code=200)
        ...
        >>> executor = AsyncRetryExecutor(RetryPolicy(retry_count=2, retry_delay=0))
        >>> asyncio.run(executor.execute(attempt, label="GET")).status_code
        200

        ```
    """

    def __init__(self, policy: RetryPolicy) -> None:
        self.policy = policy
        self.decider = RetryDecider(policy)

    async def execute(self, request_func: Callable[[], Awaitable[R]], label: str = "request") -> R:
        """Await the request function until it succeeds or the policy is
        exhausted.

        Args:
            request_func: Coroutine function performing one attempt.
            label: Name used in the log messages (e.g. the HTTP method).

        Returns:
            The first response that should not be retried, or the
            response of the last attempt.
        """
        max_attempts = self.policy.max_attempts
        for attempt in range(max_attempts):
            response = await request_func()
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
            await asyncio.sleep(self.policy.retry_delay)
        return response  # pragma: no cover
