r"""Configuration dataclass for retry behavior."""

from __future__ import annotations

__all__ = ["DEFAULT_RETRY_COUNT", "DEFAULT_RETRY_DELAY", "RetryPolicy"]

from dataclasses import dataclass

from typedhttp.core.validation import validate_retry_params
from typedhttp.status import HttpStatusInterval

# Number of retries after the first attempt
DEFAULT_RETRY_COUNT = 1

# Fixed delay in seconds between two attempts
DEFAULT_RETRY_DELAY = 3.0


@dataclass(frozen=True)
class RetryPolicy:
    """Configuration for retry behavior.

    A request is attempted at most ``retry_count + 1`` times, waiting
    ``retry_delay`` seconds between two attempts. A response is retried
    when its status code is in ``retry_on_status`` or when it carries an
    exception whose type is in ``retry_on_exceptions``.

    Attributes:
        retry_count: Number of retries after the first attempt. 0 means
            a single attempt.
        retry_delay: Fixed delay in seconds between two attempts.
        retry_on_status: The status codes that trigger a retry.
        retry_on_exceptions: The exception types that trigger a retry.

    Example:
        ```pycon
        >>> import httpx
        >>> from typedhttp.retry import RetryPolicy
        >>> from typedhttp.status import HttpStatusInterval
        >>> policy = RetryPolicy(
        ...     retry_count=3,
        ...     retry_delay=0.5,
        ...     retry_on_status=HttpStatusInterval.SERVER_ERROR,
        ...     retry_on_exceptions=(httpx.TimeoutException,),
        ... )
        >>> policy.max_attempts
        4
        >>> policy.triggers_status(503)
        True

        ```
    """

    retry_count: int = DEFAULT_RETRY_COUNT
    retry_delay: float = DEFAULT_RETRY_DELAY
    retry_on_status: HttpStatusInterval | range = HttpStatusInterval.CLIENT_ERROR
    retry_on_exceptions: tuple[type[BaseException], ...] = ()

    def __post_init__(self) -> None:
        validate_retry_params(retry_count=self.retry_count, retry_delay=self.retry_delay)
        object.__setattr__(self, "retry_on_exceptions", tuple(self.retry_on_exceptions))

    @property
    def max_attempts(self) -> int:
        return self.retry_count + 1

    @property
    def status_range(self) -> range:
        if isinstance(self.retry_on_status, HttpStatusInterval):
            return self.retry_on_status.range
        return self.retry_on_status

    def triggers_status(self, status_code: int) -> bool:
        return status_code in self.status_range

    def triggers_exception(self, exception: BaseException) -> bool:
        return isinstance(exception, self.retry_on_exceptions)
