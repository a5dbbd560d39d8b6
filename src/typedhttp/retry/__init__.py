r"""Retry package implementing the bounded retry loop.

Public API:
    - RetryPolicy: Configuration for retry behavior
    - RetryDecider: Logic for deciding whether to retry
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "RetryDecider",
    "RetryExecutor",
    "RetryPolicy",
]

from typedhttp.retry.decider import RetryDecider
from typedhttp.retry.executor import RetryExecutor
from typedhttp.retry.executor_async import AsyncRetryExecutor
from typedhttp.retry.policy import RetryPolicy
