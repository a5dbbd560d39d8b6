r"""Dispatch blocking requests on a worker pool.

This module owns the thread pool dedicated to blocking I/O and the
``RequestHandle`` returned by the callback-based API. The handle adapts
a ``concurrent.futures.Future`` so that the completion handler runs
exactly once, unless the handle is cancelled before the result is
delivered.

Note:
    Cancelling a handle does not interrupt the transport: the background
    work runs until it completes or times out and its result is dropped.
"""

from __future__ import annotations

__all__ = [
    "CompletionHandler",
    "RequestHandle",
    "RequestState",
    "dispatch",
    "get_worker_pool",
    "shutdown_worker_pool",
]

import contextvars
import enum
import logging
import threading
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from typedhttp.exceptions import DeserializationError, TransportError

if TYPE_CHECKING:
    from typedhttp.models import Response

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")

CompletionHandler = Callable[["Response[Any] | None", "BaseException | None"], None]

_pool: ThreadPoolExecutor | None = None
_pool_lock = threading.Lock()


def get_worker_pool() -> ThreadPoolExecutor:
    r"""Return the process-wide pool used for blocking requests.

    The pool is created on first use.
    """
    global _pool  # noqa: PLW0603
    with _pool_lock:
        if _pool is None:
            _pool = ThreadPoolExecutor(thread_name_prefix="typedhttp")
        return _pool


def shutdown_worker_pool(wait: bool = True) -> None:
    r"""Shut down the worker pool. A new pool is created on next use."""
    global _pool  # noqa: PLW0603
    with _pool_lock:
        pool, _pool = _pool, None
    if pool is not None:
        pool.shutdown(wait=wait)


def dispatch(func: Callable[..., T], /, *args: Any) -> Future[T]:
    r"""Run ``func(*args)`` on the worker pool.

    The context variables of the caller, e.g. the correlation ID of
    the structured logs, are visible to ``func``.

    Example:
        ```pycon
        >>> from typedhttp.core.dispatch import dispatch
        >>> dispatch(pow, 2, 3).result()
        8

        ```
    """
    context = contextvars.copy_context()
    return get_worker_pool().submit(context.run, func, *args)


class RequestState(enum.Enum):
    r"""Enumerate the states of a dispatched request."""

    BUILT = "built"
    IN_FLIGHT = "in_flight"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class RequestHandle(Generic[T]):
    r"""Track a request dispatched with a completion handler.

    Args:
        on_complete: The handler called with ``(response, None)`` on
            success or ``(None, failure)`` on failure.
        label: Name used in the log messages.

    Example:
        ```pycon
        >>> from concurrent.futures import Future
        >>> from typedhttp.core.dispatch import RequestHandle
        >>> from typedhttp.models import Response
        >>> calls = []
        >>> handle = RequestHandle(lambda success, failure: calls.append((success, failure)))
        >>> future = Future()
        >>> handle.attach(future)
        >>> future.set_result(Response(status_code=200))
        >>> calls
        [(Response(status_code=200, body=None, headers={}, raw=None, timestamp=None, exception=None), None)]
        >>> handle.state
        <RequestState.COMPLETED: 'completed'>

        ```
    """

    def __init__(self, on_complete: CompletionHandler, label: str = "request") -> None:
        self._on_complete = on_complete
        self._label = label
        self._lock = threading.Lock()
        self._state = RequestState.BUILT
        self._future: Future[Response[T]] | None = None
        self._done = threading.Event()

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def cancelled(self) -> bool:
        return self._state is RequestState.CANCELLED

    @property
    def done(self) -> bool:
        return self._done.is_set()

    def attach(self, future: Future[Response[T]]) -> None:
        r"""Subscribe the handle to the future of the background work.

        The future is cancelled if the handle was cancelled first.
        """
        with self._lock:
            self._future = future
            if self._state is RequestState.BUILT:
                self._state = RequestState.IN_FLIGHT
            cancelled = self._state is RequestState.CANCELLED
        if cancelled:
            future.cancel()
        future.add_done_callback(self._complete)

    def cancel(self) -> bool:
        r"""Cancel the handle.

        Returns:
            ``True`` if the completion handler will not be called,
            ``False`` if the result was already delivered.
        """
        with self._lock:
            if self._state in (RequestState.COMPLETED, RequestState.FAILED):
                return False
            self._state = RequestState.CANCELLED
            future = self._future
        if future is not None:
            # dropped from the queue if it did not start yet
            future.cancel()
        logger.debug(f"{self._label}: request cancelled")
        self._done.set()
        return True

    def wait(self, timeout: float | None = None) -> bool:
        r"""Wait until the handler ran or the handle was cancelled."""
        return self._done.wait(timeout)

    def result(self, timeout: float | None = None) -> Response[T]:
        r"""Wait for the response of the background work.

        Args:
            timeout: The maximum number of seconds to wait.

        Raises:
            CancelledError: if the handle was cancelled.
            TimeoutError: if the response is not available in time.
            RuntimeError: if the handle is not attached to a request.
        """
        if self._future is None:
            msg = f"{self._label}: the handle is not attached to a request"
            raise RuntimeError(msg)
        if self.cancelled:
            raise CancelledError
        return self._future.result(timeout)

    def _complete(self, future: Future[Response[T]]) -> None:
        success: Response[T] | None = None
        failure: BaseException | None = None
        if future.cancelled():
            failure = TransportError("The request was cancelled.")
        elif future.exception() is not None:
            failure = future.exception()
        else:
            response = future.result()
            if response.status_code is None:
                failure = TransportError("Could not make request.", cause=response.exception)
            elif response.exception is not None and not isinstance(
                response.exception, DeserializationError
            ):
                failure = response.exception
            else:
                success = response

        with self._lock:
            if self._state is RequestState.CANCELLED:
                return
            self._state = RequestState.COMPLETED if failure is None else RequestState.FAILED

        try:
            self._on_complete(success, failure)
        except Exception:
            logger.exception(f"{self._label}: the completion handler raised an exception")
        finally:
            self._done.set()
