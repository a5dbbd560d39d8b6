r"""Shared test helpers to fake an HTTP server with
``httpx.MockTransport``."""

from __future__ import annotations

__all__ = ["RecordingHandler", "failing_handler"]

import threading
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


class RecordingHandler:
    r"""Answer the requests with predefined responses and record them.

    The last response is repeated when there are more requests than
    responses. An exception in ``responses`` is raised instead of being
    returned.

    Args:
        responses: The responses (or exceptions) returned in order.
    """

    def __init__(self, responses: Sequence[httpx.Response | Exception]) -> None:
        self._responses = list(responses)
        self._lock = threading.Lock()
        self.requests: list[httpx.Request] = []
        self.bodies: list[bytes] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = request.read()
        with self._lock:
            index = min(len(self.requests), len(self._responses) - 1)
            self.requests.append(request)
            self.bodies.append(body)
        response = self._responses[index]
        if isinstance(response, Exception):
            raise response
        return httpx.Response(
            response.status_code,
            headers=response.headers,
            content=response.content,
        )


def failing_handler(exc: Exception) -> Callable[[httpx.Request], httpx.Response]:
    r"""Return a handler raising ``exc`` for every request."""

    def handler(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
        raise exc

    return handler
