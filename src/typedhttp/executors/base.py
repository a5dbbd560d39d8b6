r"""Shared request/response cycle of the verb executors.

A ``VerbExecutor`` owns the request logic of one HTTP method and exposes
it in three forms built on the same blocking operation:

- ``execute``: blocking, returns a ``RawResponse``.
- ``submit``: dispatches ``execute`` on the worker pool and returns a
  ``concurrent.futures.Future``.
- ``execute_async``: awaits the future of ``submit``.

The ``process*`` methods add the response normalization and the retry
policy on top of these forms.
"""

from __future__ import annotations

__all__ = ["JsonBodyExecutor", "VerbExecutor"]

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, ClassVar

import httpx

from typedhttp.core.codec import BodyCodec
from typedhttp.core.dispatch import RequestHandle, dispatch
from typedhttp.core.headers import merge_headers
from typedhttp.core.normalizer import normalize_response
from typedhttp.core.url import compose_url
from typedhttp.models import RawResponse
from typedhttp.retry import AsyncRetryExecutor, RetryExecutor
from typedhttp.transport import HttpxTransport
from typedhttp.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from concurrent.futures import Future

    from typedhttp.core.config import ClientConfig
    from typedhttp.core.dispatch import CompletionHandler
    from typedhttp.models import Header, Query, Response
    from typedhttp.transport import Connection, Transport

logger: logging.Logger = logging.getLogger(__name__)


class VerbExecutor:
    r"""Base class of the executors of one HTTP method.

    The executor keeps no mutable state: every call opens its own
    connection so the same instance can be used from several threads.

    Args:
        config: The client configuration. Its default headers are read
            once per request.
        transport: The transport used to open connections. Defaults to
            ``HttpxTransport``.
        codec: The codec used for the request and response bodies.
    """

    method: ClassVar[str]

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Transport | None = None,
        codec: BodyCodec | None = None,
    ) -> None:
        self._config = config
        self._transport = transport or HttpxTransport()
        self._codec = codec or BodyCodec()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_url={self._config.base_url!r})"

    # Blocking / future / awaitable forms on raw responses

    def execute(
        self,
        endpoint: str,
        payload: Any = None,
        *,
        queries: Sequence[Query] | None = None,
        headers: Sequence[Header] | None = None,
    ) -> RawResponse:
        r"""Send the request and wait for the raw response.

        I/O failures are captured in the ``exception`` field of the
        returned response.

        Args:
            endpoint: The endpoint appended to the base URL.
            payload: The request payload, ignored by the methods
                without a body.
            queries: The optional query parameters.
            headers: The optional request headers. They override the
                default headers with the same key.

        Returns:
            The raw response.

        Raises:
            InvalidUrlError: If the composed URL is malformed.
            ValueError: If the payload is invalid.
        """
        return self._execute(endpoint, self._prepare(payload), queries, headers)

    def submit(
        self,
        endpoint: str,
        payload: Any = None,
        *,
        queries: Sequence[Query] | None = None,
        headers: Sequence[Header] | None = None,
    ) -> Future[RawResponse]:
        r"""Dispatch the request on the worker pool.

        The payload is validated before the dispatch. Any exception
        raised by the background work is captured in the ``exception``
        field of the response.
        """
        prepared = self._prepare(payload)
        return dispatch(self._execute_captured, endpoint, prepared, queries, headers)

    async def execute_async(
        self,
        endpoint: str,
        payload: Any = None,
        *,
        queries: Sequence[Query] | None = None,
        headers: Sequence[Header] | None = None,
    ) -> RawResponse:
        r"""Send the request on the worker pool and await the raw
        response."""
        future = self.submit(endpoint, payload, queries=queries, headers=headers)
        return await asyncio.wrap_future(future)

    # Typed forms

    def process(
        self,
        endpoint: str,
        payload: Any = None,
        *,
        response_type: Any = Any,
        queries: Sequence[Query] | None = None,
        headers: Sequence[Header] | None = None,
    ) -> Response[Any]:
        r"""Send the request, applying the retry policy, and return the
        typed response."""
        prepared = self._prepare(payload)
        return self._process_retrying(
            self._execute, endpoint, prepared, queries, headers, response_type
        )

    async def process_async(
        self,
        endpoint: str,
        payload: Any = None,
        *,
        response_type: Any = Any,
        queries: Sequence[Query] | None = None,
        headers: Sequence[Header] | None = None,
    ) -> Response[Any]:
        r"""Await the typed response, applying the retry policy between
        attempts without blocking the event loop."""
        prepared = self._prepare(payload)

        async def attempt() -> Response[Any]:
            future = dispatch(self._execute_captured, endpoint, prepared, queries, headers)
            raw = await asyncio.wrap_future(future)
            return normalize_response(raw, response_type, self._codec)

        policy = self._config.retry_policy
        if policy is None:
            return await attempt()
        return await AsyncRetryExecutor(policy).execute(attempt, label=self.method)

    def process_callback(
        self,
        endpoint: str,
        payload: Any = None,
        *,
        on_complete: CompletionHandler,
        response_type: Any = Any,
        queries: Sequence[Query] | None = None,
        headers: Sequence[Header] | None = None,
    ) -> RequestHandle[Any]:
        r"""Dispatch the request and call ``on_complete`` with the result.

        ``on_complete`` receives ``(response, None)`` on success or
        ``(None, failure)`` on failure, exactly once, unless the returned
        handle is cancelled first. The retry loop runs on the worker
        thread.
        """
        prepared = self._prepare(payload)
        handle: RequestHandle[Any] = RequestHandle(on_complete, label=self.method)
        future = dispatch(
            self._process_retrying,
            self._execute_captured,
            endpoint,
            prepared,
            queries,
            headers,
            response_type,
        )
        handle.attach(future)
        return handle

    def _process_retrying(
        self,
        execute: Callable[..., RawResponse],
        endpoint: str,
        prepared: Any,
        queries: Sequence[Query] | None,
        headers: Sequence[Header] | None,
        response_type: Any,
    ) -> Response[Any]:
        def attempt() -> Response[Any]:
            raw = execute(endpoint, prepared, queries, headers)
            return normalize_response(raw, response_type, self._codec)

        policy = self._config.retry_policy
        if policy is None:
            return attempt()
        return RetryExecutor(policy).execute(attempt, label=self.method)

    # Hooks of the subclasses

    def _prepare(self, payload: Any) -> Any:  # noqa: ARG002
        r"""Validate and encode the payload in the caller thread."""
        return None

    def _body_headers(self, prepared: Any) -> Sequence[Header]:  # noqa: ARG002
        return ()

    def _write_body(self, connection: Connection, prepared: Any) -> None:
        r"""Write the prepared payload, nothing by default."""

    # Request/response cycle

    def _execute_captured(
        self,
        endpoint: str,
        prepared: Any,
        queries: Sequence[Query] | None,
        headers: Sequence[Header] | None,
    ) -> RawResponse:
        try:
            return self._execute(endpoint, prepared, queries, headers)
        except Exception as exc:
            logger.error(f"{self.method} {endpoint}: {exc!r}")
            return RawResponse(exception=exc)

    def _execute(
        self,
        endpoint: str,
        prepared: Any,
        queries: Sequence[Query] | None,
        headers: Sequence[Header] | None,
    ) -> RawResponse:
        url = compose_url(self._config.base_url, endpoint, queries)
        connection = self._transport.open(
            url, self._config.connect_timeout, self._config.read_timeout
        )
        start_time = time.perf_counter()
        status_code: int | None = None
        try:
            connection.set_method(self.method)
            for header in merge_headers(
                self._config.default_headers, self._body_headers(prepared), headers
            ):
                connection.add_header(header.key, header.value)
            self._write_body(connection, prepared)

            status_code = connection.status_code()
            try:
                body = connection.read_body()
            except httpx.TimeoutException as exc:
                logger.error(f"{self.method} {url}: {exc!r}")
                return RawResponse(exception=exc)
            except httpx.HTTPStatusError:
                try:
                    body = connection.read_error_body()
                except httpx.HTTPError as exc:
                    logger.error(f"{self.method} {url}: could not read the error stream ({exc!r})")
                    return self._build_response(connection, status_code, None, exc)

            return self._build_response(
                connection, status_code, body.decode("utf-8", errors="replace"), None
            )
        except (httpx.HTTPError, OSError) as exc:
            logger.error(f"{self.method} {url}: {exc!r}")
            return RawResponse(exception=exc)
        finally:
            connection.close()
            log_structured(
                logger,
                logging.DEBUG,
                f"{self.method} {url} completed",
                method=self.method,
                url=url,
                status_code=status_code,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
            )

    def _build_response(
        self,
        connection: Connection,
        status_code: int,
        body: str | None,
        exception: BaseException | None,
    ) -> RawResponse:
        return RawResponse(
            status_code=status_code,
            body=body,
            headers=connection.response_headers(),
            timestamp=connection.response_date() or datetime.now(timezone.utc),
            exception=exception,
        )


class JsonBodyExecutor(VerbExecutor):
    r"""Base class of the executors sending a JSON body.

    The payload is serialized by the codec before the request is
    dispatched, so a payload that cannot be serialized raises in the
    caller thread.
    """

    def _prepare(self, payload: Any) -> bytes:
        return self._codec.serialize(payload).encode("utf-8")

    def _write_body(self, connection: Connection, prepared: bytes) -> None:
        connection.write_body(prepared)
