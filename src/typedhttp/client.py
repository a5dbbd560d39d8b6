r"""Client for typed HTTP requests.

This module provides ``HttpClient``, the entry point of the package. It
holds the configuration shared by the requests (base URL, timeouts,
default headers, retry policy) and exposes every HTTP method in three
forms: blocking, awaitable and callback-based.
"""

from __future__ import annotations

__all__ = ["HttpClient"]

from typing import TYPE_CHECKING, Any

from typedhttp.core.codec import BodyCodec
from typedhttp.core.config import ClientConfig
from typedhttp.executors import (
    DeleteExecutor,
    GetExecutor,
    MultipartExecutor,
    PatchExecutor,
    PostExecutor,
    PutExecutor,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from typedhttp.core.dispatch import CompletionHandler, RequestHandle
    from typedhttp.executors import VerbExecutor
    from typedhttp.models import Header, MultipartPart, Query, Response
    from typedhttp.retry import RetryPolicy
    from typedhttp.transport import Transport

_EXECUTORS: dict[str, type[VerbExecutor]] = {
    "GET": GetExecutor,
    "POST": PostExecutor,
    "PUT": PutExecutor,
    "PATCH": PatchExecutor,
    "DELETE": DeleteExecutor,
    "MULTIPART": MultipartExecutor,
}


class HttpClient:
    r"""Send typed HTTP requests with a shared configuration.

    Every request opens its own connection, so the client holds no
    connection and can be shared between threads. The configuration is
    an immutable snapshot: ``set_default_headers`` and
    ``remove_default_headers`` replace it as a whole and a request that
    already started keeps the headers it read.

    Args:
        config: The client configuration. Defaults to ``ClientConfig()``.
        transport: The transport used to open connections. Defaults to
            an httpx transport.
        codec: The JSON codec. Defaults to ``BodyCodec()``.

    Example:
        ```pycon
        >>> from typedhttp import ClientConfig, HttpClient, Query
        >>> client = HttpClient(ClientConfig(base_url="https://jsonplaceholder.typicode.com"))
        >>> response = client.get(
        ...     "posts", response_type=list[dict], queries=[Query("userId", "1")]
        ... )  # doctest: +SKIP
        >>> response.status_code  # doctest: +SKIP
        200

        ```
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: Transport | None = None,
        codec: BodyCodec | None = None,
    ) -> None:
        self._config: ClientConfig = config or ClientConfig()
        self._transport = transport
        self._codec = codec or BodyCodec()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_url={self._config.base_url!r})"

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def default_headers(self) -> tuple[Header, ...]:
        return self._config.default_headers

    @property
    def retry_policy(self) -> RetryPolicy | None:
        return self._config.retry_policy

    def set_default_headers(self, headers: Iterable[Header]) -> None:
        r"""Replace the default headers sent with every request."""
        self._config = self._config.with_default_headers(headers)

    def remove_default_headers(self) -> None:
        r"""Remove all the default headers."""
        self._config = self._config.with_default_headers(())

    def executor(self, method: str) -> VerbExecutor:
        r"""Return the executor of an HTTP method.

        Args:
            method: ``GET``, ``POST``, ``PUT``, ``PATCH``, ``DELETE`` or
                ``MULTIPART``.

        Raises:
            ValueError: If the method is not supported.
        """
        try:
            executor_cls = _EXECUTORS[method.upper()]
        except KeyError:
            msg = f"Unsupported method: {method!r}, expected one of {sorted(_EXECUTORS)}"
            raise ValueError(msg) from None
        return executor_cls(self._config, transport=self._transport, codec=self._codec)

    def request(
        self,
        method: str,
        endpoint: str,
        payload: Any = None,
        *,
        response_type: Any = Any,
        queries: Sequence[Query] | None = None,
        headers: Sequence[Header] | None = None,
    ) -> Response[Any]:
        r"""Send a request and wait for the typed response.

        Args:
            method: The HTTP method, or ``MULTIPART``.
            endpoint: The endpoint appended to the base URL.
            payload: The JSON body, or the multipart parts.
            response_type: The type of the decoded body.
            queries: The optional query parameters.
            headers: The optional headers, overriding the default
                headers with the same key.

        Returns:
            The typed response. Transport and decoding failures are
            reported in its ``exception`` field.

        Raises:
            InvalidUrlError: If the composed URL is malformed.
            ValueError: If the method or the payload is invalid.
        """
        return self.executor(method).process(
            endpoint, payload, response_type=response_type, queries=queries, headers=headers
        )

    async def request_async(
        self,
        method: str,
        endpoint: str,
        payload: Any = None,
        *,
        response_type: Any = Any,
        queries: Sequence[Query] | None = None,
        headers: Sequence[Header] | None = None,
    ) -> Response[Any]:
        r"""Send a request on the worker pool and await the typed
        response (see ``request``)."""
        return await self.executor(method).process_async(
            endpoint, payload, response_type=response_type, queries=queries, headers=headers
        )

    def request_callback(
        self,
        method: str,
        endpoint: str,
        payload: Any = None,
        *,
        on_complete: CompletionHandler,
        response_type: Any = Any,
        queries: Sequence[Query] | None = None,
        headers: Sequence[Header] | None = None,
    ) -> RequestHandle[Any]:
        r"""Send a request on the worker pool and call ``on_complete``
        with ``(response, None)`` or ``(None, failure)``.

        Returns:
            The handle that can cancel the notification.
        """
        return self.executor(method).process_callback(
            endpoint,
            payload,
            on_complete=on_complete,
            response_type=response_type,
            queries=queries,
            headers=headers,
        )

    # Blocking forms

    def get(self, endpoint: str, **kwargs: Any) -> Response[Any]:
        r"""Send a GET request (see ``request``)."""
        return self.request("GET", endpoint, **kwargs)

    def post(self, endpoint: str, body: Any, **kwargs: Any) -> Response[Any]:
        r"""Send a POST request with a JSON body (see ``request``)."""
        return self.request("POST", endpoint, body, **kwargs)

    def put(self, endpoint: str, body: Any, **kwargs: Any) -> Response[Any]:
        r"""Send a PUT request with a JSON body (see ``request``)."""
        return self.request("PUT", endpoint, body, **kwargs)

    def patch(self, endpoint: str, body: Any, **kwargs: Any) -> Response[Any]:
        r"""Send a PATCH request with a JSON body (see ``request``)."""
        return self.request("PATCH", endpoint, body, **kwargs)

    def delete(self, endpoint: str, **kwargs: Any) -> Response[Any]:
        r"""Send a DELETE request (see ``request``)."""
        return self.request("DELETE", endpoint, **kwargs)

    def multipart(
        self, endpoint: str, parts: Sequence[MultipartPart], **kwargs: Any
    ) -> Response[Any]:
        r"""Send a ``multipart/form-data`` POST request (see ``request``)."""
        return self.request("MULTIPART", endpoint, parts, **kwargs)

    # Awaitable forms

    async def get_async(self, endpoint: str, **kwargs: Any) -> Response[Any]:
        return await self.request_async("GET", endpoint, **kwargs)

    async def post_async(self, endpoint: str, body: Any, **kwargs: Any) -> Response[Any]:
        return await self.request_async("POST", endpoint, body, **kwargs)

    async def put_async(self, endpoint: str, body: Any, **kwargs: Any) -> Response[Any]:
        return await self.request_async("PUT", endpoint, body, **kwargs)

    async def patch_async(self, endpoint: str, body: Any, **kwargs: Any) -> Response[Any]:
        return await self.request_async("PATCH", endpoint, body, **kwargs)

    async def delete_async(self, endpoint: str, **kwargs: Any) -> Response[Any]:
        return await self.request_async("DELETE", endpoint, **kwargs)

    async def multipart_async(
        self, endpoint: str, parts: Sequence[MultipartPart], **kwargs: Any
    ) -> Response[Any]:
        return await self.request_async("MULTIPART", endpoint, parts, **kwargs)

    # Callback forms

    def get_callback(
        self, endpoint: str, on_complete: CompletionHandler, **kwargs: Any
    ) -> RequestHandle[Any]:
        return self.request_callback("GET", endpoint, on_complete=on_complete, **kwargs)

    def post_callback(
        self, endpoint: str, body: Any, on_complete: CompletionHandler, **kwargs: Any
    ) -> RequestHandle[Any]:
        return self.request_callback("POST", endpoint, body, on_complete=on_complete, **kwargs)

    def put_callback(
        self, endpoint: str, body: Any, on_complete: CompletionHandler, **kwargs: Any
    ) -> RequestHandle[Any]:
        return self.request_callback("PUT", endpoint, body, on_complete=on_complete, **kwargs)

    def patch_callback(
        self, endpoint: str, body: Any, on_complete: CompletionHandler, **kwargs: Any
    ) -> RequestHandle[Any]:
        return self.request_callback("PATCH", endpoint, body, on_complete=on_complete, **kwargs)

    def delete_callback(
        self, endpoint: str, on_complete: CompletionHandler, **kwargs: Any
    ) -> RequestHandle[Any]:
        return self.request_callback("DELETE", endpoint, on_complete=on_complete, **kwargs)

    def multipart_callback(
        self,
        endpoint: str,
        parts: Sequence[MultipartPart],
        on_complete: CompletionHandler,
        **kwargs: Any,
    ) -> RequestHandle[Any]:
        return self.request_callback(
            "MULTIPART", endpoint, parts, on_complete=on_complete, **kwargs
        )
