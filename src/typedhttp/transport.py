r"""Implement the transport adapter used by the request executors.

A transport opens one connection per request. The connection collects
the method, the headers and the body, sends the request lazily the first
time the response is accessed, and exposes the response through a
success stream (``read_body``) and an error stream
(``read_error_body``). The default implementation is built on httpx.
"""

from __future__ import annotations

__all__ = ["Connection", "HttpxConnection", "HttpxTransport", "Transport"]

import logging
from email.utils import parsedate_to_datetime
from typing import TYPE_CHECKING, Protocol

import httpx

from typedhttp.exceptions import InvalidUrlError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

logger: logging.Logger = logging.getLogger(__name__)


class Connection(Protocol):
    r"""Define the interface of a single-use connection."""

    def set_method(self, method: str) -> None: ...

    def add_header(self, key: str, value: str) -> None: ...

    def write_body(self, body: bytes | Iterable[bytes]) -> None: ...

    def status_code(self) -> int: ...

    def response_headers(self) -> dict[str, list[str]]: ...

    def response_date(self) -> datetime | None: ...

    def read_body(self) -> bytes: ...

    def read_error_body(self) -> bytes: ...

    def close(self) -> None: ...


class Transport(Protocol):
    r"""Define the interface of a connection factory."""

    def open(self, url: str, connect_timeout: int, read_timeout: int) -> Connection: ...


class HttpxConnection:
    r"""Implement a connection on top of a dedicated ``httpx.Client``.

    Args:
        url: The absolute URL to request.
        client: The client used to send the request. It is closed with
            the connection.
    """

    def __init__(self, url: httpx.URL, client: httpx.Client) -> None:
        self._url = url
        self._client = client
        self._method = "GET"
        self._headers: list[tuple[str, str]] = []
        self._content: bytes | Iterable[bytes] | None = None
        self._response: httpx.Response | None = None

    def set_method(self, method: str) -> None:
        self._method = method

    def add_header(self, key: str, value: str) -> None:
        self._headers.append((key, value))

    def write_body(self, body: bytes | Iterable[bytes]) -> None:
        self._content = body

    def status_code(self) -> int:
        return self._send().status_code

    def response_headers(self) -> dict[str, list[str]]:
        headers: dict[str, list[str]] = {}
        for key, value in self._send().headers.multi_items():
            headers.setdefault(key, []).append(value)
        return headers

    def response_date(self) -> datetime | None:
        date = self._send().headers.get("Date")
        if date is None:
            return None
        try:
            return parsedate_to_datetime(date)
        except (TypeError, ValueError):
            logger.debug(f"Invalid Date header: {date!r}")
            return None

    def read_body(self) -> bytes:
        r"""Read the body of a successful response.

        Raises:
            httpx.HTTPStatusError: if the status code is >= 400. The body
                is then available through ``read_error_body``.
            httpx.TimeoutException: if the server is too slow.
        """
        response = self._send()
        if response.is_error:
            msg = f"Server returned HTTP status {response.status_code} for {self._url}"
            raise httpx.HTTPStatusError(msg, request=response.request, response=response)
        return response.read()

    def read_error_body(self) -> bytes:
        return self._send().read()

    def close(self) -> None:
        if self._response is not None:
            self._response.close()
        self._client.close()

    def _send(self) -> httpx.Response:
        if self._response is None:
            request = self._client.build_request(
                self._method, self._url, headers=self._headers, content=self._content
            )
            self._response = self._client.send(request, stream=True)
        return self._response


class HttpxTransport:
    r"""Open connections backed by httpx.

    Every connection owns its own ``httpx.Client`` so nothing is shared
    between two requests.

    Args:
        transport: An optional httpx transport given to every client,
            e.g. ``httpx.MockTransport`` in tests.

    Example:
        ```pycon
        >>> import httpx
        >>> from typedhttp.transport import HttpxTransport
        >>> transport = HttpxTransport(httpx.MockTransport(lambda request: httpx.Response(204)))
        >>> connection = transport.open("https://api.example.com/items", 1000, 1000)
        >>> connection.set_method("DELETE")
        >>> connection.status_code()
        204
        >>> connection.close()

        ```
    """

    def __init__(self, transport: httpx.BaseTransport | None = None) -> None:
        self._transport = transport

    def open(self, url: str, connect_timeout: int, read_timeout: int) -> HttpxConnection:
        r"""Open a connection.

        Args:
            url: The absolute URL.
            connect_timeout: Maximum milliseconds to connect.
            read_timeout: Maximum milliseconds to wait for data.

        Raises:
            InvalidUrlError: if the URL is malformed or does not use the
                http or https scheme.
        """
        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as exc:
            msg = f"Malformed URL: {url!r}"
            raise InvalidUrlError(msg) from exc
        if parsed.scheme not in ("http", "https") or not parsed.host:
            msg = f"Malformed URL: {url!r}"
            raise InvalidUrlError(msg)

        timeout = httpx.Timeout(read_timeout / 1000, connect=connect_timeout / 1000)
        client = httpx.Client(timeout=timeout, transport=self._transport)
        return HttpxConnection(parsed, client)
