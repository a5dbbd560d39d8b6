r"""Contain the value objects exchanged with the request executors.

All the objects are immutable dataclasses. Queries and headers are
ordered lists so duplicated keys are kept in the order they were given.
"""

from __future__ import annotations

__all__ = [
    "Basic",
    "Bearer",
    "Header",
    "MultipartPart",
    "Query",
    "RawResponse",
    "Response",
]

import base64
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from typedhttp.exceptions import MultipartPartError

if TYPE_CHECKING:
    from datetime import datetime

T = TypeVar("T")


@dataclass(frozen=True)
class Query:
    r"""Implement a query parameter appended to the request URL.

    Args:
        key: The parameter name.
        value: The parameter value.
    """

    key: str
    value: str


@dataclass(frozen=True)
class Header:
    r"""Implement a request header.

    Args:
        key: The header name.
        value: The header value.
    """

    key: str
    value: str


@dataclass(frozen=True)
class Basic:
    r"""Implement the credentials of the HTTP Basic authentication.

    Example:
        ```pycon
        >>> from typedhttp.models import Basic
        >>> Basic("user", "pass").to_header()
        Header(key='Authorization', value='Basic dXNlcjpwYXNz')

        ```
    """

    username: str
    password: str

    def to_header(self) -> Header:
        credentials = f"{self.username}:{self.password}".encode()
        return Header("Authorization", f"Basic {base64.b64encode(credentials).decode('ascii')}")


@dataclass(frozen=True)
class Bearer:
    r"""Implement a bearer token.

    Example:
        ```pycon
        >>> from typedhttp.models import Bearer
        >>> Bearer("abc").to_header()
        Header(key='Authorization', value='Bearer abc')

        ```
    """

    token: str

    def to_header(self) -> Header:
        return Header("Authorization", f"Bearer {self.token}")


@dataclass(frozen=True)
class MultipartPart:
    r"""Implement one section of a ``multipart/form-data`` body.

    Exactly one of ``body`` and ``file_path`` must be set. ``body`` is
    inlined in the section (``str`` and ``bytes`` verbatim, any other
    value as JSON) while ``file_path`` points to a file streamed from
    disk.

    Args:
        name: The form field name.
        body: The inline payload.
        file_path: The path of the file to upload.
        content_type: The optional ``Content-Type`` of the section.
        file_name: The ``filename`` announced for a file section.
            Defaults to the basename of ``file_path``.

    Example:
        ```pycon
        >>> from typedhttp.models import MultipartPart
        >>> part = MultipartPart(name="image", file_path="/tmp/cat.png")
        >>> part.is_file
        True
        >>> part.filename
        'cat.png'

        ```
    """

    name: str
    body: Any = None
    file_path: str | Path | None = None
    content_type: str | None = None
    file_name: str | None = None

    @property
    def is_file(self) -> bool:
        return self.file_path is not None

    @property
    def filename(self) -> str | None:
        if self.file_name is not None:
            return self.file_name
        if self.file_path is None:
            return None
        return Path(self.file_path).name

    def validate(self) -> None:
        r"""Check that exactly one payload is set.

        Raises:
            MultipartPartError: if both or none of ``body`` and
                ``file_path`` are set.
        """
        if self.body is not None and self.file_path is not None:
            msg = f"multipart part {self.name!r} cannot have both a body and a file_path"
            raise MultipartPartError(msg)
        if self.body is None and self.file_path is None:
            msg = f"multipart part {self.name!r} must have a body or a file_path"
            raise MultipartPartError(msg)


@dataclass(frozen=True)
class RawResponse:
    r"""Implement the untyped result of one request attempt.

    A ``status_code`` equal to ``None`` means that the transport did not
    produce any response, and ``exception`` then holds the reason.

    Args:
        status_code: The HTTP status code.
        body: The body decoded as text.
        headers: The response headers, each key mapped to its values.
        timestamp: The response date.
        exception: The exception captured during the attempt.
    """

    status_code: int | None = None
    body: str | None = None
    headers: dict[str, list[str]] = field(default_factory=dict)
    timestamp: datetime | None = None
    exception: BaseException | None = None


@dataclass(frozen=True)
class Response(Generic[T]):
    r"""Implement the typed result returned to the caller.

    ``body`` is ``None`` when the response had no body or when the body
    could not be decoded; ``raw`` keeps the text for diagnostics.

    Example:
        ```pycon
        >>> from typedhttp.models import Response
        >>> response = Response(status_code=200, body={"id": 1}, raw='{"id": 1}')
        >>> response.is_successful
        True

        ```
    """

    status_code: int | None = None
    body: T | None = None
    headers: dict[str, list[str]] = field(default_factory=dict)
    raw: str | None = None
    timestamp: datetime | None = None
    exception: BaseException | None = None

    @property
    def is_successful(self) -> bool:
        r"""Indicate if the status code is 2xx and nothing failed."""
        return (
            self.exception is None
            and self.status_code is not None
            and 200 <= self.status_code < 300
        )

    def header(self, key: str) -> str | None:
        r"""Return the first value of a response header.

        The lookup is case-insensitive.
        """
        key = key.lower()
        for name, values in self.headers.items():
            if name.lower() == key and values:
                return values[0]
        return None
