r"""Define the exceptions raised or captured by ``typedhttp``.

Two families coexist:

- Errors that describe a failed exchange (``TransportError``,
  ``DeserializationError``). They are never raised by the request
  executors; they are captured in the ``exception`` field of the
  returned ``RawResponse`` or ``Response``.
- Caller errors (``InvalidUrlError``, ``MultipartPartError``). They are
  raised synchronously when the request is built.
"""

from __future__ import annotations

__all__ = [
    "DeserializationError",
    "InvalidUrlError",
    "MultipartPartError",
    "TransportError",
    "TypedHttpError",
]


class TypedHttpError(Exception):
    r"""Base class of all the ``typedhttp`` exceptions."""


class TransportError(TypedHttpError):
    r"""Indicate that the request could not produce a response.

    Args:
        message: The error message.
        url: The URL that was requested, if known.
        cause: The underlying exception, if any.

    Example:
        ```pycon
        >>> from typedhttp.exceptions import TransportError
        >>> error = TransportError("Could not make request.", url="https://example.com")
        >>> error.url
        'https://example.com'

        ```
    """

    def __init__(
        self, message: str, *, url: str | None = None, cause: BaseException | None = None
    ) -> None:
        super().__init__(message)
        self.url = url
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class DeserializationError(TypedHttpError):
    r"""Indicate that a response body does not match the requested type.

    Args:
        message: The error message.
        raw: The raw body that failed to decode.
        response_type: The requested type.
    """

    def __init__(
        self, message: str, *, raw: str | None = None, response_type: object = None
    ) -> None:
        super().__init__(message)
        self.raw = raw
        self.response_type = response_type


class InvalidUrlError(TypedHttpError, ValueError):
    r"""Raised when the composed URL cannot be opened."""


class MultipartPartError(TypedHttpError, ValueError):
    r"""Raised when a multipart part has both or none of its payloads."""
