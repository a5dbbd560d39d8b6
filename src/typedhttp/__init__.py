r"""typedhttp - Typed HTTP client with pluggable execution modes.

This package sends GET, POST, PUT, PATCH, DELETE and multipart requests,
serializes the request bodies to JSON and decodes the response bodies
into the requested type. Built on top of httpx for the transport and
pydantic for the JSON codec.

Key Features:
    - Blocking, awaitable and callback-based forms of every HTTP method
    - Typed ``Response`` envelopes that never raise on I/O failures
    - ``multipart/form-data`` uploads streamed from disk
    - Optional retry policy driven by status ranges and exception types
    - Default headers with Basic and Bearer authorization helpers

Example:
    ```pycon
    >>> from typedhttp import ClientConfig, HttpClient, RetryPolicy
    >>> from typedhttp.status import HttpStatusInterval
    >>> client = HttpClient(
    ...     ClientConfig(
    ...         base_url="https://api.example.com",
    ...         retry_policy=RetryPolicy(
    ...             retry_count=3, retry_delay=1.0, retry_on_status=HttpStatusInterval.SERVER_ERROR
    ...         ),
    ...     )
    ... )
    >>> response = client.get("posts/1", response_type=dict)  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "Basic",
    "Bearer",
    "ClientConfig",
    "DeserializationError",
    "Header",
    "HttpClient",
    "HttpStatusInterval",
    "InvalidUrlError",
    "MultipartPart",
    "MultipartPartError",
    "Query",
    "RawResponse",
    "RequestHandle",
    "Response",
    "RetryPolicy",
    "TransportError",
    "TypedHttpError",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from typedhttp.client import HttpClient
from typedhttp.core.config import ClientConfig
from typedhttp.core.dispatch import RequestHandle
from typedhttp.exceptions import (
    DeserializationError,
    InvalidUrlError,
    MultipartPartError,
    TransportError,
    TypedHttpError,
)
from typedhttp.models import (
    Basic,
    Bearer,
    Header,
    MultipartPart,
    Query,
    RawResponse,
    Response,
)
from typedhttp.retry import RetryPolicy
from typedhttp.status import HttpStatusInterval

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
