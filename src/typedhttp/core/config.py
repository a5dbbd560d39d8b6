r"""Configuration dataclass and defaults for ``HttpClient``.

This module provides configuration constants and a dataclass-based
configuration object consumed by the request executors.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_HEADERS",
    "DEFAULT_READ_TIMEOUT",
    "JSON_CONTENT_TYPE",
    "ClientConfig",
]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from typedhttp.core.headers import merge_headers
from typedhttp.core.validation import validate_buffer_size, validate_timeout
from typedhttp.models import Header

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typedhttp.models import Basic, Bearer
    from typedhttp.retry.policy import RetryPolicy


# Default timeouts in milliseconds, applied to every connection
DEFAULT_CONNECT_TIMEOUT = 20000
DEFAULT_READ_TIMEOUT = 20000

# Chunk size in bytes used to stream the files of a multipart request
DEFAULT_BUFFER_SIZE = 1024

JSON_CONTENT_TYPE = "application/json; charset=UTF-8"

DEFAULT_HEADERS = (Header("Content-Type", JSON_CONTENT_TYPE),)


@dataclass(frozen=True)
class ClientConfig:
    """Configuration of an ``HttpClient``.

    Args:
        base_url: The URL prepended to every endpoint.
        connect_timeout: Maximum milliseconds to establish a connection.
            Must be > 0.
        read_timeout: Maximum milliseconds to wait for response data.
            Must be > 0.
        default_headers: Headers sent with every request.
        buffer_size: Chunk size in bytes used to stream files. Must be > 0.
        retry_policy: Optional retry policy applied to every request.

    Example:
        ```pycon
        >>> from typedhttp.core.config import ClientConfig
        >>> from typedhttp.models import Bearer
        >>> config = ClientConfig(base_url="https://api.example.com")
        >>> config.read_timeout
        20000
        >>> config = config.with_authorization(Bearer("token"))
        >>> [header.key for header in config.default_headers]
        ['Content-Type', 'Authorization']

        ```
    """

    base_url: str = ""
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT
    read_timeout: int = DEFAULT_READ_TIMEOUT
    default_headers: tuple[Header, ...] = field(default_factory=lambda: DEFAULT_HEADERS)
    buffer_size: int = DEFAULT_BUFFER_SIZE
    retry_policy: RetryPolicy | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_timeout(self.connect_timeout, name="connect_timeout")
        validate_timeout(self.read_timeout, name="read_timeout")
        validate_buffer_size(self.buffer_size)
        # lists are accepted for convenience, the stored value is immutable
        object.__setattr__(self, "default_headers", tuple(self.default_headers))

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Example:
            ```pycon
            >>> from typedhttp.core.config import ClientConfig
            >>> config = ClientConfig(read_timeout=5000)
            >>> config.merge(read_timeout=1000, retry_policy=None).read_timeout
            1000
            >>> config.read_timeout
            5000

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def with_default_headers(self, headers: Iterable[Header]) -> ClientConfig:
        return replace(self, default_headers=tuple(headers))

    def with_authorization(self, credentials: Basic | Bearer) -> ClientConfig:
        """Return a config whose default headers carry the credentials.

        An existing ``Authorization`` header is replaced.

        Args:
            credentials: The basic credentials or the bearer token.
        """
        headers = merge_headers(self.default_headers, [credentials.to_header()])
        return replace(self, default_headers=tuple(headers))
