r"""Compose the absolute URL of a request."""

from __future__ import annotations

__all__ = ["compose_url", "encode_queries"]

from typing import TYPE_CHECKING
from urllib.parse import quote_plus

if TYPE_CHECKING:
    from collections.abc import Sequence

    from typedhttp.models import Query


def encode_queries(queries: Sequence[Query] | None) -> str:
    r"""Encode query parameters as ``key=value`` pairs joined by ``&``.

    Keys and values are form-encoded in UTF-8 and the order is preserved.

    Example:
        ```pycon
        >>> from typedhttp.core.url import encode_queries
        >>> from typedhttp.models import Query
        >>> encode_queries([Query("q", "a b"), Query("lang", "é")])
        'q=a+b&lang=%C3%A9'
        >>> encode_queries(None)
        ''

        ```
    """
    if not queries:
        return ""
    return "&".join(
        f"{quote_plus(query.key, encoding='utf-8')}={quote_plus(query.value, encoding='utf-8')}"
        for query in queries
    )


def compose_url(base_url: str, endpoint: str, queries: Sequence[Query] | None = None) -> str:
    r"""Join the base URL, the endpoint and the query parameters.

    The URL is not validated here: a malformed base URL is reported
    when the transport opens it.

    Args:
        base_url: The client base URL.
        endpoint: The endpoint appended after a ``/``.
        queries: The optional query parameters.

    Returns:
        The absolute URL.

    Example:
        ```pycon
        >>> from typedhttp.core.url import compose_url
        >>> from typedhttp.models import Query
        >>> compose_url("https://api.example.com", "posts", [Query("userId", "1")])
        'https://api.example.com/posts?userId=1'
        >>> compose_url("https://api.example.com", "posts?page=2", [Query("size", "10")])
        'https://api.example.com/posts?page=2&size=10'

        ```
    """
    url = f"{base_url}/{endpoint}"
    encoded = encode_queries(queries)
    if encoded:
        url += ("&" if "?" in url else "?") + encoded
    return url
