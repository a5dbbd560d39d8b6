r"""Merge the default headers with the headers of a request."""

from __future__ import annotations

__all__ = ["merge_headers"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typedhttp.models import Header


def merge_headers(defaults: Iterable[Header], *overrides: Iterable[Header] | None) -> list[Header]:
    r"""Merge header lists, later lists overriding earlier ones.

    A key present in an override list removes every header with the same
    key (compared case-insensitively) from the previous lists. Inside one
    list, duplicated keys are kept in order.

    Args:
        defaults: The default headers.
        *overrides: The header lists applied in order. ``None`` is
            ignored.

    Returns:
        The merged headers.

    Example:
        ```pycon
        >>> from typedhttp.core.headers import merge_headers
        >>> from typedhttp.models import Header
        >>> merged = merge_headers(
        ...     [Header("Content-Type", "application/json"), Header("X-Client", "a")],
        ...     [Header("content-type", "text/plain")],
        ... )
        >>> [(h.key, h.value) for h in merged]
        [('X-Client', 'a'), ('content-type', 'text/plain')]

        ```
    """
    merged = list(defaults)
    for headers in overrides:
        if not headers:
            continue
        headers = list(headers)
        keys = {header.key.lower() for header in headers}
        merged = [header for header in merged if header.key.lower() not in keys]
        merged.extend(headers)
    return merged
