r"""Convert a ``RawResponse`` into a typed ``Response``."""

from __future__ import annotations

__all__ = ["normalize_response"]

import logging
from typing import TYPE_CHECKING, Any

from typedhttp.models import Response

if TYPE_CHECKING:
    from typedhttp.core.codec import BodyCodec
    from typedhttp.models import RawResponse

logger: logging.Logger = logging.getLogger(__name__)


def normalize_response(
    raw: RawResponse, response_type: Any, codec: BodyCodec
) -> Response[Any]:
    r"""Decode the raw body and build the typed response.

    The status code, headers and timestamp are copied unchanged. A
    transport exception is kept as is; a deserialization exception is
    only recorded when there is no transport exception.

    Args:
        raw: The raw response of one attempt.
        response_type: The type of the decoded body.
        codec: The codec used to decode the body.

    Returns:
        The typed response.

    Example:
        ```pycon
        >>> from typedhttp.core.codec import BodyCodec
        >>> from typedhttp.core.normalizer import normalize_response
        >>> from typedhttp.models import RawResponse
        >>> response = normalize_response(
        ...     RawResponse(status_code=200, body='{"id": 3}'), dict, BodyCodec()
        ... )
        >>> response.status_code, response.body
        (200, {'id': 3})

        ```
    """
    if raw.exception is not None:
        logger.debug(f"The response carries a transport exception: {raw.exception!r}")
    body, error = codec.deserialize(raw.body, response_type)
    return Response(
        status_code=raw.status_code,
        body=body,
        headers=raw.headers,
        raw=raw.body,
        timestamp=raw.timestamp,
        exception=raw.exception if raw.exception is not None else error,
    )
