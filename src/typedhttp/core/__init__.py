r"""Core shared logic for the request executors.

This package contains the building blocks shared by every HTTP verb:
configuration, validation, URL composition, header merging, the JSON
codec, the multipart encoder, the response normalizer and the worker
pool.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_READ_TIMEOUT",
    "BodyCodec",
    "ClientConfig",
    "MultipartEncoder",
    "compose_url",
    "merge_headers",
    "normalize_response",
    "validate_timeout",
]

from typedhttp.core.codec import BodyCodec
from typedhttp.core.config import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    ClientConfig,
)
from typedhttp.core.headers import merge_headers
from typedhttp.core.multipart import MultipartEncoder
from typedhttp.core.normalizer import normalize_response
from typedhttp.core.url import compose_url
from typedhttp.core.validation import validate_timeout
