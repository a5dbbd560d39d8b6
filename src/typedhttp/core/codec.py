r"""Implement the JSON body codec.

The codec relies on pydantic: ``pydantic_core.to_json`` serializes the
request payloads (dataclasses, pydantic models, mappings, sets,
sequences and primitives) and ``pydantic.TypeAdapter`` decodes a
response body into the requested type.
"""

from __future__ import annotations

__all__ = ["BodyCodec"]

import logging
import threading
from typing import Any

import pydantic_core
from pydantic import TypeAdapter, ValidationError

from typedhttp.exceptions import DeserializationError

logger: logging.Logger = logging.getLogger(__name__)


class BodyCodec:
    r"""Serialize request payloads and deserialize response bodies.

    ``deserialize`` never raises: a body that cannot be decoded is
    returned as ``None`` together with the exception, except when the
    requested type is ``str`` where the raw text is returned verbatim.

    Example:
        ```pycon
        >>> from typedhttp.core.codec import BodyCodec
        >>> codec = BodyCodec()
        >>> codec.serialize({"id": 1, "tags": ["a"]})
        '{"id":1,"tags":["a"]}'
        >>> codec.deserialize('{"id": 1}', dict[str, int])
        ({'id': 1}, None)
        >>> codec.deserialize("plain text", str)
        ('plain text', None)

        ```
    """

    def __init__(self) -> None:
        self._adapters: dict[Any, TypeAdapter[Any]] = {}
        self._lock = threading.Lock()

    def serialize(self, value: Any) -> str:
        r"""Serialize a value to a JSON string.

        Raises:
            pydantic_core.PydanticSerializationError: if the value
                cannot be serialized.
        """
        return pydantic_core.to_json(value).decode("utf-8")

    def deserialize(
        self, raw: str | None, response_type: Any = Any
    ) -> tuple[Any | None, Exception | None]:
        r"""Decode a raw body into ``response_type``.

        Args:
            raw: The raw response body.
            response_type: The requested type.

        Returns:
            The decoded value (or ``None``) and the exception that
            prevented the decoding (or ``None``).
        """
        if not raw:
            return None, None
        try:
            return self._adapter(response_type).validate_json(raw), None
        except ValidationError as exc:
            if response_type is str:
                return raw, None
            logger.debug(f"Could not decode the body as {response_type!r}: {exc}")
            error = DeserializationError(
                f"Could not decode the body as {response_type!r}",
                raw=raw,
                response_type=response_type,
            )
            error.__cause__ = exc
            return None, error

    def _adapter(self, response_type: Any) -> TypeAdapter[Any]:
        try:
            return self._adapters[response_type]
        except KeyError:
            pass
        except TypeError:
            # unhashable annotations are not cached
            return TypeAdapter(response_type)
        with self._lock:
            adapter = self._adapters.get(response_type)
            if adapter is None:
                adapter = TypeAdapter(response_type)
                self._adapters[response_type] = adapter
        return adapter
