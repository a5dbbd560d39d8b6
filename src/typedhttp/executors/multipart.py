r"""Contains the executor of the ``multipart/form-data`` requests."""

from __future__ import annotations

__all__ = ["MultipartExecutor"]

from typing import TYPE_CHECKING

from typedhttp.core.multipart import MULTIPART_CONTENT_TYPE, MultipartEncoder
from typedhttp.core.validation import validate_multipart_parts
from typedhttp.executors.base import VerbExecutor
from typedhttp.models import Header

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from typedhttp.core.codec import BodyCodec
    from typedhttp.core.config import ClientConfig
    from typedhttp.models import MultipartPart
    from typedhttp.transport import Connection, Transport


class MultipartExecutor(VerbExecutor):
    r"""Send ``multipart/form-data`` POST requests.

    The payload is a sequence of ``MultipartPart``. The parts are
    validated in the caller thread, files are streamed from disk in
    chunks of ``config.buffer_size`` bytes and the exact
    ``Content-Length`` is announced. A file that cannot be read is an
    I/O failure captured in the response.

    Example:
        ```pycon
        >>> from typedhttp.core.config import ClientConfig
        >>> from typedhttp.executors import MultipartExecutor
        >>> from typedhttp.models import MultipartPart
        >>> executor = MultipartExecutor(ClientConfig(base_url="https://api.example.com"))
        >>> executor.execute("images", [MultipartPart(name="data")])
        Traceback (most recent call last):
        ...
        typedhttp.exceptions.MultipartPartError: multipart part 'data' must have a body or a file_path

        ```
    """

    method = "POST"

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Transport | None = None,
        codec: BodyCodec | None = None,
    ) -> None:
        super().__init__(config, transport=transport, codec=codec)
        self._encoder = MultipartEncoder(self._codec, buffer_size=config.buffer_size)

    def _prepare(self, payload: Iterable[MultipartPart] | None) -> list[MultipartPart]:
        parts = list(payload or ())
        validate_multipart_parts(parts)
        return parts

    def _body_headers(self, prepared: list[MultipartPart]) -> Sequence[Header]:
        return (
            Header("Content-Type", MULTIPART_CONTENT_TYPE),
            Header("Content-Length", str(self._encoder.content_length(prepared))),
        )

    def _write_body(self, connection: Connection, prepared: list[MultipartPart]) -> None:
        connection.write_body(self._encoder.iter_encode(prepared))

    def encode(self, parts: Sequence[MultipartPart]) -> bytes:
        r"""Return the body that would be sent for ``parts``."""
        return self._encoder.encode_bytes(parts)
