r"""Encode ``multipart/form-data`` request bodies.

Each part produces one section::

    --*****\r\n
    Content-Disposition: form-data; name="<name>"[; filename="<file>"]\r\n
    [Content-Type: <content type>\r\n]
    \r\n
    <payload>\r\n

and the body ends with ``--*****--\r\n``. File payloads are read from
disk in chunks of ``buffer_size`` bytes so that large files are never
fully loaded in memory.
"""

from __future__ import annotations

__all__ = ["BOUNDARY", "MULTIPART_CONTENT_TYPE", "MultipartEncoder"]

import logging
import os
import shutil
from typing import TYPE_CHECKING, Any

from typedhttp.core.config import DEFAULT_BUFFER_SIZE
from typedhttp.core.validation import validate_buffer_size, validate_multipart_parts

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from typing import BinaryIO

    from typedhttp.core.codec import BodyCodec
    from typedhttp.models import MultipartPart

logger: logging.Logger = logging.getLogger(__name__)

BOUNDARY = "*****"
MULTIPART_CONTENT_TYPE = f"multipart/form-data; boundary={BOUNDARY}"

_CRLF = b"\r\n"
_DELIMITER = f"--{BOUNDARY}\r\n".encode()
_TERMINATOR = f"--{BOUNDARY}--\r\n".encode()


class MultipartEncoder:
    r"""Serialize multipart parts into a ``multipart/form-data`` body.

    Args:
        codec: The codec used to serialize the inline bodies.
        buffer_size: The chunk size in bytes used to copy files.

    Example:
        ```pycon
        >>> from typedhttp.core.codec import BodyCodec
        >>> from typedhttp.core.multipart import MultipartEncoder
        >>> from typedhttp.models import MultipartPart
        >>> encoder = MultipartEncoder(BodyCodec())
        >>> encoder.encode_bytes([MultipartPart(name="title", body="hello")])
        b'--*****\r\nContent-Disposition: form-data; name="title"\r\n\r\nhello\r\n--*****--\r\n'

        ```
    """

    def __init__(self, codec: BodyCodec, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        validate_buffer_size(buffer_size)
        self._codec = codec
        self._buffer_size = buffer_size

    @property
    def buffer_size(self) -> int:
        return self._buffer_size

    def iter_encode(self, parts: Sequence[MultipartPart]) -> Iterator[bytes]:
        r"""Yield the encoded body chunk by chunk.

        The parts are validated before the first chunk is produced.

        Raises:
            MultipartPartError: If a part has both or none of its
                payloads.
        """
        validate_multipart_parts(parts)
        return self._iter_chunks(list(parts))

    def encode(self, parts: Sequence[MultipartPart], stream: BinaryIO) -> None:
        r"""Write the encoded body to a binary stream."""
        validate_multipart_parts(parts)
        for part in parts:
            stream.write(self._section_head(part))
            if part.is_file:
                with open(part.file_path, "rb") as file:  # noqa: PTH123
                    shutil.copyfileobj(file, stream, self._buffer_size)
            else:
                stream.write(self._inline_payload(part.body))
            stream.write(_CRLF)
        stream.write(_TERMINATOR)

    def encode_bytes(self, parts: Sequence[MultipartPart]) -> bytes:
        r"""Return the whole encoded body."""
        return b"".join(self.iter_encode(parts))

    def content_length(self, parts: Sequence[MultipartPart]) -> int:
        r"""Compute the size of the encoded body without reading files.

        Raises:
            OSError: If a file does not exist.
        """
        validate_multipart_parts(parts)
        length = len(_TERMINATOR)
        for part in parts:
            length += len(self._section_head(part)) + len(_CRLF)
            if part.is_file:
                length += os.path.getsize(part.file_path)  # noqa: PTH202
            else:
                length += len(self._inline_payload(part.body))
        return length

    def _iter_chunks(self, parts: list[MultipartPart]) -> Iterator[bytes]:
        for part in parts:
            yield self._section_head(part)
            if part.is_file:
                logger.debug(f"Streaming {part.file_path} ({self._buffer_size} bytes chunks)")
                with open(part.file_path, "rb") as file:  # noqa: PTH123
                    while chunk := file.read(self._buffer_size):
                        yield chunk
            else:
                yield self._inline_payload(part.body)
            yield _CRLF
        yield _TERMINATOR

    def _section_head(self, part: MultipartPart) -> bytes:
        disposition = f'Content-Disposition: form-data; name="{part.name}"'
        if part.is_file:
            disposition += f'; filename="{part.filename}"'
        lines = [disposition]
        if part.content_type is not None:
            lines.append(f"Content-Type: {part.content_type}")
        head = "\r\n".join(lines) + "\r\n\r\n"
        return _DELIMITER + head.encode("utf-8")

    def _inline_payload(self, body: Any) -> bytes:
        if isinstance(body, bytes):
            return body
        if isinstance(body, str):
            return body.encode("utf-8")
        return self._codec.serialize(body).encode("utf-8")
