# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

"""
Reads the header of an Avro Object Container File without touching its data blocks.

The header is laid out as:

- the four-byte magic ``Obj\\x01``,
- the file metadata, encoded as an Avro map of string keys to ``bytes`` values,
- the file's 16-byte sync marker.

See https://avro.apache.org/docs/1.7.7/spec.html#Object+Container+Files
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import IO
import avro.errors
from avro.datafile import NULL_CODEC
from avro.io import BinaryDecoder
from avro.schema import Schema
from ..errors import InvalidFormatError
from ..url import URL
from .schema import avro_schema

MAGIC = b"Obj\x01"
SYNC_SIZE = 16
SCHEMA_KEY = "avro.schema"
CODEC_KEY = "avro.codec"
INITIAL_VALUE_BUFFER_SIZE = 512

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AvroMetadata:
    """
    Metadata recovered from an Avro container file header.
    """

    sync_marker: bytes
    codec: str = NULL_CODEC
    schema_text: str = ""

    def schema(self) -> Schema:
        """
        Parses the writer's schema embedded in the file.
        """
        if not self.schema_text:
            raise InvalidFormatError("Avro header has no avro.schema entry")
        return avro_schema(self.schema_text)


def _fill(fh: IO[bytes], buffer: bytearray, size: int) -> None:
    # Raw streams may return fewer bytes than asked for; only EOF is a truncation
    filled = 0
    with memoryview(buffer) as view:
        while filled < size:
            chunk = fh.read(size - filled)
            if not chunk:
                raise InvalidFormatError("truncated header")
            view[filled : filled + len(chunk)] = chunk
            filled += len(chunk)


def _read_bytes_into(decoder: BinaryDecoder, fh: IO[bytes], buffer: bytearray) -> int:
    """
    Reads an Avro ``bytes`` value into ``buffer``, growing it when the value is larger.

    :return: The length of the value, which occupies the start of ``buffer``.
    """
    size = decoder.read_long()
    if size < 0:
        raise InvalidFormatError(f"malformed metadata map: value length {size}")
    if len(buffer) < size:
        buffer.extend(bytes(size - len(buffer)))
    _fill(fh, buffer, size)
    return size


def _read_exact(fh: IO[bytes], size: int) -> bytes:
    data = bytearray(size)
    _fill(fh, data, size)
    return bytes(data)


def _read_string(decoder: BinaryDecoder, fh: IO[bytes]) -> str:
    size = decoder.read_long()
    if size < 0:
        raise InvalidFormatError(f"malformed metadata map: key length {size}")
    try:
        return _read_exact(fh, size).decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidFormatError("metadata key is not valid UTF-8") from e


def _decode_utf8(key: str, buffer: bytearray, size: int) -> str:
    try:
        return buffer[:size].decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidFormatError(f"metadata value for {key} is not valid UTF-8") from e


def read_avro_metadata_from_stream(fh: IO[bytes]) -> AvroMetadata:
    """
    Reads the :class:`AvroMetadata` from a stream positioned at the start of a file.

    Exactly the header bytes are consumed; the stream is left at the first data block.

    :param fh: A readable binary stream.
    :raises InvalidFormatError: If the header is missing, truncated or malformed.
    """
    decoder = BinaryDecoder(fh)
    codec: str | None = None
    schema_text: str | None = None
    try:
        if _read_exact(fh, len(MAGIC)) != MAGIC:
            raise InvalidFormatError("missing Avro signature")
        value_buffer = bytearray(INITIAL_VALUE_BUFFER_SIZE)
        block_count = decoder.read_long()
        while block_count != 0:
            if block_count < 0:
                # N.b. a negative count is followed by the block's size in bytes
                block_count = -block_count
                decoder.read_long()
            for _ in range(block_count):
                key = _read_string(decoder, fh)
                size = _read_bytes_into(decoder, fh, value_buffer)
                if key == CODEC_KEY:
                    codec = _decode_utf8(key, value_buffer, size)
                elif key == SCHEMA_KEY:
                    schema_text = _decode_utf8(key, value_buffer, size)
                else:
                    logger.debug("Skipping header metadata %s (%d bytes)", key, size)
            block_count = decoder.read_long()
        sync_marker = _read_exact(fh, SYNC_SIZE)
    except avro.errors.InvalidAvroBinaryEncoding as e:
        raise InvalidFormatError("truncated header") from e
    return AvroMetadata(
        sync_marker=sync_marker,
        codec=codec if codec is not None else NULL_CODEC,
        schema_text=schema_text if schema_text is not None else "",
    )


def read_avro_metadata(url: URL) -> AvroMetadata:
    """
    Reads the :class:`AvroMetadata` from the header of the Avro file at the given URL.

    The URL's stream is closed before returning, whether or not the read succeeds.

    :param url: The URL of the Avro file.
    :raises InvalidFormatError: If the header is missing, truncated or malformed.
    """
    with url as f:
        metadata = read_avro_metadata_from_stream(f)
    logger.debug(
        "Read header from %s: codec=%s, sync_marker=%s",
        url,
        metadata.codec,
        metadata.sync_marker.hex(),
    )
    return metadata
