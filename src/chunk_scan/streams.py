from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, Iterator

from chunk_core.errors import InvalidSignature, TruncatedChunk
from chunk_core.protocol import (
    PNG_SIGNATURE,
    SIGNATURE_LEN,
    CHUNK_HEADER_LEN,
    CHUNK_CRC_FMT,
    CHUNK_CRC_LEN,
    CHUNK_FRAMING_LEN,
)


@dataclass
class Chunk:
    length: int
    type_tag: bytes
    payload: bytes
    crc: int

    @property
    def type_name(self) -> str:
        return self.type_tag.decode("latin-1")

    @property
    def size(self) -> int:
        """Bytes the chunk occupies on disk."""
        return CHUNK_FRAMING_LEN + self.length


def check_signature(f: BinaryIO) -> None:
    """Consume the 8-byte signature, raising InvalidSignature on mismatch."""
    sig = f.read(SIGNATURE_LEN)
    if sig != PNG_SIGNATURE:
        raise InvalidSignature(f"Not a valid PNG file (signature {sig.hex() or 'empty'})", 0)


def read_chunk(f: BinaryIO, offset: int = 0) -> Chunk | None:
    """Read one chunk at the current position.

    Returns None on a clean end of stream. ``offset`` is only used to
    label a TruncatedChunk.
    """
    raw_len = f.read(4)

    # Clean EOF
    if len(raw_len) == 0:
        return None

    if len(raw_len) < 4:
        raise TruncatedChunk(f"Truncated chunk length at offset {offset}", offset)
    (length,) = struct.unpack(">I", raw_len)

    type_tag = f.read(4)
    if len(type_tag) < 4:
        raise TruncatedChunk(f"Truncated chunk type at offset {offset}", offset)

    payload = f.read(length)
    if len(payload) != length:
        raise TruncatedChunk(
            f"Truncated payload at offset {offset}: declared {length} bytes, got {len(payload)}",
            offset,
        )

    raw_crc = f.read(CHUNK_CRC_LEN)
    if len(raw_crc) < CHUNK_CRC_LEN:
        raise TruncatedChunk(f"Truncated CRC at offset {offset}", offset)
    (crc,) = struct.unpack(CHUNK_CRC_FMT, raw_crc)

    return Chunk(length=int(length), type_tag=type_tag, payload=payload, crc=int(crc))


def walk_chunks(f: BinaryIO, offset: int = SIGNATURE_LEN) -> Iterator[tuple[Chunk, int]]:
    """Yield (chunk, offset) pairs until end of stream.

    The caller must have consumed the signature already (see check_signature).
    ``offset`` is the position of each chunk's length field. Repairs done by
    the consumer between iterations must leave ``f`` at the end of the
    chunk just yielded.
    """
    while True:
        chunk = read_chunk(f, offset)
        if chunk is None:
            return

        yield chunk, offset

        # Advance only after the consumer is done with this chunk
        offset += CHUNK_HEADER_LEN + chunk.length + CHUNK_CRC_LEN
