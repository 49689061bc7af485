"""Chunk checksum functions."""
from __future__ import annotations

import struct
import zlib

from .protocol import CHUNK_CRC_FMT


def chunk_crc(type_tag: bytes, payload: bytes) -> int:
    """CRC-32/IEEE over type tag followed by payload."""
    crc = zlib.crc32(type_tag)
    crc = zlib.crc32(payload, crc)
    return crc & 0xFFFFFFFF


def pack_crc(value: int) -> bytes:
    """Encode a CRC as it is stored on disk (4 bytes, big-endian)."""
    return struct.pack(CHUNK_CRC_FMT, value & 0xFFFFFFFF)
