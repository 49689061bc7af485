import struct
import zlib

import pytest

SIG = b"\x89PNG\r\n\x1a\n"

# 1x1 RGBA, 8-bit
IHDR_PAYLOAD = struct.pack(">IIBBBBB", 1, 1, 8, 6, 0, 0, 0)
IHDR_CRC = 0x1F15C489


def chunk(type_tag: bytes, payload: bytes, crc: int | None = None) -> bytes:
    if crc is None:
        crc = zlib.crc32(type_tag + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + type_tag + payload + struct.pack(">I", crc)


@pytest.fixture
def good_png() -> bytes:
    return (
        SIG
        + chunk(b"IHDR", IHDR_PAYLOAD)
        + chunk(b"IDAT", zlib.compress(b"\x00\xff\x00\x00\xff"))
        + chunk(b"IEND", b"")
    )


@pytest.fixture
def broken_ihdr_png() -> bytes:
    return (
        SIG
        + chunk(b"IHDR", IHDR_PAYLOAD, crc=0)
        + chunk(b"IDAT", zlib.compress(b"\x00\xff\x00\x00\xff"))
        + chunk(b"IEND", b"")
    )
