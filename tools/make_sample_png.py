import struct, sys, zlib
from pathlib import Path

from chunk_core.crc import chunk_crc, pack_crc
from chunk_core.protocol import PNG_SIGNATURE, CHUNK_HEADER_FMT

# --- CONFIGURATION ---
WIDTH = 32
HEIGHT = 32


def build_chunk(type_tag: bytes, payload: bytes) -> bytes:
    header = struct.pack(CHUNK_HEADER_FMT, len(payload), type_tag)
    return header + payload + pack_crc(chunk_crc(type_tag, payload))


def build_png(width=WIDTH, height=HEIGHT) -> bytes:
    # 8-bit grayscale, no interlace
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 0, 0, 0, 0)
    # Filter byte 0 + one gradient row per scanline
    raw = b"".join(b"\x00" + bytes((x * 255) // max(width - 1, 1) for x in range(width)) for _ in range(height))
    return (
        PNG_SIGNATURE
        + build_chunk(b"IHDR", ihdr)
        + build_chunk(b"IDAT", zlib.compress(raw))
        + build_chunk(b"IEND", b"")
    )


def main():
    out = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("sample.png")
    out.write_bytes(build_png())
    print(f"Wrote {out} ({out.stat().st_size} bytes)")

if __name__ == "__main__":
    main()
