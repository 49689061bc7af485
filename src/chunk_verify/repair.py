"""In-place CRC repair for the designated chunk type.

The CRC field of a chunk starting at ``offset`` sits at
``offset + 8 + length``. ``offset`` must be the chunk's own start, taken
before the walker advances past it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from chunk_core.crc import chunk_crc, pack_crc
from chunk_core.errors import RepairIOError
from chunk_core.protocol import CHUNK_HEADER_LEN, CHUNK_CRC_LEN, REPAIR_TARGET_TYPE
from chunk_scan.streams import Chunk
from .integrity import validate


@dataclass
class RepairOutcome:
    correct_crc: int
    crc_offset: int
    written: bool = False


def crc_position(chunk: Chunk, offset: int) -> int:
    return offset + CHUNK_HEADER_LEN + chunk.length


def maybe_repair(
    f: BinaryIO,
    chunk: Chunk,
    offset: int,
    repair_enabled: bool,
    target_type: bytes = REPAIR_TARGET_TYPE,
) -> RepairOutcome | None:
    """Compute (and optionally write) the correct CRC of a broken target chunk.

    Returns None when the chunk is not the target type or its CRC is fine.
    Any other chunk type is never written. With repair enabled the cursor is
    left at the end of the chunk, where the walker expects it.
    """
    if chunk.type_tag != target_type or validate(chunk):
        return None

    correct = chunk_crc(chunk.type_tag, chunk.payload)
    outcome = RepairOutcome(correct_crc=correct, crc_offset=crc_position(chunk, offset))
    if not repair_enabled:
        return outcome

    pos = outcome.crc_offset
    try:
        f.seek(pos)
        written = f.write(pack_crc(correct))
        if written is not None and written != CHUNK_CRC_LEN:
            raise RepairIOError(
                f"Short write of CRC at offset {pos}: {written}/{CHUNK_CRC_LEN} bytes", pos
            )
        f.flush()
        f.seek(pos + CHUNK_CRC_LEN)
    except OSError as e:
        raise RepairIOError(f"Failed to write CRC at offset {pos}: {e}", pos) from e

    outcome.written = True
    return outcome
