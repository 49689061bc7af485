"""Chunk Core - Shared framing constants, checksum and error types."""
from .crc import chunk_crc, pack_crc
from .errors import ChunkScanError, InvalidSignature, RepairIOError, TruncatedChunk
from .protocol import PNG_SIGNATURE, REPAIR_TARGET_TYPE

__all__ = [
    "chunk_crc",
    "pack_crc",
    "ChunkScanError",
    "InvalidSignature",
    "RepairIOError",
    "TruncatedChunk",
    "PNG_SIGNATURE",
    "REPAIR_TARGET_TYPE",
]
