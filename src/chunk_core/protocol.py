"""PNG chunk stream protocol constants.

Single source of truth for the on-disk signature and chunk framing.
Reader, walker and repair must stay synchronized with these values.
"""

# File signature
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
SIGNATURE_LEN = 8

# Chunk: [Length(4) | Type(4)] payload [CRC(4)], all integers big-endian
CHUNK_HEADER_FMT = ">I4s"
CHUNK_HEADER_LEN = 8
CHUNK_CRC_FMT = ">I"
CHUNK_CRC_LEN = 4
CHUNK_FRAMING_LEN = CHUNK_HEADER_LEN + CHUNK_CRC_LEN  # 12

# The only chunk type whose CRC is rewritten in place
REPAIR_TARGET_TYPE = b"IHDR"

# Presentation defaults
DEFAULT_MAX_DISPLAY_LINES = 10
DEFAULT_BYTES_PER_LINE = 16
