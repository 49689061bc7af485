from chunk_core.crc import chunk_crc


def validate(chunk) -> bool:
    """True when the stored CRC matches the one computed over type + payload."""
    return chunk_crc(chunk.type_tag, chunk.payload) == chunk.crc
