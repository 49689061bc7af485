def format_hex(data: bytes, bytes_per_line: int = 16) -> list[str]:
    """Split data into lines of space-separated hex byte pairs."""
    lines = []
    for i in range(0, len(data), bytes_per_line):
        row = data[i:i + bytes_per_line]
        lines.append("".join(f"{b:02x} " for b in row))
    return lines
