import sys
from pathlib import Path

def main():
    if len(sys.argv) != 2:
        print("Usage: corrupt_crc.py <file>")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    b = bytearray(p.read_bytes())
    if len(b) < 33 or b[12:16] != b"IHDR":
        print("File does not start with an IHDR chunk.")
        raise SystemExit(2)

    # Signature is 8 bytes, IHDR header 8, payload 13: its CRC sits at 29..33.
    length = int.from_bytes(b[8:12], "big")
    idx = 8 + 8 + length
    b[idx:idx + 4] = b"\x00\x00\x00\x00"
    p.write_bytes(bytes(b))
    print(f"Zeroed IHDR CRC at offset {idx} in {p}")

if __name__ == "__main__":
    main()
