"""Query an exported chunk table - list chunks whose CRC does not match."""
from __future__ import annotations

import sys
from pathlib import Path

import duckdb


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python query.py <export_dir> [chunk_type]")
        print("Example: python query.py out/ IHDR")
        sys.exit(1)

    out = Path(sys.argv[1])
    chunk_type = sys.argv[2] if len(sys.argv) > 2 else None

    con = duckdb.connect(":memory:")
    con.execute(f"CREATE VIEW chunks AS SELECT * FROM '{out}/evidence/chunks.parquet'")

    sql = """
    SELECT
        chunk_type,
        "offset",
        length,
        printf('0x%08X', stored_crc) AS stored,
        printf('0x%08X', computed_crc) AS computed
    FROM chunks
    WHERE status = 'CRC_MISMATCH'
    """
    params: list = []
    if chunk_type:
        sql += " AND chunk_type = ?"
        params.append(chunk_type)
    sql += ' ORDER BY "offset"'

    rows = con.execute(sql, params).fetchall()
    if not rows:
        print("No CRC mismatches found.")
        return

    print(f"CRC mismatches in {out}:")
    for ctype, off, length, stored, computed in rows:
        print(f"  {ctype} @ {off} ({length} bytes): stored {stored}, computed {computed}")


if __name__ == "__main__":
    main()
