"""Chunk Scan - PNG chunk table exporter."""
from __future__ import annotations

from pathlib import Path

import click

from chunk_scan.evidence import compile_chunk_evidence


@click.command()
@click.argument("png", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("out", type=click.Path(file_okay=False, path_type=Path))
def main(png: Path, out: Path) -> None:
    """Export the chunk table of PNG into OUT/evidence/chunks.parquet."""
    try:
        rows = compile_chunk_evidence(png, out)
    except Exception as e:
        # Fail closed with a single-line reason.
        print(f"FATAL: {e}")
        raise SystemExit(1)

    if rows:
        print(f"PASS: Chunk table written to {out / 'evidence' / 'chunks.parquet'}")
    else:
        print("PASS: No chunks found, nothing written")
    print(f"  Chunks: {rows}")


if __name__ == "__main__":
    main()
