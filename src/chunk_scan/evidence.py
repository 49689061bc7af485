from __future__ import annotations

import hashlib
from pathlib import Path

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from chunk_core.crc import chunk_crc
from .streams import check_signature, walk_chunks


CHUNKS_SCHEMA = pa.schema(
    [
        ("index", pa.int32()),
        ("chunk_type", pa.string()),
        ("offset", pa.int64()),
        ("length", pa.int64()),
        ("stored_crc", pa.int64()),
        ("computed_crc", pa.int64()),
        ("status", pa.string()),
        ("content_hash", pa.string()),
    ]
)


def compile_chunk_evidence(png_path: Path, out_path: Path) -> int:
    """Build evidence/chunks.parquet for a PNG file. Read-only.

    Returns the number of rows written.
    """
    evidence: list[dict] = []

    with open(png_path, "rb") as f:
        check_signature(f)
        for i, (chunk, offset) in enumerate(walk_chunks(f)):
            computed = chunk_crc(chunk.type_tag, chunk.payload)
            evidence.append(
                {
                    "index": i,
                    "chunk_type": chunk.type_name,
                    "offset": int(offset),
                    "length": int(chunk.length),
                    "stored_crc": int(chunk.crc),
                    "computed_crc": int(computed),
                    "status": "VERIFIED" if computed == chunk.crc else "CRC_MISMATCH",
                    "content_hash": hashlib.sha256(chunk.type_tag + chunk.payload).hexdigest(),
                }
            )

    df = pd.DataFrame(evidence)
    if df.empty:
        return 0

    (Path(out_path) / "evidence").mkdir(parents=True, exist_ok=True)
    table = pa.Table.from_pandas(df, schema=CHUNKS_SCHEMA, preserve_index=False)
    pq.write_table(table, Path(out_path) / "evidence/chunks.parquet")
    return len(df)
