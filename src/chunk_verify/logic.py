from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Callable, Optional

from chunk_core.crc import chunk_crc
from chunk_core.errors import ChunkScanError
from chunk_core.protocol import (
    DEFAULT_BYTES_PER_LINE,
    DEFAULT_MAX_DISPLAY_LINES,
    REPAIR_TARGET_TYPE,
)
from chunk_scan.streams import Chunk, check_signature, walk_chunks
from .const import ERRORS
from .integrity import validate
from .repair import maybe_repair


@dataclass
class ScanConfig:
    repair_enabled: bool = False
    display_line_cap: int = DEFAULT_MAX_DISPLAY_LINES
    overflow_directory: Path = field(default_factory=lambda: Path("."))
    verbose: bool = False
    bytes_per_line: int = DEFAULT_BYTES_PER_LINE


@dataclass
class ChunkReport:
    chunk: Chunk
    offset: int
    computed_crc: int
    ok: bool
    correct_crc: Optional[int] = None
    repaired: bool = False

    @property
    def status(self) -> str:
        return "VERIFIED" if self.ok else "CRC_MISMATCH"

    @property
    def end(self) -> int:
        return self.offset + self.chunk.size

    def as_dict(self) -> dict:
        d = {
            "type": self.chunk.type_name,
            "length": self.chunk.length,
            "start": self.offset,
            "end": self.end,
            "status": self.status,
            "stored_crc": f"0x{self.chunk.crc:08X}",
        }
        if self.correct_crc is not None:
            d["correct_crc"] = f"0x{self.correct_crc:08X}"
            d["repaired"] = self.repaired
        return d


OnRecord = Callable[[ChunkReport], None]


def scan_stream(f: BinaryIO, config: ScanConfig, on_record: OnRecord | None = None) -> list[ChunkReport]:
    """Check signature, walk every chunk, validate and repair the target type.

    Fatal conditions raise ChunkScanError subclasses; reports handed to
    ``on_record`` before the failure stay delivered.
    """
    check_signature(f)

    reports: list[ChunkReport] = []
    for chunk, offset in walk_chunks(f):
        report = ChunkReport(
            chunk=chunk,
            offset=offset,
            computed_crc=chunk_crc(chunk.type_tag, chunk.payload),
            ok=validate(chunk),
        )
        if not report.ok:
            # Repair must run before the walker advances past this chunk.
            outcome = maybe_repair(f, chunk, offset, config.repair_enabled, REPAIR_TARGET_TYPE)
            if outcome is not None:
                report.correct_crc = outcome.correct_crc
                report.repaired = outcome.written

        reports.append(report)
        if on_record is not None:
            on_record(report)
    return reports


def _summary(status: str, reports: list[ChunkReport], errors: list[dict]) -> dict:
    return {
        "status": status,
        "chunk_count": len(reports),
        "mismatch_count": sum(1 for r in reports if not r.ok),
        "repaired_count": sum(1 for r in reports if r.repaired),
        "chunks": [r.as_dict() for r in reports],
        "error_count": len(errors),
        "errors": errors,
    }


def scan_file(path: Path, config: ScanConfig | None = None, on_record: OnRecord | None = None) -> dict:
    if config is None:
        config = ScanConfig()

    reports: list[ChunkReport] = []

    def collect(report: ChunkReport) -> None:
        reports.append(report)
        if on_record is not None:
            on_record(report)

    mode = "r+b" if config.repair_enabled else "rb"
    with open(path, mode) as f:
        try:
            scan_stream(f, config, collect)
        except ChunkScanError as e:
            err = {"code": e.code, "message": ERRORS.get(e.code, str(e)), "detail": str(e), "offset": e.offset}
            return _summary("ABORT", reports, [err])

    status = "PASS" if all(r.ok for r in reports) else "FAIL"
    return _summary(status, reports, [])
