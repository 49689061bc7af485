"""Console output for chunk reports."""
from __future__ import annotations

from pathlib import Path
from warnings import warn

import click

from .hexdump import format_hex
from .logic import ChunkReport, ScanConfig


def overflow_filename(report: ChunkReport) -> str:
    # Tags are opaque bytes; keep only characters safe in a file name
    safe_type = "".join(c if c.isascii() and c.isalnum() else "_" for c in report.chunk.type_name)
    return f"chunk_{safe_type}_0x{report.offset:X}.hex"


class ConsolePresenter:
    """Sink for scan_stream: prints one block per chunk."""

    def __init__(self, config: ScanConfig, echo=click.echo):
        self.config = config
        self.echo = echo

    def __call__(self, report: ChunkReport) -> None:
        chunk = report.chunk
        self.echo(
            f"\nChunk Type: {chunk.type_name}, Length: {chunk.length} bytes, "
            f"Offset: {report.offset} - {report.end}"
        )
        if self.config.verbose:
            self.echo(f"Stored CRC: 0x{chunk.crc:08X}, Computed CRC: 0x{report.computed_crc:08X}")

        if report.ok:
            self.echo("CRC: OK")
            return

        self.echo("CRC: MISMATCH")
        if report.correct_crc is not None:
            self._advise(report)
        self._dump(report)

    def _advise(self, report: ChunkReport) -> None:
        crc = report.correct_crc
        self.echo(f"{report.chunk.type_name} chunk CRC error detected.")
        self.echo(f"Suggested fix: set CRC to 0x{crc:08X}")
        self.echo(f"You can update it with a hex editor at offset {report.end - 4}.")
        if report.repaired:
            self.echo(f"Fixed {report.chunk.type_name} CRC in place: 0x{crc:08X}")

    def _dump(self, report: ChunkReport) -> None:
        lines = format_hex(report.chunk.payload, self.config.bytes_per_line)
        cap = self.config.display_line_cap

        if len(lines) <= cap:
            self.echo("Chunk Data (Hex):")
            for line in lines:
                self.echo(line)
            return

        out = Path(self.config.overflow_directory) / overflow_filename(report)
        try:
            out.write_text("\n".join(lines), encoding="ascii")
        except (OSError, ValueError) as e:
            warn(f"Could not save hex data for chunk at offset {report.offset} to {out}: {e}")
            return

        self.echo(f"Chunk Data (Hex) [First {cap} lines]:")
        for line in lines[:cap]:
            self.echo(line)
        self.echo(f"Full hex data saved to file: {out}")
