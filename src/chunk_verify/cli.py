import json
from pathlib import Path
import click
from .logic import ScanConfig, scan_file
from .present import ConsolePresenter

@click.group()
def main():
    """Parse PNG files and check their chunks."""

@main.command("parse")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-v", "--verbose", is_flag=True, help="Show stored and computed CRC for every chunk")
@click.option("-o", "--output-dir", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".",
              show_default=True, help="Directory to save hex data files")
@click.option("-m", "--max-lines", type=click.IntRange(min=0), default=10, show_default=True,
              help="Number of hex lines to display before saving to file")
@click.option("-f", "--fix", is_flag=True, help="Automatically fix CRC errors in IHDR chunk")
@click.option("--json", "as_json", is_flag=True, help="Print the scan result as JSON instead of text")
def parse_cmd(path: Path, verbose: bool, output_dir: Path, max_lines: int, fix: bool, as_json: bool):
    config = ScanConfig(
        repair_enabled=fix,
        display_line_cap=max_lines,
        overflow_directory=output_dir,
        verbose=verbose,
    )
    sink = None if as_json else ConsolePresenter(config)
    try:
        result = scan_file(path, config, sink)
    except OSError as e:
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(result, sort_keys=True, separators=(",", ":"), ensure_ascii=False))
    elif result["status"] != "ABORT":
        click.echo(f"\n{result['status']}: {result['chunk_count']} chunks, "
                   f"{result['mismatch_count']} CRC mismatches, {result['repaired_count']} repaired")

    if result["status"] == "ABORT":
        if not as_json:
            for err in result["errors"]:
                click.echo(f"FATAL: {err['detail']} [{err['code']}]")
        raise SystemExit(1)

if __name__ == "__main__":
    main()
