import json
import subprocess
import sys
from pathlib import Path

import pyarrow.parquet as pq

from conftest import SIG, chunk


def run(args, cwd):
    return subprocess.run([sys.executable, *args], cwd=cwd, check=False, capture_output=True, text=True)


def test_parse_fix_and_export(tmp_path, broken_ihdr_png):
    png = tmp_path / "bad.png"
    png.write_bytes(broken_ihdr_png)

    # Report only
    r = run(["-m", "chunk_verify.cli", "parse", str(png), "-o", str(tmp_path)], cwd=tmp_path)
    assert r.returncode == 0, r.stderr + r.stdout
    assert "Suggested fix: set CRC to 0x1F15C489" in r.stdout
    assert png.read_bytes() == broken_ihdr_png

    # Export sees the mismatch
    out = tmp_path / "out"
    r = run(["-m", "chunk_scan.cli", str(png), str(out)], cwd=tmp_path)
    assert r.returncode == 0, r.stderr + r.stdout
    table = pq.read_table(out / "evidence" / "chunks.parquet").to_pylist()
    assert [row["chunk_type"] for row in table] == ["IHDR", "IDAT", "IEND"]
    assert table[0]["status"] == "CRC_MISMATCH"
    assert table[0]["computed_crc"] == 0x1F15C489
    assert table[1]["offset"] == 33

    # Fix in place
    r = run(["-m", "chunk_verify.cli", "parse", str(png), "--fix", "--json"], cwd=tmp_path)
    assert r.returncode == 0, r.stderr + r.stdout
    result = json.loads(r.stdout)
    assert result["repaired_count"] == 1
    assert png.read_bytes()[29:33] == b"\x1f\x15\xc4\x89"

    r = run(["-m", "chunk_verify.cli", "parse", str(png), "--json"], cwd=tmp_path)
    assert json.loads(r.stdout)["status"] == "PASS"


def test_parse_truncated_exits_nonzero(tmp_path):
    png = tmp_path / "cut.png"
    png.write_bytes(SIG + chunk(b"IHDR", b"a" * 13)[:10])

    r = run(["-m", "chunk_verify.cli", "parse", str(png)], cwd=tmp_path)
    assert r.returncode == 1
    assert "FATAL" in r.stdout
    assert "offset 8" in r.stdout


def test_export_rejects_non_png(tmp_path):
    bogus = tmp_path / "bogus.bin"
    bogus.write_bytes(b"not a png at all")

    r = run(["-m", "chunk_scan.cli", str(bogus), str(tmp_path / "out")], cwd=tmp_path)
    assert r.returncode == 1
    assert r.stdout.startswith("FATAL:")
    assert not (tmp_path / "out").exists()
