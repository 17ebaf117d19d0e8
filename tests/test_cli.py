import re
import subprocess
import sys

import willie


def run_cli(args, cwd=None, stdin=None):
    return subprocess.run(
        [sys.executable, "-m", "willie.cli", *args],
        capture_output=True,
        text=True,
        cwd=cwd,
        input=stdin,
    )


def test_version_matches_package():
    proc = run_cli(["--version"])
    assert proc.returncode == 0
    m = re.match(r"willie\s+(\d+\.\d+\.\d+)", (proc.stdout + proc.stderr).strip())
    assert m
    assert m.group(1) == willie.__version__


def test_block_from_file(tmp_path):
    src = tmp_path / "notes.txt"
    src.write_text("first\n\n   second  \n", encoding="utf-8")
    proc = run_cli([str(src), "--indent", "2", "--no-color"])
    assert proc.returncode == 0, proc.stderr
    lines = [l for l in proc.stdout.splitlines() if l.strip()]
    assert len(lines) == 2
    assert lines[0].endswith("   info:         first")
    assert lines[1].endswith("   info:         second")


def test_block_from_stdin_with_hr(tmp_path):
    proc = run_cli(["-", "--hr", "--level", "warn"], stdin="a\nb\n")
    assert proc.returncode == 0, proc.stderr
    lines = [l for l in proc.stdout.splitlines() if l.strip()]
    assert len(lines) == 4
    assert lines[0].endswith("-" * 80)
    assert lines[1].endswith("   warn: a")
    assert lines[3].endswith("-" * 80)


def test_debug_level_lowers_threshold():
    proc = run_cli(["-", "--level", "debug"], stdin="low\n")
    assert proc.returncode == 0, proc.stderr
    assert "  debug: low" in proc.stdout


def test_file_prefix_writes_log(tmp_path):
    src = tmp_path / "in.txt"
    src.write_text("saved\n", encoding="utf-8")
    proc = run_cli([str(src), "--file-prefix", "out"], cwd=tmp_path)
    assert proc.returncode == 0, proc.stderr
    (log,) = list(tmp_path.glob("out_*.log"))
    assert "saved" in log.read_text(encoding="utf-8")


def test_missing_file(tmp_path):
    proc = run_cli([str(tmp_path / "nope.txt")])
    assert proc.returncode == 2
    assert "file not found" in proc.stderr
