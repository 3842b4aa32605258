"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "b64seq.cli.main", *args],
        capture_output=True,
        text=True,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = _run("--help")
    assert result.returncode == 0
    assert "b64seq: compact radix-64 codec" in result.stdout
    assert "--encode" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = _run("--version")
    assert result.returncode == 0
    assert "b64seq 0.1.0" in result.stdout


def test_cli_encode() -> None:
    result = _run("--encode", "1,2,3")
    assert result.returncode == 0
    assert result.stdout.strip() == "BgkY"


def test_cli_decode() -> None:
    result = _run("--decode", "BgkY")
    assert result.returncode == 0
    assert result.stdout.strip() == "1,2,3"


def test_cli_encode_out_of_range() -> None:
    """Test that codec errors exit with status 1."""
    result = _run("--encode", "1,301")
    assert result.returncode == 1
    assert "Error" in result.stderr
    assert "301" in result.stderr


def test_cli_encode_not_a_number() -> None:
    result = _run("--encode", "1,x")
    assert result.returncode == 1
    assert "Error" in result.stderr


def test_cli_decode_invalid_character() -> None:
    result = _run("--decode", "#")
    assert result.returncode == 1
    assert "Invalid character" in result.stderr


def test_cli_report_to_file(tmp_path: Path) -> None:
    """Test the report written to a file."""
    output = tmp_path / "report.txt"
    result = _run("--report", "--seed", "5", "--output", str(output))

    assert result.returncode == 0
    text = output.read_text(encoding="utf-8")
    assert text.count("Round-trip OK: yes") == 10
    assert "Report written to" in result.stdout


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = _run()
    assert result.returncode == 0
    assert "b64seq: compact radix-64 codec" in result.stdout


def test_cli_report_options_need_report() -> None:
    """Test that report-only options are rejected with --encode/--decode."""
    result = _run("--encode", "1,2,3", "--seed", "4")
    assert result.returncode == 2
    assert "only apply to --report" in result.stderr

    result = _run("--decode", "BgkY", "--output", "out.txt")
    assert result.returncode == 2
    assert "only apply to --report" in result.stderr
