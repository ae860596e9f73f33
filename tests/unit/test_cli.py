"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from msgpack_dump import __version__
from msgpack_dump.cli.main import main


@pytest.fixture
def input_file(tmp_path: Path, nested_map_payload: bytes) -> Path:
    """File holding one encoded map followed by one integer."""
    path = tmp_path / "input.msgpack"
    path.write_bytes(nested_map_payload + b"\x05")
    return path


def test_cli_file(input_file: Path, nested_map_text: str, capsys: pytest.CaptureFixture) -> None:
    """Test dumping a file."""
    assert main([str(input_file)]) == 0

    captured = capsys.readouterr()
    assert captured.out == nested_map_text + "5\n"
    assert captured.err == ""


def test_cli_empty_file(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """Test zero-byte input is a clean success."""
    path = tmp_path / "empty.msgpack"
    path.write_bytes(b"")

    assert main([str(path)]) == 0
    assert capsys.readouterr().out == ""


def test_cli_stats(input_file: Path, capsys: pytest.CaptureFixture) -> None:
    """Test --stats summary on stderr."""
    assert main(["--stats", str(input_file)]) == 0
    assert capsys.readouterr().err == "2 values, 10 bytes\n"


def test_cli_indent(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """Test --indent option."""
    path = tmp_path / "array.msgpack"
    path.write_bytes(b"\x91\x01")

    assert main(["--indent", "2", str(path)]) == 0
    assert capsys.readouterr().out == "[\n  [0]: 1\n]\n"


def test_cli_invalid_indent(input_file: Path, capsys: pytest.CaptureFixture) -> None:
    """Test out-of-range options are reported."""
    assert main(["--indent", "99", str(input_file)]) == 1
    assert "Invalid options" in capsys.readouterr().err


def test_cli_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """Test missing input file."""
    assert main([str(tmp_path / "nonexistent.msgpack")]) == 1
    assert "Cannot open input file" in capsys.readouterr().err


def test_cli_bad_tag(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """Test unknown tag aborts with an error after earlier output."""
    path = tmp_path / "bad.msgpack"
    path.write_bytes(b"\x01\xc1")

    assert main([str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == "1\n"
    assert "Error: Bad tag c1 at offset 1" in captured.err


def test_cli_truncated(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """Test truncated input aborts with an error."""
    path = tmp_path / "truncated.msgpack"
    path.write_bytes(b"\xa5ab")

    assert main([str(path)]) == 1
    assert "Cannot read 5 bytes" in capsys.readouterr().err


def test_cli_too_many_args(input_file: Path) -> None:
    """Test more than one input is a usage error."""
    with pytest.raises(SystemExit) as exc_info:
        main([str(input_file), str(input_file)])
    assert exc_info.value.code == 2


def test_cli_version(capsys: pytest.CaptureFixture) -> None:
    """Test CLI --version flag."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert f"msgpack-dump {__version__}" in capsys.readouterr().out


def test_cli_stdin() -> None:
    """Test reading standard input when no file is given."""
    result = subprocess.run(
        [sys.executable, "-m", "msgpack_dump.cli.main"],
        input=b"\xc3\x90",
        capture_output=True,
    )
    assert result.returncode == 0
    assert result.stdout == b"true\n[\n]\n"


def test_cli_raw_string_bytes() -> None:
    """Test string bytes reach stdout unchanged, even when not UTF-8."""
    result = subprocess.run(
        [sys.executable, "-m", "msgpack_dump.cli.main"],
        input=b"\xa3\xff\xfe\x01",
        capture_output=True,
    )
    assert result.returncode == 0
    assert result.stdout == b'"\xff\xfe\x01"\n'


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = subprocess.run(
        [sys.executable, "-m", "msgpack_dump.cli.main", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "msgpack-dump: MessagePack Stream Inspector" in result.stdout
    assert "--indent" in result.stdout


def test_cli_leaves_stdout_untouched(input_file: Path, capsys: pytest.CaptureFixture) -> None:
    """Test main() does not reconfigure the process-wide stdout."""
    stdout = sys.stdout
    encoding, errors = stdout.encoding, stdout.errors

    assert main([str(input_file)]) == 0

    assert sys.stdout is stdout
    assert (sys.stdout.encoding, sys.stdout.errors) == (encoding, errors)
    assert capsys.readouterr().out.endswith("5\n")
