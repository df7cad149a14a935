"""Tests for the linscan command line."""

from __future__ import annotations

import io
import json
import logging
import subprocess
import sys
from pathlib import Path

import pytest

from linscan.cli import EXIT_LEX_ERROR, EXIT_OK, EXIT_USAGE, main


@pytest.fixture
def script(tmp_path: Path) -> Path:
    path = tmp_path / "01.lin"
    path.write_text("'x { 1 2 add } define\n", encoding="utf-8")
    return path


def test_default_output(script: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(script)]) == EXIT_OK
    out = capsys.readouterr().out
    assert out == '[Symbol("x"), OpeningBrace, Int(1), Int(2), Function("add"), ClosingBrace, Function("define"), EOF]\n'


def test_lines_with_locations(script: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--format", "lines", "--locations", str(script)]) == EXIT_OK
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f'{script}:1:1 SYMBOL "x"'
    assert lines[-1] == f"{script}:2:1 EOF"


def test_json_output(script: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--format", "json", str(script)]) == EXIT_OK
    data = json.loads(capsys.readouterr().out)
    assert data[-1]["type"] == "EOF"
    assert data[0]["location"]["source_file"] == str(script)


def test_lex_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "bad.lin"
    path.write_text("1 2\n1.2.3\n", encoding="utf-8")
    assert main([str(path)]) == EXIT_LEX_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == f"error: {path}:2:1 invalid number\n"


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "nope.lin")]) == EXIT_USAGE
    assert capsys.readouterr().err.startswith("error: ")


def test_undecodable_file(tmp_path: Path) -> None:
    path = tmp_path / "latin1.lin"
    path.write_bytes(b"\xff\xfe")
    assert main([str(path)]) == EXIT_USAGE


def test_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("dup"))
    assert main([]) == EXIT_OK
    assert capsys.readouterr().out == '[Function("dup"), EOF]\n'


def test_stdin_error_has_no_file(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO('"open'))
    assert main(["-"]) == EXIT_LEX_ERROR
    assert capsys.readouterr().err == "error: 1:1 unterminated string\n"


class TestConfigFile:
    """--config TOML handling."""

    def test_linscan_table(self, script: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config = tmp_path / "linscan.toml"
        config.write_text('[linscan]\nformat = "lines"\n', encoding="utf-8")
        assert main(["--config", str(config), str(script)]) == EXIT_OK
        assert capsys.readouterr().out.splitlines()[0] == 'SYMBOL "x"'

    def test_top_level_keys(self, script: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config = tmp_path / "linscan.toml"
        config.write_text('format = "lines"\nshow_locations = true\n', encoding="utf-8")
        assert main(["--config", str(config), str(script)]) == EXIT_OK
        assert capsys.readouterr().out.splitlines()[0].endswith(':1:1 SYMBOL "x"')

    def test_flags_override_file(self, script: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config = tmp_path / "linscan.toml"
        config.write_text('[linscan]\nformat = "lines"\n', encoding="utf-8")
        assert main(["--config", str(config), "--format", "debug", str(script)]) == EXIT_OK
        assert capsys.readouterr().out.startswith("[")

    def test_bad_format_in_file(self, script: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config = tmp_path / "linscan.toml"
        config.write_text('[linscan]\nformat = "xml"\n', encoding="utf-8")
        assert main(["--config", str(config), str(script)]) == EXIT_USAGE
        assert "Unknown output format" in capsys.readouterr().err

    def test_bad_json_indent_in_file(self, script: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config = tmp_path / "linscan.toml"
        config.write_text('[linscan]\nformat = "json"\njson_indent = [1]\n', encoding="utf-8")
        assert main(["--config", str(config), str(script)]) == EXIT_USAGE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "json_indent must be an integer" in captured.err

    def test_string_show_locations_in_file(self, script: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config = tmp_path / "linscan.toml"
        config.write_text('[linscan]\nformat = "lines"\nshow_locations = "no"\n', encoding="utf-8")
        assert main(["--config", str(config), str(script)]) == EXIT_USAGE
        assert "show_locations must be true or false" in capsys.readouterr().err

    def test_malformed_toml(self, script: Path, tmp_path: Path) -> None:
        config = tmp_path / "linscan.toml"
        config.write_text("format = \n", encoding="utf-8")
        assert main(["--config", str(config), str(script)]) == EXIT_USAGE


def test_verbose_logs_to_stderr(script: Path, capsys: pytest.CaptureFixture[str]) -> None:
    logger = logging.getLogger("linscan")
    try:
        assert main(["-v", str(script)]) == EXIT_OK
        captured = capsys.readouterr()
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
    assert captured.out.startswith("[")
    assert "linscan.lexer.core: Scanned 8 tokens" in captured.err


def test_unknown_format_flag() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--format", "xml", "x.lin"])
    assert exc_info.value.code == 2


def test_python_dash_m(script: Path) -> None:
    proc = subprocess.run(
        [sys.executable, "-m", "linscan", str(script)],
        text=True,
        capture_output=True,
        check=False,
    )
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.startswith('[Symbol("x")')
