"""Tests for the command-line entry point."""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from memfs.__main__ import main


@pytest.fixture(autouse=True)
def isolated(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


def _feed_stdin(monkeypatch, text: str) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(text.encode("utf-8"))))


class TestMain:
    def test_shell_quit_exits_zero(self, monkeypatch, capsys):
        _feed_stdin(monkeypatch, "create\na.txt\nhello\nlist\nquit\n")
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "[1] a.txt (5 bytes)" in out
        assert "Goodbye!" in out

    def test_shell_end_of_input_exits_zero(self, monkeypatch):
        _feed_stdin(monkeypatch, "list\n")
        with pytest.raises(SystemExit) as exc:
            main(["shell"])
        assert exc.value.code == 0

    def test_input_closed_mid_command_exits_nonzero(self, monkeypatch, capsys):
        _feed_stdin(monkeypatch, "create\nhalf\n")
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1
        assert "Fatal error" in capsys.readouterr().err

    def test_invalid_utf8_exits_nonzero(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"list\n\xff\xfe\n")))
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_demo(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["demo"])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "✅ File 'config.json' created successfully with ID: 3" in out
        assert "❌ File 'config.json' not found" in out
        assert "    .txt: 1 files" in out

    def test_usage(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["bogus"])
        assert exc.value.code == 1
        assert "Usage" in capsys.readouterr().out
