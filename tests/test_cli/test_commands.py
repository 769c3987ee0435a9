"""Tests for the queryhl command line."""

import io

import pytest

from queryhl import __version__
from queryhl.cli import main


@pytest.fixture
def query_file(tmp_path):
    path = tmp_path / "query.txt"
    path.write_text("status = active", encoding="utf-8")
    return path


class TestCommands:
    def test_tokenize(self, query_file, capsys):
        assert main(["tokenize", str(query_file)]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Token(KEY, 'status', 0:6)",
            "Token(EQUALS, '=', 7:8)",
            "Token(TEXT, 'active', 9:15)",
        ]

    def test_highlight(self, query_file, capsys):
        assert main(["highlight", str(query_file)]) == 0
        out = capsys.readouterr().out
        assert '<span class="token-key">status</span>' in out

    def test_page(self, query_file, capsys):
        assert main(["page", str(query_file)]) == 0
        out = capsys.readouterr().out
        assert "<title>query.txt</title>" in out
        assert 'class="highlight-preview"' in out

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("a OR b"))
        assert main(["tokenize", "-"]) == 0
        out = capsys.readouterr().out
        assert "Token(LOGICAL_OPERATOR, 'OR', 2:4)" in out

    def test_stdin_not_utf8(self, monkeypatch, capsys):
        raw = io.BytesIO(b"status = \xff\xfe")
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(raw, encoding="utf-8"))
        assert main(["highlight", "-"]) == 1
        assert "Error: cannot read stdin" in capsys.readouterr().out

    def test_verbose_flag_accepted(self, query_file, capsys):
        assert main(["-v", "tokenize", str(query_file)]) == 0
        assert "Token(KEY" in capsys.readouterr().out


class TestUsage:
    def test_no_arguments(self, capsys):
        assert main([]) == 1
        assert "Usage:" in capsys.readouterr().out

    def test_help(self, capsys):
        assert main(["--help"]) == 0
        assert "queryhl tokenize" in capsys.readouterr().out

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.strip() == f"queryhl {__version__}"

    def test_unknown_command(self, capsys):
        assert main(["parse", "x"]) == 1
        assert "unknown command 'parse'" in capsys.readouterr().out

    def test_missing_file_argument(self, capsys):
        assert main(["highlight"]) == 1
        assert "requires a file argument" in capsys.readouterr().out

    def test_file_not_found(self, tmp_path, capsys):
        assert main(["tokenize", str(tmp_path / "nope.txt")]) == 1
        assert "file not found" in capsys.readouterr().out
