"""
Tests for the hexlens command line (hexlens.cli.main).

main() is called in-process with an argv list; output is read with capsys.
stdout is not a terminal under capsys, so colours are off.
"""

import logging

import pytest

from hexlens.cli import build_parser, configure_logging, handler, main, resolve_options
from hexlens.config import BinariesMode, HexdumpOptions
from hexlens.core import ELISION_MARKER, HEADER


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("HEXLENS_LIMIT", "HEXLENS_MODE", "HEXLENS_PRINTABLE_LIMIT", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def blob(tmp_path):
    path = tmp_path / "blob.bin"
    path.write_bytes(b"\x00\x01\x02\x03\x04123abcdefxyz\xfd\xfe\xff")
    return path


class TestDump:
    def test_dumps_file(self, blob, capsys):
        """A file is printed as a plain dump with a trailing newline."""
        assert main([str(blob)]) == 0
        out = capsys.readouterr().out
        assert out == (
            HEADER + "\n"
            "  0000000:  0001 0203 0431 3233 6162 6364 6566 7879   ⋄••••123abcdefxy\n"
            "  0000010:  7AFD FEFF" + " " * 33 + "z×××\n"
        )
        assert "\x1b[" not in out

    def test_limit(self, tmp_path, capsys):
        """--limit elides the middle of long files."""
        path = tmp_path / "zeros.bin"
        path.write_bytes(bytes(200))
        assert main([str(path), "--limit", "32"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[3] == ELISION_MARKER
        assert lines[4].startswith("  0000120:  ")

    def test_no_limit(self, tmp_path, capsys, monkeypatch):
        """--no-limit overrides a limit from the environment."""
        monkeypatch.setenv("HEXLENS_LIMIT", "16")
        path = tmp_path / "zeros.bin"
        path.write_bytes(bytes(64))
        assert main([str(path), "--no-limit"]) == 0
        out = capsys.readouterr().out
        assert ELISION_MARKER not in out.splitlines()
        assert len(out.splitlines()) == 5

    def test_text_mode(self, tmp_path, capsys):
        """--mode text prints the decoded bytes."""
        path = tmp_path / "note.txt"
        path.write_bytes(b"hello there")
        assert main([str(path), "--mode", "text"]) == 0
        assert capsys.readouterr().out == "hello there\n"

    def test_infer_mode(self, tmp_path, blob, capsys):
        """--mode infer dumps binary files and prints text files."""
        text = tmp_path / "note.txt"
        text.write_bytes(b"hello there")
        assert main([str(text), "--mode", "infer"]) == 0
        assert capsys.readouterr().out == "hello there\n"
        assert main([str(blob), "--mode", "infer"]) == 0
        assert capsys.readouterr().out.startswith(HEADER)


class TestErrors:
    def test_missing_file(self, tmp_path, caplog):
        """A missing file is logged and exits with 1."""
        with caplog.at_level(logging.ERROR):
            assert main([str(tmp_path / "nope.bin")]) == 1
        assert "nope.bin" in caplog.text

    def test_negative_limit_is_a_usage_error(self, blob):
        """argparse refuses negative limits."""
        with pytest.raises(SystemExit) as exc:
            main([str(blob), "--limit", "-5"])
        assert exc.value.code == 2

    def test_limit_and_no_limit_conflict(self, blob):
        """--limit and --no-limit are mutually exclusive."""
        with pytest.raises(SystemExit):
            main([str(blob), "--limit", "5", "--no-limit"])

    def test_bad_environment(self, blob, monkeypatch):
        """Broken environment settings exit with 1."""
        monkeypatch.setenv("HEXLENS_MODE", "hex")
        assert main([str(blob)]) == 1


class TestResolveOptions:
    def test_flags_override_base(self):
        """Command line flags win over the base options."""
        args = build_parser().parse_args(["x", "-n", "64", "--mode", "infer", "--printable-limit", "9", "--no-color"])
        options = resolve_options(args, HexdumpOptions(limit=8))
        assert options == HexdumpOptions(
            binaries=BinariesMode.INFER, printable_limit=9, limit=64, color=False
        )


class TestLogging:
    def test_handler_installed_once(self, blob, capsys):
        """Repeated runs in one process share a single root handler."""
        configure_logging()
        configure_logging(logging.DEBUG)
        main([str(blob)])
        root = logging.getLogger()
        assert root.handlers.count(handler) == 1
        assert root.level == logging.WARNING
