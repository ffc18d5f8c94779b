"""Smoke tests for the fileref command."""

import io
import json
import tempfile
from pathlib import Path

from cli import main, parse_args


def _write(path: Path, content: str = "x\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Test default options."""
        parsed = parse_args([])

        assert parsed.input == "-"
        assert parsed.format == "text"
        assert parsed.root is None
        assert not parsed.first

    def test_repeatable_options(self):
        """Test -r and -p accumulate."""
        parsed = parse_args(["trace.txt", "-r", "a", "-r", "b", "-p", "/x/", "-vv"])

        assert parsed.root == ["a", "b"]
        assert parsed.strip_prefix == ["/x/"]
        assert parsed.verbose == 2


class TestMain:
    """Tests for the main entry point."""

    def test_goto_output(self, capsys):
        """Test resolving a traceback with a stripped prefix."""
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir).resolve()
            _write(root / "pkg" / "mod.py")
            trace = _write(root / "trace.txt", 'File "/srv/app/./pkg/mod.py", line 12, in f\n')

            code = main([str(trace), "-r", str(root), "-p", "/srv/app/", "-f", "goto"])

            assert code == 0
            assert capsys.readouterr().out.strip() == f"{root / 'pkg' / 'mod.py'}:12"

    def test_json_output(self, capsys):
        """Test JSON output includes missing references by default."""
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir).resolve()
            _write(root / "src" / "app.js")
            trace = _write(root / "trace.txt", "at f (/src/app.js:3:4)\nlib/gone.py:9\n")

            code = main([str(trace), "-r", str(root), "-f", "json"])

            data = json.loads(capsys.readouterr().out)
            assert code == 0
            assert data[0]["resolved"] == str(root / "src" / "app.js")
            assert data[0]["column"] == 4
            assert data[1]["resolved"] is None

    def test_text_output_from_stdin(self, capsys, monkeypatch):
        """Test reading from stdin with text output."""
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir).resolve()
            _write(root / "a.py")
            monkeypatch.setattr("sys.stdin", io.StringIO("Check a.py:42 for details\n"))

            code = main(["-r", str(root)])

            out = capsys.readouterr().out
            assert code == 0
            assert "a.py:42" in out
            assert f"Line 42 -> {root / 'a.py'}" in out

    def test_config_file(self, capsys):
        """Test prefixes read from a config file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir).resolve()
            _write(root / "web" / "view.py")
            config = _write(root / "fileref.yaml", "strip_prefixes: ['/deploy/current/']\n")
            trace = _write(root / "trace.txt", "/deploy/current/web/view.py:5\n")

            code = main([str(trace), "-r", str(root), "-c", str(config), "-f", "goto"])

            assert code == 0
            assert capsys.readouterr().out.strip() == f"{root / 'web' / 'view.py'}:5"

    def test_nothing_resolved(self, capsys):
        """Test exit status when no reference resolves."""
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir).resolve()
            trace = _write(root / "trace.txt", "missing/file.py:3\n")

            code = main([str(trace), "-r", str(root)])

            assert code == 1
            assert "No valid file references found" in capsys.readouterr().err

    def test_no_references(self, capsys):
        """Test text without references."""
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir).resolve()
            trace = _write(root / "trace.txt", "all good\n")

            code = main([str(trace), "-r", str(root)])

            assert code == 1
            assert "No file references found" in capsys.readouterr().err

    def test_invalid_root(self, capsys):
        """Test a root that is not a directory."""
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = Path(tmpdir) / "nope"

            code = main(["-r", str(missing)])

            assert code == 1
            assert "is not a directory" in capsys.readouterr().err

    def test_missing_input_file(self, capsys):
        """Test an unreadable input file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            code = main([str(Path(tmpdir) / "nope.txt"), "-r", tmpdir])

            assert code == 1
            assert "Error reading input" in capsys.readouterr().err
