"""Tests for parsing and resolving in one pass."""

import logging

from scanner.builder import locate


TRACE = """Traceback (most recent call last):
  File "/srv/app/./pkg/main.py", line 10, in <module>
    run()
  File "/srv/app/pkg/missing.py", line 20, in run
    helper()
  File "/usr/lib/python3.11/json/decoder.py", line 337, in decode"""


class TestLocate:
    """Tests for locate()."""

    def test_resolves_each_reference_in_order(self, fake_fs):
        """Test every reference is resolved and kept in parse order."""
        fs = fake_fs(files={"/w/pkg/main.py", "/usr/lib/python3.11/json/decoder.py"})

        resolved = locate(TRACE, ["/w"], filesystem=fs, strip_prefixes=["/srv/app/"])

        assert [item.reference.line for item in resolved] == [10, 20, 337]
        assert resolved[0].path == "/w/pkg/main.py"
        assert not resolved[1].found
        assert resolved[2].path == "/usr/lib/python3.11/json/decoder.py"

    def test_first_only(self, fake_fs):
        """Test only the first reference is resolved."""
        fs = fake_fs(files={"/w/pkg/main.py"})

        resolved = locate(TRACE, ["/w"], filesystem=fs, strip_prefixes=["/srv/app/"],
                          first_only=True)

        assert len(resolved) == 1
        assert resolved[0].found
        assert fs.searches == []

    def test_no_references(self, fake_fs):
        """Test text without references."""
        assert locate("nothing to see", ["/w"], filesystem=fake_fs()) == []

    def test_logs_resolution_trace(self, fake_fs, caplog):
        """Test resolution steps are logged at debug level."""
        fs = fake_fs()

        with caplog.at_level(logging.DEBUG, logger="scanner.builder"):
            locate("lib/gone.py:3", ["/w"], filesystem=fs)

        assert "search: lib/gone.py" in caplog.text
        assert "File not found: lib/gone.py" in caplog.text
