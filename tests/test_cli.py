"""Tests for the `coedit` command-line interface."""

from __future__ import annotations

import json
import textwrap

import pytest

from coedit.cli import main


PY_SRC = textwrap.dedent("""\
    import os


    def helper(x):
        return x + 1
""")

DIFF = """\
--- f.txt
+++ f.txt
@@ -1,2 +1,2 @@
-one
+ONE
 two
@@ -4,1 +4,1 @@
-four
+FOUR
"""


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("COEDIT_STRICT_APPLY", raising=False)
    monkeypatch.delenv("COEDIT_DIFF_CONTEXT_LINES", raising=False)


@pytest.fixture()
def files(tmp_path):
    (tmp_path / "a.py").write_text(PY_SRC)
    (tmp_path / "b.py").write_text("X = 1\n")
    (tmp_path / "f.txt").write_text("one\ntwo\nthree\nfour\n")
    (tmp_path / "change.diff").write_text(DIFF)
    return tmp_path


class TestRegionsCommand:
    def test_json(self, files, capsys):
        assert main(["regions", "a.py", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [(r["type"], r["name"]) for r in data] == [
            ("imports", "imports"), ("function", "helper"),
        ]

    def test_table(self, files, capsys):
        assert main(["regions", "a.py", "b.py"]) == 0
        out = capsys.readouterr().out
        assert "a.py" in out and "b.py" in out
        assert "helper" in out

    def test_unreadable_file_skipped(self, files, capsys):
        assert main(["regions", "missing.py", "b.py", "--json"]) == 0
        captured = capsys.readouterr()
        assert "missing.py" in captured.err
        assert json.loads(captured.out)[0]["name"] == "X"


class TestPartitionCommand:
    def test_json(self, files, capsys):
        assert main(["partition", "-w", "2", "a.py", "b.py", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == {"0": ["a.py"], "1": ["b.py"]}

    def test_invalid_workers(self, files, capsys):
        assert main(["partition", "--workers", "0", "a.py"]) == 2
        assert "worker_count" in capsys.readouterr().err


class TestHunksCommand:
    def test_listing(self, files, capsys):
        assert main(["hunks", "change.diff"]) == 0
        out = capsys.readouterr().out
        assert "hunk-0" in out and "hunk-1" in out
        assert "2 hunk(s), +2 / -2" in out

    def test_json(self, files, capsys):
        assert main(["hunks", "change.diff", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["original_path"] == "f.txt"
        assert [h["id"] for h in data["hunks"]] == ["hunk-0", "hunk-1"]


class TestApplyCommand:
    def test_apply_all(self, files, capsys):
        assert main(["apply", "f.txt", "change.diff"]) == 0
        assert capsys.readouterr().out == "ONE\ntwo\nthree\nFOUR\n"

    def test_apply_selected_to_file(self, files):
        assert main(["apply", "f.txt", "change.diff", "--hunk", "hunk-1", "-o", "out.txt"]) == 0
        assert (files / "out.txt").read_text() == "one\ntwo\nthree\nFOUR\n"

    def test_unknown_hunk(self, files, capsys):
        assert main(["apply", "f.txt", "change.diff", "--hunk", "hunk-7"]) == 1
        assert "hunk-7" in capsys.readouterr().err

    def test_stale_original_fails(self, files, capsys):
        (files / "f.txt").write_text("one\nTWO\nthree\nfour\n")
        assert main(["apply", "f.txt", "change.diff"]) == 1
        assert "Cannot apply" in capsys.readouterr().err

    def test_lenient(self, files, capsys):
        (files / "f.txt").write_text("one\nTWO\nthree\nfour\n")
        assert main(["apply", "f.txt", "change.diff", "--lenient"]) == 0


class TestDiffCommand:
    def test_diff(self, files, capsys):
        (files / "g.txt").write_text("one\n2\nthree\nfour\n")
        assert main(["diff", "f.txt", "g.txt", "--path", "f.txt"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("--- f.txt\n+++ f.txt\n@@ -1,")
        assert "-two\n+2\n" in out

    def test_identical_prints_nothing(self, files, capsys):
        assert main(["diff", "f.txt", "f.txt"]) == 0
        assert capsys.readouterr().out == ""
