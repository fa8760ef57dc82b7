"""Tests for the unified diff hunk parser."""

from coedit.hunks.models import CONTEXT, REMOVAL, ADDITION, classify_line
from coedit.hunks.parser import parse_diff


SIMPLE_DIFF = "--- f\n+++ f\n@@ -1,2 +1,3 @@\n a\n-b\n+x\n+y\n"

MULTI_HUNK_DIFF = """\
--- a/src/app.py
+++ b/src/app.py
@@ -1,3 +1,3 @@ import os
 import os
-import sys
+import json

@@ -10,4 +10,5 @@ def main():
     run()
+    log()
     stop()
-    exit()
+    sys.exit()
"""


class TestParseDiff:
    def test_single_hunk(self):
        parsed = parse_diff(SIMPLE_DIFF)
        assert parsed.original_path == "f"
        assert parsed.modified_path == "f"
        assert len(parsed.hunks) == 1

        hunk = parsed.hunks[0]
        assert hunk.id == "hunk-0"
        assert hunk.header == "@@ -1,2 +1,3 @@"
        assert (hunk.original_start, hunk.original_count) == (1, 2)
        assert (hunk.modified_start, hunk.modified_count) == (1, 3)
        assert hunk.removals == ["b"]
        assert hunk.additions == ["x", "y"]
        assert hunk.lines == [" a", "-b", "+x", "+y"]
        assert hunk.context is None
        assert hunk.preview == "Line 1 (-1/+2)"

    def test_multiple_hunks(self):
        parsed = parse_diff(MULTI_HUNK_DIFF)
        assert parsed.original_path == "a/src/app.py"
        assert parsed.modified_path == "b/src/app.py"
        assert [h.id for h in parsed.hunks] == ["hunk-0", "hunk-1"]

        first, second = parsed.hunks
        assert first.context == "import os"
        assert first.preview == "import os (-1/+1)"
        assert first.lines[-1] == ""
        assert second.context == "def main():"
        assert second.additions == ["    log()", "    sys.exit()"]
        assert second.removals == ["    exit()"]
        assert second.preview == "def main(): (-1/+2)"

    def test_counts_default_to_one(self):
        parsed = parse_diff("@@ -3 +3 @@\n-old\n+new\n")
        hunk = parsed.hunks[0]
        assert (hunk.original_count, hunk.modified_count) == (1, 1)
        assert parsed.original_path == ""

    def test_malformed_header_is_skipped(self):
        text = "--- f\n+++ f\n@@ bogus @@\n+lost\n@@ -1 +1 @@\n-a\n+b\n"
        parsed = parse_diff(text)
        assert len(parsed.hunks) == 1
        hunk = parsed.hunks[0]
        assert hunk.id == "hunk-0"
        assert hunk.additions == ["b"]

    def test_later_path_headers_overwrite(self):
        parsed = parse_diff("--- one\n+++ one\n--- two\n+++ three\n")
        assert parsed.original_path == "two"
        assert parsed.modified_path == "three"
        assert parsed.hunks == []

    def test_preview_variants(self):
        parsed = parse_diff(
            "@@ -1,1 +1,0 @@\n-gone\n"
            "@@ -5,0 +5,1 @@\n+added\n"
            "@@ -9,1 +9,1 @@\n same\n"
        )
        assert [h.preview for h in parsed.hunks] == ["Line 1 (-1)", "Line 5 (+1)", "Line 9"]

    def test_no_newline_marker_is_unclassified(self):
        parsed = parse_diff("@@ -1 +1 @@\n-a\n\\ No newline at end of file\n+b\n")
        hunk = parsed.hunks[0]
        assert hunk.removals == ["a"]
        assert hunk.additions == ["b"]
        assert len(hunk.lines) == 3

    def test_empty_text(self):
        parsed = parse_diff("")
        assert parsed.hunks == []

    def test_select(self):
        parsed = parse_diff(MULTI_HUNK_DIFF)
        assert [h.id for h in parsed.select(["hunk-1", "hunk-9"])] == ["hunk-1"]


class TestClassifyLine:
    def test_classes(self):
        assert classify_line(" ctx") == CONTEXT
        assert classify_line("") == CONTEXT
        assert classify_line("-gone") == REMOVAL
        assert classify_line("+new") == ADDITION
        assert classify_line("--- f") is None
        assert classify_line("+++ f") is None
        assert classify_line("\\ No newline at end of file") is None
