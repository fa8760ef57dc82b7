"""Tests for regex-based region extraction and block-end scanning."""

import re
import textwrap

import pytest

from coedit.regions.models import RegionType
from coedit.regions.registry import GO_PATTERNS, JAVA_PATTERNS, PYTHON_PATTERNS
from coedit.regions.strategies import (
    BlockEnd, FallbackStrategy, RegexPatterns, RegexStrategy,
    find_brace_block_end, find_indent_block_end,
)


PYTHON_SRC = textwrap.dedent("""\
    import os
    from typing import List

    CONSTANT = 42


    class Animal:
        def __init__(self, name):
            self.name = name

        def speak(self):
            return "..."


    def helper(x):
        return x + 1
""")

GO_SRC = textwrap.dedent("""\
    package main

    import "fmt"

    type Server struct {
        addr string
    }

    func (s *Server) Start() error {
        fmt.Println(s.addr)
        return nil
    }

    const Version = "1.0"
""")

JAVA_SRC = textwrap.dedent("""\
    public class Greeter {
        public String greet(String name) {
            return "hi " + name;
        }
    }
""")


def _spans(regions):
    return [(r.type, r.name, r.start_line, r.end_line) for r in regions]


class TestPythonRegex:
    def test_regions(self):
        strategy = RegexStrategy(PYTHON_PATTERNS, BlockEnd.INDENT)
        regions = strategy.extract("animal.py", PYTHON_SRC)
        assert _spans(regions) == [
            (RegionType.IMPORTS, "imports", 1, 2),
            (RegionType.VARIABLE, "CONSTANT", 4, 4),
            (RegionType.CLASS, "Animal", 7, 12),
            (RegionType.FUNCTION, "helper", 15, 16),
        ]

    def test_async_def(self):
        strategy = RegexStrategy(PYTHON_PATTERNS, BlockEnd.INDENT)
        regions = strategy.extract("a.py", "async def fetch():\n    pass\n")
        assert _spans(regions) == [(RegionType.FUNCTION, "fetch", 1, 2)]

    def test_comparison_is_not_assignment(self):
        strategy = RegexStrategy(PYTHON_PATTERNS, BlockEnd.INDENT)
        assert strategy.extract("a.py", "x == 1\n") == []


class TestBraceLanguages:
    def test_go_regions(self):
        regions = RegexStrategy(GO_PATTERNS).extract("main.go", GO_SRC)
        assert _spans(regions) == [
            (RegionType.IMPORTS, "imports", 3, 3),
            (RegionType.CLASS, "Server", 5, 7),
            (RegionType.FUNCTION, "Start", 9, 12),
            (RegionType.VARIABLE, "Version", 14, 14),
        ]

    def test_java_methods_nest_inside_class(self):
        regions = RegexStrategy(JAVA_PATTERNS).extract("Greeter.java", JAVA_SRC)
        assert _spans(regions) == [
            (RegionType.CLASS, "Greeter", 1, 5),
            (RegionType.FUNCTION, "greet", 2, 4),
        ]

    def test_unnamed_group_is_anonymous(self):
        patterns = RegexPatterns(function=re.compile(r"^init\s*\{"))
        regions = RegexStrategy(patterns).extract("x.kt", "init {\n  go()\n}\n")
        assert _spans(regions) == [(RegionType.FUNCTION, "anonymous", 1, 3)]


class TestBlockEnd:
    def test_brace_block(self):
        lines = ["fn a() {", "    if x {", "    }", "}", "fn b() {}"]
        assert find_brace_block_end(lines, 0) == 4
        assert find_brace_block_end(lines, 4) == 5

    def test_semicolon_declaration_is_single_line(self):
        lines = ["fn decl(x: i32) -> i32;", "fn other() {", "}"]
        assert find_brace_block_end(lines, 0) == 1

    def test_no_brace_stops_at_next_top_level_line(self):
        lines = ["type Alias =", "    Foo", "", "next"]
        assert find_brace_block_end(lines, 0) == 2

    def test_unclosed_brace_runs_to_last_content_line(self):
        lines = ["fn a() {", "    go()", "", ""]
        assert find_brace_block_end(lines, 0) == 2

    def test_indent_block_skips_trailing_blanks(self):
        lines = ["def f():", "    return 1", "", "", "x = 2"]
        assert find_indent_block_end(lines, 0) == 2

    def test_indent_block_continues_signature(self):
        lines = ["def f(", "    a,", "):", "    return a", "y = 1"]
        assert find_indent_block_end(lines, 0) == 4

    def test_single_line_block(self):
        assert find_indent_block_end(["def f(): pass", "x = 1"], 0) == 1


class TestFallbackStrategy:
    def test_windows(self):
        content = "\n".join(f"line {i}" for i in range(7))
        regions = FallbackStrategy(chunk_size=3).extract("notes.txt", content)
        assert _spans(regions) == [
            (RegionType.OTHER, "lines_1_3", 1, 3),
            (RegionType.OTHER, "lines_4_6", 4, 6),
            (RegionType.OTHER, "lines_7_7", 7, 7),
        ]

    def test_empty_content(self):
        assert FallbackStrategy().extract("notes.txt", "") == []

    def test_chunk_size_must_be_positive(self):
        with pytest.raises(ValueError):
            FallbackStrategy(chunk_size=0)
