"""
Region extraction strategies — structural, regex and fixed-size fallback.

Each strategy turns ``(file_path, content)`` into regions.  The registry picks
one per file extension; adding a language means registering a strategy, never
editing one.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .models import CodeRegion, RegionType, make_region, split_lines
from .structural import StructuralAdapter


DEFAULT_CHUNK_SIZE = 50


class ExtractionStrategy(ABC):
    """Base class for the three strategy variants."""

    kind: str = ""

    @abstractmethod
    def extract(self, file_path: str, content: str) -> list[CodeRegion]:
        """Return the regions of *content*, ordered by start line."""


# ---------------------------------------------------------------------------
# Fallback
# ---------------------------------------------------------------------------

class FallbackStrategy(ExtractionStrategy):
    """Fixed-size line windows for languages without a better strategy."""

    kind = "fallback"

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
        self.chunk_size = chunk_size

    def extract(self, file_path: str, content: str) -> list[CodeRegion]:
        total = len(split_lines(content))
        regions = []
        for i in range(0, total, self.chunk_size):
            start = i + 1
            end = min(i + self.chunk_size, total)
            regions.append(make_region(
                file_path, RegionType.OTHER, f"lines_{start}_{end}", start, end,
            ))
        return regions


# ---------------------------------------------------------------------------
# Structural
# ---------------------------------------------------------------------------

class StructuralStrategy(ExtractionStrategy):
    """Delegates to a syntax-tree adapter."""

    kind = "structural"

    def __init__(self, adapter: StructuralAdapter) -> None:
        self.adapter = adapter

    def extract(self, file_path: str, content: str) -> list[CodeRegion]:
        return self.adapter.extract(file_path, content)


# ---------------------------------------------------------------------------
# Regex
# ---------------------------------------------------------------------------

class BlockEnd(str, Enum):
    """How a regex strategy finds where a matched block stops."""
    BRACES = "braces"
    INDENT = "indent"


@dataclass(frozen=True)
class RegexPatterns:
    """Per-construct patterns for one language; group 1 captures the name."""
    import_: Optional[re.Pattern] = None
    function: Optional[re.Pattern] = None
    class_: Optional[re.Pattern] = None
    interface: Optional[re.Pattern] = None
    type_: Optional[re.Pattern] = None
    variable: Optional[re.Pattern] = None


_CLOSING_BRACKETS = (")", "]", "}")


def find_brace_block_end(lines: list[str], start_index: int) -> int:
    """Return the 1-indexed last line of the brace block opened at *start_index*.

    Depth counts ``{`` and ``}``.  A declaration ending in ``;`` before any
    brace opens is single-line.  If no brace ever opens, the block stops
    before the next non-blank unindented line.
    """
    depth = 0
    started = False
    for i in range(start_index, len(lines)):
        line = lines[i]
        if not started and i > start_index and _is_top_level(line):
            return _last_content_line(lines, start_index, i)
        for char in line:
            if char == "{":
                depth += 1
                started = True
            elif char == "}" and started:
                depth -= 1
        if started and depth <= 0:
            return i + 1
        if not started and line.rstrip().endswith(";"):
            return i + 1
    return _last_content_line(lines, start_index, len(lines))


def find_indent_block_end(lines: list[str], start_index: int) -> int:
    """Return the 1-indexed last line of an indentation block.

    The block runs until the first non-blank line without leading
    whitespace; lines opening with a closing bracket continue a signature.
    """
    for i in range(start_index + 1, len(lines)):
        line = lines[i]
        if _is_top_level(line) and not line.startswith(_CLOSING_BRACKETS):
            return _last_content_line(lines, start_index, i)
    return _last_content_line(lines, start_index, len(lines))


def _is_top_level(line: str) -> bool:
    return line.strip() != "" and not line[0].isspace()


def _last_content_line(lines: list[str], start_index: int, stop_index: int) -> int:
    """1-indexed last non-blank line before *stop_index*, at least the start."""
    for i in range(stop_index - 1, start_index, -1):
        if lines[i].strip():
            return i + 1
    return start_index + 1


_BLOCK_SCANNERS = {
    BlockEnd.BRACES: find_brace_block_end,
    BlockEnd.INDENT: find_indent_block_end,
}


class RegexStrategy(ExtractionStrategy):
    """Line-by-line pattern matching, one construct per line at most."""

    kind = "regex"

    def __init__(self, patterns: RegexPatterns, block_end: BlockEnd = BlockEnd.BRACES) -> None:
        self.patterns = patterns
        self.block_end = block_end

    def extract(self, file_path: str, content: str) -> list[CodeRegion]:
        lines = split_lines(content)
        find_end = _BLOCK_SCANNERS[self.block_end]
        p = self.patterns

        # precedence after imports: function, class, interface, type
        block_constructs = [
            (p.function, RegionType.FUNCTION),
            (p.class_, RegionType.CLASS),
            (p.interface, RegionType.INTERFACE),
            (p.type_, RegionType.TYPE_DEFINITION),
        ]

        regions: list[CodeRegion] = []
        import_start: Optional[int] = None
        import_end: Optional[int] = None

        for i, line in enumerate(lines):
            if not line:
                continue
            line_num = i + 1

            if p.import_ is not None and p.import_.search(line):
                if import_start is None:
                    import_start = line_num
                import_end = line_num
                continue

            matched = False
            for pattern, region_type in block_constructs:
                if pattern is None:
                    continue
                m = pattern.search(line)
                if m:
                    regions.append(make_region(
                        file_path, region_type, _match_name(m), line_num,
                        find_end(lines, i),
                    ))
                    matched = True
                    break
            if matched:
                continue

            if p.variable is not None:
                m = p.variable.search(line)
                if m:
                    regions.append(make_region(
                        file_path, RegionType.VARIABLE, _match_name(m), line_num, line_num,
                    ))

        if import_start is not None and import_end is not None:
            regions.insert(0, make_region(
                file_path, RegionType.IMPORTS, "imports", import_start, import_end,
            ))

        regions.sort(key=lambda r: r.start_line)
        return regions


def _match_name(m: re.Match) -> str:
    if m.re.groups and m.group(1):
        return m.group(1)
    return "anonymous"
