"""
Line-bounded, semantically typed spans of source code.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Optional


class RegionType(str, Enum):
    """Kind of code construct a region covers."""
    FUNCTION = "function"
    CLASS = "class"
    INTERFACE = "interface"
    TYPE_DEFINITION = "type_definition"
    VARIABLE = "variable"
    ENUM = "enum"
    IMPORTS = "imports"
    EXPORT = "export"
    OTHER = "other"


@dataclass
class CodeRegion:
    """A named span of lines within one file.

    Regions of the same file may nest (a class containing its methods).
    ``modified_by`` is an agent identifier owned by external callers; the
    engine neither reads nor writes it.
    """
    id: str
    file_path: str
    type: RegionType
    name: str
    start_line: int            # 1-indexed, inclusive
    end_line: int              # 1-indexed, inclusive
    dependencies: frozenset[str] = field(default_factory=frozenset)
    modified_by: Optional[str] = field(default=None, compare=False)

    @property
    def span(self) -> int:
        return self.end_line - self.start_line

    @property
    def line_count(self) -> int:
        return self.span + 1

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "file_path": self.file_path,
            "type": self.type.value,
            "name": self.name,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "dependencies": sorted(self.dependencies),
            "modified_by": self.modified_by,
        }


def make_region(
    file_path: str,
    region_type: RegionType,
    name: str,
    start_line: int,
    end_line: int,
    dependencies: Iterable[str] = (),
) -> CodeRegion:
    """Build a region with a provisional id (finalized by the extractor)."""
    return CodeRegion(
        id="",
        file_path=file_path,
        type=region_type,
        name=name,
        start_line=start_line,
        end_line=end_line,
        dependencies=frozenset(dependencies),
    )


def split_lines(content: str) -> list[str]:
    """Split *content* on ``\\n``; a final newline does not add a line."""
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def finalize_regions(regions: list[CodeRegion], total_lines: int) -> list[CodeRegion]:
    """Clamp line bounds, stable-sort by start line and assign ids.

    Ids take the form ``{file}:{start}-{end}:{type}:{name}``; a ``~N`` suffix
    keeps them unique when two regions would collide.
    """
    if total_lines <= 0:
        return []

    clamped: list[CodeRegion] = []
    for region in regions:
        start = max(1, min(region.start_line, total_lines))
        end = max(start, min(region.end_line, total_lines))
        clamped.append(replace(region, start_line=start, end_line=end))

    clamped.sort(key=lambda r: r.start_line)

    seen: dict[str, int] = {}
    result: list[CodeRegion] = []
    for region in clamped:
        base = (
            f"{region.file_path}:{region.start_line}-{region.end_line}"
            f":{region.type.value}:{region.name}"
        )
        count = seen.get(base, 0)
        seen[base] = count + 1
        region_id = base if count == 0 else f"{base}~{count + 1}"
        result.append(replace(region, id=region_id))
    return result
