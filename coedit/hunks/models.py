"""
Unified-diff data model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Optional

# Line classes inside a hunk body
CONTEXT = "context"
REMOVAL = "removal"
ADDITION = "addition"


def classify_line(line: str) -> Optional[str]:
    """Classify one raw hunk line, or None for markers like ``\\ No newline``.

    An empty line is a context line whose leading space was stripped.
    """
    if line == "" or line.startswith(" "):
        return CONTEXT
    if line.startswith("-") and not line.startswith("---"):
        return REMOVAL
    if line.startswith("+") and not line.startswith("+++"):
        return ADDITION
    return None


@dataclass
class DiffHunk:
    """One ``@@`` block of a unified diff."""
    id: str
    header: str                     # raw "@@ -a,b +c,d @@ ctx" line
    original_start: int
    original_count: int
    modified_start: int
    modified_count: int
    lines: list[str] = field(default_factory=list)   # raw, prefix preserved
    context: Optional[str] = None
    removals: list[str] = field(default_factory=list)
    additions: list[str] = field(default_factory=list)
    preview: str = ""

    @property
    def is_insertion(self) -> bool:
        return len(self.removals) == 0

    @property
    def is_deletion(self) -> bool:
        return len(self.additions) == 0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "header": self.header,
            "original_start": self.original_start,
            "original_count": self.original_count,
            "modified_start": self.modified_start,
            "modified_count": self.modified_count,
            "context": self.context,
            "preview": self.preview,
            "additions": len(self.additions),
            "removals": len(self.removals),
        }


@dataclass
class ParsedDiff:
    """A single-file unified diff."""
    original_path: str = ""
    modified_path: str = ""
    hunks: list[DiffHunk] = field(default_factory=list)

    def select(self, hunk_ids: Iterable[str]) -> list[DiffHunk]:
        """Hunks whose id is in *hunk_ids*, in diff order."""
        wanted = set(hunk_ids)
        return [h for h in self.hunks if h.id in wanted]


class HunkStats(NamedTuple):
    total_hunks: int
    total_additions: int
    total_removals: int
