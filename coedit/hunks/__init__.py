"""Hunk-level diff handling: parse, select, re-serialize and apply unified diffs."""

from .models import DiffHunk, ParsedDiff, HunkStats
from .parser import parse_diff, hunk_preview
from .applier import reconstruct_diff, apply_hunks
from .generator import generate_diff
from .stats import get_hunk_stats

__all__ = [
    "DiffHunk", "ParsedDiff", "HunkStats",
    "parse_diff", "hunk_preview",
    "reconstruct_diff", "apply_hunks",
    "generate_diff",
    "get_hunk_stats",
]
