"""Aggregate counts over a set of hunks."""

from __future__ import annotations

from typing import Sequence

from .models import DiffHunk, HunkStats


def get_hunk_stats(hunks: Sequence[DiffHunk]) -> HunkStats:
    """Count hunks, added lines and removed lines."""
    return HunkStats(
        total_hunks=len(hunks),
        total_additions=sum(len(h.additions) for h in hunks),
        total_removals=sum(len(h.removals) for h in hunks),
    )
