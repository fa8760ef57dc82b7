"""
Unified diff parser — splits diff text into individually reviewable hunks.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from .models import ADDITION, REMOVAL, DiffHunk, ParsedDiff, classify_line

logger = logging.getLogger(__name__)

# @@ -origStart[,origCount] +modStart[,modCount] @@ [context]
_HUNK_HEADER = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@(.*)$")


def parse_diff(text: str) -> ParsedDiff:
    """Parse a single-file unified diff.

    Malformed ``@@`` headers are skipped together with the lines that follow
    them, so callers needing every hunk should check ``len(result.hunks)``.

    Parameters
    ----------
    text:
        Unified diff text (``---``/``+++`` file headers, ``@@`` hunks).

    Returns
    -------
    ParsedDiff
        File paths and hunks in diff order.
    """
    result = ParsedDiff()
    current: Optional[DiffHunk] = None
    hunk_index = 0

    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    for line in lines:
        # File headers
        if line.startswith("---"):
            result.original_path = line[4:].strip()
            continue
        if line.startswith("+++"):
            result.modified_path = line[4:].strip()
            continue

        # Hunk header
        if line.startswith("@@"):
            if current is not None:
                _flush(current, result)
            current = _parse_header(line, hunk_index)
            if current is None:
                logger.debug("[Hunks] Dropping malformed hunk header: %r", line)
            else:
                hunk_index += 1
            continue

        if current is None:
            continue

        current.lines.append(line)
        kind = classify_line(line)
        if kind == REMOVAL:
            current.removals.append(line[1:])
        elif kind == ADDITION:
            current.additions.append(line[1:])

    if current is not None:
        _flush(current, result)

    return result


def _parse_header(line: str, index: int) -> Optional[DiffHunk]:
    m = _HUNK_HEADER.match(line)
    if not m:
        return None
    return DiffHunk(
        id=f"hunk-{index}",
        header=line,
        original_start=int(m.group(1)),
        original_count=int(m.group(2)) if m.group(2) is not None else 1,
        modified_start=int(m.group(3)),
        modified_count=int(m.group(4)) if m.group(4) is not None else 1,
        context=m.group(5).strip() or None,
    )


def _flush(hunk: DiffHunk, result: ParsedDiff) -> None:
    hunk.preview = hunk_preview(hunk)
    result.hunks.append(hunk)


def hunk_preview(hunk: DiffHunk) -> str:
    """Short label: header context (or ``Line N``) plus change counts."""
    removals = len(hunk.removals)
    additions = len(hunk.additions)
    preview = hunk.context or f"Line {hunk.modified_start}"
    if removals and additions:
        preview += f" (-{removals}/+{additions})"
    elif removals:
        preview += f" (-{removals})"
    elif additions:
        preview += f" (+{additions})"
    return preview
