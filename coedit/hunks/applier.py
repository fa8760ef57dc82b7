"""
Hunk applier — rebuilds diff text or file content from an approved subset
of hunks.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..errors import HunkApplyError
from .models import ADDITION, CONTEXT, REMOVAL, DiffHunk, classify_line

logger = logging.getLogger(__name__)


def reconstruct_diff(
    original_path: str,
    modified_path: str,
    hunks: Sequence[DiffHunk],
) -> str:
    """Serialize *hunks* back into unified diff text, in the given order."""
    if not hunks:
        return ""
    lines = [f"--- {original_path}", f"+++ {modified_path}"]
    for hunk in hunks:
        lines.append(hunk.header)
        lines.extend(hunk.lines)
    return "\n".join(lines)


def apply_hunks(
    original_content: str,
    hunks: Sequence[DiffHunk],
    strict: bool = True,
) -> str:
    """Apply *hunks* to *original_content* and return the new content.

    Hunks are applied in ``original_start`` order.  Original lines outside
    the supplied hunks pass through unchanged, so leaving a hunk out keeps its
    deletions and drops its additions.

    Parameters
    ----------
    original_content:
        The content the hunks were generated against.
    hunks:
        The approved hunks, in any order.
    strict:
        When True, raise ``HunkApplyError`` if hunks overlap, reach past the
        end of the content, or their context/removal lines do not match.
        When False, clamp out-of-range positions and ignore mismatches.
    """
    if not hunks:
        return original_content

    original = original_content.split("\n")
    result: list[str] = []
    cursor = 0

    for hunk in sorted(hunks, key=lambda h: h.original_start):
        # "-0,0" headers insert before the first line
        hunk_start = max(hunk.original_start - 1, 0)
        if hunk.original_count == 0 and hunk.original_start > 0:
            hunk_start = hunk.original_start

        if hunk_start < cursor:
            if strict:
                raise HunkApplyError(
                    f"{hunk.id} starts at line {hunk.original_start}, "
                    f"overlapping the previous hunk (cursor at line {cursor + 1})"
                )
            logger.debug("[Hunks] %s overlaps previous hunk, clamping", hunk.id)
        if hunk_start > len(original):
            if strict:
                raise HunkApplyError(
                    f"{hunk.id} starts at line {hunk.original_start}, "
                    f"past the end of the content ({len(original)} lines)"
                )
            hunk_start = len(original)

        while cursor < hunk_start:
            result.append(original[cursor])
            cursor += 1

        for line in hunk.lines:
            kind = classify_line(line)
            if kind == ADDITION:
                result.append(line[1:])
            elif kind == REMOVAL:
                _check_line(hunk, original, cursor, line[1:], strict)
                cursor += 1
            elif kind == CONTEXT:
                text = line[1:]
                _check_line(hunk, original, cursor, text, strict)
                result.append(text)
                cursor += 1

    while cursor < len(original):
        result.append(original[cursor])
        cursor += 1

    return "\n".join(result)


def _check_line(
    hunk: DiffHunk,
    original: list[str],
    cursor: int,
    expected: str,
    strict: bool,
) -> None:
    if not strict:
        return
    if cursor >= len(original):
        raise HunkApplyError(
            f"{hunk.id} runs past the end of the content at line {cursor + 1}"
        )
    if original[cursor] != expected:
        raise HunkApplyError(
            f"{hunk.id} does not match line {cursor + 1}: "
            f"expected {expected!r}, found {original[cursor]!r}"
        )
