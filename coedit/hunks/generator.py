"""
Simple unified diff generator.

Walks both texts line by line without LCS backtracking, so output is
deterministic but not minimal.  Used to re-serialize partially approved
edits, not for primary change detection.
"""

from __future__ import annotations

from typing import Optional

DEFAULT_CONTEXT_LINES = 3


class _HunkBuilder:
    """Accumulates one hunk's lines and header counts."""

    def __init__(self, original_start: int, modified_start: int, seed: list[str]) -> None:
        self.original_start = original_start
        self.modified_start = modified_start
        self.lines = list(seed)
        self.original_count = len(seed)
        self.modified_count = len(seed)
        self.trailing_context = 0

    def context(self, text: str) -> None:
        self.lines.append(f" {text}")
        self.original_count += 1
        self.modified_count += 1
        self.trailing_context += 1

    def removal(self, text: str) -> None:
        self.lines.append(f"-{text}")
        self.original_count += 1
        self.trailing_context = 0

    def addition(self, text: str) -> None:
        self.lines.append(f"+{text}")
        self.modified_count += 1
        self.trailing_context = 0

    def drop_trailing(self, count: int) -> None:
        if count <= 0:
            return
        del self.lines[-count:]
        self.original_count -= count
        self.modified_count -= count

    def render(self) -> list[str]:
        header = (
            f"@@ -{self.original_start},{self.original_count} "
            f"+{self.modified_start},{self.modified_count} @@"
        )
        return [header, *self.lines]


def generate_diff(
    original: str,
    modified: str,
    path: str = "file",
    context_lines: int = DEFAULT_CONTEXT_LINES,
    lookahead: bool = True,
) -> str:
    """Return a unified diff turning *original* into *modified*.

    Matching lines are buffered as leading context (up to *context_lines*)
    or, inside a hunk, appended as context; a hunk closes after
    *context_lines* consecutive matches while original lines remain, keeping
    one trailing context line.  On divergence one ``-`` line and then one
    ``+`` line are consumed until the texts realign.

    With *lookahead* (the default) the walk departs from that plain greedy
    pairing: when the next modified line equals the current original line a
    lone ``+`` is emitted, and when the next original line equals the current
    modified line a lone ``-`` is emitted, so pure insertions and deletions
    do not rewrite the lines after them.  Pass ``lookahead=False`` for the
    plain greedy walk.

    Returns an empty string when the texts are identical.
    """
    if context_lines < 1:
        raise ValueError(f"context_lines must be >= 1, got {context_lines}")

    orig_lines = original.split("\n")
    mod_lines = modified.split("\n")
    n_orig = len(orig_lines)
    n_mod = len(mod_lines)

    output: list[str] = []
    hunk: Optional[_HunkBuilder] = None
    buffered: list[str] = []
    oi = 0
    mi = 0

    while oi < n_orig or mi < n_mod:
        orig_line = orig_lines[oi] if oi < n_orig else None
        mod_line = mod_lines[mi] if mi < n_mod else None

        if orig_line is not None and orig_line == mod_line:
            if hunk is not None:
                hunk.context(orig_line)
                if hunk.trailing_context >= context_lines and oi < n_orig - 1:
                    hunk.drop_trailing(context_lines - 1)
                    output.extend(hunk.render())
                    hunk = None
                    buffered = []
            else:
                buffered.append(orig_line)
                if len(buffered) > context_lines:
                    buffered.pop(0)
            oi += 1
            mi += 1
            continue

        if hunk is None:
            hunk = _HunkBuilder(
                original_start=oi - len(buffered) + 1,
                modified_start=mi - len(buffered) + 1,
                seed=[f" {line}" for line in buffered],
            )
            buffered = []

        if orig_line is None:
            hunk.addition(mod_line)
            mi += 1
        elif mod_line is None:
            hunk.removal(orig_line)
            oi += 1
        elif lookahead and mi + 1 < n_mod and mod_lines[mi + 1] == orig_line:
            hunk.addition(mod_line)
            mi += 1
        elif lookahead and oi + 1 < n_orig and orig_lines[oi + 1] == mod_line:
            hunk.removal(orig_line)
            oi += 1
        else:
            hunk.removal(orig_line)
            hunk.addition(mod_line)
            oi += 1
            mi += 1

    if hunk is not None:
        output.extend(hunk.render())

    if not output:
        return ""
    return "\n".join([f"--- {path}", f"+++ {path}", *output])
