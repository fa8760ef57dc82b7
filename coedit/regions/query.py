"""
Pure queries over region sets: overlap, containment, specificity and
token-level dependency links.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .models import CodeRegion


def regions_overlap(a: CodeRegion, b: CodeRegion) -> bool:
    """True iff *a* and *b* share a file and at least one line."""
    if a.file_path != b.file_path:
        return False
    return a.start_line <= b.end_line and b.start_line <= a.end_line


def find_regions_at_position(
    file_path: str,
    line: int,
    regions: Sequence[CodeRegion],
) -> list[CodeRegion]:
    """All regions of *file_path* whose line range contains *line*."""
    return [
        r for r in regions
        if r.file_path == file_path and r.start_line <= line <= r.end_line
    ]


def get_most_specific_region(
    file_path: str,
    line: int,
    regions: Sequence[CodeRegion],
) -> Optional[CodeRegion]:
    """The smallest region containing *line*; ties go to the earliest in *regions*."""
    best: Optional[CodeRegion] = None
    for region in find_regions_at_position(file_path, line, regions):
        if best is None or region.span < best.span:
            best = region
    return best


def get_dependent_regions(
    region: CodeRegion,
    all_regions: Sequence[CodeRegion],
) -> list[CodeRegion]:
    """Other regions sharing at least one dependency token with *region*."""
    if not region.dependencies:
        return []
    return [
        r for r in all_regions
        if r is not region and not r.dependencies.isdisjoint(region.dependencies)
    ]


def find_overlapping_regions(
    regions_a: Sequence[CodeRegion],
    regions_b: Sequence[CodeRegion],
) -> list[CodeRegion]:
    """Regions of either set that overlap some region of the other set.

    Each region is reported once, in first-seen order (pairs from *regions_a*
    drive the order).
    """
    result: list[CodeRegion] = []
    seen: set[int] = set()
    for a in regions_a:
        for b in regions_b:
            if not regions_overlap(a, b):
                continue
            for region in (a, b):
                if id(region) not in seen:
                    seen.add(id(region))
                    result.append(region)
    return result
