"""
coedit — region partitioning and hunk-level diffs for concurrent code editing.

Public API for library usage::

    from coedit import RegionExtractor, assign_regions_to_workers, parse_diff, apply_hunks

    regions = RegionExtractor().analyze_file("src/app.ts", content)
    buckets = assign_regions_to_workers(regions, worker_count=4)
"""

from .errors import CoeditError, PartitionError, HunkApplyError, StructuralParseError
from .regions import (
    CodeRegion, RegionType, RegionExtractor, LanguageRegistry, default_registry,
    regions_overlap, find_regions_at_position, get_most_specific_region,
    get_dependent_regions, find_overlapping_regions,
    assign_regions_to_workers,
)
from .hunks import (
    DiffHunk, ParsedDiff, HunkStats,
    parse_diff, reconstruct_diff, apply_hunks, generate_diff, get_hunk_stats,
)

__all__ = [
    "CoeditError", "PartitionError", "HunkApplyError", "StructuralParseError",
    "CodeRegion", "RegionType", "RegionExtractor", "LanguageRegistry", "default_registry",
    "regions_overlap", "find_regions_at_position", "get_most_specific_region",
    "get_dependent_regions", "find_overlapping_regions",
    "assign_regions_to_workers",
    "DiffHunk", "ParsedDiff", "HunkStats",
    "parse_diff", "reconstruct_diff", "apply_hunks", "generate_diff", "get_hunk_stats",
]
