"""Region analysis: extraction strategies, queries and partitioning."""

from .models import CodeRegion, RegionType
from .cache import RegionCache, content_hash
from .strategies import (
    ExtractionStrategy, FallbackStrategy, RegexStrategy, StructuralStrategy,
    RegexPatterns, BlockEnd,
)
from .structural import StructuralAdapter, TreeSitterAdapter
from .registry import LanguageRegistry, default_registry
from .extractor import RegionExtractor
from .query import (
    regions_overlap, find_regions_at_position, get_most_specific_region,
    get_dependent_regions, find_overlapping_regions,
)
from .partition import assign_regions_to_workers, file_owners

__all__ = [
    "CodeRegion", "RegionType",
    "RegionCache", "content_hash",
    "ExtractionStrategy", "FallbackStrategy", "RegexStrategy", "StructuralStrategy",
    "RegexPatterns", "BlockEnd",
    "StructuralAdapter", "TreeSitterAdapter",
    "LanguageRegistry", "default_registry",
    "RegionExtractor",
    "regions_overlap", "find_regions_at_position", "get_most_specific_region",
    "get_dependent_regions", "find_overlapping_regions",
    "assign_regions_to_workers", "file_owners",
]
