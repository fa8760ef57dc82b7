"""
Region extractor — the entry point of the region engine.

Selects a strategy through the language registry, degrades to fixed-size
windows when a strategy fails, and memoizes results per file by content hash.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from ..config import Config
from .cache import RegionCache, content_hash
from .models import CodeRegion, finalize_regions, split_lines
from .registry import LanguageRegistry, default_registry

logger = logging.getLogger(__name__)


class RegionExtractor:
    """Partition file contents into code regions.

    Each instance owns its cache; confine an instance to one thread or guard
    it with a lock.
    """

    def __init__(
        self,
        registry: Optional[LanguageRegistry] = None,
        cache: Optional[RegionCache] = None,
    ) -> None:
        self._registry = registry or default_registry()
        self._cache = cache if cache is not None else RegionCache()

    @classmethod
    def from_config(cls, config: Config) -> "RegionExtractor":
        return cls(
            registry=default_registry(config.FALLBACK_CHUNK_SIZE),
            cache=RegionCache(config.CACHE_CAPACITY, config.CACHE_EVICT_FRACTION),
        )

    @property
    def registry(self) -> LanguageRegistry:
        return self._registry

    @property
    def cache(self) -> RegionCache:
        return self._cache

    def analyze_file(self, file_path: str, content: str) -> list[CodeRegion]:
        """Return the regions of *content*, sorted by start line.

        Never raises: a failing strategy degrades to line windows.

        Parameters
        ----------
        file_path:
            Path used for strategy selection and stamped on every region.
        content:
            Full file content.
        """
        digest = content_hash(content)
        cached = self._cache.get(file_path, digest)
        if cached is not None:
            return cached

        strategy = self._registry.strategy_for(file_path)
        try:
            raw = strategy.extract(file_path, content)
        except Exception as exc:
            logger.warning(
                "[Regions] %s extraction failed for %s, using line windows: %s",
                strategy.kind, file_path, exc,
            )
            raw = self._registry.fallback.extract(file_path, content)

        regions = finalize_regions(raw, len(split_lines(content)))
        logger.debug(
            "[Regions] Analyzed %s (%s): %d regions",
            file_path, strategy.kind, len(regions),
        )

        self._cache.put(file_path, digest, regions)
        return list(regions)

    def analyze_files(self, files: Mapping[str, str]) -> list[CodeRegion]:
        """Analyze every ``path → content`` pair, concatenating in order."""
        regions: list[CodeRegion] = []
        for file_path, content in files.items():
            regions.extend(self.analyze_file(file_path, content))
        return regions

    def is_supported(self, file_path: str) -> bool:
        return self._registry.is_supported(file_path)

    def supported_extensions(self) -> list[str]:
        return self._registry.supported_extensions()

    def invalidate(self, file_path: str) -> bool:
        """Drop the cached regions of *file_path*."""
        return self._cache.invalidate(file_path)
