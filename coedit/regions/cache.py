"""
Bounded per-extractor cache of analyzed regions, keyed by file path and
validated by a cheap content hash.
"""

from __future__ import annotations

import logging
import zlib
from typing import Optional

from .models import CodeRegion

logger = logging.getLogger(__name__)


def content_hash(content: str) -> str:
    """32-bit CRC of *content* as 8 hex digits."""
    return f"{zlib.crc32(content.encode('utf-8')):08x}"


class RegionCache:
    """Insertion-ordered cache with approximate-LRU bulk eviction.

    When a new key arrives and the cache is full, the oldest
    ``evict_fraction`` of entries are dropped first.  Not thread-safe.
    """

    def __init__(self, capacity: int = 1000, evict_fraction: float = 0.1) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._evict_count = max(1, int(capacity * evict_fraction))
        self._entries: dict[str, tuple[str, list[CodeRegion]]] = {}

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, file_path: str, digest: str) -> Optional[list[CodeRegion]]:
        """Return cached regions when *digest* matches, else None."""
        entry = self._entries.get(file_path)
        if entry is None or entry[0] != digest:
            return None
        return list(entry[1])

    def put(self, file_path: str, digest: str, regions: list[CodeRegion]) -> None:
        if file_path not in self._entries and len(self._entries) >= self._capacity:
            self._evict()
        self._entries[file_path] = (digest, list(regions))

    def invalidate(self, file_path: str) -> bool:
        return self._entries.pop(file_path, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, file_path: str) -> bool:
        return file_path in self._entries

    def _evict(self) -> None:
        oldest = list(self._entries)[: self._evict_count]
        for key in oldest:
            del self._entries[key]
        logger.debug("[Regions] Cache full, evicted %d entries", len(oldest))
