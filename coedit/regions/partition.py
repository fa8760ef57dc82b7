"""
Partition assigner — hands whole files to worker buckets so no two workers
ever receive regions of the same file.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..errors import PartitionError
from .models import CodeRegion

logger = logging.getLogger(__name__)


def assign_regions_to_workers(
    regions: Sequence[CodeRegion],
    worker_count: int,
) -> dict[int, list[CodeRegion]]:
    """Group *regions* by file and deal the file groups round-robin.

    File groups are dealt in first-encountered order; the result holds every
    worker index in ``range(worker_count)``, empty lists included.  Buckets
    are not balanced by region or line count.

    Raises
    ------
    PartitionError
        If *worker_count* is less than 1.
    """
    if worker_count <= 0:
        raise PartitionError(f"worker_count must be >= 1, got {worker_count}")

    assignments: dict[int, list[CodeRegion]] = {i: [] for i in range(worker_count)}

    by_file: dict[str, list[CodeRegion]] = {}
    for region in regions:
        by_file.setdefault(region.file_path, []).append(region)

    for index, file_regions in enumerate(by_file.values()):
        assignments[index % worker_count].extend(file_regions)

    logger.debug(
        "[Regions] Assigned %d files (%d regions) to %d workers",
        len(by_file), len(regions), worker_count,
    )
    return assignments


def file_owners(assignments: dict[int, list[CodeRegion]]) -> dict[str, int]:
    """Invert an assignment into ``file_path → worker index``."""
    owners: dict[str, int] = {}
    for worker, regions in assignments.items():
        for region in regions:
            owners.setdefault(region.file_path, worker)
    return owners
