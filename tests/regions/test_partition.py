"""Tests for file-level worker partitioning."""

import pytest

from coedit.errors import CoeditError, PartitionError
from coedit.regions.models import RegionType, make_region
from coedit.regions.partition import assign_regions_to_workers, file_owners


def _regions(*specs):
    return [
        make_region(path, RegionType.FUNCTION, name, i + 1, i + 1)
        for i, (path, name) in enumerate(specs)
    ]


class TestAssignRegionsToWorkers:
    def test_two_files_two_workers(self):
        regions = _regions(("a.ts", "f"), ("a.ts", "g"), ("b.ts", "h"))
        result = assign_regions_to_workers(regions, 2)
        assert set(result) == {0, 1}
        assert [r.name for r in result[0]] == ["f", "g"]
        assert [r.name for r in result[1]] == ["h"]

    def test_round_robin_in_first_seen_order(self):
        regions = _regions(("c", "1"), ("a", "2"), ("b", "3"), ("a", "4"))
        result = assign_regions_to_workers(regions, 2)
        assert {r.file_path for r in result[0]} == {"c", "b"}
        assert [r.name for r in result[1]] == ["2", "4"]

    def test_more_workers_than_files(self):
        result = assign_regions_to_workers(_regions(("a", "x")), 4)
        assert set(result) == {0, 1, 2, 3}
        assert result[1] == result[2] == result[3] == []

    def test_empty_regions(self):
        assert assign_regions_to_workers([], 3) == {0: [], 1: [], 2: []}

    @pytest.mark.parametrize("workers", [1, 2, 3, 5])
    def test_never_splits_a_file(self, workers):
        regions = _regions(*[(f"f{i % 4}", str(i)) for i in range(12)])
        owners = {}
        for worker, bucket in assign_regions_to_workers(regions, workers).items():
            for region in bucket:
                assert owners.setdefault(region.file_path, worker) == worker

    @pytest.mark.parametrize("workers", [0, -1])
    def test_invalid_worker_count(self, workers):
        with pytest.raises(PartitionError):
            assign_regions_to_workers(_regions(("a", "x")), workers)

    def test_partition_error_hierarchy(self):
        assert issubclass(PartitionError, CoeditError)
        assert issubclass(PartitionError, ValueError)


class TestFileOwners:
    def test_inverts_assignment(self):
        regions = _regions(("a", "1"), ("b", "2"), ("a", "3"))
        owners = file_owners(assign_regions_to_workers(regions, 2))
        assert owners == {"a": 0, "b": 1}
