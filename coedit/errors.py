"""
Exceptions raised by the region and hunk engines.
"""


class CoeditError(Exception):
    """Base class for all coedit errors."""


class PartitionError(CoeditError, ValueError):
    """Raised when regions cannot be partitioned (e.g. worker_count <= 0)."""


class HunkApplyError(CoeditError):
    """Raised when a hunk does not fit the content it is applied to."""


class StructuralParseError(CoeditError):
    """Raised by a structural adapter that cannot parse its input."""
