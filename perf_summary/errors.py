"""Fatal conditions raised while building a performance summary."""

from __future__ import annotations


class PerfSummaryError(ValueError):
    pass


class NoDatesError(PerfSummaryError):
    """Raised when a record store is built from an empty batch."""


class MalformedPatchError(PerfSummaryError):
    """Raised when a patch does not carry exactly one run."""


class ComparisonMismatchError(PerfSummaryError):
    """Raised when two commits' benchmark trees cannot be paired."""


class MissingCommitError(PerfSummaryError):
    """Raised when the total summary range holds no commits."""
