"""Weekly benchmark timing summaries over per-commit result files."""

from .compare import Comparison, compare_points
from .config import WEEKS_IN_SUMMARY, SummaryConfig, load_config
from .errors import (
    ComparisonMismatchError,
    MalformedPatchError,
    MissingCommitError,
    NoDatesError,
    PerfSummaryError,
)
from .loader import load_input_data
from .model import Commit, CommitData, Pass, Patch, Percent, Run, commit_key
from .ranges import DateRange, data_range
from .store import InputData
from .summary import Summary, build_summary

__all__ = [
    "Commit",
    "CommitData",
    "Comparison",
    "ComparisonMismatchError",
    "DateRange",
    "InputData",
    "MalformedPatchError",
    "MissingCommitError",
    "NoDatesError",
    "Pass",
    "Patch",
    "Percent",
    "PerfSummaryError",
    "Run",
    "Summary",
    "SummaryConfig",
    "WEEKS_IN_SUMMARY",
    "build_summary",
    "commit_key",
    "compare_points",
    "data_range",
    "load_config",
    "load_input_data",
]
