"""
Weekly performance summary.

Window 0 is the calendar week holding the reference date, window 1 the week
before, and so on. Each window compares its earliest and latest commit.

The total comparison uses a wider range whose end is the reference date plus
some slack rather than the end of a calendar week, so the latest commit is
always part of it even when weekly windows are narrower than a week.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta

from .compare import Comparison, compare_points
from .config import SummaryConfig
from .dates import start_of_week
from .errors import MissingCommitError
from .ranges import data_range
from .store import InputData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Summary:
    total: Comparison
    # most recent window first
    comparisons: list[Comparison] = field(default_factory=list)


def week_bounds(reference_date: date, index: int, config: SummaryConfig) -> tuple[date, date]:
    start = start_of_week(reference_date, config.week_start) - config.window * index
    return start, start + config.window


def total_bounds(reference_date: date, config: SummaryConfig) -> tuple[date, date]:
    start = start_of_week(reference_date, config.week_start) - timedelta(
        weeks=config.total_lookback_weeks
    )
    return start, reference_date + config.total_slack


def build_summary(
    store: InputData,
    reference_date: date | None = None,
    config: SummaryConfig | None = None,
) -> Summary:
    config = config or SummaryConfig()
    reference_date = reference_date or store.last_date

    weeks: list[Comparison] = []
    for i in range(config.weeks):
        start, end = week_bounds(reference_date, i, config)
        logger.debug("summarizing week %d: start: %s, end: %s", i, start, end)

        week = data_range(store, start, end)
        if len(week) < 2:
            logger.warning("week %s - %s has too few commits", start, end)
            continue

        _, first = next(iter(week))
        _, last = next(reversed(week))
        logger.debug("actual: start: %s, end: %s", first.commit.date, last.commit.date)
        weeks.append(compare_points(first, last))

    start, end = total_bounds(reference_date, config)
    period = data_range(store, start, end)
    first_entry, last_entry = period.first(), period.last()
    if first_entry is None or last_entry is None:
        raise MissingCommitError(f"No commits between {start} and {end}")

    return Summary(total=compare_points(first_entry[1], last_entry[1]), comparisons=weeks)
