from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from .errors import NoDatesError
from .model import Commit, CommitData, commit_key

logger = logging.getLogger(__name__)


class InputData:
    """
    Every measured commit, ordered by commit date.

    The derived indices are computed once here; nothing mutates the store
    afterwards. Loading new results means building a new `InputData`.
    """

    def __init__(self, records: Iterable[CommitData]):
        by_date: dict[date, CommitData] = {}
        for record in records:
            day = commit_key(record.commit)
            previous = by_date.get(day)
            if previous is not None:
                logger.warning(
                    "Commits %s and %s share date %s; keeping %s",
                    previous.commit.sha,
                    record.commit.sha,
                    day,
                    record.commit.sha,
                )
            by_date[day] = record

        if not by_date:
            raise NoDatesError("No dates found")

        crate_list: set[str] = set()
        phase_list: set[str] = set()
        for record in by_date.values():
            for patch in record.patches():
                crate_list.add(patch.full_name)
                for p in patch.run.passes:
                    phase_list.add(p.name)

        self.dates: list[date] = sorted(by_date)
        self.data: dict[Commit, CommitData] = {
            by_date[day].commit: by_date[day] for day in self.dates
        }
        self.entries: tuple[tuple[Commit, CommitData], ...] = tuple(self.data.items())
        self.crate_list: frozenset[str] = frozenset(crate_list)
        self.phase_list: frozenset[str] = frozenset(phase_list)
        self.last_date: date = self.dates[-1]

    def __len__(self) -> int:
        return len(self.dates)
