from __future__ import annotations

from bisect import bisect_left
from datetime import date
from typing import Iterator

from .model import Commit, CommitData
from .store import InputData

Entry = tuple[Commit, CommitData]


class DateRange:
    """
    The records of a store whose date lies in [start, end), ascending.

    Only the bisected bounds are kept, so the view can be iterated from
    either end any number of times without copying the store.
    """

    def __init__(self, store: InputData, start: date, end: date):
        self.start = start
        self.end = end
        self._entries = store.entries
        self._lo = bisect_left(store.dates, start)
        self._hi = max(self._lo, bisect_left(store.dates, end))

    def __len__(self) -> int:
        return self._hi - self._lo

    def __iter__(self) -> Iterator[Entry]:
        for i in range(self._lo, self._hi):
            yield self._entries[i]

    def __reversed__(self) -> Iterator[Entry]:
        for i in range(self._hi - 1, self._lo - 1, -1):
            yield self._entries[i]

    def first(self) -> Entry | None:
        return next(iter(self), None)

    def last(self) -> Entry | None:
        return next(reversed(self), None)


def data_range(store: InputData, start: date, end: date) -> DateRange:
    return DateRange(store, start, end)
