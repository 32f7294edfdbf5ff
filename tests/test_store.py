"""Tests for InputData construction and derived indices."""

import logging
from datetime import date

import pytest

from perf_summary.errors import MalformedPatchError, NoDatesError
from perf_summary.model import Commit, CommitData, Patch, Run
from perf_summary.store import InputData


class TestInputData:
    def test_last_date_is_max_date(self, make_record):
        records = [
            make_record("b", date(2020, 3, 1), {"link": 1.0}),
            make_record("c", date(2020, 1, 1), {"link": 1.0}),
            make_record("a", date(2020, 2, 1), {"link": 1.0}),
        ]
        assert InputData(records).last_date == date(2020, 3, 1)

    def test_empty_batch_fails(self):
        with pytest.raises(NoDatesError):
            InputData([])

    def test_records_ordered_by_date(self, make_record):
        records = [
            make_record("b", date(2020, 3, 1), {"link": 1.0}),
            make_record("c", date(2020, 1, 1), {"link": 1.0}),
            make_record("a", date(2020, 2, 1), {"link": 1.0}),
        ]
        store = InputData(records)

        assert [c.sha for c in store.data] == ["c", "a", "b"]
        assert store.dates == [date(2020, 1, 1), date(2020, 2, 1), date(2020, 3, 1)]
        assert [c for c, _ in store.entries] == list(store.data)
        assert len(store) == 3

    def test_crate_and_phase_lists(self, make_record):
        records = [
            make_record("a", date(2020, 1, 1), {"link": 1.0, "llvm": 2.0}, name="hyper", patch="@0"),
            make_record("b", date(2020, 1, 2), {"typeck": 1.0}, group="regex", name="regex"),
        ]
        store = InputData(records)

        assert store.crate_list == {"hyper@0", "regex"}
        assert store.phase_list == {"link", "llvm", "typeck"}

    def test_same_day_keeps_later_record(self, make_record, caplog):
        first = make_record("first", date(2020, 1, 1), {"link": 1.0})
        second = make_record("second", date(2020, 1, 1), {"link": 2.0})

        with caplog.at_level(logging.WARNING):
            store = InputData([first, second])

        assert list(store.data.values()) == [second]
        assert "share date 2020-01-01" in caplog.text

    def test_malformed_patch_fails(self):
        patch = Patch(patch="", name="bar", runs=[])
        record = CommitData(commit=Commit("a", date(2020, 1, 1)), benchmarks={"foo": [patch]})
        with pytest.raises(MalformedPatchError):
            InputData([record])

    def test_single_record(self, make_record):
        store = InputData([make_record("a", date(2020, 1, 1), {"link": 1.0})])
        assert store.last_date == date(2020, 1, 1)
        assert len(store) == 1

    def test_accepts_generator(self, weekly_records):
        store = InputData(r for r in weekly_records)
        assert len(store) == 13
