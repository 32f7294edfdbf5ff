"""Tests for markdown and JSON summary rendering."""

import json
from datetime import date

from perf_summary.model import CommitData
from perf_summary.report import percent_changes, render_markdown, summary_to_dict
from perf_summary.store import InputData
from perf_summary.summary import build_summary


def build_store(make_record):
    return InputData(
        [
            make_record("aaaa", date(2020, 3, 30), {"link": 10.0, "llvm": 4.0}),
            make_record("bbbb", date(2020, 4, 2), {"link": 12.0, "llvm": 3.0}),
        ]
    )


class TestPercentChanges:
    def test_relative_to_a_time(self, make_record):
        store = build_store(make_record)
        summary = build_summary(store)

        percents = percent_changes(store, summary.total)

        assert percents["bar"]["link"].to_json() == 20.0
        assert percents["bar"]["llvm"].to_json() == -25.0

    def test_zero_base(self, make_record):
        store = InputData(
            [
                make_record("aaaa", date(2020, 3, 30), {"link": 0.0}),
                make_record("bbbb", date(2020, 4, 2), {"link": 1.0}),
            ]
        )
        assert percent_changes(store, build_summary(store).total)["bar"]["link"] is None


class TestSummaryToDict:
    def test_structure(self, make_record):
        store = build_store(make_record)
        data = summary_to_dict(store, build_summary(store))

        assert data["last_date"] == "2020-04-02"
        assert data["phases"] == ["link", "llvm"]
        assert data["total"]["a"] == {"sha": "aaaa", "date": "2020-03-30"}
        assert data["total"]["by_crate"]["bar"]["link"] == {"delta": 2.0, "percent": 20.0}
        assert len(data["comparisons"]) == 1
        json.dumps(data)


class TestRenderMarkdown:
    def test_sections(self, make_record):
        store = build_store(make_record)
        text = render_markdown(store, build_summary(store))

        assert text.startswith("# Weekly Performance Summary")
        assert "- Commits: **2**" in text
        assert "| `bar` | `link` | +2.000 | +20.0% |" in text
        assert "- `bar/llvm`: -1.000" in text
        assert "## 2020-03-30 to 2020-04-02" in text


class TestBaseTimes:
    def test_base_ignores_groups_missing_from_b(self, make_record):
        a_foo = make_record("aaaa", date(2020, 3, 30), {"link": 10.0}, group="foo")
        a_gone = make_record("aaaa", date(2020, 3, 30), {"link": 100.0}, group="gone")
        a = CommitData(
            commit=a_foo.commit,
            benchmarks={**a_foo.benchmarks, **a_gone.benchmarks},
        )
        b = make_record("bbbb", date(2020, 4, 2), {"link": 12.0}, group="foo")
        store = InputData([a, b])

        percents = percent_changes(store, build_summary(store).total)

        assert percents["bar"]["link"].to_json() == 20.0
