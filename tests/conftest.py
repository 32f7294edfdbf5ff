"""Shared builders for commit records and result files."""

import json
from datetime import date, timedelta

import pytest

from perf_summary.model import Commit, CommitData, Pass, Patch, Run


def build_record(sha, day, passes, group="foo", name="bar", patch=""):
    """One commit with a single group, patch and run holding `passes`."""
    run = Run(name=name, passes=[Pass(name=n, time=t) for n, t in passes.items()])
    return CommitData(
        commit=Commit(sha=sha, date=day),
        benchmarks={group: [Patch(patch=patch, name=name, runs=[run])]},
    )


def build_payload(sha, day, passes, group="foo", name="bar", patch=""):
    return {
        "commit": {"sha": sha, "date": day},
        "benchmarks": {
            group: [
                {
                    "patch": patch,
                    "name": name,
                    "runs": [
                        {
                            "name": name,
                            "passes": [
                                {"name": n, "time": t, "mem": 1024} for n, t in passes.items()
                            ],
                        }
                    ],
                }
            ]
        },
    }


@pytest.fixture
def make_record():
    return build_record


@pytest.fixture
def make_payload():
    return build_payload


@pytest.fixture
def weekly_records():
    """13 commits one week apart starting Monday 2020-01-06, link time growing by 1.0."""
    start = date(2020, 1, 6)
    return [
        build_record(f"sha{i:02d}", start + timedelta(weeks=i), {"link": 10.0 + i})
        for i in range(13)
    ]


@pytest.fixture
def times_dir(tmp_path):
    path = tmp_path / "repo" / "times"
    path.mkdir(parents=True)
    return path


def write_payload(directory, filename, payload):
    path = directory / filename
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def write_result():
    return write_payload
