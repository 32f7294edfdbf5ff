"""
Benchmark records as stored per measured commit.

A result file holds one `CommitData`: the commit identity plus, for every
benchmark group, the list of patches measured against it. Each patch carries
exactly one run, and each run a list of timed passes (compiler phases).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterator

from .dates import parse_date
from .errors import MalformedPatchError


def _require(payload: Any, key: str, kind: type | tuple[type, ...]) -> Any:
    if not isinstance(payload, dict):
        raise ValueError(f"Expected JSON object, got {type(payload).__name__}")
    if key not in payload:
        raise ValueError(f"Missing field '{key}'")
    value = payload[key]
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ValueError(f"Field '{key}' has unexpected type {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Pass:
    name: str
    time: float
    mem: int = 0

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> Pass:
        name = _require(payload, "name", str)
        mem = _require(payload, "mem", int) if "mem" in payload else 0
        if mem < 0:
            raise ValueError(f"Negative memory usage for pass {name!r}")
        try:
            time = float(_require(payload, "time", (int, float)))
        except OverflowError:
            raise ValueError(f"Time out of range for pass {name!r}") from None
        return cls(name=name, time=time, mem=mem)


@dataclass(frozen=True)
class Run:
    name: str
    passes: list[Pass] = field(default_factory=list)

    def get_pass(self, name: str) -> Pass | None:
        for p in self.passes:
            if p.name == name:
                return p
        return None

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> Run:
        return cls(
            name=_require(payload, "name", str),
            passes=[Pass.from_dict(p) for p in _require(payload, "passes", list)],
        )


@dataclass(frozen=True)
class Patch:
    patch: str
    name: str
    runs: list[Run] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return self.name + self.patch

    @property
    def run(self) -> Run:
        if len(self.runs) != 1:
            raise MalformedPatchError(
                f"Patch {self.full_name!r} has {len(self.runs)} runs, expected exactly 1"
            )
        return self.runs[0]

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> Patch:
        return cls(
            patch=_require(payload, "patch", str),
            name=_require(payload, "name", str),
            runs=[Run.from_dict(r) for r in _require(payload, "runs", list)],
        )


@dataclass(frozen=True)
class Commit:
    sha: str
    date: date


def commit_key(commit: Commit) -> date:
    """Ordering key for commits. Same-day commits are interchangeable."""
    return commit.date


@dataclass(frozen=True)
class CommitData:
    commit: Commit
    benchmarks: dict[str, list[Patch]] = field(default_factory=dict)

    def patches(self) -> Iterator[Patch]:
        for patches in self.benchmarks.values():
            yield from patches

    def validate(self) -> None:
        if not self.benchmarks:
            raise ValueError(f"Empty benchmarks for commit {self.commit.sha}")
        for patch in self.patches():
            _ = patch.run

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> CommitData:
        commit = _require(payload, "commit", dict)
        benchmarks = _require(payload, "benchmarks", dict)
        return cls(
            commit=Commit(
                sha=_require(commit, "sha", str),
                date=parse_date(_require(commit, "date", str)),
            ),
            benchmarks={
                str(group): [Patch.from_dict(p) for p in _require(benchmarks, group, list)]
                for group in benchmarks
            },
        )


@dataclass(frozen=True)
class Percent:
    """One decimal place rounded percent."""

    value: float

    @classmethod
    def change(cls, delta: float, base: float) -> Percent | None:
        if base == 0:
            return None
        return cls(delta / base * 100.0)

    def to_json(self) -> float:
        return round(self.value, 1)

    def __str__(self) -> str:
        return f"{self.value:+.1f}%"
