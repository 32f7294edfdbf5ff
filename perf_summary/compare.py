from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .errors import ComparisonMismatchError
from .model import Commit, CommitData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Comparison:
    a: Commit
    b: Commit
    # run name -> phase name -> b time minus a time
    by_crate: dict[str, dict[str, float]] = field(default_factory=dict)


def compare_points(a: CommitData, b: CommitData) -> Comparison:
    """
    Per-phase time deltas from commit `a` to commit `b`.

    Groups that `b` lacks are skipped. Patches are paired by position within
    a group. A phase that `b` no longer reports counts as a time of 0.0, so
    its delta is the negated time from `a`.
    """
    by_crate: dict[str, dict[str, float]] = {}
    for group, a_patches in a.benchmarks.items():
        b_patches = b.benchmarks.get(group)
        if b_patches is None:
            logger.warning(
                "Comparing %s with %s: a contained %s, but b did not.",
                a.commit.sha,
                b.commit.sha,
                group,
            )
            continue

        if len(a_patches) != len(b_patches):
            raise ComparisonMismatchError(
                f"Group {group!r} has {len(a_patches)} patches in {a.commit.sha} "
                f"but {len(b_patches)} in {b.commit.sha}"
            )

        for a_patch, b_patch in zip(a_patches, b_patches):
            a_run = a_patch.run
            b_run = b_patch.run
            if a_run.name != b_run.name:
                raise ComparisonMismatchError(
                    f"Run name mismatch in group {group!r}: {a_run.name!r} != {b_run.name!r}"
                )

            for a_pass in a_run.passes:
                b_pass = b_run.get_pass(a_pass.name)
                b_time = b_pass.time if b_pass is not None else 0.0
                by_crate.setdefault(a_run.name, {})[a_pass.name] = b_time - a_pass.time

    return Comparison(a=a.commit, b=b.commit, by_crate=by_crate)
