"""Render a `Summary` as markdown and as JSON-serialisable data."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .compare import Comparison
from .model import CommitData, Percent
from .store import InputData
from .summary import Summary


def base_times(a: CommitData, b: CommitData) -> dict[str, dict[str, float]]:
    """Times from `a` for the groups `compare_points` pairs with `b`."""
    out: dict[str, dict[str, float]] = {}
    for group, patches in a.benchmarks.items():
        if group not in b.benchmarks:
            continue
        for patch in patches:
            run = patch.run
            for p in run.passes:
                out.setdefault(run.name, {})[p.name] = p.time
    return out


def percent_changes(store: InputData, comparison: Comparison) -> dict[str, dict[str, Percent | None]]:
    a = store.data.get(comparison.a)
    b = store.data.get(comparison.b)
    bases = base_times(a, b) if a is not None and b is not None else {}
    out: dict[str, dict[str, Percent | None]] = {}
    for run_name, phases in comparison.by_crate.items():
        for phase, delta in phases.items():
            base = bases.get(run_name, {}).get(phase, 0.0)
            out.setdefault(run_name, {})[phase] = Percent.change(delta, base)
    return out


def comparison_to_dict(store: InputData, comparison: Comparison) -> dict[str, Any]:
    percents = percent_changes(store, comparison)
    by_crate: dict[str, dict[str, Any]] = {}
    for run_name, phases in sorted(comparison.by_crate.items()):
        by_crate[run_name] = {}
        for phase, delta in sorted(phases.items()):
            pct = percents[run_name][phase]
            by_crate[run_name][phase] = {
                "delta": round(delta, 3),
                "percent": None if pct is None else pct.to_json(),
            }
    return {
        "a": {"sha": comparison.a.sha, "date": comparison.a.date.isoformat()},
        "b": {"sha": comparison.b.sha, "date": comparison.b.date.isoformat()},
        "by_crate": by_crate,
    }


def summary_to_dict(store: InputData, summary: Summary) -> dict[str, Any]:
    return {
        "last_date": store.last_date.isoformat(),
        "crates": sorted(store.crate_list),
        "phases": sorted(store.phase_list),
        "total": comparison_to_dict(store, summary.total),
        "comparisons": [comparison_to_dict(store, c) for c in summary.comparisons],
    }


def _comparison_lines(store: InputData, comparison: Comparison) -> list[str]:
    percents = percent_changes(store, comparison)
    lines = [
        f"`{comparison.a.sha[:12]}` ({comparison.a.date.isoformat()}) -> "
        f"`{comparison.b.sha[:12]}` ({comparison.b.date.isoformat()})",
        "",
        "| Run | Phase | Delta | Change |",
        "| --- | --- | ---: | ---: |",
    ]
    for run_name, phases in sorted(comparison.by_crate.items()):
        for phase, delta in sorted(phases.items()):
            pct = percents[run_name][phase]
            change = "n/a" if pct is None else str(pct)
            lines.append(f"| `{run_name}` | `{phase}` | {delta:+.3f} | {change} |")
    return lines


def render_markdown(store: InputData, summary: Summary) -> str:
    now = datetime.now(timezone.utc).isoformat()

    lines: list[str] = []
    lines.append("# Weekly Performance Summary")
    lines.append("")
    lines.append(f"Generated: `{now}`")
    lines.append("")
    lines.append("## Coverage")
    lines.append("")
    lines.append(f"- Commits: **{len(store)}**")
    lines.append(f"- Crates: **{len(store.crate_list)}**")
    lines.append(f"- Phases: **{len(store.phase_list)}** ({', '.join(sorted(store.phase_list))})")
    lines.append(f"- Last date: **{store.last_date.isoformat()}**")
    lines.append(f"- Weekly comparisons: **{len(summary.comparisons)}**")

    lines.append("")
    lines.append("## Total")
    lines.append("")
    lines.extend(_comparison_lines(store, summary.total))

    deltas = [
        (run_name, phase, delta)
        for run_name, phases in summary.total.by_crate.items()
        for phase, delta in phases.items()
    ]
    improve = sorted((d for d in deltas if d[2] < 0), key=lambda d: d[2])[:10]
    regress = sorted((d for d in deltas if d[2] > 0), key=lambda d: d[2], reverse=True)[:10]

    lines.append("")
    lines.append("Top improvements (most negative delta):")
    if improve:
        for run_name, phase, delta in improve:
            lines.append(f"- `{run_name}/{phase}`: {delta:+.3f}")
    else:
        lines.append("- none")

    lines.append("")
    lines.append("Top regressions (most positive delta):")
    if regress:
        for run_name, phase, delta in regress:
            lines.append(f"- `{run_name}/{phase}`: {delta:+.3f}")
    else:
        lines.append("- none")

    for comparison in summary.comparisons:
        lines.append("")
        lines.append(f"## {comparison.a.date.isoformat()} to {comparison.b.date.isoformat()}")
        lines.append("")
        lines.extend(_comparison_lines(store, comparison))

    lines.append("")
    return "\n".join(lines)


def write_json(path: Path, payload: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
