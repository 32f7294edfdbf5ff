"""
Build a weekly performance summary from per-commit benchmark results.

Usage:
  python3 -m perf_summary path/to/repo
  python3 -m perf_summary path/to/repo --config perf_summary.yaml --output-dir summary
  python3 -m perf_summary path/to/repo --reference-date 2020-03-01
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import SummaryConfig, load_config
from .dates import parse_date
from .errors import PerfSummaryError
from .loader import load_input_data
from .report import render_markdown, summary_to_dict, write_json, write_text
from .summary import build_summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Summarize weekly benchmark timing changes across measured commits"
    )
    parser.add_argument(
        "repo",
        type=Path,
        help="Directory containing a times/ folder of per-commit result JSON files",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with summary window settings",
    )
    parser.add_argument(
        "--reference-date",
        type=parse_date,
        default=None,
        help="Date the most recent window is anchored on (default: last measured date)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("summary"),
        help="Output directory for summary.md and summary.json",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-window details",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else SummaryConfig()
    except (OSError, ValueError) as e:
        print(f"ERROR: Invalid config: {e}")
        return 1

    times_dir = args.repo / "times"
    if not times_dir.is_dir():
        print(f"ERROR: Results directory not found: {times_dir}")
        return 1

    try:
        store = load_input_data(args.repo)
        summary = build_summary(store, args.reference_date, config)
    except PerfSummaryError as e:
        print(f"ERROR: {e}")
        return 1

    summary_md = args.output_dir / "summary.md"
    summary_json = args.output_dir / "summary.json"
    write_text(summary_md, render_markdown(store, summary))
    write_json(summary_json, summary_to_dict(store, summary))

    print(f"Wrote: {summary_md}")
    print(f"Wrote: {summary_json}")
    return 0
