"""
Load per-commit result files from `<repo>/times/*.json`.

Unreadable, empty or malformed files are skipped with a diagnostic; the
remaining records form the `InputData`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .errors import MalformedPatchError
from .model import CommitData
from .store import InputData

logger = logging.getLogger(__name__)

TIMES_DIR = "times"


def load_commit_data(path: Path) -> CommitData | None:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read %s: %s", path.name, e)
        return None
    if not text:
        logger.warning("Skipping empty file: %s", path.name)
        return None

    try:
        record = CommitData.from_dict(json.loads(text))
    except ValueError as e:
        logger.error("Failed to parse JSON for %s: %s", path.name, e)
        return None

    if not record.benchmarks:
        logger.warning("empty benchmarks hash for %s", path.name)
        return None

    try:
        record.validate()
    except MalformedPatchError as e:
        logger.error("Malformed patch in %s: %s", path.name, e)
        return None
    return record


def load_records(times_dir: Path) -> list[CommitData]:
    records: list[CommitData] = []
    file_count = 0
    skipped = 0
    for path in sorted(times_dir.iterdir()):
        if path.is_dir():
            continue
        file_count += 1
        record = load_commit_data(path)
        if record is None:
            skipped += 1
            continue
        records.append(record)

    logger.info("%d total files", file_count)
    logger.info("%d skipped files", skipped)
    logger.info("%d measured", len(records))
    return records


def load_input_data(repo_loc: Path) -> InputData:
    return InputData(load_records(Path(repo_loc) / TIMES_DIR))
