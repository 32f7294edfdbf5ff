"""
Summary window settings, optionally loaded from a YAML file:

    version: 1
    weeks: 12
    window_days: 7
    total_lookback_weeks: 13
    total_slack_days: 7
    week_start: monday
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any

import yaml

from .dates import parse_weekday

WEEKS_IN_SUMMARY = 12


@dataclass(frozen=True)
class SummaryConfig:
    weeks: int = WEEKS_IN_SUMMARY
    window: timedelta = timedelta(weeks=1)
    total_lookback_weeks: int = WEEKS_IN_SUMMARY + 1
    total_slack: timedelta = timedelta(weeks=1)
    week_start: int = 0

    def __post_init__(self) -> None:
        if self.weeks < 0:
            raise ValueError(f"weeks must be non-negative, got {self.weeks}")
        if self.window <= timedelta(0):
            raise ValueError(f"window must be positive, got {self.window}")
        if self.total_lookback_weeks < 0:
            raise ValueError(
                f"total_lookback_weeks must be non-negative, got {self.total_lookback_weeks}"
            )
        if self.total_slack < timedelta(0):
            raise ValueError(f"total_slack must be non-negative, got {self.total_slack}")
        if not 0 <= self.week_start <= 6:
            raise ValueError(f"week_start must be a weekday index 0-6, got {self.week_start}")


def load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(str(path))
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML at {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML mapping at {path}, got {type(data)}")
    return data


def int_setting(data: dict[str, Any], key: str, default: int) -> int:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {value!r}") from None


def config_from_dict(data: dict[str, Any]) -> SummaryConfig:
    defaults = SummaryConfig()
    week_start = data.get("week_start")
    try:
        return SummaryConfig(
            weeks=int_setting(data, "weeks", defaults.weeks),
            window=timedelta(days=int_setting(data, "window_days", defaults.window.days)),
            total_lookback_weeks=int_setting(
                data, "total_lookback_weeks", defaults.total_lookback_weeks
            ),
            total_slack=timedelta(
                days=int_setting(data, "total_slack_days", defaults.total_slack.days)
            ),
            week_start=defaults.week_start if week_start is None else parse_weekday(week_start),
        )
    except OverflowError as e:
        raise ValueError(f"Config value out of range: {e}") from e


def load_config(path: Path) -> SummaryConfig:
    data = load_yaml(path)
    version = int_setting(data, "version", 0)
    if version != 1:
        raise ValueError(f"Unsupported config version {version} in {path}")
    return config_from_dict(data)
