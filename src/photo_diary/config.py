"""Configuration constants, runtime config dataclass, and settings loader."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from photo_diary.errors import ConfigError

PHOTO_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}(-\d{2})?\.(jpg|png)$")
DATE_LENGTH: int = 10  # "YYYY-MM-DD"

DIARY_SECTION_HEADING: str = "### Iltakirjoitus"
DIARY_SUFFIX: str = ".md"
DIARY_FILE_MODE: int = 0o644

DEFAULT_SETTINGS_FILE: Path = Path("settings.yaml")

SETTINGS_KEYS: dict[str, str] = {
    "original_photo_path": "source",
    "target_photo_path": "target",
    "obsidian_file_path": "vault",
    "check_interval": "interval",
    "image_prefix": "image_prefix",
}

_DURATION_UNITS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


@dataclass(frozen=True)
class DiaryConfig:
    """Immutable runtime configuration assembled from settings + CLI args."""

    source: Path
    target: Path
    vault: Path
    interval: float  # seconds
    image_prefix: str
    dry_run: bool = False


def parse_duration(value: Any) -> float:
    """Parse '1h30m', '90s', '250ms' or a bare number into seconds.

    Raises ValueError for anything else, including zero, negative and
    non-finite values.
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid duration: {value!r}")

    if isinstance(value, (int, float)):
        seconds = float(value)
    elif isinstance(value, str):
        text = value.strip()
        pos = 0
        seconds = 0.0
        for m in _DURATION_PART.finditer(text):
            if m.start() != pos:
                break
            seconds += float(m.group(1)) * _DURATION_UNITS[m.group(2)]
            pos = m.end()
        if not text or pos != len(text):
            raise ValueError(f"invalid duration: {value!r}")
    else:
        raise ValueError(f"invalid duration: {value!r}")

    if not math.isfinite(seconds) or seconds <= 0:
        raise ValueError(f"duration must be a positive finite value: {value!r}")
    return seconds


def load_settings(
    settings_path: Path = DEFAULT_SETTINGS_FILE,
    dry_run: bool = False,
) -> DiaryConfig:
    """Read the YAML settings file and build a DiaryConfig.

    All five settings keys are required. Paths are taken as written;
    the CLI resolves them before use.
    """
    try:
        text = settings_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"failed to read {settings_path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"failed to parse {settings_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{settings_path} must contain a mapping of settings")

    missing = [key for key in SETTINGS_KEYS if key not in data]
    if missing:
        raise ConfigError(
            f"{settings_path} is missing required settings: {', '.join(missing)}"
        )

    values: dict[str, Any] = {}
    for key in ("original_photo_path", "target_photo_path", "obsidian_file_path"):
        raw = data[key]
        if not isinstance(raw, str) or not raw:
            raise ConfigError(f"{key} must be a non-empty path string")
        values[SETTINGS_KEYS[key]] = Path(raw).expanduser()

    try:
        values["interval"] = parse_duration(data["check_interval"])
    except ValueError as e:
        raise ConfigError(f"check_interval: {e}") from e

    prefix = data["image_prefix"]
    if prefix is None:
        prefix = ""
    if not isinstance(prefix, str):
        raise ConfigError("image_prefix must be a string")
    if "/" in prefix or "\\" in prefix:
        raise ConfigError(f"image_prefix must not contain path separators: {prefix!r}")
    values["image_prefix"] = prefix

    return DiaryConfig(dry_run=dry_run, **values)
