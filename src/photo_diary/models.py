"""Core data types used throughout the photo-diary cycle."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PhotoMatch:
    """A source file whose name carries a date."""

    date: str  # YYYY-MM-DD, first 10 chars of the filename
    path: Path


@dataclass
class CycleResult:
    """Summary counters for one scan-update-relocate cycle."""

    photos_found: int = 0
    dates: int = 0
    diaries_created: int = 0
    diaries_appended: int = 0
    photos_moved: int = 0
    dry_run: bool = False
