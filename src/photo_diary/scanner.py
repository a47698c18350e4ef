"""Non-recursive discovery of dated photos, grouped by date."""

from __future__ import annotations

import logging
import os
from collections import defaultdict
from pathlib import Path
from typing import Iterator

from photo_diary.config import DATE_LENGTH, PHOTO_PATTERN, DiaryConfig
from photo_diary.errors import ScanError
from photo_diary.models import PhotoMatch

logger = logging.getLogger(__name__)


def is_dated_photo(filename: str) -> bool:
    return PHOTO_PATTERN.match(filename) is not None


def date_from_filename(filename: str) -> str:
    """Return the YYYY-MM-DD part of a dated photo name."""
    return filename[:DATE_LENGTH]


class Scanner:
    def __init__(self, config: DiaryConfig) -> None:
        self.config = config

    def matches(self) -> Iterator[PhotoMatch]:
        """Yield a PhotoMatch per dated photo, in directory listing order."""
        source = self.config.source
        try:
            with os.scandir(source) as entries:
                listing = list(entries)
        except OSError as e:
            raise ScanError(f"unable to read path {source}: {e}") from e

        for entry in listing:
            if entry.is_dir():
                continue
            if not is_dated_photo(entry.name):
                logger.debug(f"Ignoring {entry.name}")
                continue
            yield PhotoMatch(
                date=date_from_filename(entry.name),
                path=source / entry.name,
            )

    def scan(self) -> dict[str, list[Path]]:
        """List the source directory once.

        Returns:
            dict of date string -> photo paths sharing that date, each list
            in listing order
        """
        groups: dict[str, list[Path]] = defaultdict(list)
        for match in self.matches():
            groups[match.date].append(match.path)
        return dict(groups)
