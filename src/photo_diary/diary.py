"""Per-date diary documents in the notes vault."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from photo_diary.config import (
    DIARY_FILE_MODE,
    DIARY_SECTION_HEADING,
    DIARY_SUFFIX,
    DiaryConfig,
)
from photo_diary.errors import DiaryError

logger = logging.getLogger(__name__)


def embed_line(prefix: str, photo: Path) -> str:
    """Embed reference for the name the photo will have after relocation."""
    return f"![[{prefix}{photo.name}]]\n"


def render_entry(date: str, photos: list[Path], prefix: str, exists: bool) -> str:
    """Build the text appended to a diary document.

    A new document gets a '# <date>' title; an existing one gets the section
    separated from its current content by a blank line.
    """
    embeds = "".join(embed_line(prefix, p) for p in photos)
    if exists:
        return f"\n\n{DIARY_SECTION_HEADING}\n{embeds}"
    return f"# {date}\n\n{DIARY_SECTION_HEADING}\n{embeds}"


class DiaryUpdater:
    def __init__(self, config: DiaryConfig) -> None:
        self.config = config

    def diary_path(self, date: str) -> Path:
        return self.config.vault / f"{date}{DIARY_SUFFIX}"

    def update(self, date: str, photos: list[Path]) -> tuple[Path, bool]:
        """Append an embed section for photos to the diary of date.

        Existing text is never read or rewritten, so running the same photos
        twice appends the section twice. Returns the diary path and whether it
        already existed before the write.
        """
        path = self.diary_path(date)
        exists = path.is_file()
        content = render_entry(date, photos, self.config.image_prefix, exists)
        verb = "APPEND" if exists else "CREATE"

        if self.config.dry_run:
            logger.info(f"[DRY-RUN] {verb}: {path} ({len(photos)} embeds)")
            return path, exists

        logger.debug(f"{verb}: {path} ({len(photos)} embeds)")
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_APPEND, DIARY_FILE_MODE)
        except OSError as e:
            raise DiaryError(f"unable to open file {path}: {e}") from e

        try:
            with os.fdopen(fd, "a", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise DiaryError(f"unable to append text to file {path}: {e}") from e

        return path, exists
