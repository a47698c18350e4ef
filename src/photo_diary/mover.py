"""Copy-then-delete relocation of photos into the target directory."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from photo_diary.config import DiaryConfig
from photo_diary.errors import RelocationError

logger = logging.getLogger(__name__)


def target_name(target_dir: Path, prefix: str, photo: Path) -> Path:
    """Destination path for photo: <target>/<prefix><basename>."""
    return target_dir / f"{prefix}{photo.name}"


class Mover:
    def __init__(self, config: DiaryConfig) -> None:
        self.config = config

    def relocate(self, photos: list[Path]) -> list[Path]:
        """Move each photo in turn, stopping at the first failure.

        Photos handled before a failure stay at their destination.
        """
        moved: list[Path] = []
        for photo in photos:
            dest = target_name(self.config.target, self.config.image_prefix, photo)
            self._transfer(photo, dest)
            moved.append(dest)
        return moved

    def _transfer(self, src: Path, dest: Path) -> None:
        """Copy bytes to dest, then remove src."""
        prefix = "[DRY-RUN] " if self.config.dry_run else ""
        logger.info(f"{prefix}MOVE: {src} -> {dest}")

        if self.config.dry_run:
            return

        try:
            shutil.copyfile(src, dest)
        except OSError as e:
            raise RelocationError(f"unable to copy image {src} to {dest}: {e}") from e

        try:
            src.unlink()
        except OSError as e:
            raise RelocationError(f"unable to delete the input file {src}: {e}") from e
