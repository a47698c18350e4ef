"""Cycle orchestrator: scan -> update diaries -> relocate photos."""

from __future__ import annotations

import logging

from photo_diary.config import DiaryConfig
from photo_diary.diary import DiaryUpdater
from photo_diary.models import CycleResult
from photo_diary.mover import Mover
from photo_diary.scanner import Scanner

logger = logging.getLogger(__name__)


class Pipeline:
    """Runs one full pass over the source directory."""

    def __init__(self, config: DiaryConfig) -> None:
        self.config = config
        self.scanner = Scanner(config)
        self.diary = DiaryUpdater(config)
        self.mover = Mover(config)

    def run_cycle(self) -> CycleResult:
        result = CycleResult(dry_run=self.config.dry_run)

        logger.info(f"checking photos from {self.config.source}")
        groups = self.scanner.scan()
        result.photos_found = sum(len(paths) for paths in groups.values())
        result.dates = len(groups)

        if not groups:
            logger.debug("No photos to process.")
            return result

        # Sorted so diaries are updated oldest date first
        for date in sorted(groups):
            photos = groups[date]
            logger.info(f"updating diary for {date} with {len(photos)} photos")

            _, existed = self.diary.update(date, photos)
            if existed:
                result.diaries_appended += 1
            else:
                result.diaries_created += 1

            result.photos_moved += len(self.mover.relocate(photos))

        logger.info(
            f"Cycle done: {result.photos_moved} photos, "
            f"{result.diaries_created} diaries created, "
            f"{result.diaries_appended} appended"
        )
        return result
