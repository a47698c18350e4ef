"""Fixed-interval loop around Pipeline.run_cycle."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from photo_diary.models import CycleResult
from photo_diary.pipeline import Pipeline

logger = logging.getLogger(__name__)


class Scheduler:
    """Waits one interval, runs a cycle, and repeats.

    There is no shutdown path: the loop ends only when a cycle raises or the
    process is killed. ``max_cycles`` exists for callers that need a bound.
    """

    def __init__(
        self,
        pipeline: Pipeline,
        interval: float,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.pipeline = pipeline
        self.interval = interval
        self.sleep = sleep

    def run_once(self) -> CycleResult:
        return self.pipeline.run_cycle()

    def run_forever(self, max_cycles: Optional[int] = None) -> int:
        """Return the number of cycles run (only reached with max_cycles)."""
        logger.info(f"Polling every {self.interval:g}s")
        cycles = 0
        while max_cycles is None or cycles < max_cycles:
            self.sleep(self.interval)
            self.pipeline.run_cycle()
            cycles += 1
        return cycles
