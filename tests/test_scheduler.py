"""Tests for the Scheduler loop."""

import pytest

from photo_diary.errors import ScanError
from photo_diary.models import CycleResult
from photo_diary.pipeline import Pipeline
from photo_diary.scheduler import Scheduler


class RecordingPipeline:
    """Stands in for Pipeline and records calls alongside sleeps."""

    def __init__(self, events: list[str]) -> None:
        self.events = events

    def run_cycle(self) -> CycleResult:
        self.events.append("cycle")
        return CycleResult()


def test_waits_before_each_cycle():
    events: list[str] = []
    scheduler = Scheduler(
        RecordingPipeline(events),
        interval=30.0,
        sleep=lambda seconds: events.append(f"sleep {seconds:g}"),
    )

    cycles = scheduler.run_forever(max_cycles=3)

    assert cycles == 3
    assert events == ["sleep 30", "cycle"] * 3


def test_run_once_does_not_sleep():
    events: list[str] = []
    scheduler = Scheduler(
        RecordingPipeline(events),
        interval=30.0,
        sleep=lambda seconds: events.append("sleep"),
    )

    scheduler.run_once()

    assert events == ["cycle"]


def test_cycle_error_stops_loop(make_config, tmp_path):
    config = make_config(source=tmp_path / "gone")
    sleeps: list[float] = []
    scheduler = Scheduler(Pipeline(config), config.interval, sleep=sleeps.append)

    with pytest.raises(ScanError):
        scheduler.run_forever(max_cycles=5)

    assert sleeps == [60.0]


def test_photos_arriving_later_are_picked_up(make_config, source_dir, target_dir):
    pipeline = Pipeline(make_config())
    drops = iter(["2024-03-01.jpg", "2024-03-02.jpg"])

    def sleep(_seconds):
        (source_dir / next(drops)).write_bytes(b"\x00")

    Scheduler(pipeline, 1.0, sleep=sleep).run_forever(max_cycles=2)

    assert sorted(p.name for p in target_dir.iterdir()) == [
        "sync_2024-03-01.jpg", "sync_2024-03-02.jpg",
    ]
