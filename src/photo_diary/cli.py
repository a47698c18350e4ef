"""CLI argument parsing, startup validation, and main entry point."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from photo_diary import __version__
from photo_diary.config import DEFAULT_SETTINGS_FILE, DiaryConfig, load_settings
from photo_diary.errors import ConfigError, PhotoDiaryError
from photo_diary.logging_setup import setup_logging
from photo_diary.pipeline import Pipeline
from photo_diary.scheduler import Scheduler

logger = logging.getLogger("photo_diary")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="photo-diary",
        description=(
            "Poll a folder for dated photos, embed them in the matching "
            "diary note, and move them into the vault's image folder."
        ),
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=DEFAULT_SETTINGS_FILE,
        help=f"YAML settings file (default: {DEFAULT_SETTINGS_FILE}).",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single cycle immediately and exit.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview diary writes and moves without making changes.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG-level) console output.",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Directory for a timestamped log file (default: console only).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _prepare(config: DiaryConfig) -> DiaryConfig:
    """Resolve paths and make sure the directories a cycle needs exist."""
    config = replace(
        config,
        source=config.source.resolve(),
        target=config.target.resolve(),
        vault=config.vault.resolve(),
    )

    if not config.source.is_dir():
        raise ConfigError(f"original_photo_path is not a directory: {config.source}")

    if not config.dry_run:
        try:
            config.target.mkdir(parents=True, exist_ok=True)
            config.vault.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigError(f"unable to create directory: {e}") from e

    return config


def _log_banner(config: DiaryConfig, log_file: Optional[Path]) -> None:
    logger.info("=" * 60)
    logger.info(f"photo-diary v{__version__}")
    logger.info(f"  Source:   {config.source}")
    logger.info(f"  Target:   {config.target}")
    logger.info(f"  Vault:    {config.vault}")
    logger.info(f"  Prefix:   {config.image_prefix!r}")
    logger.info(f"  Interval: {config.interval:g}s")
    logger.info(f"  Dry-run:  {config.dry_run}")
    logger.info(f"  Log file: {log_file or '(console only)'}")
    logger.info("=" * 60)


def run(args: argparse.Namespace, log_file: Optional[Path] = None) -> None:
    """Load settings and drive the scheduler; raises PhotoDiaryError on failure."""
    config = load_settings(args.settings, dry_run=args.dry_run)
    config = _prepare(config)
    _log_banner(config, log_file)

    scheduler = Scheduler(Pipeline(config), config.interval)
    if args.once:
        scheduler.run_once()
    else:
        scheduler.run_forever()


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    log_dir = args.log_dir.resolve() if args.log_dir else None

    try:
        log_file = setup_logging(verbose=args.verbose, log_dir=log_dir)
        run(args, log_file)
    except PhotoDiaryError as e:
        logger.error(f"Fatal: {e}")
        raise SystemExit(f"Error: {e}")
