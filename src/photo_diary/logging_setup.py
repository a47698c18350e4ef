"""Logging configuration for photo-diary."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from photo_diary.errors import ConfigError

CONSOLE_FORMAT = "%(asctime)s [%(levelname)-7s] %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"


def setup_logging(verbose: bool = False, log_dir: Optional[Path] = None) -> Optional[Path]:
    """Attach a stdout handler to the photo_diary logger.

    With log_dir, every record also goes to
    log_dir/photo-diary_YYYYmmdd_HHMMSS.log, whose path is returned.
    """
    root = logging.getLogger("photo_diary")
    root.setLevel(logging.DEBUG)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(logging.DEBUG if verbose else logging.INFO)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(console)

    if log_dir is None:
        return None

    log_file = log_dir / f"photo-diary_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"unable to open log file {log_file}: {e}") from e
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(FILE_FORMAT))
    root.addHandler(fh)

    return log_file
