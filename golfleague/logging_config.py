"""Logging setup for the leaderboard CLI."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'


def setup_logging(level: int = logging.INFO, log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Configure the 'golfleague' logger.

    Messages go to stdout. When log_dir is given, a timestamped
    leaderboard_<YYYYmmdd_HHMMSS>.log file is written there as well,
    with source locations in each line.

    Calling this again replaces the handlers from the previous call.
    """
    logger = logging.getLogger('golfleague')
    logger.setLevel(level)
    logger.handlers = []

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f'leaderboard_{datetime.now():%Y%m%d_%H%M%S}.log'
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger
