"""Logging setup for banksim.

Menu output goes to stdout; log records go to a dated file under the
configured log directory and to stderr.
"""

import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional

from config import Config

LOGGER_NAME = "banksim"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def log_file_path(log_dir: Path, day: Optional[date] = None) -> Path:
    """Return the log file for the given day, e.g. banksim-2024-03-01.log."""
    day = day or date.today()
    return log_dir / f"{LOGGER_NAME}-{day.isoformat()}.log"


def _file_handler(config: Config) -> logging.Handler:
    handler = logging.FileHandler(log_file_path(config.log_dir), encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def setup_logging(config: Config) -> logging.Logger:
    """Attach file and console handlers to the banksim logger.

    Calling this again replaces the previously attached handlers.

    Args:
        config: Configuration providing log_level and log_dir.

    Returns:
        The configured banksim logger.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = get_logger()
    logger.setLevel(config.log_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    for handler in (_file_handler(config), _console_handler()):
        handler.setLevel(config.log_level)
        logger.addHandler(handler)

    return logger


def get_logger() -> logging.Logger:
    """Return the banksim logger."""
    return logging.getLogger(LOGGER_NAME)
