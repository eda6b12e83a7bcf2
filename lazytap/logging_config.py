"""Logging configuration for lazytap.

The terminal belongs to the TUI while it runs, so records only ever go to a
file. Without a log file the package logger gets a ``NullHandler``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "lazytap"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"


def default_log_path() -> Path:
    """Return the per-user log file used by ``--debug``."""
    return Path(user_log_dir(APP_NAME, appauthor=False)) / f"{APP_NAME}.log"


def setup_logging(level: str = "WARNING", log_file: Path | None = None) -> logging.Logger:
    """Configure the ``lazytap`` logger tree.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional file that receives all records at ``level``.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(APP_NAME)
    numeric_level = getattr(logging, str(level).upper(), logging.WARNING)
    logger.setLevel(numeric_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(numeric_level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for one lazytap module (``lazytap.<name>``)."""
    return logging.getLogger(f"{APP_NAME}.{name}")
