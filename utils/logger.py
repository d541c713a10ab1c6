# -*- coding: utf-8 -*-
"""
Logging configuration.

Every module logs through a child of the "maintlog" logger:

    from utils.logger import get_logger
    logger = get_logger(__name__)

The file log keeps DEBUG detail (wizard transitions, draft writes); the
console shows LOG_LEVEL and above.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

ROOT_LOGGER_NAME = "maintlog"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def _file_handler(log_path: Path, max_bytes: int, backup_count: int) -> RotatingFileHandler:
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _console_handler(level_name: str) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level_name.upper(), logging.INFO))
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def setup_logger(log_path: Optional[Union[str, Path]] = None,
                 console_level: Optional[str] = None) -> logging.Logger:
    """
    Setup application logger with file and console handlers.

    Calling it again replaces the handlers, so the entry point may
    reconfigure after modules already grabbed their child loggers.

    Args:
        log_path: Log file (defaults to Config.LOG_PATH)
        console_level: Console level name (defaults to Config.LOG_CONSOLE_LEVEL)

    Returns:
        The "maintlog" logger
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_file_handler(
        Path(log_path) if log_path else Config.LOG_PATH,
        Config.LOG_MAX_BYTES,
        Config.LOG_BACKUP_COUNT
    ))
    logger.addHandler(_console_handler(console_level or Config.LOG_CONSOLE_LEVEL))

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
