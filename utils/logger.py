# -*- coding: utf-8 -*-
"""
Logging configuration.

All application loggers hang off the "customer_desk" logger. Levels, file
location, rotation and formats come from Config (and so from .env).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

ROOT_LOGGER_NAME = "customer_desk"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def _level(value: Union[str, int], default: int) -> int:
    """Turn a level name like "info" (or a number) into a logging level."""
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).upper())
    return level if isinstance(level, int) else default


def setup_logger(level: Union[str, int, None] = None,
                 console_level: Union[str, int, None] = None) -> logging.Logger:
    """
    Setup application logger with a rotating file handler and a console handler.

    Args:
        level: file handler level, Config.LOG_LEVEL when omitted
        console_level: console handler level, Config.CONSOLE_LOG_LEVEL when omitted
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    file_level = _level(level if level is not None else Config.LOG_LEVEL, logging.DEBUG)
    stream_level = _level(
        console_level if console_level is not None else Config.CONSOLE_LOG_LEVEL, logging.INFO
    )

    Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(min(file_level, stream_level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        Config.LOGS_DIR / Config.LOG_FILE,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(Config.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(stream_level)
    console_handler.setFormatter(logging.Formatter(Config.CONSOLE_LOG_FORMAT))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for a module."""
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
