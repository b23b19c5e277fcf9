"""
Logging configuration for the assistant backend.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from roo_code.core.config import get_config, get_log_path

LOGGER_NAME = "roo_code"

_logger: Optional[logging.Logger] = None


def setup_logging() -> logging.Logger:
    """
    Configure the ``roo_code`` logger with a rotating file handler and stdout.

    Safe to call more than once; the first configured logger is returned.
    """
    global _logger

    if _logger is not None:
        return _logger

    log_config = get_config().logging
    level = getattr(logging, log_config.level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(log_config.format)

    file_handler = RotatingFileHandler(
        get_log_path(),
        maxBytes=log_config.max_size * 1024 * 1024,  # MB -> bytes
        backupCount=log_config.backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Get the application logger, configuring it on first use."""
    if _logger is None:
        return setup_logging()
    return _logger
