"""Logging setup for the exporter process.

Logs go to stderr, and additionally to a rotating file when LOG_FILE is set.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from core.config import LOG_BACKUP_COUNT, LOG_FILE, LOG_LEVEL, LOG_MAX_BYTES


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Module-level state
_logging_configured = False


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> str:
    """Configure the root logger on first use.

    Args:
        level: Log level name (defaults to LOG_LEVEL)
        log_file: Optional rotating log file path (defaults to LOG_FILE)

    Returns:
        The log level that was applied
    """
    global _logging_configured

    requested = level or LOG_LEVEL
    level_name = requested.upper()
    invalid_level = level_name not in VALID_LEVELS
    if invalid_level:
        level_name = "INFO"

    if _logging_configured:
        return level_name

    formatter = logging.Formatter(LOG_FORMAT)
    logger = logging.getLogger()
    logger.setLevel(level_name)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    log_file = LOG_FILE if log_file is None else log_file
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _logging_configured = True

    if invalid_level:
        logger.warning("Invalid log level %r, using INFO", requested)
    return level_name
