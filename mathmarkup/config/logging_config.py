"""
Centralized logging configuration.

Library modules only call logging.getLogger(__name__); applications call
setup_logger() once to attach handlers.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from .constants import (
    LOG_LEVEL, LOG_FORMAT,
    LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT
)


def setup_logger(
    name: str = None,
    level: str = LOG_LEVEL,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Get or create a configured logger.

    Usage:
        from mathmarkup.config.logging_config import setup_logger
        logger = setup_logger('mathmarkup')
        logger.info("Message here")

    Args:
        name: Logger name. If None, uses 'mathmarkup'.
        level: Level name for the logger and console handler.
        log_file: Optional path for a rotating DEBUG-level log file.

    Returns:
        Configured logging.Logger instance.
    """
    logger = logging.getLogger(name or 'mathmarkup')

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    console = logging.StreamHandler()
    console.setLevel(logger.level)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=LOG_MAX_SIZE_MB * 1024 * 1024,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8',
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Alias for setup_logger for convenience.

    Usage:
        from mathmarkup.config.logging_config import get_logger
        logger = get_logger(__name__)
    """
    return setup_logger(name)


def configure_from_settings(settings) -> logging.Logger:
    """Attach handlers to the package logger using MarkupSettings values."""
    return setup_logger(
        'mathmarkup',
        level=settings.log_level,
        log_file=settings.log_file,
    )
