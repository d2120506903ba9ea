"""Logging configuration for the service."""

import logging
import sys
from typing import TextIO

from msgcache.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(stream: TextIO | None = None) -> None:
    """Configure service-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout unless stream is given (CLIs log to stderr).
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(stream or sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
