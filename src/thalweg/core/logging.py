"""Logging setup."""
from __future__ import annotations

import logging
import sys

_configured = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", force: bool = False) -> None:
    """Install a single stderr handler on the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        force: Reconfigure even if logging was already set up.
    """
    global _configured

    log_level = getattr(logging, level.upper(), logging.INFO)
    package_logger = logging.getLogger("thalweg")
    package_logger.setLevel(log_level)

    if _configured and not force:
        return

    package_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.NOTSET)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    package_logger.addHandler(handler)

    _configured = True
    package_logger.debug("Logging configured with level: %s", level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
