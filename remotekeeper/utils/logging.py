"""Simple logging utilities for remotekeeper."""

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name."""
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.INFO)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def setup_logging(verbose: bool = False, quiet: bool = False, level: Optional[str] = None) -> logging.Logger:
    """Configure the package logger from CLI flags or the configured level.

    --verbose wins over the configured level, --quiet drops to errors only.
    """
    if verbose:
        resolved = logging.DEBUG
    elif quiet:
        resolved = logging.ERROR
    else:
        resolved = getattr(logging, (level or "INFO").upper(), logging.INFO)

    logger = get_logger("remotekeeper")
    logger.setLevel(resolved)
    for handler in logger.handlers:
        handler.setLevel(resolved)
    return logger
