"""Logging setup for the glyphgeom namespace.

The kernel only logs through module loggers at DEBUG (sentinel paths).
Applications that want to see those messages call setup_logging() once.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "glyphgeom"
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATEFMT = "%H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Send glyphgeom records to stdout, and to *log_file* when given.

    Replaces whatever handlers the package logger had, so repeated calls
    reconfigure rather than stack. Records stop at the package logger and
    are not passed on to root handlers.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(_FORMAT, datefmt=_DATEFMT)
    for h in handlers:
        h.setLevel(level)
        h.setFormatter(formatter)
        logger.addHandler(h)

    logger.setLevel(level)
    logger.propagate = False
    logger.info("Logging initialized.")
    return logger
