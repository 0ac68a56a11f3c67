"""
Opt-in log output for applications using nlogofmt.

The package itself only attaches a NullHandler to the "nlogofmt" logger;
nothing is printed unless the application configures logging, for example:

    from nlogofmt.logging_config import setup_logging
    setup_logging(logging.DEBUG, log_file="nlogofmt.log")
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "nlogofmt"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """Send nlogofmt records to stderr, and to log_file if given. Returns the logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]:
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
