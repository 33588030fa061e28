"""Centralised logging configuration for oui."""
from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int | str = logging.WARNING) -> None:
    """Configure the ``oui`` package logger.

    The handler writes to stderr so stdout only ever carries the lookup
    result. Repeated calls only adjust the level.
    """
    logger = logging.getLogger("oui")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the ``oui`` namespace."""
    return logging.getLogger(f"oui.{name}")
