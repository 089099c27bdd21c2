"""
Package-wide logger.

The library never configures handlers itself; applications opt in with
``logging.basicConfig`` or by attaching handlers to ``tiny_graphstats``.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "tiny_graphstats"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it for ``name``."""
    if not name or name == LOGGER_NAME:
        return logger
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logger.getChild(name)
