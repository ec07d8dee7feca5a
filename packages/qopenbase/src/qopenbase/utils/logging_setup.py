"""Logger factory.

Usage::

    from qopenbase.utils.logging_setup import get_logger
    logger = get_logger(__name__)
    logger.debug("...")

Library convention: loggers carry a ``NullHandler`` and emit nothing unless
the application configures logging (e.g. ``logging.basicConfig``).
"""

from __future__ import annotations

import logging

__all__ = ["get_logger"]


def get_logger(name: str = "qopenbase") -> logging.Logger:
    """Return the package logger ``name`` with a ``NullHandler`` attached once."""
    logger = logging.getLogger(name)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger
