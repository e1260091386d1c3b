"""Logging setup shared by the library and the CLI."""

from __future__ import annotations

import logging
import sys

_ROOT_LOGGER = "tocsmith"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``tocsmith`` namespace."""
    if name != _ROOT_LOGGER and not name.startswith(_ROOT_LOGGER + "."):
        name = f"{_ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Install a single stderr handler on the package logger.

    Calling this repeatedly replaces the handler rather than stacking them.

    Args:
        level: Logging level name or number.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_tocsmith_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._tocsmith_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
