"""Logging setup for textmetrics commands."""

from __future__ import annotations

import logging

_LOGGER_NAME = "textmetrics"


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Send textmetrics log records to stderr, at DEBUG level when *verbose*."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI runs more than once.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[textmetrics] %(levelname)s %(message)s"))
    logger.addHandler(handler)
    return logger


__all__ = ["configure_logging"]
