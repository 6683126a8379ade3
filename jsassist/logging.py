"""Logger setup for jsassist runs."""

from __future__ import annotations

import logging

_LOGGER_NAME = "jsassist"
_FORMAT = "[jsassist] %(levelname)s %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below ``jsassist`` for the given stage."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Send jsassist records to the console, at DEBUG when ``verbose`` is set."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # main() may run more than once per process
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(console)
    return logger


__all__ = ["configure_logging", "get_logger"]
