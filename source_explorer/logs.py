"""Logging setup that does not write over the terminal UI."""

from __future__ import annotations

import logging

from textual.logging import TextualHandler

__all__ = ["configure_logging", "LOG_FORMAT"]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int | str = logging.WARNING, log_file: str | None = None) -> logging.Logger:
    """Route ``source_explorer`` records to the Textual console and, optionally, a file."""
    logger = logging.getLogger("source_explorer")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [TextualHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    return logger
