"""Diagnostic logging for the gitu CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "gitu"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Route gitu log records to stderr through rich.

    Calling this again replaces the handler installed by a previous call.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ...)

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
