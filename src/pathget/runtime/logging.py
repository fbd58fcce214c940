from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from ..config import PATHGET_CONFIG

LOGGER_NAME = "pathget"


class _PathgetRichConsoleHandler(RichHandler):
    """Rich console handler installed by ``configure_logging``."""

    def __init__(self, level: int) -> None:
        super().__init__(
            level=level,
            console=Console(stderr=True),
            show_path=False,
            markup=False,
            rich_tracebacks=False,
        )


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(level: int | None = None) -> logging.Logger:
    """Attach a rich stderr handler to the ``pathget`` logger.

    Safe to call repeatedly; a second call only updates the level.
    """

    if level is None:
        level = PATHGET_CONFIG.log_level

    logger = get_logger()
    logger.setLevel(level)
    for handler in logger.handlers:
        if isinstance(handler, _PathgetRichConsoleHandler):
            handler.setLevel(level)
            return logger

    logger.addHandler(_PathgetRichConsoleHandler(level))
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
