from __future__ import annotations

import logging
import os

from .options import ResolveOptions

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return default


def _env_log_level(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level
    return default


class PathgetConfig:
    """Process-wide settings, read from the environment at import time."""

    def __init__(self) -> None:
        self.debug_trace = _env_flag("PATHGET_DEBUG_TRACE", False)
        self.log_level = _env_log_level("PATHGET_LOG_LEVEL", logging.WARNING)

    def default_options(self) -> ResolveOptions:
        return ResolveOptions(debug_trace=self.debug_trace)


PATHGET_CONFIG = PathgetConfig()

__all__ = ["PATHGET_CONFIG", "PathgetConfig"]
