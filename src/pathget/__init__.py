"""
pathget: read values at dot/bracket paths in nested data without guard clauses.

This package uses a src-layout. Import the package as `pathget`.
"""

from importlib.metadata import version

__version__ = version("pathget")

from .config import PATHGET_CONFIG, PathgetConfig
from .options import DEFAULT_OPTIONS, ResolveOptions
from .paths import (
    BLOCKED_KEYS,
    PATH_CACHE,
    PATH_MISSING,
    UNDEFINED,
    JSONValue,
    PathCache,
    lookup,
    parse_path,
    tokenize_path,
)
from .resolve import has_path, resolve, safe_get
from .runtime import configure_logging, get_logger
from .trace import ResolutionTrace, StopReason

__all__ = [
    "__version__",
    "BLOCKED_KEYS",
    "DEFAULT_OPTIONS",
    "JSONValue",
    "PATHGET_CONFIG",
    "PATH_CACHE",
    "PATH_MISSING",
    "PathCache",
    "PathgetConfig",
    "ResolutionTrace",
    "ResolveOptions",
    "StopReason",
    "UNDEFINED",
    "configure_logging",
    "get_logger",
    "has_path",
    "lookup",
    "parse_path",
    "resolve",
    "safe_get",
    "tokenize_path",
]
