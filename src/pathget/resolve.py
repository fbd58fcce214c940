"""Failure-proof value lookup at a dot/bracket path."""

from __future__ import annotations

from typing import Any, TypeVar

from .config import PATHGET_CONFIG
from .options import ResolveOptions
from .paths import (
    PATH_MISSING,
    is_blocked_key,
    is_traversable,
    is_undefined,
    lookup,
    parse_path,
    step,
)
from .trace import StopReason, emit

T = TypeVar("T")


def resolve(
    root: object,
    path: str,
    default: T | None = None,
    options: ResolveOptions | None = None,
) -> Any:
    """Return the value at ``path`` inside ``root``, or ``default``.

    ``path`` uses ``.`` separators and optional ``[index]`` groups, e.g.
    ``"user.tags[1]"``. Resolution never raises: a non-container root, a
    non-container intermediate, an absent or reserved key, and a value that
    the active ``options`` treat as missing all produce ``default``. With
    ``options.debug_trace`` set, the reason is logged as a warning on the
    ``pathget.trace`` logger.
    """

    if options is None:
        options = PATHGET_CONFIG.default_options()
    trace = options.debug_trace

    if not is_traversable(root):
        if trace:
            emit(path, StopReason.ROOT_NOT_TRAVERSABLE, value=root)
        return default

    if not isinstance(path, str):
        if trace:
            emit(path, StopReason.INVALID_PATH, value=path)
        return default

    current = root
    for key in parse_path(path):
        if not is_traversable(current):
            if trace:
                emit(path, StopReason.NOT_TRAVERSABLE, key=key, value=current)
            return default

        current = step(current, key)
        if current is PATH_MISSING:
            if trace:
                reason = (
                    StopReason.KEY_BLOCKED
                    if is_blocked_key(key)
                    else StopReason.KEY_MISSING
                )
                emit(path, reason, key=key, include_value=False)
            return default

    if _counts_as_missing(current, options):
        if trace:
            emit(path, StopReason.FILTERED, value=current)
        return default
    return current


def _counts_as_missing(value: object, options: ResolveOptions) -> bool:
    if is_undefined(value):
        return True
    if value is None:
        return options.treat_null_as_missing
    if isinstance(value, str) and value == "":
        return options.treat_empty_string_as_missing
    return False


safe_get = resolve


def has_path(root: object, path: str) -> bool:
    """Return whether every key of ``path`` is present in ``root``.

    A key holding ``None`` counts as present; an undefined value does not.
    """

    if not is_traversable(root) or not isinstance(path, str):
        return False
    found = lookup(root, parse_path(path))
    return found is not PATH_MISSING and not is_undefined(found)


__all__ = ["has_path", "resolve", "safe_get"]
