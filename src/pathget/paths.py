"""Path tokenization and traversal helpers."""

from __future__ import annotations

import re
import threading
from collections.abc import Mapping, Sequence
from typing import TypeAlias, TypeGuard

from chz.util import MISSING as CHZ_MISSING

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = (
    JSONScalar | Sequence["JSONValue"] | Mapping[str, "JSONValue"]
)

_INDEX_PATTERN = re.compile(r"0|[1-9][0-9]*")
_STRIPPED_CHARS = str.maketrans({"[": ".", "]": None, "'": None, '"': None})

BLOCKED_KEYS: frozenset[str] = frozenset({"__proto__", "constructor", "prototype"})


class _PathMissing:
    """Sentinel for missing document paths."""

    def __repr__(self) -> str:
        return "PATH_MISSING"


class _Undefined:
    """Sentinel for keys that are present but hold no value."""

    def __repr__(self) -> str:
        return "UNDEFINED"


PATH_MISSING: _PathMissing = _PathMissing()
UNDEFINED: _Undefined = _Undefined()


def tokenize_path(path: str) -> tuple[str, ...]:
    """Split a dot/bracket path into access keys.

    ``"a.b[0].c"``, ``"a.b.0.c"`` and ``"a['b'][0].c"`` all yield
    ``("a", "b", "0", "c")``. Empty segments are dropped.
    """

    normalized = path.translate(_STRIPPED_CHARS)
    return tuple(token for token in normalized.split(".") if token)


class PathCache:
    """Append-only memo of parsed paths, keyed by the literal path string."""

    def __init__(self) -> None:
        self._entries: dict[str, tuple[str, ...]] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get_or_parse(self, path: str) -> tuple[str, ...]:
        keys = self._entries.get(path)
        if keys is not None:
            self.hits += 1
            return keys

        # Racing threads may both tokenize; the result is identical either way.
        keys = tokenize_path(path)
        with self._lock:
            self.misses += 1
            return self._entries.setdefault(path, keys)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)


PATH_CACHE = PathCache()


def parse_path(path: str) -> tuple[str, ...]:
    """Return the access keys for ``path``, memoized process-wide."""

    return PATH_CACHE.get_or_parse(path)


def is_traversable(
    value: object,
) -> TypeGuard[Mapping[str, JSONValue] | Sequence[JSONValue]]:
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, (Mapping, Sequence))


def is_blocked_key(key: str) -> bool:
    """Keys naming the object model rather than the data are never resolved."""

    if key in BLOCKED_KEYS:
        return True
    return len(key) > 4 and key.startswith("__") and key.endswith("__")


def is_undefined(value: object) -> bool:
    return value is UNDEFINED or value is CHZ_MISSING


def parse_index(key: str) -> int | None:
    if _INDEX_PATTERN.fullmatch(key) is None:
        return None
    return int(key)


def step(
    current: Mapping[str, JSONValue] | Sequence[JSONValue], key: str
) -> JSONValue | _PathMissing:
    """Return the own value of ``current`` under ``key``, or ``PATH_MISSING``."""

    if is_blocked_key(key):
        return PATH_MISSING

    if isinstance(current, Mapping):
        if key not in current:
            return PATH_MISSING
        try:
            return current[key]
        except LookupError:
            return PATH_MISSING

    index = parse_index(key)
    if index is None or index >= len(current):
        return PATH_MISSING
    return current[index]


def lookup(root: object, keys: Sequence[str]) -> JSONValue | _PathMissing:
    """Walk ``keys`` through nested mappings/sequences starting at ``root``.

    Returns ``PATH_MISSING`` if any key is unavailable.
    """

    current = root
    for key in keys:
        if not is_traversable(current):
            return PATH_MISSING
        current = step(current, key)
        if current is PATH_MISSING:
            return PATH_MISSING
    return current


__all__ = [
    "BLOCKED_KEYS",
    "JSONScalar",
    "JSONValue",
    "PATH_CACHE",
    "PATH_MISSING",
    "PathCache",
    "UNDEFINED",
    "is_blocked_key",
    "is_traversable",
    "is_undefined",
    "lookup",
    "parse_index",
    "parse_path",
    "step",
    "tokenize_path",
]
