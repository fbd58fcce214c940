"""Diagnostics describing where a resolution stopped."""

from __future__ import annotations

import enum
import logging

from pydantic import BaseModel, ConfigDict
from rich.pretty import pretty_repr

logger = logging.getLogger(__name__)

_MAX_REPR_ITEMS = 10
_MAX_REPR_STRING = 80


class StopReason(str, enum.Enum):
    ROOT_NOT_TRAVERSABLE = "root_not_traversable"
    INVALID_PATH = "invalid_path"
    NOT_TRAVERSABLE = "not_traversable"
    KEY_MISSING = "key_missing"
    KEY_BLOCKED = "key_blocked"
    FILTERED = "filtered"


class ResolutionTrace(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    reason: StopReason
    key: str | None = None
    value: str | None = None

    def message(self) -> str:
        if self.reason is StopReason.ROOT_NOT_TRAVERSABLE:
            return f"root is not a mapping or sequence: {self.value}"
        if self.reason is StopReason.INVALID_PATH:
            return f"path is not a string: {self.value}"
        if self.reason is StopReason.NOT_TRAVERSABLE:
            return f"cannot read key {self.key!r} from non-container {self.value}"
        if self.reason is StopReason.KEY_MISSING:
            return f"key {self.key!r} not found"
        if self.reason is StopReason.KEY_BLOCKED:
            return f"key {self.key!r} is reserved and never resolved"
        return f"resolved value {self.value} treated as missing"


def describe(value: object) -> str:
    return pretty_repr(value, max_length=_MAX_REPR_ITEMS, max_string=_MAX_REPR_STRING)


def emit(
    path: object,
    reason: StopReason,
    *,
    key: str | None = None,
    value: object = None,
    include_value: bool = True,
) -> ResolutionTrace:
    trace = ResolutionTrace(
        path=path if isinstance(path, str) else describe(path),
        reason=reason,
        key=key,
        value=describe(value) if include_value else None,
    )
    logger.warning(
        "pathget: %s (path=%r)",
        trace.message(),
        trace.path,
        extra={"pathget_trace": trace},
    )
    return trace


__all__ = ["ResolutionTrace", "StopReason", "describe", "emit"]
