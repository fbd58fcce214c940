from __future__ import annotations

import chz


@chz.chz
class ResolveOptions:
    """Missingness policy and diagnostics for a single ``resolve`` call."""

    treat_null_as_missing: bool = False
    treat_empty_string_as_missing: bool = False
    debug_trace: bool = False


DEFAULT_OPTIONS = ResolveOptions()

__all__ = ["DEFAULT_OPTIONS", "ResolveOptions"]
