from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .config import PATHGET_CONFIG
from .paths import PATH_CACHE


@dataclass(frozen=True)
class _PathgetConfigSnapshot:
    debug_trace: bool
    log_level: int

    @classmethod
    def capture(cls) -> "_PathgetConfigSnapshot":
        return cls(
            debug_trace=PATHGET_CONFIG.debug_trace,
            log_level=PATHGET_CONFIG.log_level,
        )

    def restore(self) -> None:
        PATHGET_CONFIG.debug_trace = self.debug_trace
        PATHGET_CONFIG.log_level = self.log_level


@contextmanager
def pathget_test_env(
    *, debug_trace: bool = False
) -> Generator[None, None, None]:
    """Run with default config and an empty path cache, restoring config after."""
    snapshot = _PathgetConfigSnapshot.capture()
    PATHGET_CONFIG.debug_trace = debug_trace
    PATH_CACHE.clear()
    try:
        yield
    finally:
        PATH_CACHE.clear()
        snapshot.restore()


@pytest.fixture()
def pathget_clean() -> Generator[None, None, None]:
    """Isolate a test from environment-driven config and cached paths."""
    with pathget_test_env():
        yield
