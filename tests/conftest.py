import pytest

from pathget.testing import pathget_clean  # noqa: F401


@pytest.fixture(autouse=True)
def _isolated_pathget(pathget_clean) -> None:
    return None
