from __future__ import annotations

import pytest


@pytest.fixture
def calls() -> list[int]:
    return []
