from __future__ import annotations

import os
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable

import pytest

from core.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    for key in list(os.environ):
        if key.startswith("TRAZA_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("TRAZA_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("TRAZA_EXPORT_DIR", str(tmp_path / "exports"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def ticking_clock() -> Callable[[], datetime]:
    """Clock that advances one second per call."""
    current = datetime(2024, 5, 1, 12, 0, 0)

    def _tick() -> datetime:
        nonlocal current
        value = current
        current = current + timedelta(seconds=1)
        return value

    return _tick
