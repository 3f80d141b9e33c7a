"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`durland` package (e.g., `from durland.main import main`) without
requiring an editable install in CI.
"""

import os
import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def clean_env(monkeypatch):
    """Keep DURLAND_* variables from the host out of the tests."""

    from durland.config import get_settings

    for key in list(os.environ):
        if key.startswith("DURLAND_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
