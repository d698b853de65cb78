"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch):
    """Keep SPELLED_NUMBERS_* variables from the host shell out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("SPELLED_NUMBERS_"):
            monkeypatch.delenv(key)
    yield
