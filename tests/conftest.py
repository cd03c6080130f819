"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ui_vault.config import Config  # noqa: E402
from ui_vault.color_engine import generate_palette_from_seed  # noqa: E402


@pytest.fixture(autouse=True)
def reset_config():
    """Drop the cached configuration between tests."""
    Config._instance = None
    yield
    Config._instance = None


@pytest.fixture
def blue_palettes():
    """Palettes generated from the blue preset seed."""
    return generate_palette_from_seed("#3B82F6")
