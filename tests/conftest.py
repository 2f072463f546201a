"""Pytest configuration file for setting up test environment."""

import sys
from pathlib import Path

import pytest

# Add the repository root to Python path so tests can import patterns_demo
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

_CONFIG_VARIABLES = ("LOGGING_LEVEL", "SHOW_ENCRYPTION", "DEMO_TEXT", "XOR_KEY")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep configuration variables from the outer environment out of tests."""
    for name in _CONFIG_VARIABLES:
        monkeypatch.delenv(name, raising=False)
