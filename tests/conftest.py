"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from tokenlist.dom import Element
from tokenlist.presets import get_default_loader


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for preset files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def body() -> Element:
    """A <body> element with an existing class attribute."""
    return Element("body", {"class": "a b"})


@pytest.fixture(autouse=True)
def fresh_default_loader():
    """Make sure no test sees another test's cached default loader."""
    get_default_loader.cache_clear()
    yield
    get_default_loader.cache_clear()
