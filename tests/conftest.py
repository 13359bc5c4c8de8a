"""Shared fixtures for portpath tests."""

import pytest

from portpath.config import reset_config
from portpath.filesystem.profiles import current_profile


@pytest.fixture(autouse=True)
def clean_state():
    """Restore default configuration and forget the cached host profile."""
    reset_config()
    current_profile.cache_clear()
    yield
    reset_config()
    current_profile.cache_clear()
