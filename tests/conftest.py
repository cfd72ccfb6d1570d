"""Shared fixtures for the test suite."""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from voice_transit.config import reset_config
from voice_transit.container import reset_container


@pytest.fixture(autouse=True)
def _fresh_globals():
    """Each test sees freshly loaded configuration and container."""
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()
