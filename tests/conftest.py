"""
Pytest configuration and shared fixtures for the pixel editor tests.
"""

import pytest

from pixel_editor.core.picture import Picture
from pixel_editor.utils.config import AppConfig


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def white_3x3():
    return Picture.empty(3, 3, "#ffffff")


@pytest.fixture
def config(tmp_path):
    """
    AppConfig backed by a file in a temporary directory, so tests never
    read or write the user's real config.
    """
    cfg = AppConfig(tmp_path / "config.json")
    cfg.width = 5
    cfg.height = 4
    return cfg
