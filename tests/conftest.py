"""Pytest fixtures for tests."""

import pytest

from nicecolors import Color


@pytest.fixture
def red():
    """Pure red."""
    return Color(red=255, green=0, blue=0)


@pytest.fixture
def blue():
    """Pure blue."""
    return Color(red=0, green=0, blue=255)


@pytest.fixture
def purple():
    """The midpoint of red and blue."""
    return Color(red=128, green=0, blue=128)


@pytest.fixture
def sample_colors():
    """A spread of colors covering channel extremes and odd values."""
    return [
        Color(0, 0, 0),
        Color(255, 255, 255),
        Color(128, 0, 128),
        Color(17, 34, 51),
        Color(1, 254, 127),
        Color(100, 100, 100),
    ]
