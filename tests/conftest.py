"""
Shared pytest fixtures for pwlayout tests.
"""

import pytest
from pubsub import pub

from pwlayout.geometry import Rect


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without side effects")


@pytest.fixture(autouse=True)
def clean_bus():
    """Drop all bus listeners after each test."""
    yield
    pub.unsubAll()


@pytest.fixture
def standard_area():
    """Standard 1920x1080 area for layout tests."""
    return Rect(0, 0, 1920, 1080)


@pytest.fixture
def small_area():
    """Small 800x600 area for layout tests."""
    return Rect(0, 0, 800, 600)


@pytest.fixture
def portrait_area():
    """Portrait 1080x1920 area for layout tests."""
    return Rect(0, 0, 1080, 1920)


@pytest.fixture
def tiny_area():
    """12x8 area, small enough to reason about every pixel."""
    return Rect(0, 0, 12, 8)


@pytest.fixture
def assert_tiles():
    """Assert that rects cover `container` exactly, without overlapping."""

    def overlap(a, b):
        width = min(a.right, b.right) - max(a.x, b.x)
        height = min(a.bottom, b.bottom) - max(a.y, b.y)
        return max(0, width) * max(0, height)

    def check(rects, container):
        for rect in rects:
            assert rect.x >= container.x and rect.right <= container.right
            assert rect.y >= container.y and rect.bottom <= container.bottom
        assert sum(r.surface_area() for r in rects) == container.surface_area()
        for i, a in enumerate(rects):
            for b in rects[i + 1 :]:
                assert overlap(a, b) == 0, f"{a} overlaps {b}"

    return check
