"""
Shared pytest fixtures for ctile tests.
"""

import pytest
from pubsub import pub

from ctile.geometry import Rect


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external state")


@pytest.fixture
def mock_window():
    """Factory fixture for creating mock window objects."""

    class MockWindow:
        def __init__(self, object_id=1, title="test"):
            self.object_id = object_id
            self.title = title
            self.app_id = "test_app"

        def __hash__(self):
            return hash(self.object_id)

        def __eq__(self, other):
            if not isinstance(other, MockWindow):
                return False
            return self.object_id == other.object_id

        def __repr__(self):
            return f"MockWindow({self.object_id!r})"

    return MockWindow


@pytest.fixture
def standard_area():
    """Standard 1920x1080 area for layout tests."""
    return Rect(0, 0, 1920, 1080)


@pytest.fixture
def small_area():
    """Small 800x600 area for layout tests."""
    return Rect(0, 0, 800, 600)


@pytest.fixture
def bus():
    """The global pubsub bus, with listeners cleared around each test."""
    pub.unsubAll()
    yield pub
    pub.unsubAll()


def assert_tiles_horizontally(frames, area):
    """Frames sit side by side and exactly cover area."""
    rects = sorted(frames.values(), key=lambda r: r.x)
    assert rects, "no frames"
    assert rects[0].x == area.x
    for prev, cur in zip(rects, rects[1:]):
        assert cur.x == pytest.approx(prev.right)
    assert rects[-1].right == pytest.approx(area.right)
    for rect in rects:
        assert rect.y == area.y
        assert rect.height == area.height
        assert rect.width > 0


@pytest.fixture
def assert_tiles():
    """Checker asserting that frames tile an area left to right."""
    return assert_tiles_horizontally
