"""
Shared pytest fixtures for twm tests.
"""

import pytest
from pubsub import pub

from twm.bbox import BBox
from twm.errors import RenderError
from twm.objects import Display, Tile, Window
from twm.platform import Platform, Renderer


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without OS access")


@pytest.fixture(autouse=True)
def reset_bus():
    """Drop listeners left on the global bus by a test."""
    yield
    pub.unsubAll()


@pytest.fixture
def standard_bbox():
    """Standard 1920x1080 area for layout tests."""
    return BBox(0, 0, 1920, 1080)


@pytest.fixture
def small_bbox():
    """Small 800x600 area for layout tests."""
    return BBox(0, 0, 800, 600)


@pytest.fixture
def standard_display(standard_bbox):
    return Display(id=0, bbox=standard_bbox)


@pytest.fixture
def make_tile():
    """Factory fixture for creating tiles with a window of the same id."""

    def _make_tile(tile_id=0, handle=None):
        window = Window(
            id=tile_id,
            handle=tile_id if handle is None else handle,
            original_bbox=BBox(10, 10, 640, 480),
        )
        return Tile(id=tile_id, bbox=BBox(), window=window)

    return _make_tile


class FakePlatform(Platform):
    """Platform with a fixed display that records taskbar calls."""

    def __init__(self, bbox=BBox(0, 0, 1920, 1080)):
        self.display = Display(id=0, bbox=bbox)
        self.discover_calls = 0
        self.taskbar_calls = []
        self.windows = []

    def discover_main_display(self):
        self.discover_calls += 1
        return self.display

    def window_from_handle(self, handle):
        window = Window(
            id=len(self.windows), handle=handle, original_bbox=BBox(0, 0, 800, 600)
        )
        self.windows.append(window)
        return window

    def hide_taskbar(self):
        self.taskbar_calls.append("hide")

    def show_taskbar(self):
        self.taskbar_calls.append("show")


class FakeRenderer(Renderer):
    """Renderer that records applied bboxes.

    Handles in ``stale`` fail per tile; each entry of ``errors`` is raised
    by one whole ``render()`` call.
    """

    def __init__(self, stale=(), errors=()):
        self.stale = set(stale)
        self.errors = list(errors)
        self.applied = {}
        self.renders = 0
        self.initialized = False
        self.shut_down = False

    def init(self, config=None):
        self.initialized = True

    def shutdown(self):
        self.shut_down = True

    def apply_bbox(self, tile):
        if tile.window.handle in self.stale:
            raise RenderError(f"stale handle {tile.window.handle}")
        self.applied[tile.window.handle] = tile.bbox

    def render(self, workspace):
        self.renders += 1
        if self.errors:
            raise self.errors.pop(0)
        return super().render(workspace)


@pytest.fixture
def platform():
    return FakePlatform()


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def renderer_factory():
    """Factory fixture for renderers with stale handles."""
    return FakeRenderer
