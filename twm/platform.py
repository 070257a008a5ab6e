"""
Platform Interfaces

twm never talks to an OS window system itself. The outer application
provides a Platform (display discovery, window handles, taskbar) and a
Renderer that moves real windows to the computed bounding boxes.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, TYPE_CHECKING

from .errors import RenderError

if TYPE_CHECKING:
    from .config import Config
    from .objects import Display, Tile, Window
    from .workspace import Workspace

log = logging.getLogger(__name__)


class Platform(ABC):
    """OS services twm consumes."""

    @abstractmethod
    def discover_main_display(self) -> "Display":
        """Return the primary display with its usable bounding box."""
        pass

    @abstractmethod
    def window_from_handle(self, handle: Any) -> "Window":
        """Convert a raw OS window handle into a Window."""
        pass

    def hide_taskbar(self):
        """Hide the OS taskbar. No-op where there is none."""
        pass

    def show_taskbar(self):
        """Show the OS taskbar again. No-op where there is none."""
        pass


class Renderer(ABC):
    """Applies tile bounding boxes to real windows."""

    def init(self, config: Optional["Config"] = None):
        """Called once before the first render."""
        pass

    def shutdown(self):
        """Called once at teardown."""
        pass

    @abstractmethod
    def apply_bbox(self, tile: "Tile"):
        """
        Move and resize the window of one tile to ``tile.bbox``.

        Raises:
            RenderError: If the window could not be positioned (e.g. the
                handle is stale).
        """
        pass

    def render(self, workspace: "Workspace") -> int:
        """
        Apply the bounding box of every tile in a workspace.

        A failing tile is logged and skipped, the rest still render.

        Returns:
            Number of tiles rendered successfully
        """
        rendered = 0
        for tile in workspace.tiles():
            try:
                self.apply_bbox(tile)
            except (RenderError, OSError) as e:
                log.error("Failed to set bounding box for %s: %s", tile, e)
                continue
            rendered += 1
        return rendered
