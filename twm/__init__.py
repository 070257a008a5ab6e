"""
twm - tiling window manager core

Computes a non-overlapping bounding box for every window of a workspace
according to a pluggable layout, and recomputes only when state changed.

This package provides:
- Bounding box split algebra
- Window, tile, display, workspace and manager data model
- Layouts (sided, middle) with dirty-tracking and a registry
- The Twm application shell with a reader/writer-locked query surface
- Platform and renderer interfaces for the OS-specific parts

Example usage:
    from twm import Twm, Config

    twm = Twm(platform, renderer, Config.from_dict(parsed_config))
    with twm:
        twm.new_ws()
        twm.manage_window(handle)
"""

__version__ = "0.1.0"

from .bbox import BBox, HorizontalSplit, VerticalSplit, SplitDirection
from .util import Direction
from .objects import Window, Tile, Display
from .errors import (
    TwmError,
    InvalidGeometry,
    TileNotFoundError,
    WorkspaceNotFoundError,
    UnknownLayoutError,
    ConfigError,
    RenderError,
    NotAvailableError,
)
from .layouts import (
    Layout,
    LayoutMeta,
    LayoutUpdateInfo,
    SidedLayout,
    SidedTilePolicy,
    MiddleLayout,
    create_layout,
    layout_from_dict,
)
from .workspace import Workspace
from .manager import Manager
from .lock import RWLock
from .platform import Platform, Renderer
from .config import Config, KeyEntry, TaskbarConfig, LayoutConfig
from .twm import Twm, PROTOCOL_VERSION

from . import topics

__all__ = [
    # Version
    "__version__",
    "PROTOCOL_VERSION",
    # Geometry
    "BBox",
    "HorizontalSplit",
    "VerticalSplit",
    "SplitDirection",
    "Direction",
    # Objects
    "Window",
    "Tile",
    "Display",
    # Errors
    "TwmError",
    "InvalidGeometry",
    "TileNotFoundError",
    "WorkspaceNotFoundError",
    "UnknownLayoutError",
    "ConfigError",
    "RenderError",
    "NotAvailableError",
    # Layouts
    "Layout",
    "LayoutMeta",
    "LayoutUpdateInfo",
    "SidedLayout",
    "SidedTilePolicy",
    "MiddleLayout",
    "create_layout",
    "layout_from_dict",
    # Model
    "Workspace",
    "Manager",
    "RWLock",
    # Collaborators
    "Platform",
    "Renderer",
    # Configuration
    "Config",
    "KeyEntry",
    "TaskbarConfig",
    "LayoutConfig",
    # Application
    "Twm",
    # Event topics
    "topics",
]
