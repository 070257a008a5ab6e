"""
Layout System

A layout is responsible for laying out the tiles inside a workspace by
changing the bounding box of each tile.
"""

from .layout_base import (
    Layout,
    LayoutMeta,
    LayoutUpdateInfo,
    register_layout,
    registered_layouts,
    layout_class,
    create_layout,
    layout_from_dict,
)
from .layout_sided import SidedLayout, SidedTilePolicy
from .layout_middle import MiddleLayout

__all__ = [
    # Base classes
    "Layout",
    "LayoutMeta",
    "LayoutUpdateInfo",
    # Registry
    "register_layout",
    "registered_layouts",
    "layout_class",
    "create_layout",
    "layout_from_dict",
    # Layout implementations
    "SidedLayout",
    "SidedTilePolicy",
    "MiddleLayout",
]
