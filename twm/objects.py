"""
Managed Objects

Plain records for the things twm arranges: windows handed over by the
platform, tiles placing them inside a workspace, and displays.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict

from .bbox import BBox


@dataclass(frozen=True)
class Window:
    """An OS-level window before any layout was applied.

    ``handle`` is opaque to twm; only the platform and renderer interpret it.
    """

    id: int = 0
    handle: Any = 0
    original_bbox: BBox = field(default_factory=BBox)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "handle": self.handle,
            "original_bbox": self.original_bbox.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Window:
        return cls(
            id=int(data.get("id", 0)),
            handle=data.get("handle", 0),
            original_bbox=BBox.from_dict(data.get("original_bbox", {})),
        )


@dataclass
class Tile:
    """A window as placed inside a workspace.

    Tiles do not keep track of already assigned ids. Keeping ids unique
    within a workspace is up to the caller.
    """

    id: int = 0
    bbox: BBox = field(default_factory=BBox)
    window: Window = field(default_factory=Window)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "bbox": self.bbox.to_dict(),
            "window": self.window.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Tile:
        return cls(
            id=int(data.get("id", 0)),
            bbox=BBox.from_dict(data.get("bbox", {})),
            window=Window.from_dict(data.get("window", {})),
        )

    def __str__(self) -> str:
        return f"Tile[id={self.id},handle={self.window.handle}]"


@dataclass(frozen=True)
class Display:
    """A monitor's usable area."""

    id: int = 0
    bbox: BBox = field(default_factory=BBox)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "bbox": self.bbox.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Display:
        return cls(id=int(data.get("id", 0)), bbox=BBox.from_dict(data.get("bbox", {})))
