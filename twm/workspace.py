"""
Workspace

A workspace keeps track of the tiles on one display, the focused tile and
the one active layout responsible for laying the tiles out.
"""

from __future__ import annotations
import copy
import logging
from dataclasses import replace
from typing import Any, Dict, Iterator, List, Optional

from pubsub import pub

from . import topics
from .errors import TileNotFoundError
from .layouts import Layout, LayoutUpdateInfo, SidedLayout, layout_from_dict
from .objects import Display, Tile

log = logging.getLogger(__name__)


class Workspace:
    """A workspace bound to one display.

    Tiles keep insertion order. Tile ids are not checked for uniqueness,
    keeping them unique is up to the caller.
    """

    def __init__(
        self,
        id: int = 0,
        display: Optional[Display] = None,
        layout: Optional[Layout] = None,
    ):
        self.id = id
        self.display = display if display is not None else Display()
        self.layout: Layout = layout if layout is not None else SidedLayout()
        self.focused_tile_id: Optional[int] = None
        self._tiles: List[Tile] = []

    def apply_layout(self) -> bool:
        """
        Lay out all tiles inside the workspace.

        Delegates to the active layout, which only recomputes while dirty.

        Returns:
            True if tile bboxes were recomputed
        """
        update_info = LayoutUpdateInfo(
            tiles=self._tiles,
            workspace_bbox=self.display.bbox,
            focused_tile_id=self.focused_tile_id,
        )
        changed = self.layout.layout(update_info)
        if changed:
            pub.sendMessage(topics.WORKSPACE_LAID_OUT, workspace_id=self.id)
        return changed

    def set_layout(self, layout: Layout):
        """Install a new active layout and mark it dirty."""
        self.layout = layout
        layout.invalidate()
        log.info("Workspace %d layout -> %s", self.id, layout.name)
        pub.sendMessage(
            topics.LAYOUT_CHANGED, workspace_id=self.id, layout_name=layout.name
        )

    def add_tile(self, tile: Tile):
        """Add a new tile to the workspace and focus it.

        Does not check whether a tile with the same id is already present.
        """
        self._tiles.append(tile)
        self.focused_tile_id = tile.id
        self.layout.invalidate()
        log.debug("Workspace %d +%s", self.id, tile)

        pub.sendMessage(topics.TILE_ADDED, workspace_id=self.id, tile_id=tile.id)
        pub.sendMessage(topics.TILE_FOCUSED, workspace_id=self.id, tile_id=tile.id)

    def remove_tile(self, tile: Tile) -> Tile:
        """Remove a tile from the workspace.

        If the tile was focused, ``focused_tile_id`` is set to None.
        """
        return self.remove_tile_by_id(tile.id)

    def remove_tile_by_id(self, tile_id: int) -> Tile:
        """
        Remove the first tile with the given id.

        If the tile was focused, ``focused_tile_id`` is set to None. No other
        tile gets focused.

        Returns:
            The removed tile

        Raises:
            TileNotFoundError: If no tile has that id.
        """
        for index, tile in enumerate(self._tiles):
            if tile.id == tile_id:
                break
        else:
            raise TileNotFoundError(tile_id)

        del self._tiles[index]
        was_focused = self.focused_tile_id == tile_id
        if was_focused:
            self.focused_tile_id = None
        self.layout.invalidate()
        log.debug("Workspace %d -%s", self.id, tile)

        pub.sendMessage(topics.TILE_REMOVED, workspace_id=self.id, tile_id=tile_id)
        if was_focused:
            pub.sendMessage(topics.TILE_FOCUSED, workspace_id=self.id, tile_id=None)
        return tile

    def focus_tile(self, tile_id: int):
        """
        Focus the tile with the given id.

        Raises:
            TileNotFoundError: If no tile has that id.
        """
        if self.tile_by_id(tile_id) is None:
            raise TileNotFoundError(tile_id)
        if self.focused_tile_id == tile_id:
            return

        self.focused_tile_id = tile_id
        if self.layout.depends_on_focus():
            self.layout.invalidate()
        pub.sendMessage(topics.TILE_FOCUSED, workspace_id=self.id, tile_id=tile_id)

    def tiles(self) -> List[Tile]:
        """Return the tiles in insertion order (a copy of the list)."""
        return list(self._tiles)

    def tiles_count(self) -> int:
        return len(self._tiles)

    def focused_tile(self) -> Optional[Tile]:
        """Return the focused tile, or None if no tile is focused."""
        if self.focused_tile_id is None:
            return None
        return self.tile_by_id(self.focused_tile_id)

    def tile_by_id(self, tile_id: int) -> Optional[Tile]:
        """Return the tile with the given id, or None."""
        for tile in self._tiles:
            if tile.id == tile_id:
                return tile
        return None

    def copy(self) -> Workspace:
        """
        Return a snapshot of the workspace.

        Tiles are new records, so their bboxes can change independently.
        Windows are frozen and shared, so their handles still refer to the
        real OS windows.
        """
        snapshot = copy.copy(self)
        snapshot.layout = copy.copy(self.layout)
        snapshot._tiles = [replace(tile) for tile in self._tiles]
        return snapshot

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "display": self.display.to_dict(),
            "tiles": [tile.to_dict() for tile in self._tiles],
            "layout": self.layout.to_dict(),
            "focused_tile_id": self.focused_tile_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Workspace:
        workspace = cls(
            id=int(data.get("id", 0)),
            display=Display.from_dict(data.get("display", {})),
        )
        if "layout" in data:
            workspace.layout = layout_from_dict(data["layout"])
        workspace._tiles = [Tile.from_dict(t) for t in data.get("tiles", [])]
        workspace.focused_tile_id = data.get("focused_tile_id")
        return workspace

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __repr__(self) -> str:
        return (
            f"Workspace(id={self.id}, tiles={len(self._tiles)}, "
            f"layout={self.layout!r}, focused_tile_id={self.focused_tile_id})"
        )
