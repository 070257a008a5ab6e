"""
twm application shell.

Twm owns the one Manager of the process, guards it with a reader/writer
lock, wires the platform and renderer collaborators and exposes the
read-only query surface used by the RPC layer.
"""

from __future__ import annotations
from dataclasses import replace
import itertools
import logging
from typing import Any, Optional

from pubsub import pub

from . import topics
from .config import Config
from .errors import NotAvailableError
from .layouts import LayoutMeta, SidedLayout
from .lock import RWLock
from .manager import Manager
from .objects import Display, Tile
from .platform import Platform, Renderer
from .util import Direction
from .workspace import Workspace

log = logging.getLogger(__name__)

PROTOCOL_VERSION = "1.0"


class Twm:
    """
    The tiling window manager.

    Architecture:
    1. Queries take the read side of ``lock``, mutations the write side
    2. Command topics (topics.CMD_*) published by the hotkey path are
       handled here
    3. ``init()`` once at startup, ``shutdown()`` once at teardown

    Bus listeners run synchronously while the write lock is held, so they
    must not call back into Twm.
    """

    def __init__(
        self,
        platform: Platform,
        renderer: Optional[Renderer] = None,
        config: Optional[Config] = None,
    ):
        self.config = config or Config()
        self.platform = platform
        self.renderer = renderer
        self.manager = Manager()
        self.lock = RWLock()

        self._workspace_ids = itertools.count()
        self._tile_ids = itertools.count()
        self._display: Optional[Display] = None
        self._initialized = False

        if self.config.debug_enabled:
            pub.subscribe(self.debug_event_logger, pub.ALL_TOPICS)

        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to the command topics."""
        pub.subscribe(self._on_new_workspace, topics.CMD_NEW_WORKSPACE)
        pub.subscribe(self._on_manage_window, topics.CMD_MANAGE_WINDOW)
        pub.subscribe(self._on_unmanage_tile, topics.CMD_UNMANAGE_TILE)
        pub.subscribe(self._on_focus_tile, topics.CMD_FOCUS_TILE)
        pub.subscribe(self._on_switch_workspace, topics.CMD_SWITCH_WORKSPACE)
        pub.subscribe(self._on_set_side, topics.CMD_SET_SIDE)
        pub.subscribe(self._on_refresh, topics.CMD_REFRESH)

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
        log.debug("EVENT: %s | %s", topic.getName(), data_str)

    # Lifecycle

    @property
    def initialized(self) -> bool:
        return self._initialized

    def init(self):
        """Discover the main display, apply taskbar settings, start the renderer."""
        if self._initialized:
            return

        display = self.main_display()
        log.info("Display: %dx%d", display.bbox.width, display.bbox.height)

        if not self.config.taskbar.show:
            self.platform.hide_taskbar()
            log.info("Taskbar hidden")
        if self.renderer is not None:
            self.renderer.init(self.config)

        self._initialized = True
        pub.sendMessage(topics.LIFECYCLE_INIT)

    def shutdown(self):
        """Undo ``init()``. Safe to call more than once."""
        if not self._initialized:
            return
        self._initialized = False

        try:
            if not self.config.taskbar.show:
                self.platform.show_taskbar()
                log.info("Taskbar restored")
        finally:
            if self.renderer is not None:
                self.renderer.shutdown()
        pub.sendMessage(topics.LIFECYCLE_SHUTDOWN)

    def __enter__(self) -> Twm:
        self.init()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()

    def main_display(self) -> Display:
        """Return the main display, discovered once."""
        if self._display is None:
            self._display = self.platform.discover_main_display()
        return self._display

    # Mutations

    def new_ws(self) -> int:
        """Create a workspace on the main display and focus it.

        Returns:
            The id of the new workspace
        """
        display = self.main_display()
        with self.lock.write():
            workspace = Workspace(
                id=next(self._workspace_ids),
                display=display,
                layout=self.config.layout.create(),
            )
            self.manager.add_workspace(workspace, focus=True)
        return workspace.id

    def manage_window(self, handle: Any) -> int:
        """
        Tile a window in the focused workspace and focus it.

        Returns:
            The id of the new tile

        Raises:
            NotAvailableError: If no workspace is focused.
        """
        window = self.platform.window_from_handle(handle)
        with self.lock.write():
            workspace = self._focused_or_raise()
            tile = Tile(id=next(self._tile_ids), bbox=window.original_bbox, window=window)
            workspace.add_tile(tile)
        self.refresh()
        return tile.id

    def unmanage_tile(self, tile_id: int):
        """
        Remove a tile from the focused workspace.

        Raises:
            NotAvailableError: If no workspace is focused.
            TileNotFoundError: If the focused workspace has no such tile.
        """
        with self.lock.write():
            self._focused_or_raise().remove_tile_by_id(tile_id)
        self.refresh()

    def focus_tile(self, tile_id: int):
        with self.lock.write():
            self._focused_or_raise().focus_tile(tile_id)
        self.refresh()

    def switch_workspace(self, workspace_id: int):
        with self.lock.write():
            self.manager.focus_workspace(workspace_id)
            workspace = self.manager.focused_workspace()
            # Windows of the previous workspace were moved, re-apply ours
            workspace.layout.invalidate()
        self.refresh()

    def set_side(self, side: Direction):
        """
        Change the side of the focused workspace's sided layout.

        Raises:
            NotAvailableError: If no workspace is focused or its layout is
                not a SidedLayout.
        """
        with self.lock.write():
            layout = self._focused_or_raise().layout
            if not isinstance(layout, SidedLayout):
                raise NotAvailableError(f"{layout.name} has no side")
            layout.side = Direction.parse(side)
        self.refresh()

    def refresh(self) -> bool:
        """
        Lay out the focused workspace and render it if anything changed.

        Rendering happens on a snapshot, outside the lock. If taking the
        snapshot or rendering raises, the layout is marked dirty again so
        the next refresh retries.

        Returns:
            True if tile bboxes were recomputed
        """
        with self.lock.write():
            workspace = self.manager.focused_workspace()
            if workspace is None:
                return False
            changed = workspace.apply_layout()
            if not changed or self.renderer is None:
                return changed
            try:
                snapshot = workspace.copy()
            except Exception:
                workspace.layout.invalidate()
                raise

        try:
            rendered = self.renderer.render(snapshot)
        except Exception:
            with self.lock.write():
                workspace.layout.invalidate()
            raise
        log.debug("Rendered %d/%d tiles", rendered, snapshot.tiles_count())
        return changed

    # Queries

    def protocol_version(self) -> str:
        return PROTOCOL_VERSION

    def tiles_count(self) -> int:
        with self.lock.read():
            return self._focused_or_raise().tiles_count()

    def tile(self, tile_id: int) -> Tile:
        with self.lock.read():
            tile = self._focused_or_raise().tile_by_id(tile_id)
            if tile is None:
                raise NotAvailableError(f"No tile with id {tile_id}")
            return replace(tile)

    def focused_tile(self) -> Tile:
        with self.lock.read():
            tile = self._focused_or_raise().focused_tile()
            if tile is None:
                raise NotAvailableError("No tile is focused")
            return replace(tile)

    def layout(self) -> LayoutMeta:
        """Return the metadata of the focused workspace's layout."""
        with self.lock.read():
            return self._focused_or_raise().layout.metadata()

    def focused_workspace(self) -> Workspace:
        """Return a snapshot of the focused workspace."""
        with self.lock.read():
            return self._focused_or_raise().copy()

    def workspaces_count(self) -> int:
        with self.lock.read():
            return self.manager.workspaces_count()

    def _focused_or_raise(self) -> Workspace:
        workspace = self.manager.focused_workspace()
        if workspace is None:
            raise NotAvailableError("No workspace is focused")
        return workspace

    # Command event handlers

    def _on_new_workspace(self):
        """Handle CMD_NEW_WORKSPACE command."""
        self.new_ws()

    def _on_manage_window(self, handle):
        """Handle CMD_MANAGE_WINDOW command."""
        self.manage_window(handle)

    def _on_unmanage_tile(self, tile_id):
        """Handle CMD_UNMANAGE_TILE command."""
        self.unmanage_tile(tile_id)

    def _on_focus_tile(self, tile_id):
        """Handle CMD_FOCUS_TILE command."""
        self.focus_tile(tile_id)

    def _on_switch_workspace(self, workspace_id):
        """Handle CMD_SWITCH_WORKSPACE command."""
        self.switch_workspace(workspace_id)

    def _on_set_side(self, side):
        """Handle CMD_SET_SIDE command."""
        self.set_side(side)

    def _on_refresh(self):
        """Handle CMD_REFRESH command."""
        self.refresh()
