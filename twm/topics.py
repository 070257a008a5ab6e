"""
Event Topics for twm

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>

Notification topics are published by the core after state changed.
Command topics (cmd.*) are published by the outer layers (hotkeys, RPC)
and handled by Twm.
"""

# Tile events
TILE_ADDED = "tile.added"
"""Published when a tile is added to a workspace. Params: workspace_id, tile_id"""

TILE_REMOVED = "tile.removed"
"""Published when a tile is removed from a workspace. Params: workspace_id, tile_id"""

TILE_FOCUSED = "tile.focused"
"""Published when the focused tile changes. Params: workspace_id, tile_id (or None)"""

# Workspace events
WORKSPACE_CREATED = "workspace.created"
"""Published when the manager takes ownership of a workspace. Params: workspace_id"""

WORKSPACE_REMOVED = "workspace.removed"
"""Published when the manager drops a workspace. Params: workspace_id"""

WORKSPACE_SWITCHED = "workspace.switched"
"""Published when the focused workspace changes. Params: current_workspace, old_workspace"""

WORKSPACE_LAID_OUT = "workspace.laid_out"
"""Published after a layout pass recomputed tile bboxes. Params: workspace_id"""

LAYOUT_CHANGED = "layout.changed"
"""Published when a workspace gets a new layout. Params: workspace_id, layout_name"""

# Lifecycle events
LIFECYCLE_INIT = "lifecycle.init"
"""Published once twm finished initializing."""

LIFECYCLE_SHUTDOWN = "lifecycle.shutdown"
"""Published once twm was torn down."""

# Command events (imperative - tell twm to do something)
CMD_NEW_WORKSPACE = "cmd.new_workspace"
"""Command: Create a workspace on the main display and focus it."""

CMD_MANAGE_WINDOW = "cmd.manage_window"
"""Command: Tile a window in the focused workspace. Requires handle parameter."""

CMD_UNMANAGE_TILE = "cmd.unmanage_tile"
"""Command: Remove a tile from the focused workspace. Requires tile_id parameter."""

CMD_FOCUS_TILE = "cmd.focus_tile"
"""Command: Focus a tile in the focused workspace. Requires tile_id parameter."""

CMD_SWITCH_WORKSPACE = "cmd.switch_workspace"
"""Command: Focus a workspace. Requires workspace_id parameter."""

CMD_SET_SIDE = "cmd.set_side"
"""Command: Change the side of the focused workspace's layout. Requires side parameter."""

CMD_REFRESH = "cmd.refresh"
"""Command: Lay out and render the focused workspace."""
