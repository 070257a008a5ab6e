"""
Workspace Manager

The Manager owns all workspaces and keeps track of the focused one.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from pubsub import pub

from . import topics
from .errors import WorkspaceNotFoundError
from .workspace import Workspace

log = logging.getLogger(__name__)


class Manager:
    """Manages workspaces and the focus pointer.

    Not thread-safe by itself; Twm serializes access with a reader/writer
    lock.
    """

    def __init__(self, workspaces: Optional[List[Workspace]] = None):
        self.focused_workspace_id: Optional[int] = None
        self.workspaces: List[Workspace] = list(workspaces) if workspaces else []

    def focused_workspace(self) -> Optional[Workspace]:
        """
        Return the focused workspace.

        Returns:
            The workspace, or None if no workspace is focused or the focused
            id no longer matches a managed workspace
        """
        if self.focused_workspace_id is None:
            return None
        return self.workspace_by_id(self.focused_workspace_id)

    def workspace_by_id(self, workspace_id: int) -> Optional[Workspace]:
        for workspace in self.workspaces:
            if workspace.id == workspace_id:
                return workspace
        return None

    def workspaces_count(self) -> int:
        return len(self.workspaces)

    def add_workspace(self, workspace: Workspace, focus: bool = False):
        """Take ownership of a workspace, optionally focusing it."""
        self.workspaces.append(workspace)
        log.info("Workspace %d added on display %d", workspace.id, workspace.display.id)
        pub.sendMessage(topics.WORKSPACE_CREATED, workspace_id=workspace.id)
        if focus:
            self.focus_workspace(workspace.id)

    def remove_workspace(self, workspace_id: int) -> Workspace:
        """
        Drop a workspace and its tiles.

        Clears the focus if the focused workspace is removed.

        Raises:
            WorkspaceNotFoundError: If no workspace has that id.
        """
        workspace = self.workspace_by_id(workspace_id)
        if workspace is None:
            raise WorkspaceNotFoundError(workspace_id)

        self.workspaces.remove(workspace)
        log.info("Workspace %d removed", workspace_id)
        pub.sendMessage(topics.WORKSPACE_REMOVED, workspace_id=workspace_id)

        if self.focused_workspace_id == workspace_id:
            self.focused_workspace_id = None
            pub.sendMessage(
                topics.WORKSPACE_SWITCHED,
                current_workspace=None,
                old_workspace=workspace_id,
            )
        return workspace

    def focus_workspace(self, workspace_id: int):
        """
        Focus a workspace.

        Raises:
            WorkspaceNotFoundError: If no workspace has that id.
        """
        if self.workspace_by_id(workspace_id) is None:
            raise WorkspaceNotFoundError(workspace_id)

        old_workspace = self.focused_workspace_id
        if old_workspace == workspace_id:
            return
        self.focused_workspace_id = workspace_id
        pub.sendMessage(
            topics.WORKSPACE_SWITCHED,
            current_workspace=workspace_id,
            old_workspace=old_workspace,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "focused_workspace_id": self.focused_workspace_id,
            "workspaces": [ws.to_dict() for ws in self.workspaces],
        }
