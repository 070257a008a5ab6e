"""
Unit tests for the workspace manager.
"""

import pytest
from pubsub import pub

from twm import topics
from twm.errors import WorkspaceNotFoundError
from twm.manager import Manager
from twm.workspace import Workspace


@pytest.fixture
def manager(standard_display):
    manager = Manager()
    for workspace_id in range(3):
        manager.add_workspace(Workspace(id=workspace_id, display=standard_display))
    return manager


@pytest.mark.unit
class TestManager:
    """Test workspace ownership and the focus pointer."""

    def test_empty_manager(self):
        manager = Manager()

        assert manager.workspaces_count() == 0
        assert manager.focused_workspace() is None

    def test_add_does_not_focus_by_default(self, manager):
        assert manager.workspaces_count() == 3
        assert manager.focused_workspace() is None

    def test_add_with_focus(self, standard_display):
        manager = Manager()
        manager.add_workspace(Workspace(id=7, display=standard_display), focus=True)

        assert manager.focused_workspace().id == 7

    def test_empty_workspace_can_be_focused(self, manager):
        """An empty workspace is still a workspace."""
        manager.focus_workspace(0)

        assert manager.focused_workspace() is not None
        assert manager.focused_workspace().tiles_count() == 0

    def test_focus_workspace(self, manager):
        manager.focus_workspace(1)

        assert manager.focused_workspace_id == 1
        assert manager.focused_workspace() is manager.workspace_by_id(1)

    def test_focus_missing_workspace(self, manager):
        manager.focus_workspace(1)

        with pytest.raises(WorkspaceNotFoundError):
            manager.focus_workspace(99)
        assert manager.focused_workspace_id == 1

    def test_stale_focus_id(self, manager):
        manager.focused_workspace_id = 42

        assert manager.focused_workspace() is None

    def test_workspace_by_id(self, manager):
        assert manager.workspace_by_id(2).id == 2
        assert manager.workspace_by_id(5) is None

    def test_remove_workspace(self, manager):
        manager.focus_workspace(0)

        removed = manager.remove_workspace(1)

        assert removed.id == 1
        assert manager.workspaces_count() == 2
        assert manager.focused_workspace().id == 0

    def test_remove_focused_workspace_clears_focus(self, manager):
        manager.focus_workspace(2)

        manager.remove_workspace(2)

        assert manager.focused_workspace_id is None
        assert manager.focused_workspace() is None

    def test_remove_missing_workspace(self, manager):
        with pytest.raises(WorkspaceNotFoundError):
            manager.remove_workspace(99)

    def test_to_dict(self, manager):
        manager.focus_workspace(1)
        data = manager.to_dict()

        assert data["focused_workspace_id"] == 1
        assert [ws["id"] for ws in data["workspaces"]] == [0, 1, 2]


@pytest.mark.unit
class TestManagerEvents:
    """Test workspace switch events."""

    def test_switch_events(self, manager):
        switches = []

        def on_switched(current_workspace, old_workspace):
            switches.append((current_workspace, old_workspace))

        pub.subscribe(on_switched, topics.WORKSPACE_SWITCHED)

        manager.focus_workspace(0)
        manager.focus_workspace(2)
        # Focusing the focused workspace again publishes nothing
        manager.focus_workspace(2)
        manager.remove_workspace(2)

        assert switches == [(0, None), (2, 0), (None, 2)]
