"""
Exceptions raised by twm.

Lookups that can legitimately find nothing return None instead of raising;
the classes here are for violated preconditions and for the query surface.
"""


class TwmError(Exception):
    """Base class for all twm errors."""


class InvalidGeometry(TwmError, ValueError):
    """A bounding box or split request is geometrically impossible."""


class TileNotFoundError(TwmError, LookupError):
    """No tile with the requested id exists in the workspace."""

    def __init__(self, tile_id: int):
        super().__init__(f"Failed to find tile with id {tile_id}")
        self.tile_id = tile_id


class WorkspaceNotFoundError(TwmError, LookupError):
    """No workspace with the requested id is managed."""

    def __init__(self, workspace_id: int):
        super().__init__(f"Failed to find workspace with id {workspace_id}")
        self.workspace_id = workspace_id


class UnknownLayoutError(TwmError, LookupError):
    """A layout tag or name has no registered layout class."""


class ConfigError(TwmError, ValueError):
    """A configuration value could not be parsed."""


class RenderError(TwmError):
    """Applying a bounding box to a single window failed."""


class NotAvailableError(TwmError):
    """A query has no value to return (no workspace, no tile, ...)."""
