"""
twm configuration.

Loading and parsing configuration files is left to the application; this
module turns the parsed mapping into typed settings.
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .errors import ConfigError, UnknownLayoutError
from .layouts import Layout, SidedLayout, SidedTilePolicy, create_layout, layout_class
from .util import Direction


def _require_bool(name: str, value: Any):
    # "false" from a hand-written file must not count as true
    if not isinstance(value, bool):
        raise ConfigError(f"{name} must be true or false, got {value!r}")


@dataclass
class KeyEntry:
    """A named key binding, e.g. ``name="new_workspace", value="ctrl+alt+enter"``."""

    name: str = ""
    value: str = ""


@dataclass
class TaskbarConfig:
    """Taskbar settings."""

    # False hides the OS taskbar while twm runs and restores it on shutdown
    show: bool = True

    def __post_init__(self):
        _require_bool("taskbar.show", self.show)


@dataclass
class LayoutConfig:
    """Layout used for new workspaces."""

    name: str = "sided"
    side: Direction = Direction.LEFT
    sided_tile: SidedTilePolicy = SidedTilePolicy.HIGHEST_ID

    def __post_init__(self):
        """Parse string values into enums."""
        try:
            self.side = Direction.parse(self.side)
            self.sided_tile = SidedTilePolicy.parse(self.sided_tile)
            layout_class(self.name)
        except (ValueError, UnknownLayoutError) as e:
            raise ConfigError(str(e)) from e

    def create(self) -> Layout:
        """Create a fresh layout instance from these settings."""
        if layout_class(self.name) is SidedLayout:
            return create_layout(self.name, side=self.side, policy=self.sided_tile)
        return create_layout(self.name)


@dataclass
class Config:
    """twm configuration."""

    keys: List[KeyEntry] = field(default_factory=list)
    taskbar: TaskbarConfig = field(default_factory=TaskbarConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    # Log every event published on the bus
    debug_events: bool = False

    def __post_init__(self):
        _require_bool("debug_events", self.debug_events)

    @property
    def debug_enabled(self) -> bool:
        """Debug event logging, also enabled by the TWM_DEBUG environment variable."""
        return self.debug_events or bool(os.getenv("TWM_DEBUG"))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Config:
        """
        Build a configuration from a parsed mapping (TOML, JSON, ...).

        Missing sections fall back to their defaults.

        Raises:
            ConfigError: If a section or value has the wrong shape.
        """
        data = data or {}
        if not isinstance(data, Mapping):
            raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")

        try:
            keys = [KeyEntry(**entry) for entry in data.get("keys", [])]
            taskbar = TaskbarConfig(**data.get("taskbar", {}))
            layout = LayoutConfig(**data.get("layout", {}))
        except TypeError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

        return cls(
            keys=keys,
            taskbar=taskbar,
            layout=layout,
            debug_events=data.get("debug_events", False),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keys": [{"name": k.name, "value": k.value} for k in self.keys],
            "taskbar": {"show": self.taskbar.show},
            "layout": {
                "name": self.layout.name,
                "side": self.layout.side.value,
                "sided_tile": self.layout.sided_tile.value,
            },
            "debug_events": self.debug_events,
        }
