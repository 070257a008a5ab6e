"""
Model-independent enums and helpers.
"""

from enum import Enum


class Direction(Enum):
    """A general direction."""

    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"

    @classmethod
    def parse(cls, value) -> "Direction":
        """Parse a direction from its value or name, case-insensitively."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for direction in cls:
            if text in (direction.value.lower(), direction.name.lower()):
                return direction
        raise ValueError(f"Invalid direction: {value!r}")
