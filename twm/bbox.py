"""
Bounding Boxes

Bounding boxes hold the position and size of tiles inside the tiling window
manager, together with the split algebra that layouts are built from.

All splits push the rounding remainder of an odd pixel count onto the
last (or second) part, so the parts always cover the original box exactly.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, NamedTuple

from .errors import InvalidGeometry

log = logging.getLogger(__name__)


class SplitDirection(Enum):
    """The direction a split can occur in."""

    HORIZONTAL = "horizontal"  # Parts stacked top-to-bottom
    VERTICAL = "vertical"  # Parts arranged left-to-right


@dataclass(frozen=True)
class BBox:
    """An axis-aligned rectangle in pixel space.

    Width and height are expected to be non-negative, but the default
    constructor does not enforce it. Use :meth:`checked` for validation.
    """

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def checked(cls, x: int, y: int, width: int, height: int) -> BBox:
        """Create a bounding box, rejecting negative dimensions.

        Raises:
            InvalidGeometry: If width or height is negative.
        """
        if width < 0 or height < 0:
            raise InvalidGeometry(
                f"Bounding box dimensions must be non-negative, got {width}x{height}"
            )
        return cls(x, y, width, height)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @staticmethod
    def equal_split(
        root: BBox,
        number_of_bboxes: int,
        split_direction: SplitDirection = SplitDirection.HORIZONTAL,
        strict: bool = False,
    ) -> List[BBox]:
        """
        Equally split the surface of a bounding box.

        Boxes 0..n-2 get ``size // n`` pixels along the split axis, the last
        box gets whatever is left so the result covers ``root`` exactly.

        Args:
            root: The bounding box that gets split up
            number_of_bboxes: How many boxes to split ``root`` into
            split_direction: HORIZONTAL stacks the boxes vertically,
                VERTICAL places them side by side
            strict: Reject impossible requests instead of computing them

        Returns:
            The boxes in order along the split axis. Empty if
            ``number_of_bboxes`` is 0.

        Raises:
            InvalidGeometry: Only in strict mode, when ``number_of_bboxes`` is
                negative, ``root`` has a negative dimension or the split
                dimension is smaller than ``number_of_bboxes``.
        """
        if strict:
            _validate_split(root, number_of_bboxes, split_direction)

        if number_of_bboxes <= 0:
            return []

        horizontal = split_direction == SplitDirection.HORIZONTAL
        size = root.height if horizontal else root.width
        per_part = size // number_of_bboxes
        last = number_of_bboxes - 1

        bboxes = []
        for i in range(number_of_bboxes):
            offset = i * per_part
            part = per_part if i < last else size - last * per_part
            if horizontal:
                bboxes.append(replace(root, y=root.y + offset, height=part))
            else:
                bboxes.append(replace(root, x=root.x + offset, width=part))

        log.debug(
            "equal_split %s into %d %s parts",
            root,
            number_of_bboxes,
            split_direction.value,
        )
        return bboxes

    def horizontal_split(self) -> HorizontalSplit:
        """Split into an upper and a lower half.

        The lower half absorbs the extra pixel of an odd height.
        """
        upper = replace(self, height=self.height // 2)
        lower = replace(
            self, y=self.y + upper.height, height=self.height - upper.height
        )
        return HorizontalSplit(upper, lower)

    def vertical_split(self) -> VerticalSplit:
        """Split into a left and a right half.

        The right half absorbs the extra pixel of an odd width.
        """
        left = replace(self, width=self.width // 2)
        right = replace(self, x=self.x + left.width, width=self.width - left.width)
        return VerticalSplit(left, right)

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: Dict[str, int]) -> BBox:
        return cls(
            int(data.get("x", 0)),
            int(data.get("y", 0)),
            int(data.get("width", 0)),
            int(data.get("height", 0)),
        )

    def __str__(self) -> str:
        return f"{self.width}x{self.height}@({self.x},{self.y})"


class HorizontalSplit(NamedTuple):
    """The result of a horizontal split."""

    upper: BBox
    lower: BBox


class VerticalSplit(NamedTuple):
    """The result of a vertical split."""

    left: BBox
    right: BBox


def _validate_split(root: BBox, number_of_bboxes: int, direction: SplitDirection):
    if number_of_bboxes < 0:
        raise InvalidGeometry(f"Cannot split into {number_of_bboxes} parts")
    if root.width < 0 or root.height < 0:
        raise InvalidGeometry(f"Cannot split bounding box with negative size {root}")
    size = root.height if direction == SplitDirection.HORIZONTAL else root.width
    if size < number_of_bboxes:
        raise InvalidGeometry(
            f"Cannot split {size} pixels into {number_of_bboxes} parts"
        )
