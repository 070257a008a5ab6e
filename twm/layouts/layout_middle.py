"""
Middle Layout

The sided tile centered, remaining tiles stacked on both sides.
"""

from __future__ import annotations
import logging
from dataclasses import replace
from typing import Tuple

from .layout_base import Layout, LayoutMeta, LayoutUpdateInfo, register_layout
from .layout_sided import select_sided_tile
from ..bbox import BBox, SplitDirection

log = logging.getLogger(__name__)


@register_layout("middle")
class MiddleLayout(Layout):
    """
    Middle layout.

    The middle column is half the workspace wide. Remaining tiles fill the
    left column first (``count // 2`` tiles), then the right column.

        +----+----------+----+
        |    |          | 1  |
        | 0  |    3     +----+
        |    |          | 2  |
        +----+----------+----+
    """

    def metadata(self) -> LayoutMeta:
        return LayoutMeta(name="Middle Layout")

    def columns(self, boundary: BBox) -> Tuple[BBox, BBox, BBox]:
        """Return the ``(left, middle, right)`` columns of ``boundary``."""
        middle_width = boundary.width // 2
        left_width = (boundary.width - middle_width) // 2
        right_width = boundary.width - middle_width - left_width

        left = replace(boundary, width=left_width)
        middle = replace(boundary, x=boundary.x + left_width, width=middle_width)
        right = replace(boundary, x=middle.right, width=right_width)
        return left, middle, right

    def calculate(self, update_info: LayoutUpdateInfo) -> None:
        tiles = update_info.tiles
        left, middle, right = self.columns(update_info.workspace_bbox)

        sided = select_sided_tile(tiles)
        stack = [t for t in tiles if t is not sided]
        left_n = len(stack) // 2

        sided.bbox = middle
        bboxes = BBox.equal_split(left, left_n, SplitDirection.HORIZONTAL)
        bboxes += BBox.equal_split(right, len(stack) - left_n, SplitDirection.HORIZONTAL)
        for tile, bbox in zip(stack, bboxes):
            tile.bbox = bbox

        log.debug("middle=%s, %d left, %d right", middle, left_n, len(stack) - left_n)
