"""
Sided Layout

Half of the workspace goes to one tile, the sided tile. The rest of the
space is shared equally between the remaining tiles.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, TYPE_CHECKING

from .layout_base import Layout, LayoutMeta, LayoutUpdateInfo, register_layout
from ..bbox import BBox, SplitDirection
from ..util import Direction

if TYPE_CHECKING:
    from ..objects import Tile

log = logging.getLogger(__name__)


class SidedTilePolicy(Enum):
    """How the tile occupying the sided region is chosen."""

    HIGHEST_ID = "highest_id"  # Newest tile, regardless of focus
    FOCUSED = "focused"  # Focused tile, highest id when nothing is focused

    @classmethod
    def parse(cls, value) -> "SidedTilePolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Invalid sided tile policy: {value!r}") from None


def select_sided_tile(
    tiles: List["Tile"],
    policy: SidedTilePolicy = SidedTilePolicy.HIGHEST_ID,
    focused_tile_id: Optional[int] = None,
) -> "Tile":
    """Pick the tile that takes the sided region. ``tiles`` must not be empty."""
    if policy == SidedTilePolicy.FOCUSED and focused_tile_id is not None:
        for tile in tiles:
            if tile.id == focused_tile_id:
                return tile
    return max(tiles, key=lambda t: t.id)


@register_layout("sided")
class SidedLayout(Layout):
    """
    Sided layout.

    ``side=LEFT`` with 3 tiles (ids 0, 1, 2):
        +----------+------+
        |          |  0   |
        |    2     +------+
        |          |  1   |
        +----------+------+
    """

    def __init__(
        self,
        side: Direction = Direction.LEFT,
        policy: SidedTilePolicy = SidedTilePolicy.HIGHEST_ID,
    ):
        super().__init__()
        self._side = Direction.parse(side)
        self._policy = SidedTilePolicy.parse(policy)

    @property
    def side(self) -> Direction:
        """The side the sided tile is rendered to."""
        return self._side

    @side.setter
    def side(self, value: Direction):
        value = Direction.parse(value)
        if value != self._side:
            self._side = value
            self.invalidate()

    @property
    def policy(self) -> SidedTilePolicy:
        return self._policy

    @policy.setter
    def policy(self, value: SidedTilePolicy):
        value = SidedTilePolicy.parse(value)
        if value != self._policy:
            self._policy = value
            self.invalidate()

    def metadata(self) -> LayoutMeta:
        return LayoutMeta(name="Sided Layout")

    def depends_on_focus(self) -> bool:
        return self._policy == SidedTilePolicy.FOCUSED

    def bbox_for_side(self, boundary: BBox) -> Tuple[BBox, BBox]:
        """Return the ``(sided, rest)`` halves of ``boundary``."""
        if self._side == Direction.LEFT:
            left, right = boundary.vertical_split()
            return left, right
        if self._side == Direction.RIGHT:
            left, right = boundary.vertical_split()
            return right, left
        if self._side == Direction.UP:
            upper, lower = boundary.horizontal_split()
            return upper, lower
        upper, lower = boundary.horizontal_split()
        return lower, upper

    def split_direction(self) -> SplitDirection:
        """Direction used to split up the rest region."""
        if self._side in (Direction.LEFT, Direction.RIGHT):
            return SplitDirection.HORIZONTAL
        return SplitDirection.VERTICAL

    def calculate(self, update_info: LayoutUpdateInfo) -> None:
        tiles = update_info.tiles
        side_bbox, rest_bbox = self.bbox_for_side(update_info.workspace_bbox)
        log.debug("side=%s rest=%s", side_bbox, rest_bbox)

        sided = select_sided_tile(tiles, self._policy, update_info.focused_tile_id)
        child_bboxes = BBox.equal_split(
            rest_bbox, len(tiles) - 1, self.split_direction()
        )

        children = iter(child_bboxes)
        for tile in tiles:
            if tile is sided:
                tile.bbox = side_bbox
            else:
                tile.bbox = next(children)
            log.debug("%s -> %s", tile, tile.bbox)

    def params(self) -> Dict[str, Any]:
        return {"side": self._side.value, "policy": self._policy.value}
