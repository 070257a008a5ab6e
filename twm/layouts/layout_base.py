"""
Window Layout Base Classes

Provides the Layout interface, the dirty-tracking every layout shares and
the registry used to rebuild layouts from snapshots and configuration.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type, TYPE_CHECKING

from ..bbox import BBox
from ..errors import UnknownLayoutError

if TYPE_CHECKING:
    from ..objects import Tile

log = logging.getLogger(__name__)

# tag -> layout class
_REGISTRY: Dict[str, Type["Layout"]] = {}
# short config name -> tag
_ALIASES: Dict[str, str] = {}


@dataclass(frozen=True)
class LayoutMeta:
    """Metadata associated with a layout."""

    name: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name}


@dataclass
class LayoutUpdateInfo:
    """Everything a layout needs to update the tiles of a workspace.

    ``tiles`` is the workspace's own list; layouts assign ``tile.bbox`` in
    place and must keep every tile inside ``workspace_bbox``.
    """

    tiles: List["Tile"]
    workspace_bbox: BBox
    focused_tile_id: Optional[int] = None


class Layout(ABC):
    """Abstract base class for layouts.

    A layout starts dirty, so the first pass always computes. ``layout()``
    only does work while dirty; ``invalidate()`` requests the next pass.
    """

    #: Registry tag, set by :func:`register_layout`.
    tag: str = ""

    def __init__(self):
        self._dirty = True

    @abstractmethod
    def metadata(self) -> LayoutMeta:
        """Return the human-readable identity of the layout."""
        pass

    @abstractmethod
    def calculate(self, update_info: LayoutUpdateInfo) -> None:
        """
        Assign a bounding box to every tile.

        Only called with at least one tile.

        Args:
            update_info: Tiles to update and the workspace bounds
        """
        pass

    @property
    def name(self) -> str:
        """Layout name for display."""
        return self.metadata().name

    def invalidate(self):
        """Mark the layout dirty so the next pass recomputes."""
        self._dirty = True

    def is_dirty(self) -> bool:
        return self._dirty

    def depends_on_focus(self) -> bool:
        """Whether a focus change can move tiles in this layout."""
        return False

    def layout(self, update_info: LayoutUpdateInfo) -> bool:
        """
        Lay out tiles by changing their bbox, if the layout is dirty.

        Args:
            update_info: Tiles to update and the workspace bounds

        Returns:
            True if bounding boxes were recomputed
        """
        if not self._dirty:
            return False

        if not update_info.tiles:
            log.debug("%s: no tiles to lay out, marking clean", self.name)
            self._dirty = False
            return False

        log.debug(
            "%s: laying out %d tiles inside %s",
            self.name,
            len(update_info.tiles),
            update_info.workspace_bbox,
        )
        self.calculate(update_info)
        self._dirty = False
        return True

    def params(self) -> Dict[str, Any]:
        """Layout-specific parameters, as plain values, for snapshots."""
        return {}

    @classmethod
    def from_params(cls, **params) -> "Layout":
        """Create a layout from the plain values produced by :meth:`params`."""
        return cls(**params)

    def to_dict(self) -> Dict[str, Any]:
        data = {"layout": self.tag or type(self).__name__, "dirty": self._dirty}
        data.update(self.params())
        return data

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.params().items())
        return f"{type(self).__name__}({params})"


def register_layout(alias: str) -> Callable[[Type[Layout]], Type[Layout]]:
    """Class decorator registering a layout under its class name and ``alias``."""

    def decorator(cls: Type[Layout]) -> Type[Layout]:
        cls.tag = cls.__name__
        _REGISTRY[cls.tag] = cls
        _ALIASES[alias] = cls.tag
        return cls

    return decorator


def registered_layouts() -> List[str]:
    """Return the short names of all registered layouts."""
    return sorted(_ALIASES)


def layout_class(name: str) -> Type[Layout]:
    """Resolve a registry tag or short name to a layout class."""
    tag = _ALIASES.get(name, name)
    try:
        return _REGISTRY[tag]
    except KeyError:
        raise UnknownLayoutError(f"Unknown layout: {name!r}") from None


def create_layout(name: str, **params) -> Layout:
    """Create a layout from its tag or short name."""
    return layout_class(name).from_params(**params)


def layout_from_dict(data: Dict[str, Any]) -> Layout:
    """Rebuild a layout from :meth:`Layout.to_dict` output."""
    params = dict(data)
    try:
        tag = params.pop("layout")
    except KeyError:
        raise UnknownLayoutError("Layout snapshot has no 'layout' tag") from None
    dirty = params.pop("dirty", True)

    layout = create_layout(tag, **params)
    if not dirty:
        layout._dirty = False
    return layout
