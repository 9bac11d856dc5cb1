"""Tile record.

A :class:`Tile` is one cell of a partitioned image. Its identity is the
row-major index assigned when the grid is created; the attribute payload is an
immutable ``pyrsistent.PMap`` that the core never inspects, only hands to
caller predicates.

Each of the eight neighbor slots is a list holding zero or one back-reference
to another tile of the same sequence. An empty list marks a grid boundary, so
consumers iterate slots uniformly without ``None`` checks. Slots are filled by
:func:`tile_grid.grid.build_neighbors`.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional
from pyrsistent import PMap, pmap

from tile_grid.directions import SEARCH_ORDER
from tile_grid.types import Direction, TileID


def _slot() -> Any:
    return field(default_factory=list, compare=False, repr=False)


@dataclass(unsafe_hash=True)
class Tile:
    """Grid cell with directional neighbor slots.

    Equality and hashing use ``id`` only. Slots are left out of ``repr``
    because neighbor references form a cyclic graph.

    Attributes:
        id (TileID): Row-major index (``row * columns + column``).
        attributes (PMap[str, Any]): Opaque payload (image crop, description, ...).
        up, down, left, right (List[Tile]): Orthogonal neighbor slots.
        up_left, up_right, down_left, down_right (List[Tile]): Diagonal neighbor slots.
    """

    id: TileID
    attributes: PMap = field(default_factory=pmap, compare=False)

    up: List["Tile"] = _slot()
    down: List["Tile"] = _slot()
    left: List["Tile"] = _slot()
    right: List["Tile"] = _slot()

    up_left: List["Tile"] = _slot()
    up_right: List["Tile"] = _slot()
    down_left: List["Tile"] = _slot()
    down_right: List["Tile"] = _slot()

    def neighbors(self, direction: Direction) -> List["Tile"]:
        """Return the slot for ``direction`` (empty at a boundary)."""
        return getattr(self, direction.value)

    def iter_neighbors(self) -> Iterator["Tile"]:
        """Yield every present neighbor in ``SEARCH_ORDER``."""
        for direction in SEARCH_ORDER:
            yield from self.neighbors(direction)

    @property
    def image(self) -> Optional[Any]:
        return self.attributes.get("image")

    @property
    def description(self) -> Optional[str]:
        return self.attributes.get("description")


def make_tile(tile_id: TileID, **attributes: Any) -> Tile:
    """Create an unconnected tile carrying ``attributes``."""
    return Tile(id=tile_id, attributes=pmap(attributes))
