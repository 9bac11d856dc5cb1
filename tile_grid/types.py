"""Common type aliases and enumerations.

``Predicate`` is the central extension point of the search: callers supply
any boolean test over a tile and the traversal decides *where* to look.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


# Forward declaration for Predicate typing to avoid circular imports:
if TYPE_CHECKING:
    from tile_grid.tile import Tile

TileID = int

Predicate = Callable[["Tile"], bool]


class Direction(StrEnum):
    """Named neighbor slots of a tile.

    Member values double as the slot attribute names on
    :class:`tile_grid.tile.Tile` (``Direction.UP_LEFT == "up_left"``).
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    UP_LEFT = auto()
    UP_RIGHT = auto()
    DOWN_LEFT = auto()
    DOWN_RIGHT = auto()
