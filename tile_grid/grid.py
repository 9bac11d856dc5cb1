"""Grid builder and row-major index helpers.

A grid is implicit: a flat sequence of :class:`~tile_grid.tile.Tile` of length
``columns * rows`` ordered row-major, with the dimensions passed alongside.
:func:`build_neighbors` annotates every tile in place with references to its
eight surrounding tiles.
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence, Tuple
from pyrsistent import pmap

from tile_grid.directions import DIRECTION_OFFSETS, SEARCH_ORDER
from tile_grid.tile import Tile
from tile_grid.types import TileID

logger = logging.getLogger(__name__)


class InvalidGridShape(ValueError):
    """Tile sequence does not match the declared grid dimensions."""


def tile_index(row: int, col: int, columns: int) -> int:
    """Return the row-major index of ``(row, col)``."""
    return row * columns + col


def grid_position(tile_id: TileID, columns: int) -> Tuple[int, int]:
    """Inverse of :func:`tile_index`: ``(row, col)`` of a tile id."""
    return divmod(tile_id, columns)


def tile_at(tiles: Sequence[Tile], row: int, col: int, columns: int) -> Tile:
    """Return the tile at ``(row, col)``, raising ``IndexError`` off-grid."""
    rows = len(tiles) // columns if columns else 0
    if not (0 <= row < rows and 0 <= col < columns):
        raise IndexError(f"Out of bounds: {(row, col)} for grid {columns}x{rows}")
    return tiles[tile_index(row, col, columns)]


def make_tiles(
    columns: int, rows: int, attributes: Optional[Mapping[TileID, Mapping[str, Any]]] = None
) -> List[Tile]:
    """Create a fresh row-major tile sequence with ids ``0 .. columns*rows-1``.

    ``attributes`` optionally maps tile ids to their payload.
    """
    if columns < 0 or rows < 0:
        raise InvalidGridShape(f"Grid dimensions must be non-negative, got {columns}x{rows}")
    attributes = attributes or {}
    return [
        Tile(id=tid, attributes=pmap(attributes.get(tid, {})))
        for tid in range(columns * rows)
    ]


def build_neighbors(tiles: Sequence[Tile], columns: int, rows: int) -> None:
    """Populate the eight neighbor slots of every tile in place.

    Each slot becomes a one-element list referencing the tile at the offset
    position when that position lies inside ``[0, rows) x [0, columns)``, and an
    empty list otherwise. Edges never wrap. The result depends only on tile
    positions, so calling it again with the same arguments rewrites identical
    slots.

    Arguments:
        tiles: Row-major tile sequence; the sole owner of the tiles.
        columns: Grid width in tiles.
        rows: Grid height in tiles.

    Raises:
        InvalidGridShape: If a dimension is negative or ``len(tiles)`` differs
            from ``columns * rows``.
    """
    if columns < 0 or rows < 0:
        raise InvalidGridShape(f"Grid dimensions must be non-negative, got {columns}x{rows}")
    if len(tiles) != columns * rows:
        raise InvalidGridShape(
            f"Expected {columns * rows} tiles for grid {columns}x{rows}, got {len(tiles)}"
        )

    for row in range(rows):
        for col in range(columns):
            tile = tiles[tile_index(row, col, columns)]
            for direction in SEARCH_ORDER:
                d_row, d_col = DIRECTION_OFFSETS[direction]
                n_row, n_col = row + d_row, col + d_col
                if 0 <= n_row < rows and 0 <= n_col < columns:
                    slot = [tiles[tile_index(n_row, n_col, columns)]]
                else:
                    slot = []
                setattr(tile, direction.value, slot)

    logger.debug("Built neighbor graph for %d tiles (%dx%d)", len(tiles), columns, rows)
