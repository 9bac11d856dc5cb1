"""Views of the neighbor graph for display and downstream tools.

``neighbor_index_array`` flattens the graph into a NumPy table that can be
handed across process or language boundaries without the cyclic tile objects.
"""

from typing import Dict, List, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from tile_grid.directions import DIRECTION_LABELS, SEARCH_ORDER
from tile_grid.tile import Tile
from tile_grid.types import Direction

# Marks an empty slot in the index table.
NO_NEIGHBOR = -1

IndexArray = npt.NDArray[np.int64]


def neighbor_index_array(tiles: Sequence[Tile]) -> IndexArray:
    """Return an ``(n, 8)`` table of neighbor ids.

    Row ``i`` describes ``tiles[i]``; columns follow ``SEARCH_ORDER`` and hold
    ``NO_NEIGHBOR`` where the slot is empty.
    """
    table: IndexArray = np.full((len(tiles), len(SEARCH_ORDER)), NO_NEIGHBOR, dtype=np.int64)
    for i, tile in enumerate(tiles):
        for j, direction in enumerate(SEARCH_ORDER):
            slot = tile.neighbors(direction)
            if slot:
                table[i, j] = slot[0].id
    return table


def neighbor_counts(tile: Tile) -> Dict[Direction, int]:
    """Number of neighbors held in each slot (0 or 1)."""
    return {direction: len(tile.neighbors(direction)) for direction in SEARCH_ORDER}


def labelled_neighbors(tile: Tile) -> List[Tuple[str, Tile]]:
    """``(label, neighbor)`` pairs in ``SEARCH_ORDER``, skipping empty slots."""
    return [
        (DIRECTION_LABELS[direction], neighbor)
        for direction in SEARCH_ORDER
        for neighbor in tile.neighbors(direction)
    ]
