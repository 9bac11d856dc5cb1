# tests/utils/test_export.py

import numpy as np

from tile_grid.directions import SEARCH_ORDER
from tile_grid.grid import make_tiles
from tile_grid.types import Direction
from tile_grid.utils.export import (
    NO_NEIGHBOR,
    labelled_neighbors,
    neighbor_counts,
    neighbor_index_array,
)
from tests.test_utils import make_connected_grid


def test_neighbor_index_array_shape_and_rows() -> None:
    tiles = make_connected_grid(3, 3)
    table = neighbor_index_array(tiles)
    assert table.shape == (9, 8)
    assert table.dtype == np.int64
    # up, down, left, right, up-left, up-right, down-left, down-right
    assert table[4].tolist() == [1, 7, 3, 5, 0, 2, 6, 8]
    assert table[0].tolist() == [-1, 3, -1, 1, -1, -1, -1, 4]
    assert table[8].tolist() == [5, -1, 7, -1, 4, -1, -1, -1]


def test_neighbor_index_array_unconnected() -> None:
    table = neighbor_index_array(make_tiles(2, 2))
    assert (table == NO_NEIGHBOR).all()


def test_neighbor_index_array_empty() -> None:
    assert neighbor_index_array([]).shape == (0, 8)


def test_neighbor_counts() -> None:
    tiles = make_connected_grid(2, 2)
    counts = neighbor_counts(tiles[0])
    assert list(counts) == SEARCH_ORDER
    assert counts[Direction.RIGHT] == 1
    assert counts[Direction.DOWN] == 1
    assert counts[Direction.DOWN_RIGHT] == 1
    assert counts[Direction.UP] == 0
    assert sum(counts.values()) == 3


def test_labelled_neighbors() -> None:
    tiles = make_connected_grid(2, 2)
    pairs = [(label, tile.id) for label, tile in labelled_neighbors(tiles[3])]
    assert pairs == [("Up", 1), ("Left", 2), ("Up-Left", 0)]
