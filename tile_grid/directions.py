"""Direction tables shared by the grid builder and the search.

``SEARCH_ORDER`` is the canonical ordered list of directions: the builder
fills slots in this order and the search enqueues neighbors in this order,
which fixes tie-breaking between equally distant matches.
"""

from typing import Dict, List, Tuple

from tile_grid.types import Direction

# (row_offset, col_offset); row 0 is the top of the image.
DIRECTION_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
    Direction.UP_LEFT: (-1, -1),
    Direction.UP_RIGHT: (-1, 1),
    Direction.DOWN_LEFT: (1, -1),
    Direction.DOWN_RIGHT: (1, 1),
}

SEARCH_ORDER: List[Direction] = [
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
    Direction.UP_LEFT,
    Direction.UP_RIGHT,
    Direction.DOWN_LEFT,
    Direction.DOWN_RIGHT,
]

OPPOSITE: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP_LEFT: Direction.DOWN_RIGHT,
    Direction.DOWN_RIGHT: Direction.UP_LEFT,
    Direction.UP_RIGHT: Direction.DOWN_LEFT,
    Direction.DOWN_LEFT: Direction.UP_RIGHT,
}

DIRECTION_LABELS: Dict[Direction, str] = {
    Direction.UP: "Up",
    Direction.DOWN: "Down",
    Direction.LEFT: "Left",
    Direction.RIGHT: "Right",
    Direction.UP_LEFT: "Up-Left",
    Direction.UP_RIGHT: "Up-Right",
    Direction.DOWN_LEFT: "Down-Left",
    Direction.DOWN_RIGHT: "Down-Right",
}
