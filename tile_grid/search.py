"""Nearest-match search over the neighbor graph.

Breadth-first traversal from a start tile; the first tile at the smallest
positive hop distance that satisfies the caller's predicate wins. The start
tile itself is never a match. Among equally distant candidates the one
enqueued first wins: neighbors are enqueued in ``SEARCH_ORDER`` as their
parent is dequeued.

NotFound is ``None``. Tiles must have been annotated by
:func:`tile_grid.grid.build_neighbors`; the search only reads slots and
attributes, so concurrent searches over an unchanged grid are safe.
"""

import logging
from collections import deque
from typing import Iterable, Optional, Tuple
from pyrsistent import pmap
from pyrsistent.typing import PMap

from tile_grid.tile import Tile
from tile_grid.types import Predicate, TileID

logger = logging.getLogger(__name__)


def find_nearest_with_distance(
    start: Tile, predicate: Predicate, max_distance: Optional[int] = None
) -> Optional[Tuple[Tile, int]]:
    """Return ``(tile, hops)`` for the nearest match, or ``None``.

    Tiles are marked visited when enqueued, so each is examined at most once.
    ``max_distance`` stops the frontier from growing past that many hops;
    ``None`` searches the whole reachable component. Exceptions raised by
    ``predicate`` propagate and abort the search.
    """
    if max_distance is not None and max_distance < 0:
        raise ValueError(f"max_distance must be non-negative, got {max_distance}")

    queue: deque[Tuple[Tile, int]] = deque([(start, 0)])
    visited: set[TileID] = {start.id}

    while queue:
        tile, dist = queue.popleft()
        if dist > 0 and predicate(tile):
            return tile, dist
        if max_distance is not None and dist >= max_distance:
            continue
        for neighbor in tile.iter_neighbors():
            if neighbor.id not in visited:
                visited.add(neighbor.id)
                queue.append((neighbor, dist + 1))

    return None


def find_nearest(
    start: Tile, predicate: Predicate, max_distance: Optional[int] = None
) -> Optional[Tile]:
    """Return the nearest tile (other than ``start``) satisfying ``predicate``."""
    found = find_nearest_with_distance(start, predicate, max_distance)
    return found[0] if found is not None else None


def nearest_matches(tiles: Iterable[Tile], predicate: Predicate) -> PMap[TileID, Optional[Tile]]:
    """Run :func:`find_nearest` from every tile.

    Returns a map from each start tile id to its nearest match (``None`` when
    nothing qualifies).
    """
    results: dict[TileID, Optional[Tile]] = {}
    for tile in tiles:
        found = find_nearest(tile, predicate)
        if found is not None:
            logger.debug("From tile %d, nearest matching tile found: %d", tile.id, found.id)
        else:
            logger.debug("From tile %d, no matching tile found.", tile.id)
        results[tile.id] = found

    matched = sum(1 for found in results.values() if found is not None)
    logger.info("Nearest-match search: %d of %d tiles have a match", matched, len(results))
    return pmap(results)
