"""Predicate factories for :func:`tile_grid.search.find_nearest`.

Each factory returns a pure function over a tile's attribute map. Missing
attributes never raise; they simply fail the test.
"""

from typing import Any

from tile_grid.tile import Tile
from tile_grid.types import Predicate


def description_contains(text: str) -> Predicate:
    """Match tiles whose ``description`` attribute contains ``text``."""

    def predicate(tile: Tile) -> bool:
        description = tile.description
        return description is not None and text in description

    return predicate


def has_attribute(name: str) -> Predicate:
    """Match tiles that carry attribute ``name`` at all."""

    def predicate(tile: Tile) -> bool:
        return name in tile.attributes

    return predicate


def attribute_equals(name: str, value: Any) -> Predicate:
    """Match tiles whose attribute ``name`` equals ``value``."""

    def predicate(tile: Tile) -> bool:
        return name in tile.attributes and tile.attributes[name] == value

    return predicate


def any_of(*predicates: Predicate) -> Predicate:
    """Logical OR (short-circuit, left to right)."""

    def predicate(tile: Tile) -> bool:
        return any(p(tile) for p in predicates)

    return predicate


def all_of(*predicates: Predicate) -> Predicate:
    """Logical AND (short-circuit, left to right)."""

    def predicate(tile: Tile) -> bool:
        return all(p(tile) for p in predicates)

    return predicate


def negate(inner: Predicate) -> Predicate:
    def predicate(tile: Tile) -> bool:
        return not inner(tile)

    return predicate
