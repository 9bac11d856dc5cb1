# tests/unit/test_predicates.py

from tile_grid.predicates import (
    all_of,
    any_of,
    attribute_equals,
    description_contains,
    has_attribute,
    negate,
)
from tile_grid.tile import make_tile


def test_description_contains() -> None:
    pred = description_contains("target")
    assert pred(make_tile(0, description="the target"))
    assert not pred(make_tile(1, description="wall"))
    assert not pred(make_tile(2))


def test_attribute_predicates() -> None:
    tile = make_tile(0, kind="water", walkable=False)
    assert has_attribute("kind")(tile)
    assert not has_attribute("description")(tile)
    assert attribute_equals("kind", "water")(tile)
    assert not attribute_equals("kind", "grass")(tile)
    assert not attribute_equals("missing", None)(tile)
    assert attribute_equals("walkable", False)(tile)


def test_combinators() -> None:
    water = attribute_equals("kind", "water")
    deep = attribute_equals("depth", "deep")
    shallow_water = make_tile(0, kind="water", depth="shallow")
    deep_water = make_tile(1, kind="water", depth="deep")
    grass = make_tile(2, kind="grass")

    assert all_of(water, deep)(deep_water)
    assert not all_of(water, deep)(shallow_water)
    assert any_of(deep, water)(shallow_water)
    assert not any_of(deep, water)(grass)
    assert negate(water)(grass)
    assert not negate(water)(deep_water)


def test_empty_combinators() -> None:
    tile = make_tile(0)
    assert all_of()(tile)
    assert not any_of()(tile)
