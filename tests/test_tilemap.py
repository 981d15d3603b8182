from itertools import product

import pytest

from dsfpuzzle.level_save import LevelSave
from dsfpuzzle.movement import Pos
from dsfpuzzle.tile_defs import (
    CollisionDefinition,
    Sturdiness,
    TileDefinition,
    TileDefinitions,
)
from dsfpuzzle.tilemap import AirBlock, Dummy, TileDefKey, TileMap
from dsfpuzzle.world_bounds import WorldBounds

SOLID = CollisionDefinition(True, True, True)
BLOCK = TileDefinition(dimens=Pos(1, 1), collision=SOLID)
BIG = TileDefinition(dimens=Pos(2, 2), collision=SOLID)
LADDER = TileDefinition(dimens=Pos(1, 1), climbable=True)
CRATE = TileDefinition(dimens=Pos(1, 1), sturdiness=Sturdiness.BREAKABLE)
DECO = TileDefinition(dimens=Pos(1, 1))


def _defs():
    return TileDefinitions(
        map={"block": BLOCK, "big": BIG, "ladder": LADDER, "crate": CRATE, "deco": DECO}
    )


def _level():
    return LevelSave(
        world_bounds=WorldBounds(Pos(0, 0), Pos(10, 10)),
        tiles={
            Pos(0, 0): "block",
            Pos(4, 4): "big",
            Pos(1, 0): "ladder",
            Pos(2, 0): "crate",
            Pos(3, 0): "deco",
        },
    )


def test_for_play_keeps_only_relevant_tiles():
    tile_map = TileMap.for_play(_level(), _defs())
    assert Pos(3, 0) not in tile_map.tiles
    for pos in (Pos(0, 0), Pos(1, 0), Pos(2, 0), Pos(4, 4)):
        assert tile_map.is_tile_def_key(pos)


def test_for_editing_keeps_everything():
    tile_map = TileMap.for_editing(_level(), _defs())
    assert tile_map.tiles[Pos(3, 0)] == TileDefKey("deco")
    assert tile_map.get_tile(Pos(3, 0)) == DECO


def test_world_bounds_come_from_level():
    level = _level()
    assert TileMap.for_play(level, _defs()).world_bounds == level.world_bounds


def test_large_tile_fills_dummies():
    tile_map = TileMap.for_play(_level(), _defs())
    anchor = Pos(4, 4)
    assert tile_map.tiles[anchor] == TileDefKey("big")
    for x, y in product(range(2), range(2)):
        pos = anchor.append_xy(x, y)
        assert tile_map.get_actual_pos(pos) == anchor
        assert tile_map.get_tile(pos) == BIG
        if (x, y) != (0, 0):
            assert tile_map.tiles[pos] == Dummy(anchor)
            assert not tile_map.is_tile_def_key(pos)


def test_empty_position_has_nothing():
    tile_map = TileMap.for_play(_level(), _defs())
    assert tile_map.get_tile(Pos(9, 9)) is None
    assert tile_map.get_actual_pos(Pos(9, 9)) is None
    assert tile_map.remove_tile(Pos(9, 9)) is None


def test_remove_through_dummy_removes_whole_tile():
    tile_map = TileMap.for_play(_level(), _defs())
    anchor = Pos(4, 4)
    assert tile_map.remove_tile(anchor.append_xy(1, 1)) == anchor
    for x, y in product(range(2), range(2)):
        assert anchor.append_xy(x, y) not in tile_map.tiles
    assert tile_map.is_tile_def_key(Pos(0, 0))


def test_put_tile_then_lookup():
    tile_map = TileMap(tile_defs=_defs())
    tile_map.put_tile(Pos(1, 1), "big", BIG.dimens)
    assert tile_map.get_actual_pos(Pos(2, 2)) == Pos(1, 1)
    assert tile_map.get_tile(Pos(1, 2)) == BIG
    assert len(tile_map.tiles) == BIG.dimens.x * BIG.dimens.y


def test_unknown_key_uses_fallback_when_editing():
    defs = _defs()
    level = LevelSave(tiles={Pos(0, 0): "missing"})
    assert TileMap.for_editing(level, defs).get_tile(Pos(0, 0)) == defs.fallback
    assert TileMap.for_play(level, defs).tiles == {}


def test_air_block_is_not_a_tile():
    tile_map = TileMap(tile_defs=_defs())
    tile_map.tiles[Pos(0, 0)] = AirBlock()
    assert tile_map.get_tile(Pos(0, 0)) is None
    assert tile_map.get_actual_pos(Pos(0, 0)) is None
    assert not AirBlock().is_tile_def()
    assert TileDefKey("block").is_tile_def()


def test_dangling_dummy():
    tile_map = TileMap(tile_defs=_defs())
    tile_map.tiles[Pos(1, 0)] = Dummy(Pos(0, 0))
    assert tile_map.get_tile(Pos(1, 0)) is None
    with pytest.raises(LookupError):
        tile_map.remove_tile(Pos(1, 0))