"""Grid of tiles in a level, with lookup of multi-tile blocks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import product
from typing import Optional

from dsfpuzzle.level_save import LevelSave
from dsfpuzzle.movement import Pos
from dsfpuzzle.tile_defs import TileDefinition, TileDefinitions
from dsfpuzzle.world_bounds import WorldBounds

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tile:
    """What occupies one grid position."""

    def is_tile_def(self) -> bool:
        """True only for an actual tile, not an air block or dummy."""
        return isinstance(self, TileDefKey)


@dataclass(frozen=True)
class Dummy(Tile):
    """Part of a tile larger than 1 by 1; points at the tile's anchor."""

    anchor: Pos


@dataclass(frozen=True)
class TileDefKey(Tile):
    """A tile, given by its tile definition key."""

    key: str


@dataclass(frozen=True)
class AirBlock(Tile):
    """Explicitly empty; used to override an existing block in the editor."""


@dataclass
class TileMap:
    """Tiles by position, together with the definitions they refer to."""

    world_bounds: WorldBounds = field(default_factory=WorldBounds)
    tiles: dict[Pos, Tile] = field(default_factory=dict)
    tile_defs: TileDefinitions = field(default_factory=TileDefinitions)

    @classmethod
    def for_play(cls, level: LevelSave, tile_defs: TileDefinitions) -> TileMap:
        """Only climbable, colliding and breakable tiles."""
        return cls._build(level, tile_defs, apply_filter=True)

    @classmethod
    def for_editing(cls, level: LevelSave, tile_defs: TileDefinitions) -> TileMap:
        """Every tile of the level."""
        return cls._build(level, tile_defs, apply_filter=False)

    @classmethod
    def _build(
        cls, level: LevelSave, tile_defs: TileDefinitions, apply_filter: bool
    ) -> TileMap:
        tiles: dict[Pos, Tile] = {}
        for pos, key in level.tiles.items():
            tile_def = tile_defs.get(key)
            relevant = (
                tile_def.climbable
                or tile_def.collision is not None
                or tile_def.is_breakable()
            )
            if apply_filter and not relevant:
                continue
            for x, y in product(range(tile_def.dimens.x), range(tile_def.dimens.y)):
                tile = TileDefKey(key) if (x, y) == (0, 0) else Dummy(pos)
                target = pos.append_xy(x, y)
                replaced = tiles.get(target)
                tiles[target] = tile
                if replaced is not None:
                    _log.error(
                        "At offset (%d, %d) of %s there are multiple tiles! %r replaces %r",
                        x, y, (pos, key), tile, replaced,
                    )
        return cls(world_bounds=level.world_bounds, tiles=tiles, tile_defs=tile_defs)

    def _key_at(self, pos: Pos) -> Optional[str]:
        tile = self.tiles.get(pos)
        if isinstance(tile, TileDefKey):
            return tile.key
        if isinstance(tile, Dummy):
            anchor = self.tiles.get(tile.anchor)
            if isinstance(anchor, TileDefKey):
                return anchor.key
            _log.error("Dummy position lookup failed for tile %r", tile)
        return None

    def get_tile(self, pos: Pos) -> Optional[TileDefinition]:
        """Definition of the tile covering ``pos``, or None if there is none."""
        key = self._key_at(pos)
        return None if key is None else self.tile_defs.get(key)

    def is_tile_def_key(self, pos: Pos) -> bool:
        return isinstance(self.tiles.get(pos), TileDefKey)

    def remove_tile(self, pos: Pos) -> Optional[Pos]:
        """Remove the tile covering ``pos`` with all its dummies.

        Returns the anchor position of the removed tile, or None if nothing
        was removed.
        """
        actual_pos = self.get_actual_pos(pos)
        if actual_pos is not None:
            tile_def = self.get_tile(actual_pos)
            if tile_def is None:
                raise LookupError(f"Dummy at {pos} points at {actual_pos}, which holds no tile.")
            for x, y in product(range(tile_def.dimens.x), range(tile_def.dimens.y)):
                self.tiles.pop(actual_pos.append_xy(x, y), None)
        return actual_pos

    def get_actual_pos(self, pos: Pos) -> Optional[Pos]:
        """Anchor position of the tile covering ``pos``, or None."""
        tile = self.tiles.get(pos)
        if isinstance(tile, TileDefKey):
            return pos
        if isinstance(tile, Dummy):
            return tile.anchor
        return None

    def put_tile(self, pos: Pos, tile_def_key: str, dimensions: Pos) -> None:
        """Place a tile anchored at ``pos`` and fill the rest with dummies."""
        self.tiles[pos] = TileDefKey(tile_def_key)
        for x, y in product(range(dimensions.x), range(dimensions.y)):
            if (x, y) != (0, 0):
                self.tiles[pos.append_xy(x, y)] = Dummy(pos)