"""Placing the entities of a level: transforms and the loaded level's contents."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from dsfpuzzle.assets import AssetType, SpriteType, Still, get_asset_dimensions
from dsfpuzzle.components import Block, Key, KeyDisplay, Tool
from dsfpuzzle.history import History
from dsfpuzzle.level_save import LevelSave
from dsfpuzzle.movement import Pos, Steering
from dsfpuzzle.tile_defs import Archetype, DepthLayer, TileDefinitions, ToolType
from dsfpuzzle.tilemap import TileMap
from dsfpuzzle.win import WinCondition

_log = logging.getLogger(__name__)

# Key displays are laid out on a 4-wide grid of 64-pixel cells on the door.
_KEY_DISPLAY_COLUMNS = 4
_KEY_DISPLAY_CELL = 64.0


@dataclass(frozen=True)
class Transform:
    """Translation and scale of a drawn entity."""

    translation: tuple[float, float, float] = (0.0, 0.0, 0.0)
    scale: tuple[float, float, float] = (1.0, 1.0, 1.0)


def _scale_for(dimens: Pos, asset: AssetType) -> tuple[float, float, float]:
    asset_dimens = get_asset_dimensions(asset)
    return (dimens.x / asset_dimens.x, dimens.y / asset_dimens.y, 1.0)


def load_transform(pos: Pos, depth: DepthLayer, dimens: Pos, asset: AssetType) -> Transform:
    """Transform centring an asset over the tile at ``pos`` of size ``dimens``."""
    return Transform(
        translation=(pos.x + dimens.x * 0.5, pos.y + dimens.y * 0.5, depth.z()),
        scale=_scale_for(dimens, asset),
    )


def transform_scale(dimens: Pos, asset: AssetType) -> Transform:
    """Transform at the origin that scales ``asset`` to ``dimens``."""
    return Transform(scale=_scale_for(dimens, asset))


def key_display_slot(index: int) -> int:
    """Cell on the door for the key display with the given index."""
    if index < 2:
        return index + 5
    if index < 4:
        return index + 7
    if index < 5:
        return index
    if index < 7:
        return index - 5
    if index < 9:
        return index
    if index < 11:
        return index - 7
    return index


def key_display_transform(index: int) -> Transform:
    """Transform of a key display relative to the door, one layer above it."""
    column, row = divmod(key_display_slot(index), _KEY_DISPLAY_COLUMNS)[::-1]
    return Transform(
        translation=(
            (-1.5 + column) * _KEY_DISPLAY_CELL,
            (-1.5 + row) * _KEY_DISPLAY_CELL,
            1.0,
        ),
        scale=(0.5, 0.5, 1.0),
    )


@dataclass
class LoadedLevel:
    """Everything a level puts into the world when it is started."""

    background: Transform
    tile_map: TileMap
    win_condition: WinCondition = field(default_factory=WinCondition)
    history: History = field(default_factory=History)
    blocks: list[Block] = field(default_factory=list)
    tile_transforms: dict[Pos, Transform] = field(default_factory=dict)
    player: Optional[Steering] = None
    keys: list[Key] = field(default_factory=list)
    tools: list[Tool] = field(default_factory=list)
    door: Optional[Pos] = None
    key_displays: list[tuple[KeyDisplay, Transform]] = field(default_factory=list)


def load_level(level_save: LevelSave, tile_defs: TileDefinitions) -> LoadedLevel:
    """Lay out the entities of a level and build its play-time resources."""
    bounds = level_save.world_bounds
    loaded = LoadedLevel(
        background=load_transform(
            bounds.pos,
            DepthLayer.BACKGROUND,
            bounds.dimens,
            Still(SpriteType.SELECTION, 1),
        ),
        tile_map=TileMap.for_play(level_save, tile_defs),
    )
    for pos, key in level_save.tiles.items():
        tile_def = tile_defs.get(key)
        if tile_def.asset is not None:
            loaded.tile_transforms[pos] = load_transform(
                pos, tile_def.depth, tile_def.dimens, tile_def.asset
            )
        loaded.blocks.append(Block(pos))
        archetype = tile_def.archetype
        if archetype is Archetype.PLAYER:
            loaded.player = Steering.at(pos, tile_def.dimens)
        elif archetype is Archetype.KEY:
            loaded.win_condition.add_key(pos)
            loaded.keys.append(Key(pos))
        elif archetype is Archetype.DOOR:
            if loaded.door is None:
                loaded.door = pos
        elif isinstance(archetype, ToolType):
            if isinstance(tile_def.asset, Still):
                loaded.tools.append(
                    Tool(archetype, tile_def.asset.sprite, tile_def.asset.sprite_nr)
                )
            else:
                _log.error("Tool definition %r did not have still asset.", key)
    if loaded.door is not None:
        loaded.key_displays = [
            (KeyDisplay(key_pos), key_display_transform(index))
            for index, key_pos in enumerate(sorted(loaded.win_condition.keys))
        ]
    return loaded