"""Tile definitions: the properties of every kind of tile a level can hold."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from os import PathLike
from typing import Any, Callable, ClassVar, Mapping, Optional, Union

from dsfpuzzle.assets import AnimType, Animated, AssetType, SpriteType, Still
from dsfpuzzle.movement import Pos

_log = logging.getLogger(__name__)


class DepthLayer(Enum):
    """Z-layer of a drawn entity."""

    BACKGROUND = "Background"
    DEBUG_LINES = "DebugLines"
    BLOCKS = "Blocks"
    SELECTION = "Selection"
    CURSOR = "Cursor"
    FLOATING_BLOCKS = "FloatingBlocks"
    ENEMIES = "Enemies"
    PLAYER = "Player"
    PARTICLES = "Particles"
    UI_ELEMENTS = "UiElements"
    CAMERA = "Camera"

    def z(self) -> float:
        return _DEPTH_Z[self]


_DEPTH_Z = {
    DepthLayer.BACKGROUND: 0.0,
    DepthLayer.DEBUG_LINES: 1.0,
    DepthLayer.BLOCKS: 100.0,
    DepthLayer.SELECTION: 101.0,
    DepthLayer.CURSOR: 102.0,
    DepthLayer.FLOATING_BLOCKS: 110.0,
    DepthLayer.ENEMIES: 120.0,
    DepthLayer.PLAYER: 130.0,
    DepthLayer.PARTICLES: 140.0,
    DepthLayer.UI_ELEMENTS: 200.0,
    DepthLayer.CAMERA: 300.0,
}


class Sturdiness(Enum):
    """What it takes to break a block."""

    INVULNERABLE = "Invulnerable"
    BREAKABLE = "Breakable"


@dataclass(frozen=True)
class ToolType:
    """A tool that breaks blocks, ``depth`` layers deep.

    ``BreakBlocksHorizontally`` breaks the blocks the player faces;
    ``BreakBlocksBelow`` breaks the blocks below, in the facing direction.
    """

    HORIZONTAL: ClassVar[str] = "BreakBlocksHorizontally"
    BELOW: ClassVar[str] = "BreakBlocksBelow"

    kind: str = "BreakBlocksHorizontally"
    depth: int = 0

    def __post_init__(self) -> None:
        if self.kind not in (self.HORIZONTAL, self.BELOW):
            raise ValueError(f"Unknown tool type {self.kind!r}")
        if isinstance(self.depth, bool) or not isinstance(self.depth, int):
            raise ValueError(f"Tool depth must be an integer, not {self.depth!r}")
        if not 0 <= self.depth <= 255:
            raise ValueError(f"Tool depth {self.depth} is outside 0..255")


class Archetype(Enum):
    """Special role of a tile. A tool tile's archetype is its ToolType."""

    PLAYER = "Player"
    KEY = "Key"
    DOOR = "Door"


ArchetypeLike = Union[Archetype, ToolType]


@dataclass(frozen=True)
class CollisionDefinition:
    """Which sides of a tile collide."""

    collides_top: bool
    collides_side: bool
    collides_bottom: bool


@dataclass(frozen=True)
class TileDefinition:
    """Properties of one type of tile or entity."""

    depth: DepthLayer = DepthLayer.BLOCKS
    dimens: Pos = field(default_factory=Pos)
    unique: bool = False
    mandatory: bool = False
    climbable: bool = False
    collision: Optional[CollisionDefinition] = None
    asset: Optional[AssetType] = None
    preview_asset: Optional[AssetType] = None
    archetype: Optional[ArchetypeLike] = None
    sturdiness: Sturdiness = Sturdiness.INVULNERABLE

    @classmethod
    def fallback(cls) -> TileDefinition:
        """Definition used when the requested one cannot be found."""
        return cls(dimens=Pos(1, 1), asset=Still(SpriteType.NOT_FOUND, 0))

    def provides_platform(self) -> bool:
        """True if the tile collides at the top, so it can be stood on."""
        return self.collision is not None and self.collision.collides_top

    def collides_horizontally(self) -> bool:
        return self.collision is not None and self.collision.collides_side

    def collides_bottom(self) -> bool:
        return self.collision is not None and self.collision.collides_bottom

    def is_breakable(self) -> bool:
        return self.sturdiness is Sturdiness.BREAKABLE

    def get_preview(self) -> AssetType:
        """The preview asset, else the asset, else the default still."""
        return self.preview_asset or self.asset or Still()

    def to_dict(self) -> dict[str, Any]:
        return {
            "depth": self.depth.value,
            "dimens": {"x": self.dimens.x, "y": self.dimens.y},
            "unique": self.unique,
            "mandatory": self.mandatory,
            "climbable": self.climbable,
            "collision": _collision_to_data(self.collision),
            "asset": _asset_to_data(self.asset),
            "preview_asset": _asset_to_data(self.preview_asset),
            "archetype": _archetype_to_data(self.archetype),
            "sturdiness": self.sturdiness.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TileDefinition:
        """Parse a definition; missing fields take their defaults."""
        if not isinstance(data, Mapping):
            raise ValueError("A tile definition must be a mapping.")
        unknown = set(data) - set(_FIELD_PARSERS)
        if unknown:
            raise ValueError(f"Unknown fields in tile definition: {sorted(unknown)}")
        return cls(**{name: _FIELD_PARSERS[name](value) for name, value in data.items()})


@dataclass
class TileDefinitions:
    """All tile definitions by key, with a fallback for unknown keys."""

    fallback: TileDefinition = field(default_factory=TileDefinition.fallback)
    map: dict[str, TileDefinition] = field(default_factory=dict)

    def get(self, key: str) -> TileDefinition:
        """The definition for ``key``, or the fallback if there is none."""
        definition = self.map.get(key)
        if definition is None:
            _log.error("Failed to find tile definition %r, using fallback.", key)
            return self.fallback
        return definition

    def to_dict(self) -> dict[str, Any]:
        return {
            "fallback": self.fallback.to_dict(),
            "map": {key: definition.to_dict() for key, definition in self.map.items()},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TileDefinitions:
        if not isinstance(data, Mapping):
            raise ValueError("Tile definitions must be a mapping.")
        unknown = set(data) - {"fallback", "map"}
        if unknown:
            raise ValueError(f"Unknown fields in tile definitions: {sorted(unknown)}")
        result = cls()
        if "fallback" in data:
            result.fallback = TileDefinition.from_dict(data["fallback"])
        if "map" in data:
            entries = data["map"]
            if not isinstance(entries, Mapping):
                raise ValueError("The tile definition map must be a mapping.")
            result.map = {
                str(key): TileDefinition.from_dict(value) for key, value in entries.items()
            }
        return result

    @classmethod
    def load(cls, path: Union[str, PathLike[str]]) -> TileDefinitions:
        """Read tile definitions from a JSON file."""
        with open(path, encoding="utf-8") as file:
            return cls.from_dict(json.load(file))


def _parse_enum(enum_cls: type[Enum], value: Any, name: str) -> Any:
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        raise ValueError(f"Unknown {name} {value!r}") from None


def _parse_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a boolean, not {value!r}")
    return value


def _parse_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, not {value!r}")
    return value


def _single_entry(data: Any, name: str) -> tuple[str, Any]:
    if not isinstance(data, Mapping) or len(data) != 1:
        raise ValueError(f"{name} must be a mapping with exactly one entry.")
    ((tag, value),) = data.items()
    return tag, value


def _optional(parser: Callable[[Any], Any]) -> Callable[[Any], Any]:
    return lambda value: None if value is None else parser(value)


def _pos_from_data(data: Any) -> Pos:
    if not isinstance(data, Mapping) or set(data) != {"x", "y"}:
        raise ValueError("dimens must be a mapping with exactly x and y.")
    return Pos(_parse_int(data["x"], "x"), _parse_int(data["y"], "y"))


def _collision_to_data(collision: Optional[CollisionDefinition]) -> Optional[dict[str, bool]]:
    if collision is None:
        return None
    return {
        "collides_top": collision.collides_top,
        "collides_side": collision.collides_side,
        "collides_bottom": collision.collides_bottom,
    }


def _collision_from_data(data: Any) -> CollisionDefinition:
    names = ("collides_top", "collides_side", "collides_bottom")
    if not isinstance(data, Mapping) or set(data) != set(names):
        raise ValueError(f"collision must be a mapping with exactly {', '.join(names)}.")
    return CollisionDefinition(*(_parse_bool(data[name], name) for name in names))


def _asset_to_data(asset: Optional[AssetType]) -> Optional[dict[str, Any]]:
    if asset is None:
        return None
    if isinstance(asset, Still):
        return {"Still": [asset.sprite.value, asset.sprite_nr]}
    if isinstance(asset, Animated):
        return {"Animated": asset.anim.value}
    raise TypeError(f"Not an asset: {asset!r}")


def _asset_from_data(data: Any) -> AssetType:
    tag, value = _single_entry(data, "asset")
    if tag == "Still":
        if not isinstance(value, (list, tuple)) or len(value) != 2:
            raise ValueError("A still asset needs a sprite type and a sprite number.")
        sprite, sprite_nr = value
        sprite_nr = _parse_int(sprite_nr, "sprite number")
        if sprite_nr < 0:
            raise ValueError(f"Sprite number {sprite_nr} is negative.")
        return Still(_parse_enum(SpriteType, sprite, "sprite type"), sprite_nr)
    if tag == "Animated":
        return Animated(_parse_enum(AnimType, value, "animation type"))
    raise ValueError(f"Unknown asset type {tag!r}")


def _tool_to_data(tool: ToolType) -> dict[str, int]:
    return {tool.kind: tool.depth}


def _tool_from_data(data: Any) -> ToolType:
    kind, depth = _single_entry(data, "tool type")
    return ToolType(kind, _parse_int(depth, "tool depth"))


def _archetype_to_data(archetype: Optional[ArchetypeLike]) -> Any:
    if archetype is None:
        return None
    if isinstance(archetype, ToolType):
        return {"Tool": _tool_to_data(archetype)}
    return archetype.value


def _archetype_from_data(data: Any) -> ArchetypeLike:
    if isinstance(data, str):
        return _parse_enum(Archetype, data, "archetype")
    tag, value = _single_entry(data, "archetype")
    if tag != "Tool":
        raise ValueError(f"Unknown archetype {tag!r}")
    return _tool_from_data(value)


_FIELD_PARSERS: dict[str, Callable[[Any], Any]] = {
    "depth": partial(_parse_enum, DepthLayer, name="depth layer"),
    "dimens": _pos_from_data,
    "unique": partial(_parse_bool, name="unique"),
    "mandatory": partial(_parse_bool, name="mandatory"),
    "climbable": partial(_parse_bool, name="climbable"),
    "collision": _optional(_collision_from_data),
    "asset": _optional(_asset_from_data),
    "preview_asset": _optional(_asset_from_data),
    "archetype": _optional(_archetype_from_data),
    "sturdiness": partial(_parse_enum, Sturdiness, name="sturdiness"),
}