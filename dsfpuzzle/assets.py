"""Graphical and sound assets, and the registry that hands them out."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from dsfpuzzle.movement import Pos

_log = logging.getLogger(__name__)


class SpriteType(Enum):
    """A sprite sheet."""

    NOT_FOUND = "NotFound"
    LADDER = "Ladder"
    FRAME = "Frame"
    BLOCKS = "Blocks"
    TOOLS = "Tools"
    DOOR = "Door"
    SELECTION = "Selection"
    LEVEL_SELECT = "LevelSelect"
    EDITOR_UI_ICONS = "EditorUiIcons"
    MINER = "Miner"


class AnimType(Enum):
    """An animated asset."""

    NOT_FOUND = "NotFound"
    MINER = "Miner"


class SoundType(Enum):
    """A kind of sound effect; each may be backed by several sound files."""

    JUMP = "Jump"
    STEP = "Step"
    LADDER_STEP = "LadderStep"
    MAP_STEP = "MapStep"
    CANNOT_PERFORM_ACTION = "CannotPerformAction"
    MINING = "Mining"
    TOOL_PICKUP = "ToolPickup"
    KEY_PICKUP = "KeyPickup"
    WIN = "Win"
    LVL_RESET = "LvlReset"


@dataclass(frozen=True)
class AssetType:
    """A graphical asset: either a still image or an animation."""


@dataclass(frozen=True)
class Still(AssetType):
    """A non-animated image: a sprite sheet and the number of a sprite on it."""

    sprite: SpriteType = SpriteType.NOT_FOUND
    sprite_nr: int = 0


@dataclass(frozen=True)
class Animated(AssetType):
    """An animated image."""

    anim: AnimType


_STILL_DIMENSIONS = {
    SpriteType.FRAME: Pos(50, 50),
    SpriteType.LADDER: Pos(128, 64),
    SpriteType.DOOR: Pos(256, 256),
}
_DEFAULT_DIMENSIONS = Pos(128, 128)


def get_asset_dimensions(asset: AssetType) -> Pos:
    """Size in pixels of the asset, used to scale it to its in-world bounds."""
    if isinstance(asset, Still):
        return _STILL_DIMENSIONS.get(asset.sprite, _DEFAULT_DIMENSIONS)
    if isinstance(asset, Animated):
        return _DEFAULT_DIMENSIONS
    raise TypeError(f"Not an asset: {asset!r}")


@dataclass
class Assets:
    """Loaded asset handles by type, with fallbacks for missing graphics."""

    stills: dict[SpriteType, Any] = field(default_factory=dict)
    animated: dict[AnimType, Any] = field(default_factory=dict)
    sounds: dict[SoundType, list[Any]] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def put_still(self, asset_type: SpriteType, asset: Any) -> Assets:
        self.stills[asset_type] = asset
        return self

    def put_animated(self, asset_type: AnimType, asset: Any) -> Assets:
        self.animated[asset_type] = asset
        return self

    def put_sound(self, sound_type: SoundType, asset: Any) -> Assets:
        self.sounds.setdefault(sound_type, []).append(asset)
        return self

    def get_still(self, asset_type: SpriteType) -> Any:
        """The sprite sheet, or the NOT_FOUND sheet if it is missing."""
        if asset_type in self.stills:
            return self.stills[asset_type]
        _log.error("Spritesheet asset %s is missing!", asset_type)
        try:
            return self.stills[SpriteType.NOT_FOUND]
        except KeyError:
            raise KeyError("Fallback asset also missing.") from None

    def get_animated(self, asset_type: AnimType) -> Any:
        """The animation, or the NOT_FOUND animation if it is missing."""
        if asset_type in self.animated:
            return self.animated[asset_type]
        _log.error("Animation asset %s is missing!", asset_type)
        try:
            return self.animated[AnimType.NOT_FOUND]
        except KeyError:
            raise KeyError("Fallback asset also missing!") from None

    def get_sound(self, asset_type: SoundType) -> Optional[Any]:
        """A randomly chosen sound of the type, or None if there is none."""
        sounds = self.sounds.get(asset_type)
        if not sounds:
            _log.error(
                "There are no sounds of type %s. Add them to the loading config "
                "to start using them.",
                asset_type,
            )
            return None
        return self.rng.choice(sounds)