"""Components of level objects, the player and the map cursor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from dsfpuzzle.assets import SpriteType
from dsfpuzzle.movement import Direction2D, Pos
from dsfpuzzle.tile_defs import ToolType


@dataclass(frozen=True)
class Key:
    """A key that must be collected; ``pos`` is where it lies."""

    pos: Pos = field(default_factory=Pos)


@dataclass(frozen=True)
class Tool:
    """A tool lying in the level, with the sprite it is drawn with."""

    tool_type: ToolType = field(default_factory=ToolType)
    sprite: SpriteType = SpriteType.NOT_FOUND
    sprite_nr: int = 0


@dataclass(frozen=True)
class Block:
    """Marks an entity that belongs to a tile and may be destroyed."""

    pos: Pos = field(default_factory=Pos)


@dataclass(frozen=True)
class KeyDisplay:
    """Miniature key on the exit door; ``pos`` is the matching key's position."""

    pos: Pos = field(default_factory=Pos)


@dataclass(frozen=True)
class ExitDoor:
    """The exit door."""


@dataclass(frozen=True)
class BackgroundTag:
    """The background sprite."""


@dataclass
class Player:
    """State of the player character."""

    equipped: Optional[ToolType] = None
    pressing_jump: bool = False
    jump_grace_timer: Optional[float] = None
    turn_around_timer: Optional[float] = None


@dataclass(frozen=True)
class EquippedTag:
    """A tool equipped by the player."""


@dataclass(frozen=True)
class DebugPosGhostTag:
    """Debug marker of the player's discrete position."""


@dataclass(frozen=True)
class DebugSteeringGhostTag:
    """Debug marker of the player's destination."""


@dataclass
class MapCursor:
    """Where the player is on the adventure map."""

    last_direction: Direction2D = field(default_factory=Direction2D)
    cooldown: float = 0.0