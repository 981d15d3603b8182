"""Movement checks: levels that prove which jumps a player can make."""

from __future__ import annotations

from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Union

from dsfpuzzle.layout import LoadedLevel, load_level
from dsfpuzzle.level_save import LevelSave
from dsfpuzzle.tile_defs import TileDefinitions

PathArg = Union[str, "PathLike[str]"]


class MovementTest(Enum):
    """A movement check that can be set up."""

    # The player can always jump across a 2-wide gap.
    JUMP_2_WIDE = "Jump2Wide"
    # The player can never jump across a 4-wide gap.
    JUMP_4_WIDE = "Jump4Wide"

    def level_file_name(self) -> str:
        return _LEVEL_FILES[self]


_LEVEL_FILES = {
    MovementTest.JUMP_2_WIDE: "jump_2_wide.json",
    MovementTest.JUMP_4_WIDE: "jump_4_wide.json",
}


def test_level_path(test: MovementTest, assets_dir: PathArg) -> Path:
    """Path of the level file used by ``test``."""
    return Path(assets_dir) / "tests" / test.level_file_name()


def setup_test(
    test: MovementTest, assets_dir: PathArg, tile_defs: TileDefinitions
) -> LoadedLevel:
    """Load a fresh copy of the check's level, replacing any previous one."""
    level = LevelSave.load(test_level_path(test, assets_dir))
    return load_level(level, tile_defs)