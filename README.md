# dsfpuzzle

The game model of a tile-based platform puzzle game. The player walks, climbs and jumps on a grid,
collects every key in the level and then reaches the exit door. This package holds that model
without any rendering: the data types, the JSON file formats for levels, tile definitions,
adventures and settings, the tile map used for collision lookups, and the layout of a loaded level.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

With the `test` extra the test suite can be run with pytest:

```
pip install ".[test]"
pytest
```

## Modules

- `dsfpuzzle.movement`: `Pos` (a frozen, ordered grid position with `append_x`, `append_y`,
  `append_xy`, `+` and `-`), `Direction1D`, `Direction2D`, `Velocity`, `SteeringIntent`, and
  `Steering` with its modes `Grounded`, `Climbing`, `Falling` and `Jumping`.
  `SteeringMode.calc_delta_y` gives the jump curve and the fall line; `Jumping.jump_to_fall`
  turns a jump that has peaked into a fall. Calling `jump_to_fall` or `add_to_duration` on a mode
  that does not support it raises `ValueError`.
- `dsfpuzzle.world_bounds`: `WorldBounds`, the rectangle of the level (default position
  (-20, -10), size 40 by 20), with `clamp`, `encloses`, and `adjust_x` / `adjust_y` to move a
  border. A border is never moved so far that the level becomes smaller than 2 by 2.
- `dsfpuzzle.win`: `WinCondition`, the keys still left in the level.
- `dsfpuzzle.history`: `History` (a stack of `Frame`s; `pop_frame` returns `None` when empty),
  `CurrentState` and `Rewind`.
- `dsfpuzzle.assets`: `SpriteType`, `AnimType`, `SoundType`, the asset kinds `Still` and
  `Animated`, `get_asset_dimensions`, and `Assets`, a registry of opaque asset handles. A missing
  sprite sheet or animation falls back to the `NOT_FOUND` one; `get_sound` picks one of the
  registered sounds of a type at random, or returns `None`.
- `dsfpuzzle.tile_defs`: `TileDefinition` and `TileDefinitions`, which describe what each kind of
  tile does (collision, climbing, sturdiness, archetype, depth layer), plus `DepthLayer`,
  `Sturdiness`, `ToolType`, `Archetype` and `CollisionDefinition`. Unknown keys resolve to a
  fallback definition.
- `dsfpuzzle.components`: entity data: `Key`, `Tool`, `Block`, `KeyDisplay`, `ExitDoor`,
  `BackgroundTag`, `Player`, `EquippedTag`, `DebugPosGhostTag`, `DebugSteeringGhostTag` and
  `MapCursor`.
- `dsfpuzzle.camera`: `CameraFrame`, the camera's pan offset and panning limits.
- `dsfpuzzle.level_save`: `LevelSave`, the stored form of a level. Tiles are written sorted by
  position, so saving the same level twice gives the same file.
- `dsfpuzzle.tilemap`: `TileMap`, a lookup from every grid position to the tile covering it.
  Tiles larger than one square fill their extra squares with `Dummy` entries that point at the
  anchor. `TileMap.for_play` keeps only climbable, colliding and breakable tiles;
  `TileMap.for_editing` keeps them all.
- `dsfpuzzle.adventure`: `Adventure`, a map of `AdventureNode`s and `Road`s;
  `level_files`, `create_default_adventure` (a row of every level in a directory that loads,
  joined by roads) and `initial_cursor_pos`.
- `dsfpuzzle.user_cache`: `UserCache`, which remembers the cursor position for each adventure and
  writes itself to its file on every change.
- `dsfpuzzle.signals`: `SignalEdgeDetector`, which turns a stream of "is the key down" values into
  `SignalEdge.RISING`, `FALLING`, `STILL_HIGH` or `STILL_LOW`.
- `dsfpuzzle.settings`: `AudioSettings`, `DebugSettings` and `MovementConfig`.
  `load_audio_settings` and `load_debug_settings` read `audio.json` / `debug.json` from the user
  settings directory if it is there and valid, else from the default settings directory, else use
  the built-in values.
- `dsfpuzzle.layout`: `load_level`, which turns a `LevelSave` and its tile definitions into a
  `LoadedLevel`: background and tile transforms, blocks, the player's `Steering`, keys, tools, the
  door, key displays on the door, the play-time `TileMap`, a `WinCondition` and a fresh `History`.
  Also `load_transform`, `transform_scale`, `key_display_slot` and `key_display_transform`.
- `dsfpuzzle.checks`: `MovementTest` scenarios (`JUMP_2_WIDE`, `JUMP_4_WIDE`),
  `test_level_path`, which finds a scenario's level under `<assets_dir>/tests/`, and
  `setup_test`, which loads it.

## File formats

All files are JSON. A level:

```json
{
  "world_bounds": {"pos": {"x": -20, "y": -10}, "dimens": {"x": 40, "y": 20}},
  "tiles": [
    {"pos": {"x": 0, "y": 0}, "key": "Player"},
    {"pos": {"x": 0, "y": -1}, "key": "Block"}
  ]
}
```

Tile definitions are `{"fallback": {...}, "map": {"<key>": {...}}}`. A definition may hold
`depth`, `dimens`, `unique`, `mandatory`, `climbable`, `collision`, `asset`, `preview_asset`,
`archetype` and `sturdiness`; missing fields take their defaults and unknown fields are an error.
Assets are written `{"Still": ["Blocks", 0]}` or `{"Animated": "Miner"}`; archetypes are
`"Player"`, `"Key"`, `"Door"` or `{"Tool": {"BreakBlocksHorizontally": 2}}`.

An adventure is a list of positions with their elements:

```json
{
  "nodes": [
    {"pos": {"x": 0, "y": 0}, "element": {"Node": {"name": "a.json", "details": {"Level": "a.json"}}}},
    {"pos": {"x": 1, "y": 0}, "element": "Road"}
  ]
}
```

Malformed data raises `ValueError`.

## Example

```python
from dsfpuzzle.movement import Pos
from dsfpuzzle.level_save import LevelSave
from dsfpuzzle.tile_defs import TileDefinitions
from dsfpuzzle.tilemap import TileMap

tile_defs = TileDefinitions.load("assets/world/tile_references.json")
level = LevelSave.load("assets/levels/demo_level.json")

tile_map = TileMap.for_play(level, tile_defs)
tile = tile_map.get_tile(Pos(3, 0))
if tile is not None and tile.provides_platform():
    print("You can stand on (3, 0).")
```

Loading a whole level:

```python
from dsfpuzzle.layout import load_level

loaded = load_level(level, tile_defs)
print(loaded.win_condition.nr_keys_left(), "keys to collect")
```

## What it does not do

This is the model only. There is no window, rendering, sound playback, input handling, game loop
or level editor, and no command to start a game. Nothing here advances the player frame by frame:
the steering, movement, pickup and win logic that would drive `Steering` and `WinCondition` during
play is not included. `Assets` stores whatever handles it is given and does not load image or
sound files itself, and `setup_test` loads a scenario's level but does not run the scenario.