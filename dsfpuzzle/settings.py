"""Audio, debug and movement settings, with user and default fallbacks."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, TypeVar, Union

_log = logging.getLogger(__name__)

PathArg = Union[str, "PathLike[str]"]

AUDIO_SETTINGS_FILE = "audio.json"
DEBUG_SETTINGS_FILE = "debug.json"

# Machine epsilon of a 32-bit float; volumes this close to zero mean "off".
_F32_EPSILON = 1.1920929e-07


def _parse_number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, not {value!r}")
    return float(value)


def _parse_optional_number(value: Any, name: str) -> Optional[float]:
    return None if value is None else _parse_number(value, name)


def _parse_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a boolean, not {value!r}")
    return value


def _parse_number_list(value: Any, name: str) -> list[float]:
    if not isinstance(value, list):
        raise ValueError(f"{name} must be a list of numbers.")
    return [_parse_number(item, name) for item in value]


def _parse_fields(
    data: Any, parsers: Mapping[str, Callable[[Any, str], Any]], what: str
) -> dict[str, Any]:
    """Parse the known fields of ``data``; missing ones are left out."""
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a mapping.")
    unknown = set(data) - set(parsers)
    if unknown:
        raise ValueError(f"Unknown fields in {what}: {sorted(unknown)}")
    return {name: parsers[name](value, name) for name, value in data.items()}


def _read_json(path: PathArg) -> Any:
    with open(path, encoding="utf-8") as file:
        return json.load(file)


def _write_json(path: PathArg, data: Any) -> None:
    with open(path, "w", encoding="utf-8") as file:
        json.dump(data, file, indent=2)
        file.write("\n")


def _add_volume(starting_volume: Optional[float], delta: float) -> Optional[float]:
    """Add ``delta`` and clamp to [0, 1]; a volume of zero becomes None."""
    volume = min(max((starting_volume or 0.0) + delta, 0.0), 1.0)
    return None if abs(volume) < _F32_EPSILON else volume


def _format_volume(volume: Optional[float]) -> str:
    return "Off" if volume is None else f"{volume:.2f}"


@dataclass
class AudioSettings:
    """Music and sound effect volumes in [0, 1]; None means switched off."""

    music_volume: Optional[float] = 0.5
    sound_effects_volume: Optional[float] = 0.5

    def add_to_music_volume(self, delta: float, path: PathArg) -> None:
        """Change the music volume and write the settings to ``path``."""
        self.music_volume = _add_volume(self.music_volume, delta)
        self.write(path)

    def add_to_sfx_volume(self, delta: float, path: PathArg) -> None:
        """Change the sound effects volume and write the settings to ``path``."""
        self.sound_effects_volume = _add_volume(self.sound_effects_volume, delta)
        self.write(path)

    def format_music_volume(self) -> str:
        return _format_volume(self.music_volume)

    def format_sfx_volume(self) -> str:
        return _format_volume(self.sound_effects_volume)

    def to_dict(self) -> dict[str, Optional[float]]:
        return {
            "music_volume": self.music_volume,
            "sound_effects_volume": self.sound_effects_volume,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AudioSettings:
        """Parse settings; missing fields take their defaults."""
        return cls(
            **_parse_fields(
                data,
                {
                    "music_volume": _parse_optional_number,
                    "sound_effects_volume": _parse_optional_number,
                },
                "audio settings",
            )
        )

    @classmethod
    def load(cls, path: PathArg) -> AudioSettings:
        return cls.from_dict(_read_json(path))

    def write(self, path: PathArg) -> None:
        _write_json(path, self.to_dict())


@dataclass
class DebugSettings:
    """Settings that only matter while debugging."""

    time_scale_presets: list[float] = field(default_factory=list)
    time_scale: float = 0.0
    seconds_per_rewind_frame: float = 0.0
    skip_straight_to_editor: bool = False
    display_debug_frames: bool = False

    def increase_speed(self) -> tuple[float, float]:
        """Switch to the next faster preset; return (old scale, new scale)."""
        old = self.time_scale
        self.time_scale = next(
            (scale for scale in self.time_scale_presets if scale > old), old
        )
        return old, self.time_scale

    def decrease_speed(self) -> tuple[float, float]:
        """Switch to the next slower preset; return (old scale, new scale)."""
        old = self.time_scale
        self.time_scale = next(
            (scale for scale in reversed(self.time_scale_presets) if scale < old), old
        )
        return old, self.time_scale

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DebugSettings:
        """Parse settings; missing fields take their defaults."""
        return cls(
            **_parse_fields(
                data,
                {
                    "time_scale_presets": _parse_number_list,
                    "time_scale": _parse_number,
                    "seconds_per_rewind_frame": _parse_number,
                    "skip_straight_to_editor": _parse_bool,
                    "display_debug_frames": _parse_bool,
                },
                "debug settings",
            )
        )

    @classmethod
    def load(cls, path: PathArg) -> DebugSettings:
        return cls.from_dict(_read_json(path))


@dataclass(frozen=True)
class MovementConfig:
    """Speeds and timings of player and map cursor movement, in seconds and m/s."""

    player_speed: float = 0.0
    jump_allowance: float = 0.0
    turn_allowance: float = 0.0
    map_cursor_move_high_cooldown: float = 0.0
    map_cursor_move_low_cooldown: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MovementConfig:
        """Parse the config; missing fields take their defaults."""
        names = (
            "player_speed",
            "jump_allowance",
            "turn_allowance",
            "map_cursor_move_high_cooldown",
            "map_cursor_move_low_cooldown",
        )
        return cls(
            **_parse_fields(
                data, {name: _parse_number for name in names}, "movement config"
            )
        )


_S = TypeVar("_S", AudioSettings, DebugSettings)


def _load_settings(
    cls: type[_S], file_name: str, user_settings_dir: PathArg, default_settings_dir: PathArg
) -> _S:
    user_file = Path(user_settings_dir) / file_name
    if user_file.exists():
        try:
            return cls.load(user_file)
        except (OSError, ValueError) as err:
            _log.error(
                "Failed to load the user-specific settings file from %s! "
                "Falling back to default settings file. Error: %s",
                user_file,
                err,
            )
    default_file = Path(default_settings_dir) / file_name
    try:
        return cls.load(default_file)
    except (OSError, ValueError) as err:
        _log.error(
            "Failed to load the default settings file from %s! "
            "Falling back to built-in defaults. Error: %s",
            default_file,
            err,
        )
        return cls()


def load_audio_settings(
    user_settings_dir: PathArg, default_settings_dir: PathArg
) -> AudioSettings:
    """User settings if present and valid, else default settings, else built-ins."""
    return _load_settings(
        AudioSettings, AUDIO_SETTINGS_FILE, user_settings_dir, default_settings_dir
    )


def load_debug_settings(
    user_settings_dir: PathArg, default_settings_dir: PathArg
) -> DebugSettings:
    """User settings if present and valid, else default settings, else built-ins."""
    return _load_settings(
        DebugSettings, DEBUG_SETTINGS_FILE, user_settings_dir, default_settings_dir
    )