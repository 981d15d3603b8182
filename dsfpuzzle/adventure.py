"""Adventures: maps of levels and roads that the player walks across."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, ClassVar, Mapping, Optional, Union

from dsfpuzzle.level_save import LevelSave
from dsfpuzzle.movement import Pos
from dsfpuzzle.user_cache import UserCache

_log = logging.getLogger(__name__)

PathArg = Union[str, "PathLike[str]"]


@dataclass
class PositionOnMap:
    """Where the cursor currently is on the adventure map."""

    pos: Pos = field(default_factory=Pos)


@dataclass(frozen=True)
class NodeDetails:
    """What a node opens: a nested adventure or a level, by file name."""

    ADVENTURE: ClassVar[str] = "Adventure"
    LEVEL: ClassVar[str] = "Level"

    kind: str
    target: str

    def __post_init__(self) -> None:
        if self.kind not in (self.ADVENTURE, self.LEVEL):
            raise ValueError(f"Unknown node kind {self.kind!r}")


@dataclass(frozen=True)
class AdventureNode:
    """A named, selectable node on the map."""

    name: str
    details: NodeDetails


@dataclass(frozen=True)
class Road:
    """A road between nodes."""

    start_id: int = 0
    end_id: int = 0

    def __post_init__(self) -> None:
        for value in (self.start_id, self.end_id):
            if not 0 <= value <= 0xFFFF:
                raise ValueError(f"Road id {value} is outside 0..65535")


MapElement = Union[Road, AdventureNode]


@dataclass
class Adventure:
    """Roads and nodes by position. Every adventure starts at the origin."""

    nodes: dict[Pos, MapElement] = field(default_factory=dict)

    def node_at(self, pos: Pos) -> Optional[MapElement]:
        return self.nodes.get(pos)

    def selected_level(self, pos: Pos) -> Optional[str]:
        """The level file opened by selecting ``pos``, or None."""
        element = self.nodes.get(pos)
        if isinstance(element, AdventureNode) and element.details.kind == NodeDetails.LEVEL:
            return element.details.target
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [
                {"pos": {"x": pos.x, "y": pos.y}, "element": _element_to_data(element)}
                for pos, element in sorted(self.nodes.items(), key=lambda item: item[0])
            ]
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Adventure:
        if not isinstance(data, Mapping) or set(data) != {"nodes"}:
            raise ValueError("An adventure must be a mapping with exactly nodes.")
        entries = data["nodes"]
        if not isinstance(entries, list):
            raise ValueError("nodes must be a list.")
        adventure = cls()
        for entry in entries:
            if not isinstance(entry, Mapping) or set(entry) != {"pos", "element"}:
                raise ValueError("Each node must be a mapping with exactly pos and element.")
            adventure.nodes[_pos_from_data(entry["pos"])] = _element_from_data(entry["element"])
        return adventure

    @classmethod
    def load(cls, path: PathArg) -> Adventure:
        """Read an adventure from a JSON file."""
        with open(path, encoding="utf-8") as file:
            return cls.from_dict(json.load(file))

    def write(self, path: PathArg) -> None:
        """Write the adventure to a JSON file."""
        with open(path, "w", encoding="utf-8") as file:
            json.dump(self.to_dict(), file, indent=2)
            file.write("\n")


def level_files(levels_dir: PathArg) -> list[str]:
    """Names of the regular files in ``levels_dir``, sorted."""
    with os.scandir(levels_dir) as entries:
        return sorted(entry.name for entry in entries if entry.is_file())


def create_default_adventure(levels_dir: PathArg, output_file: PathArg) -> Adventure:
    """Write an adventure giving access to every loadable level in a row.

    Levels that fail to load are logged and left out.
    """
    loadable = []
    for name in level_files(levels_dir):
        try:
            LevelSave.load(os.path.join(levels_dir, name))
        except (OSError, ValueError) as err:
            _log.error("Failed to load level %r: %s", name, err)
            continue
        loadable.append(name)

    adventure = Adventure()
    for index, name in enumerate(loadable):
        adventure.nodes[Pos(index * 2, 0)] = AdventureNode(
            name=name, details=NodeDetails(NodeDetails.LEVEL, name)
        )
        if index > 0:
            adventure.nodes[Pos(index * 2 - 1, 0)] = Road()
    adventure.write(output_file)
    return adventure


def initial_cursor_pos(
    adventure: Adventure, user_cache: UserCache, adventure_file_name: str
) -> Pos:
    """The remembered cursor position if it is on the map, else the origin."""
    last_known = user_cache.get_initial_cursor_pos(adventure_file_name)
    return last_known if last_known in adventure.nodes else Pos()


def _pos_from_data(data: Any) -> Pos:
    if not isinstance(data, Mapping) or set(data) != {"x", "y"}:
        raise ValueError("A position must be a mapping with exactly x and y.")
    if any(isinstance(v, bool) or not isinstance(v, int) for v in data.values()):
        raise ValueError("Position coordinates must be integers.")
    return Pos(data["x"], data["y"])


def _element_to_data(element: MapElement) -> Any:
    if isinstance(element, Road):
        return "Road"
    return {
        "Node": {
            "name": element.name,
            "details": {element.details.kind: element.details.target},
        }
    }


def _element_from_data(data: Any) -> MapElement:
    if data == "Road":
        return Road()
    if not isinstance(data, Mapping) or set(data) != {"Node"}:
        raise ValueError(f"Unknown map element {data!r}")
    node = data["Node"]
    if not isinstance(node, Mapping) or set(node) != {"name", "details"}:
        raise ValueError("A node must be a mapping with exactly name and details.")
    details = node["details"]
    if not isinstance(details, Mapping) or len(details) != 1:
        raise ValueError("Node details must be a mapping with exactly one entry.")
    ((kind, target),) = details.items()
    if not isinstance(node["name"], str) or not isinstance(target, str):
        raise ValueError("Node name and target must be strings.")
    return AdventureNode(name=node["name"], details=NodeDetails(kind, target))