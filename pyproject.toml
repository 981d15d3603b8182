[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsfpuzzle"
version = "0.1.0"
description = "Game model for a tile-based platform puzzle game: movement, levels, tile maps, adventures and settings, with JSON file formats."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "platformer", "tilemap", "level"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsfpuzzle"]

[tool.pytest.ini_options]
addopts = "-ra"
