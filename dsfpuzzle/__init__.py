"""Game model for a tile-based platform puzzle game: movement, levels, tile maps, adventures and settings."""

__version__ = "0.1.0"