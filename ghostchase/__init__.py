"""Building blocks for a maze-chase arcade game: geometry, input, stage, scenes, player and ghosts."""

__version__ = "0.1.0"