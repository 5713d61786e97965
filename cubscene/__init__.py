"""Reading and validating .cub scene files for ray-casting games, with small text and byte helpers."""

__version__ = "0.1.0"