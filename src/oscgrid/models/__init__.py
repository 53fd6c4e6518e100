"""Data models for the grid controller."""

from .config import DEFAULT_CONFIG_PATH, GridConfig
from .grid import DEFAULT_COLUMNS, DEFAULT_ROWS, MAX_LEVEL, MIN_LEVEL, Column, Grid
from .message import OscMessage, add_prefix, strip_prefix

__all__ = [
    "DEFAULT_COLUMNS",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_ROWS",
    "MAX_LEVEL",
    "MIN_LEVEL",
    "Column",
    "Grid",
    "GridConfig",
    "OscMessage",
    "add_prefix",
    "strip_prefix",
]
