"""CLI commands for oscgrid."""

from .config import config_group
from .grid import addresses, key, replay, send

__all__ = ["addresses", "config_group", "key", "replay", "send"]
