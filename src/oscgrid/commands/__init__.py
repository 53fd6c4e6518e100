"""Grid commands and the protocol parser that produces them."""

from .commands import (
    COMMAND_TYPES,
    OCTET,
    QUAD_LEVELS,
    QUAD_SIZE,
    Command,
    GridCommand,
    LevelSetAllCommand,
    LevelSetCommand,
    MapCommand,
    SetColCommand,
    SetRowCommand,
    StateSetAllCommand,
    StateSetCommand,
    apply_command,
    command_adapter,
    to_level,
)
from .parser import DISPATCH_TABLE, parse_command, parse_message, supported_addresses

__all__ = [
    "COMMAND_TYPES",
    "DISPATCH_TABLE",
    "OCTET",
    "QUAD_LEVELS",
    "QUAD_SIZE",
    "Command",
    "GridCommand",
    "LevelSetAllCommand",
    "LevelSetCommand",
    "MapCommand",
    "SetColCommand",
    "SetRowCommand",
    "StateSetAllCommand",
    "StateSetCommand",
    "apply_command",
    "command_adapter",
    "parse_command",
    "parse_message",
    "supported_addresses",
    "to_level",
]
