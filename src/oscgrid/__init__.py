"""oscgrid: LED grid state and protocol commands for grid controllers."""

__version__ = "0.1.0"

from .commands import Command, apply_command, parse_command, parse_message
from .core import GridSession
from .devices import ConnectEvent, KeyEvent, parse_event
from .exceptions import GridIndexError, OscGridError, ParseError
from .models import Grid, GridConfig, OscMessage

__all__ = [
    "Command",
    "ConnectEvent",
    "Grid",
    "GridConfig",
    "GridIndexError",
    "GridSession",
    "KeyEvent",
    "OscGridError",
    "OscMessage",
    "ParseError",
    "apply_command",
    "parse_command",
    "parse_event",
    "parse_message",
]
