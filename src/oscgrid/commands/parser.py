"""Protocol message parsing.

Turns an address + argument list into a grid command. The dispatch table is
plain data (address -> parse function); each parse function validates
argument count, argument types and level-list shape before constructing
the command, so a message that fails to parse never touches the grid.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from oscgrid.exceptions import (
    ArgumentCountError,
    ArgumentShapeError,
    ArgumentTypeError,
    UnrecognizedAddressError,
)
from oscgrid.models.message import OscMessage, strip_prefix

from .commands import (
    OCTET,
    QUAD_LEVELS,
    Command,
    LevelSetAllCommand,
    LevelSetCommand,
    MapCommand,
    SetColCommand,
    SetRowCommand,
    StateSetAllCommand,
    StateSetCommand,
)

logger = logging.getLogger(__name__)

# Variable-length messages: two coordinates followed by the levels
LEVELS_START = 2

ParseFunction = Callable[[str, Sequence[Any]], Command]


def type_name(argument: Any) -> str:
    """Name of an argument's type for diagnostics ("null" for a missing value)."""
    return "null" if argument is None else type(argument).__name__


def to_int(address: str, arguments: Sequence[Any], index: int) -> int:
    """
    Return ``arguments[index]`` if it is an int.

    Booleans are rejected: OSC True/False arguments decode to bool, which
    Python would otherwise accept as an int.

    Raises:
        ArgumentTypeError: If the argument is not an int
    """
    argument = arguments[index]
    if isinstance(argument, bool) or not isinstance(argument, int):
        raise ArgumentTypeError(address, index, type_name(argument))
    return argument


def expect_count(address: str, arguments: Sequence[Any], count: int) -> None:
    """Raise ArgumentCountError unless exactly ``count`` arguments were given."""
    if len(arguments) != count:
        raise ArgumentCountError(address, count, len(arguments))


def expect_at_least(address: str, arguments: Sequence[Any], count: int) -> None:
    """Raise ArgumentCountError if fewer than ``count`` arguments were given."""
    if len(arguments) < count:
        raise ArgumentCountError(address, f"at least {count}", len(arguments))


def to_int_octets(address: str, arguments: Sequence[Any], start: int) -> tuple[int, ...]:
    """
    Return ``arguments[start:]`` as ints; their count must be a multiple of 8.

    Raises:
        ArgumentShapeError: If the count is not a multiple of 8
        ArgumentTypeError: If any value is not an int
    """
    remaining = len(arguments) - start
    if remaining % OCTET != 0:
        raise ArgumentShapeError(address, f"multiple of {OCTET}", remaining)
    return tuple(to_int(address, arguments, i) for i in range(start, len(arguments)))


def to_int_quad(address: str, arguments: Sequence[Any], start: int) -> tuple[int, ...]:
    """
    Return ``arguments[start:]`` as ints; there must be exactly 64 of them.

    Raises:
        ArgumentShapeError: If the count is not 64
        ArgumentTypeError: If any value is not an int
    """
    remaining = len(arguments) - start
    if remaining != QUAD_LEVELS:
        raise ArgumentShapeError(address, f"quad ({QUAD_LEVELS})", remaining)
    return tuple(to_int(address, arguments, i) for i in range(start, len(arguments)))


def parse_state_set(address: str, arguments: Sequence[Any]) -> StateSetCommand:
    expect_count(address, arguments, 3)
    return StateSetCommand(
        x=to_int(address, arguments, 0),
        y=to_int(address, arguments, 1),
        state=to_int(address, arguments, 2),
    )


def parse_level_set(address: str, arguments: Sequence[Any]) -> LevelSetCommand:
    expect_count(address, arguments, 3)
    return LevelSetCommand(
        x=to_int(address, arguments, 0),
        y=to_int(address, arguments, 1),
        level=to_int(address, arguments, 2),
    )


def parse_state_set_all(address: str, arguments: Sequence[Any]) -> StateSetAllCommand:
    expect_count(address, arguments, 1)
    return StateSetAllCommand(state=to_int(address, arguments, 0))


def parse_level_set_all(address: str, arguments: Sequence[Any]) -> LevelSetAllCommand:
    expect_count(address, arguments, 1)
    return LevelSetAllCommand(level=to_int(address, arguments, 0))


def parse_set_row(address: str, arguments: Sequence[Any]) -> SetRowCommand:
    """`x_off y l[..]`"""
    expect_at_least(address, arguments, LEVELS_START + 1)
    x_offset = to_int(address, arguments, 0)
    y = to_int(address, arguments, 1)
    return SetRowCommand(x_offset=x_offset, y=y, levels=to_int_octets(address, arguments, LEVELS_START))


def parse_set_col(address: str, arguments: Sequence[Any]) -> SetColCommand:
    """`x y_off l[..]`"""
    expect_at_least(address, arguments, LEVELS_START + 1)
    x = to_int(address, arguments, 0)
    y_offset = to_int(address, arguments, 1)
    return SetColCommand(x=x, y_offset=y_offset, levels=to_int_octets(address, arguments, LEVELS_START))


def parse_map(address: str, arguments: Sequence[Any]) -> MapCommand:
    """`x_off y_off l[64]`"""
    expect_at_least(address, arguments, LEVELS_START + 1)
    x_offset = to_int(address, arguments, 0)
    y_offset = to_int(address, arguments, 1)
    return MapCommand(
        x_offset=x_offset, y_offset=y_offset, levels=to_int_quad(address, arguments, LEVELS_START)
    )


DISPATCH_TABLE: dict[str, ParseFunction] = {
    StateSetCommand.ADDRESS: parse_state_set,
    LevelSetCommand.ADDRESS: parse_level_set,
    StateSetAllCommand.ADDRESS: parse_state_set_all,
    LevelSetAllCommand.ADDRESS: parse_level_set_all,
    SetRowCommand.ADDRESS: parse_set_row,
    SetColCommand.ADDRESS: parse_set_col,
    MapCommand.ADDRESS: parse_map,
}


def supported_addresses() -> list[str]:
    """Addresses the parser understands, in dispatch table order."""
    return list(DISPATCH_TABLE)


def parse_command(address: str, arguments: Sequence[Any], prefix: str | None = None) -> Command:
    """
    Parse an address and its arguments into a grid command.

    If ``prefix`` is given and the address starts with it, it is stripped
    before dispatch; otherwise the address is dispatched unchanged.

    Raises:
        UnrecognizedAddressError: If no command is registered for the address
        ArgumentCountError: If a command got the wrong number of arguments
        ArgumentTypeError: If an argument is not an int
        ArgumentShapeError: If a level list has the wrong length
    """
    stripped = strip_prefix(address, prefix)
    parse = DISPATCH_TABLE.get(stripped)
    if parse is None:
        raise UnrecognizedAddressError(stripped)

    command = parse(stripped, arguments)
    logger.debug(f"Parsed {address} -> {command.kind}")
    return command


def parse_message(message: OscMessage, prefix: str | None = None) -> Command:
    """Parse a protocol message into a grid command. See ``parse_command``."""
    return parse_command(message.address, message.arguments, prefix=prefix)
