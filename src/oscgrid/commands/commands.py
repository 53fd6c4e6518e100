"""Grid mutation commands.

Every command is a frozen value object tagged with a ``kind`` literal, so the
set of commands is closed: ``Command`` is a discriminated union of exactly
the variants below, and ``apply_command`` matches over all of them.

Addresses (serialosc varibright revision)::

    /grid/led/set x y s                  StateSetCommand
    /grid/led/level/set x y l            LevelSetCommand
    /grid/led/all s                      StateSetAllCommand
    /grid/led/level/all l                LevelSetAllCommand
    /grid/led/level/row x_off y l[..]    SetRowCommand
    /grid/led/level/col x y_off l[..]    SetColCommand
    /grid/led/level/map x_off y_off l[64] MapCommand

Levels are conventionally 0-15 and are written as given; states map
1 -> 15 and anything else -> 0.
"""

import logging
from abc import abstractmethod
from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from oscgrid.models.grid import MAX_LEVEL, MIN_LEVEL, Grid
from oscgrid.models.message import OscMessage, add_prefix

logger = logging.getLogger(__name__)

# Row/column writes come in runs of 8, maps are one 8x8 quad
OCTET = 8
QUAD_SIZE = 8
QUAD_LEVELS = QUAD_SIZE * QUAD_SIZE


def to_level(state: int) -> int:
    """Map an on/off state to a level: 1 is full brightness, anything else is off."""
    return MAX_LEVEL if state == 1 else MIN_LEVEL


class GridCommand(BaseModel):
    """Base for all grid commands."""

    model_config = ConfigDict(frozen=True)

    ADDRESS: ClassVar[str]

    @abstractmethod
    def arguments(self) -> list[int]:
        """Protocol arguments in wire order."""

    def to_message(self, prefix: str | None = None) -> OscMessage:
        """Render this command as a protocol message, optionally address-prefixed."""
        return OscMessage(address=add_prefix(self.ADDRESS, prefix), arguments=self.arguments())


class StateSetCommand(GridCommand):
    """Set led at (x, y) on (1) or off (0)."""

    ADDRESS: ClassVar[str] = "/grid/led/set"

    kind: Literal["state_set"] = "state_set"
    x: int
    y: int
    state: int

    def arguments(self) -> list[int]:
        return [self.x, self.y, self.state]


class LevelSetCommand(GridCommand):
    """Set led at (x, y) to a level."""

    ADDRESS: ClassVar[str] = "/grid/led/level/set"

    kind: Literal["level_set"] = "level_set"
    x: int
    y: int
    level: int

    def arguments(self) -> list[int]:
        return [self.x, self.y, self.level]


class StateSetAllCommand(GridCommand):
    """Set every led on (1) or off (0)."""

    ADDRESS: ClassVar[str] = "/grid/led/all"

    kind: Literal["state_set_all"] = "state_set_all"
    state: int

    def arguments(self) -> list[int]:
        return [self.state]


class LevelSetAllCommand(GridCommand):
    """Set every led to a level."""

    ADDRESS: ClassVar[str] = "/grid/led/level/all"

    kind: Literal["level_set_all"] = "level_set_all"
    level: int

    def arguments(self) -> list[int]:
        return [self.level]


class SetRowCommand(GridCommand):
    """
    Set a run of leds in row ``y``.

    ``levels[i]`` goes to ``(x_offset + i, y)``. The parser only accepts a
    multiple of 8 levels; ``x_offset`` is expected to be a multiple of 8 as
    well but is not checked.
    """

    ADDRESS: ClassVar[str] = "/grid/led/level/row"

    kind: Literal["set_row"] = "set_row"
    x_offset: int
    y: int
    levels: tuple[int, ...]

    def arguments(self) -> list[int]:
        return [self.x_offset, self.y, *self.levels]


class SetColCommand(GridCommand):
    """
    Set a run of leds in column ``x``.

    ``levels[i]`` goes to ``(x, y_offset + i)``.
    """

    ADDRESS: ClassVar[str] = "/grid/led/level/col"

    kind: Literal["set_col"] = "set_col"
    x: int
    y_offset: int
    levels: tuple[int, ...]

    def arguments(self) -> list[int]:
        return [self.x, self.y_offset, *self.levels]


class MapCommand(GridCommand):
    """
    Set an 8x8 quad at (x_offset, y_offset).

    ``levels`` holds 64 values in row-major order: ``levels[y * 8 + x]``
    goes to ``(x + x_offset, y + y_offset)``.
    """

    ADDRESS: ClassVar[str] = "/grid/led/level/map"

    kind: Literal["map"] = "map"
    x_offset: int
    y_offset: int
    levels: tuple[int, ...]

    def arguments(self) -> list[int]:
        return [self.x_offset, self.y_offset, *self.levels]


Command = Annotated[
    Union[
        StateSetCommand,
        LevelSetCommand,
        StateSetAllCommand,
        LevelSetAllCommand,
        SetRowCommand,
        SetColCommand,
        MapCommand,
    ],
    Field(discriminator="kind"),
]

COMMAND_TYPES: tuple[type[GridCommand], ...] = (
    StateSetCommand,
    LevelSetCommand,
    StateSetAllCommand,
    LevelSetAllCommand,
    SetRowCommand,
    SetColCommand,
    MapCommand,
)

command_adapter: TypeAdapter[Command] = TypeAdapter(Command)


def apply_command(grid: Grid, command: Command) -> None:
    """
    Apply ``command`` to ``grid`` in place.

    Region writes (row, column, map) check the whole target region first,
    so a command that does not fit raises GridIndexError without writing
    anything.

    Raises:
        GridIndexError: If the command addresses cells outside the grid
        TypeError: If ``command`` is not a grid command
    """
    match command:
        case StateSetCommand(x=x, y=y, state=state):
            grid.set(x, y, to_level(state))
        case LevelSetCommand(x=x, y=y, level=level):
            grid.set(x, y, level)
        case StateSetAllCommand(state=state):
            grid.fill(to_level(state))
        case LevelSetAllCommand(level=level):
            grid.fill(level)
        case SetRowCommand(x_offset=x_offset, y=y, levels=levels):
            grid.write_row(x_offset, y, levels)
        case SetColCommand(x=x, y_offset=y_offset, levels=levels):
            grid.write_column(x, y_offset, levels)
        case MapCommand(x_offset=x_offset, y_offset=y_offset, levels=levels):
            grid.write_block(x_offset, y_offset, QUAD_SIZE, levels)
        case _:
            raise TypeError(f"Not a grid command: {command!r}")

    logger.debug(f"Applied {command.kind} to {grid!r}")
