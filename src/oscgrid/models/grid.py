"""Grid model representing the LED level matrix of a grid controller."""

import logging
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

import numpy as np

from oscgrid.exceptions import GridIndexError, GridRangeError, GridValueError

if TYPE_CHECKING:
    from oscgrid.commands import Command

logger = logging.getLogger(__name__)


# Most common physical device shape (a "128": 16 wide, 8 tall)
DEFAULT_ROWS = 8
DEFAULT_COLUMNS = 16

MIN_LEVEL = 0
MAX_LEVEL = 15

CELL_WIDTH = 3

# Cells are int64; levels outside this range cannot be stored
STORABLE = np.iinfo(np.int64)


def check_levels(levels: Sequence[int]) -> None:
    """Raise GridValueError for the first level that does not fit a cell."""
    for level in levels:
        if not STORABLE.min <= level <= STORABLE.max:
            raise GridValueError(level)


class Column:
    """A fixed-length column of LED levels.

    Wraps a one-dimensional view into the owning grid's buffer, so writes
    through a Column are writes to the grid. Levels are conventionally in
    [0, 15] but are stored as given, up to the
    64-bit signed range of the buffer.
    """

    def __init__(self, values: np.ndarray):
        self._values = values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return (int(v) for v in self._values)

    def __getitem__(self, index: int) -> int:
        """Get the level at ``index``, raising GridIndexError if out of range."""
        self._check_index(index)
        return int(self._values[index])

    def __setitem__(self, index: int, value: int) -> None:
        """Set the level at ``index``, raising GridIndexError if out of range."""
        self._check_index(index)
        check_levels((value,))
        self._values[index] = value

    def fill_range(self, start: int, end: int, value: int) -> None:
        """
        Set every level in the half-open range [start, end) to ``value``.

        The range is valid if ``0 <= start <= end <= len(self)``; an empty
        range (``start == end``) is valid and writes nothing.

        Raises:
            GridRangeError: If the range is not valid
        """
        if not 0 <= start <= end <= len(self):
            raise GridRangeError(start, end, len(self))
        check_levels((value,))
        self._values[start:end] = value

    def to_list(self) -> list[int]:
        """Return a copy of the column levels."""
        return [int(v) for v in self._values]

    def _check_index(self, index: int) -> None:
        # numpy would wrap negative indices silently
        if not 0 <= index < len(self):
            raise GridIndexError(
                f"Row index {index} out of range [0, {len(self)})", index=index, size=len(self)
            )


class Grid:
    """
    A rows x columns matrix of LED levels.

    Dimensions are fixed at construction. The grid exclusively owns its
    buffer (a numpy matrix indexed ``[x, y]``) and the Column views over it.
    It is mutated in place by commands and provides no internal locking:
    callers applying commands from several threads must serialize access.

    Example:
        >>> grid = Grid(rows=8, columns=16)
        >>> grid.set(3, 2, 15)
        >>> grid[3][2]
        15
    """

    def __init__(self, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS):
        if rows < 1 or columns < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows} rows x {columns} columns")

        self.rows = rows
        self.columns = columns
        self._levels = np.zeros((columns, rows), dtype=np.int64)
        self._columns = [Column(self._levels[x]) for x in range(columns)]

        logger.debug(f"Created {columns}x{rows} grid")

    def __getitem__(self, x: int) -> Column:
        """Get column ``x``, raising GridIndexError if out of range."""
        self._check_x(x)
        return self._columns[x]

    def __iter__(self) -> Iterator[Column]:
        return iter(self._columns)

    def __len__(self) -> int:
        return self.columns

    @property
    def shape(self) -> tuple[int, int]:
        """(columns, rows) of this grid."""
        return (self.columns, self.rows)

    def get(self, x: int, y: int) -> int:
        """Get the level at (x, y)."""
        return self[x][y]

    def set(self, x: int, y: int, level: int) -> None:
        """Set the level at (x, y). The level is not range checked."""
        self[x][y] = level

    def fill_range(self, x: int, start: int, end: int, value: int) -> None:
        """Fill rows [start, end) of column ``x`` with ``value``."""
        self[x].fill_range(start, end, value)

    def fill(self, value: int) -> None:
        """Set every cell of every column to ``value``."""
        for column in self._columns:
            column.fill_range(0, len(column), value)

    def write_row(self, x_offset: int, y: int, levels: Sequence[int]) -> None:
        """
        Write ``levels[i]`` to ``(x_offset + i, y)`` for every i.

        The whole target region is checked before anything is written.

        Raises:
            GridIndexError: If any target cell is outside the grid
            GridValueError: If a level does not fit a cell
        """
        self.check_region(x_offset, y, len(levels), 1)
        check_levels(levels)
        self._levels[x_offset:x_offset + len(levels), y] = levels

    def write_column(self, x: int, y_offset: int, levels: Sequence[int]) -> None:
        """
        Write ``levels[i]`` to ``(x, y_offset + i)`` for every i.

        Raises:
            GridIndexError: If any target cell is outside the grid
        """
        self.check_region(x, y_offset, 1, len(levels))
        check_levels(levels)
        self._levels[x, y_offset:y_offset + len(levels)] = levels

    def write_block(self, x_offset: int, y_offset: int, size: int, levels: Sequence[int]) -> None:
        """
        Write a ``size`` x ``size`` block given in row-major order.

        ``levels[y * size + x]`` lands on ``(x + x_offset, y + y_offset)``.

        Raises:
            ValueError: If ``levels`` does not hold ``size * size`` values
            GridIndexError: If any target cell is outside the grid
        """
        if len(levels) != size * size:
            raise ValueError(f"Block of size {size} needs {size * size} levels, got {len(levels)}")
        self.check_region(x_offset, y_offset, size, size)
        check_levels(levels)
        block = np.asarray(levels, dtype=np.int64).reshape(size, size)  # [y, x]
        self._levels[x_offset:x_offset + size, y_offset:y_offset + size] = block.T

    def check_region(self, x: int, y: int, width: int, height: int) -> None:
        """
        Ensure the rectangle at (x, y) of ``width`` x ``height`` lies within the grid.

        Raises:
            GridIndexError: If any part of the rectangle is outside the grid
        """
        if not (0 <= x and x + width <= self.columns):
            raise GridIndexError(
                f"Columns [{x}, {x + width}) out of range [0, {self.columns})",
                index=x,
                size=self.columns,
            )
        if not (0 <= y and y + height <= self.rows):
            raise GridIndexError(
                f"Rows [{y}, {y + height}) out of range [0, {self.rows})",
                index=y,
                size=self.rows,
            )

    def run(self, command: "Command") -> None:
        """Apply ``command`` to this grid."""
        from oscgrid.commands import apply_command

        apply_command(self, command)

    def to_list(self) -> list[list[int]]:
        """Return a copy of the levels as a list of columns."""
        return [column.to_list() for column in self._columns]

    def to_display_string(self) -> str:
        """
        Render the grid as fixed-width text.

        A dashed edge of ``columns * 3`` characters frames one line per row
        (increasing y), each cell right-justified to width 3 (increasing x).
        """
        edge = "-" * (self.columns * CELL_WIDTH) + "\n"
        lines = [edge]
        for y in range(self.rows):
            row = "".join(str(int(self._levels[x, y])).rjust(CELL_WIDTH) for x in range(self.columns))
            lines.append(row + "\n")
        lines.append(edge)
        return "".join(lines)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, columns={self.columns})"

    def _check_x(self, x: int) -> None:
        if not 0 <= x < self.columns:
            raise GridIndexError(
                f"Column index {x} out of range [0, {self.columns})", index=x, size=self.columns
            )
