"""Grid bounds errors.

These signal a malformed offset in an otherwise valid message, or a caller
bug. They propagate to the caller; nothing in oscgrid retries them.
"""

from .base import OscGridError


class GridIndexError(OscGridError, IndexError):
    """A cell, column or row index fell outside the grid."""

    HINT = "Check the offsets against the configured grid size ('oscgrid config show')."

    def __init__(self, detail: str, index: int | None = None, size: int | None = None):
        super().__init__(detail)
        self.index = index
        self.size = size


class GridRangeError(GridIndexError):
    """A half-open fill range [start, end) does not satisfy 0 <= start <= end <= length."""

    def __init__(self, start: int, end: int, length: int):
        super().__init__(f"Invalid range [{start}, {end}) for column of length {length}", size=length)
        self.start = start
        self.end = end


class GridValueError(OscGridError, ValueError):
    """A level cannot be stored in a grid cell."""

    def __init__(self, level: int):
        super().__init__(f"Level {level} does not fit a grid cell (64-bit signed)")
        self.level = level
