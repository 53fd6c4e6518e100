"""Unit tests for the Grid and Column models."""

import pytest

from oscgrid.exceptions import GridIndexError, GridRangeError, GridValueError
from oscgrid.models import Grid


@pytest.mark.unit
class TestColumn:
    """Test Column indexing and range fill."""

    def test_length_matches_rows(self, grid):
        """Test every column has one level per row."""
        assert len(grid) == 16
        for column in grid:
            assert len(column) == 8

    def test_index_read_write(self, grid):
        """Test writing through a column is visible through the grid."""
        grid[0][0] = 13
        assert grid[0][0] == 13
        assert grid.get(0, 0) == 13

    def test_index_out_of_range(self, grid):
        """Test reads and writes outside [0, rows) fail."""
        with pytest.raises(GridIndexError):
            grid[0][8]
        with pytest.raises(GridIndexError):
            grid[0][8] = 1

    def test_negative_index_rejected(self, grid):
        """Test negative indices do not wrap around."""
        with pytest.raises(GridIndexError):
            grid[0][-1]

    def test_fill_range(self, grid):
        """Test filling a half-open range."""
        grid[2].fill_range(1, 4, 9)
        assert grid[2].to_list() == [0, 9, 9, 9, 0, 0, 0, 0]

    def test_fill_range_empty(self, grid):
        """Test an empty range is valid and writes nothing."""
        grid[2].fill_range(3, 3, 9)
        assert grid[2].to_list() == [0] * 8

    def test_fill_range_full(self, grid):
        """Test a range covering the whole column."""
        grid[2].fill_range(0, 8, 5)
        assert grid[2].to_list() == [5] * 8

    @pytest.mark.parametrize("start,end", [(-1, 2), (3, 2), (0, 9)])
    def test_fill_range_invalid(self, grid, start, end):
        """Test ranges outside 0 <= start <= end <= length fail."""
        with pytest.raises(GridRangeError):
            grid[2].fill_range(start, end, 1)
        assert grid[2].to_list() == [0] * 8


@pytest.mark.unit
class TestGrid:
    """Test Grid accessors and rendering."""

    def test_default_dimensions(self):
        """Test the default shape is 8 rows x 16 columns."""
        grid = Grid()
        assert grid.rows == 8
        assert grid.columns == 16
        assert grid.shape == (16, 8)

    def test_starts_dark(self, small_grid):
        """Test a new grid is all zeros."""
        assert small_grid.to_list() == [[0] * 4 for _ in range(5)]

    @pytest.mark.parametrize("rows,columns", [(0, 16), (8, 0), (-1, 4)])
    def test_invalid_dimensions(self, rows, columns):
        """Test non-positive dimensions are rejected."""
        with pytest.raises(ValueError):
            Grid(rows=rows, columns=columns)

    def test_set_then_get_every_cell(self, small_grid):
        """Test set(x, y, v) followed by get(x, y) returns v everywhere."""
        for x in range(small_grid.columns):
            for y in range(small_grid.rows):
                small_grid.set(x, y, x * 10 + y)

        for x in range(small_grid.columns):
            for y in range(small_grid.rows):
                assert small_grid.get(x, y) == x * 10 + y

    def test_level_not_clamped(self, grid):
        """Test out-of-convention levels are stored as given."""
        grid.set(1, 1, 99)
        grid.set(1, 2, -3)
        assert grid.get(1, 1) == 99
        assert grid.get(1, 2) == -3

    @pytest.mark.parametrize("x,y", [(16, 0), (0, 8), (-1, 0), (0, -1)])
    def test_get_out_of_range(self, grid, x, y):
        """Test coordinates outside the grid fail."""
        with pytest.raises(GridIndexError):
            grid.get(x, y)
        with pytest.raises(GridIndexError):
            grid.set(x, y, 1)

    def test_index_error_is_builtin_index_error(self, grid):
        """Test bounds errors can be caught as IndexError."""
        with pytest.raises(IndexError):
            grid[16]

    def test_fill(self, small_grid):
        """Test fill sets every cell."""
        small_grid.fill(7)
        assert all(level == 7 for column in small_grid for level in column)

    def test_write_row_checks_before_writing(self, grid):
        """Test a row write that overruns the grid writes nothing."""
        with pytest.raises(GridIndexError):
            grid.write_row(12, 0, [1] * 8)
        assert grid.to_list() == [[0] * 8 for _ in range(16)]

    @pytest.mark.parametrize("level", [2**63, -(2**63) - 1, 2**64])
    def test_oversized_level_rejected(self, grid, level):
        """Test a level outside the int64 cell range fails as a ValueError."""
        with pytest.raises(GridValueError) as exc_info:
            grid.set(0, 0, level)
        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.level == level
        assert grid.get(0, 0) == 0

    def test_int64_extremes_stored(self, grid):
        grid.set(0, 0, 2**63 - 1)
        grid.set(0, 1, -(2**63))
        assert grid.get(0, 0) == 2**63 - 1
        assert grid.get(0, 1) == -(2**63)

    def test_oversized_level_in_row_writes_nothing(self, grid):
        with pytest.raises(GridValueError):
            grid.write_row(0, 0, [1] * 7 + [2**64])
        assert grid.to_list() == [[0] * 8 for _ in range(16)]

    def test_write_block_requires_square(self, grid):
        """Test a block write with the wrong number of levels fails."""
        with pytest.raises(ValueError):
            grid.write_block(0, 0, 8, [1] * 63)

    def test_display_string_all_zero(self, grid):
        """Test the rendering of an empty 8x16 grid."""
        edge = "-" * 48 + "\n"
        row = "  0" * 16 + "\n"
        assert grid.to_display_string() == edge + row * 8 + edge

    def test_display_string_layout(self, grid):
        """Test rows render top to bottom and columns left to right."""
        grid.write_column(0, 0, [0, 1, 2, 3, 4, 5, 6, 7])
        grid.set(15, 7, 15)

        assert grid.to_display_string() == (
            "------------------------------------------------\n"
            "  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0\n"
            "  1  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0\n"
            "  2  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0\n"
            "  3  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0\n"
            "  4  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0\n"
            "  5  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0\n"
            "  6  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0\n"
            "  7  0  0  0  0  0  0  0  0  0  0  0  0  0  0 15\n"
            "------------------------------------------------\n"
        )

    def test_display_string_custom_shape(self, small_grid):
        """Test the edge width follows the column count."""
        lines = small_grid.to_display_string().splitlines()
        assert lines[0] == "-" * 15
        assert lines[-1] == "-" * 15
        assert len(lines) == 4 + 2
        assert str(small_grid) == small_grid.to_display_string()
