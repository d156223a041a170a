"""Tests for langton.world.grid."""

import numpy as np
import pytest

from langton.simulation.errors import ConfigError, InvariantError
from langton.world.grid import Grid


class TestGrid:
    """Tests for cell access and rendering."""

    def test_new_grid_is_white_square(self) -> None:
        grid = Grid(3)
        assert grid.dimensions() == (3, 3)
        assert grid.black_cells() == 0
        assert grid.bounding_box() is None

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size_rejected(self, size: int) -> None:
        with pytest.raises(ConfigError):
            Grid(size)

    def test_flip_and_get(self, small_grid: Grid) -> None:
        small_grid.flip(1, 2)
        assert small_grid.get(1, 2) is True
        assert small_grid.get(2, 1) is False

    def test_double_flip_restores(self, small_grid: Grid) -> None:
        for r in range(4):
            for c in range(4):
                small_grid.flip(r, c)
                small_grid.flip(r, c)
        assert small_grid == Grid(4)

    @pytest.mark.parametrize(("row", "col"), [(4, 0), (0, 4), (-1, 0), (0, -1)])
    def test_out_of_bounds_access(self, small_grid: Grid, row: int, col: int) -> None:
        with pytest.raises(InvariantError, match="out of bounds for 4x4"):
            small_grid.get(row, col)
        with pytest.raises(InvariantError):
            small_grid.flip(row, col)

    def test_render(self) -> None:
        grid = Grid(2)
        grid.flip(0, 1)
        assert grid.render() == "0 1 \n0 0 \n"
        assert str(grid) == grid.render()

    def test_bounding_box(self, small_grid: Grid) -> None:
        small_grid.flip(1, 3)
        small_grid.flip(2, 1)
        assert small_grid.bounding_box() == (1, 1, 2, 3)
        assert small_grid.black_cells() == 2

    def test_to_array_is_a_copy(self, small_grid: Grid) -> None:
        arr = small_grid.to_array()
        arr[0, 0] = True
        assert small_grid.get(0, 0) is False


class TestGridFromArray:
    """Tests for building grids from existing data."""

    def test_from_rows(self) -> None:
        grid = Grid.from_array([[1, 0, 0], [0, 1, 1]])
        assert grid.dimensions() == (2, 3)
        assert grid.get(1, 2) is True

    def test_ragged_rows_rejected(self) -> None:
        with pytest.raises(InvariantError):
            Grid.from_array([[1, 0], [1]])

    def test_empty_rejected(self) -> None:
        with pytest.raises(InvariantError):
            Grid.from_array([[]])


class TestGridExtension:
    """Tests for the four edge-extension operations."""

    @pytest.fixture
    def marked(self) -> Grid:
        grid = Grid(3)
        grid.flip(0, 0)
        grid.flip(2, 1)
        return grid

    def test_prepend_row_shifts_rows(self, marked: Grid) -> None:
        marked.prepend_row()
        assert marked.dimensions() == (4, 3)
        assert not marked.to_array()[0].any()
        assert marked.get(1, 0) and marked.get(3, 1)
        assert marked.black_cells() == 2

    def test_append_row_keeps_indices(self, marked: Grid) -> None:
        marked.append_row()
        assert marked.dimensions() == (4, 3)
        assert marked.get(0, 0) and marked.get(2, 1)
        assert not marked.to_array()[3].any()

    def test_prepend_column_shifts_columns(self, marked: Grid) -> None:
        marked.prepend_column()
        assert marked.dimensions() == (3, 4)
        assert not marked.to_array()[:, 0].any()
        assert marked.get(0, 1) and marked.get(2, 2)

    def test_append_column_keeps_indices(self, marked: Grid) -> None:
        marked.append_column()
        assert marked.dimensions() == (3, 4)
        assert marked.get(0, 0) and marked.get(2, 1)
        assert not marked.to_array()[:, 3].any()

    def test_rectangular_after_mixed_extension(self, marked: Grid) -> None:
        marked.prepend_row()
        marked.append_column()
        marked.prepend_column()
        marked.append_row()
        rows = marked.render().splitlines()
        assert len(rows) == 5
        assert {len(row.split()) for row in rows} == {5}
        assert np.array_equal(
            marked.to_array()[1:4, 1:4],
            Grid.from_array([[1, 0, 0], [0, 0, 0], [0, 1, 0]]).to_array(),
        )
