import numpy as np
import pytest

from yeewave import Grid, InvalidConfiguration, IndexOutOfBounds, MAX_CELLS


def test_grid_starts_at_zero():
    grid = Grid.create(7, 4)
    assert grid.width == 7
    assert grid.height == 4
    assert grid.shape == (4, 7)
    assert grid.data.dtype == np.float32
    assert np.all(grid.to_numpy() == 0.0)


def test_grid_read_write_is_row_major():
    grid = Grid(5, 3)
    grid.write(4, 1, 2.5)
    assert grid.read(4, 1) == 2.5
    # offset x + y * width
    assert grid.to_numpy().ravel()[4 + 1 * 5] == 2.5
    grid[0, 2] = -1.0
    assert grid[0, 2] == -1.0


@pytest.mark.parametrize("x, y", [(5, 0), (0, 3), (-1, 0), (0, -1), (10, 10)])
def test_grid_out_of_range_access_raises(x, y):
    grid = Grid(5, 3)
    with pytest.raises(IndexOutOfBounds):
        grid.read(x, y)
    with pytest.raises(IndexOutOfBounds):
        grid.write(x, y, 1.0)


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-3, 3), (2.5, 3), (True, 3)])
def test_grid_invalid_dimensions(width, height):
    with pytest.raises(InvalidConfiguration):
        Grid(width, height)


def test_grid_rejects_absurd_size():
    with pytest.raises(InvalidConfiguration):
        Grid(MAX_CELLS, 2)


def test_clone_is_deep():
    grid = Grid(4, 4)
    grid.write(1, 2, 3.0)
    copy = grid.clone()
    assert copy == grid
    copy.write(1, 2, 0.0)
    assert grid.read(1, 2) == 3.0
    assert copy != grid


def test_fill():
    grid = Grid(3, 3)
    grid.fill(1.5)
    assert np.all(grid.to_numpy() == 1.5)
