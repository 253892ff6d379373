import numpy as np
import pytest

from rectinterp.search import bracket, exact_index, find_nearest_index, wrap


def test_find_nearest_index():
    grid = np.array([0.0, 1.0, 2.0, 3.0, 4.0])

    assert find_nearest_index(grid, 0.0) == 0
    assert find_nearest_index(grid, 0.5) == 0
    assert find_nearest_index(grid, 3.75) == 3
    # Interior grid points are the upper end of the interval below them
    assert find_nearest_index(grid, 1.0) == 0
    assert find_nearest_index(grid, 3.0) == 2
    # The last grid point is the upper end of the last interval
    assert find_nearest_index(grid, 4.0) == 3


def test_find_nearest_index_single_point():
    grid = np.array([3.0])
    assert find_nearest_index(grid, 3.0) == 0
    assert grid[find_nearest_index(grid, 3.0)] == 3.0


def test_find_nearest_index_rectilinear():
    grid = np.array([-1.0, -0.25, 0.5, 2.0, 10.0])
    for target, expected in [(-0.9, 0), (-0.1, 1), (0.75, 2), (9.99, 3)]:
        i = find_nearest_index(grid, target)
        assert i == expected
        assert grid[i] <= target <= grid[i + 1]


def test_bracket():
    grid = np.array([0.0, 1.0, 2.0, 3.0, 4.0])

    assert bracket(grid, 2.25) == (2, 3, 0.25)
    # Out of range uses the edge intervals
    assert bracket(grid, -1.0) == (0, 1, -1.0)
    assert bracket(grid, 5.0) == (3, 4, 2.0)
    # Single-point axis
    assert bracket(np.array([3.0]), 3.0) == (0, 0, 0.0)


def test_wrap():
    assert wrap(-0.5, 0.0, 4.0) == pytest.approx(3.5)
    assert wrap(9.0, 0.0, 4.0) == pytest.approx(1.0)
    assert wrap(-9.0, 1.0, 3.0) == pytest.approx(1.0)
    assert wrap(0.25 + 3 * 2.0, -1.0, 1.0) == pytest.approx(0.25)
    # Zero span maps everything to the single point
    assert wrap(5.0, 2.0, 2.0) == 2.0


def test_exact_index():
    grid = np.array([0.0, 0.5, 2.0])
    assert exact_index(grid, 0.5) == 1
    assert exact_index(grid, 2.0) == 2
    assert exact_index(grid, 0.25) is None
