"""Index search and coordinate wrapping on a single sorted grid axis."""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import NDArray


def find_nearest_index(grid: NDArray, target) -> int:
    """
    Find the index of the grid point at or left of ``target``, usable as the
    lower index of a bracketing pair ``(i, i + 1)``.

    Assumes ``grid[0] <= target <= grid[-1]``. A single-point grid returns 0.
    A target equal to the last grid point returns ``len(grid) - 2`` so that the
    upper neighbour is the final point. On ties the search window moves down,
    favouring the lower index.
    """
    n = len(grid)
    if n < 2:
        return 0
    if target == grid[n - 1]:
        return n - 2

    low = 0
    high = n - 1
    while low < high:
        mid = low + (high - low) // 2
        if grid[mid] >= target:
            high = mid
        else:
            low = mid + 1

    if low > 0 and grid[low] >= target:
        return low - 1
    return low


def bracket(grid: NDArray, target) -> tuple[int, int, float]:
    """
    Lower index, upper index, and fractional position of ``target``
    between them.

    Targets below or above the grid use the first or last interval, so the
    fraction is negative or greater than one (linear extrapolation).
    A single-point axis returns ``(0, 0, 0)``.
    """
    n = len(grid)
    if n == 1:
        return 0, 0, 0.0
    if target < grid[0]:
        lower = 0
    elif target > grid[n - 1]:
        lower = n - 2
    else:
        lower = find_nearest_index(grid, target)
    upper = lower + 1
    diff = (target - grid[lower]) / (grid[upper] - grid[lower])
    return lower, upper, diff


def wrap(value, vmin, vmax):
    """
    Wrap ``value`` into ``[vmin, vmax)`` using floored modulo,
    so negative offsets wrap from the top of the range.
    """
    span = vmax - vmin
    if span == 0:
        return vmin
    return vmin + (value - vmin) % span


def exact_index(grid: NDArray, target) -> Optional[int]:
    """Index of the grid point equal to ``target``, if there is one."""
    hits = np.flatnonzero(grid == target)
    if hits.size:
        return int(hits[0])
    return None
