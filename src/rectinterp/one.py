"""
1-D interpolation kernels.

These assume the point has already been routed through the extrapolation
policy: it is inside the grid, or was clamped/wrapped onto it, or
extrapolation is enabled (linear only).
"""

from __future__ import annotations

from collections.abc import Sequence

from .data import InterpData1D
from .search import bracket, exact_index, find_nearest_index


def linear(data: InterpData1D, point: Sequence):
    x = data.grid[0].data
    f_x = data.values.data
    i = exact_index(x, point[0])
    if i is not None:
        return f_x[i]
    x_l, x_u, x_diff = bracket(x, point[0])
    return f_x[x_l] * (1 - x_diff) + f_x[x_u] * x_diff


def nearest(data: InterpData1D, point: Sequence):
    x = data.grid[0].data
    f_x = data.values.data
    i = exact_index(x, point[0])
    if i is not None:
        return f_x[i]
    x_l, x_u, _ = bracket(x, point[0])
    # Ties go to the upper neighbour
    i = x_l if point[0] - x[x_l] < x[x_u] - point[0] else x_u
    return f_x[i]


def left_nearest(data: InterpData1D, point: Sequence):
    x = data.grid[0].data
    f_x = data.values.data
    i = exact_index(x, point[0])
    if i is not None:
        return f_x[i]
    return f_x[find_nearest_index(x, point[0])]


def right_nearest(data: InterpData1D, point: Sequence):
    x = data.grid[0].data
    f_x = data.values.data
    i = exact_index(x, point[0])
    if i is not None:
        return f_x[i]
    return f_x[min(find_nearest_index(x, point[0]) + 1, len(x) - 1)]
