"""2-D interpolation kernels, unrolled bilinear blending."""

from __future__ import annotations

from collections.abc import Sequence

from .data import InterpData2D
from .search import bracket


def linear(data: InterpData2D, point: Sequence):
    x = data.grid[0].data
    y = data.grid[1].data
    f_xy = data.values.data
    x_l, x_u, x_diff = bracket(x, point[0])
    y_l, y_u, y_diff = bracket(y, point[1])
    # interpolate in the x-direction
    f0 = f_xy[x_l, y_l] * (1 - x_diff) + f_xy[x_u, y_l] * x_diff
    f1 = f_xy[x_l, y_u] * (1 - x_diff) + f_xy[x_u, y_u] * x_diff
    # interpolate in the y-direction
    return f0 * (1 - y_diff) + f1 * y_diff


def nearest(data: InterpData2D, point: Sequence):
    x = data.grid[0].data
    y = data.grid[1].data
    x_l, x_u, _ = bracket(x, point[0])
    i = x_l if point[0] - x[x_l] < x[x_u] - point[0] else x_u
    y_l, y_u, _ = bracket(y, point[1])
    j = y_l if point[1] - y[y_l] < y[y_u] - point[1] else y_u
    return data.values.data[i, j]
