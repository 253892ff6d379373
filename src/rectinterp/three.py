"""3-D interpolation kernels, unrolled trilinear blending."""

from __future__ import annotations

from collections.abc import Sequence

from .data import InterpData3D
from .search import bracket


def linear(data: InterpData3D, point: Sequence):
    x = data.grid[0].data
    y = data.grid[1].data
    z = data.grid[2].data
    f = data.values.data
    x_l, x_u, x_diff = bracket(x, point[0])
    y_l, y_u, y_diff = bracket(y, point[1])
    z_l, z_u, z_diff = bracket(z, point[2])
    # interpolate in the x-direction
    f00 = f[x_l, y_l, z_l] * (1 - x_diff) + f[x_u, y_l, z_l] * x_diff
    f01 = f[x_l, y_l, z_u] * (1 - x_diff) + f[x_u, y_l, z_u] * x_diff
    f10 = f[x_l, y_u, z_l] * (1 - x_diff) + f[x_u, y_u, z_l] * x_diff
    f11 = f[x_l, y_u, z_u] * (1 - x_diff) + f[x_u, y_u, z_u] * x_diff
    # interpolate in the y-direction
    f0 = f00 * (1 - y_diff) + f10 * y_diff
    f1 = f01 * (1 - y_diff) + f11 * y_diff
    # interpolate in the z-direction
    return f0 * (1 - z_diff) + f1 * z_diff


def nearest(data: InterpData3D, point: Sequence):
    x = data.grid[0].data
    y = data.grid[1].data
    z = data.grid[2].data
    x_l, x_u, _ = bracket(x, point[0])
    i = x_l if point[0] - x[x_l] < x[x_u] - point[0] else x_u
    y_l, y_u, _ = bracket(y, point[1])
    j = y_l if point[1] - y[y_l] < y[y_u] - point[1] else y_u
    z_l, z_u, _ = bracket(z, point[2])
    k = z_l if point[2] - z[z_l] < z[z_u] - point[2] else z_u
    return data.values.data[i, j, k]
