"""
N-dimensional interpolation kernels, for dimensionality known only at runtime.

Both kernels first drop every axis on which the point coincides with a grid
coordinate (fixing the values tensor at that index), then blend the ``2**k``
values surrounding the point over the ``k`` remaining axes.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np
from numpy.typing import NDArray

from .data import InterpDataND
from .errors import NaNError
from .search import bracket, exact_index


def reduce_dims(
    data: InterpDataND, point: Sequence
) -> tuple[list, list[NDArray], NDArray]:
    """
    Remove the axes on which ``point`` lies exactly on a grid coordinate.

    Returns the remaining point coordinates, grid axes, and a view of the
    values tensor indexed at the coincident coordinates.
    """
    point = list(point)
    grid = [g.data for g in data.grid[: len(point)]]
    values = data.values.data
    # Reverse order so that removal doesn't shift the axes still to be visited
    for dim in reversed(range(len(point))):
        pos = exact_index(grid[dim], point[dim])
        if pos is not None:
            del point[dim]
            del grid[dim]
            values = values[(slice(None),) * dim + (pos,)]
    return point, grid, values


def hypercube(
    data: InterpDataND,
    point: Sequence,
    blend: Callable,
):
    """
    Collapse the corners surrounding ``point`` one axis at a time.

    ``blend(lower, upper, diff)`` combines the lower and upper halves of the
    corner array along its leading axis, where ``diff`` is the fractional
    position of the point between the two grid coordinates on that axis.
    Each pass halves the number of corners until a single value remains.
    """
    point, grid, values = reduce_dims(data, point)
    if values.size == 1:
        # Supplied point is coincident with a grid point
        return values.flat[0]

    lowers = []
    diffs = []
    for dim in range(len(point)):
        lower, _, diff = bracket(grid[dim], point[dim])
        lowers.append(lower)
        diffs.append(diff)

    # Shape (2, 2, ...), one axis per remaining dimension
    corners = values[tuple(slice(lower, lower + 2) for lower in lowers)]
    if np.isnan(corners).any():
        raise NaNError(
            f"\npoint = {point!r},\ngrid = {grid!r},\nvalues = {data.values.data!r}"
        )
    for diff in diffs:
        corners = blend(corners[0], corners[1], diff)

    return corners[()]


def _lerp(lower, upper, diff):
    return lower * (1 - diff) + upper * diff


def _nearest(lower, upper, diff):
    # Ties go to the upper neighbour
    return lower if diff < 0.5 else upper


def linear(data: InterpDataND, point: Sequence):
    return hypercube(data, point, _lerp)


def nearest(data: InterpDataND, point: Sequence):
    return hypercube(data, point, _nearest)
