"""
Re-exported interpolation kernels.

These operate directly on validated grid data and skip point-length checks
and extrapolation handling: out-of-range points are extrapolated linearly
by the linear kernels.
Using these can yield some performance benefit at the expense of ergonomics.
"""

from .one import (
    linear as linear_1d,
    nearest as nearest_1d,
    left_nearest as left_nearest_1d,
    right_nearest as right_nearest_1d,
)
from .two import linear as linear_2d, nearest as nearest_2d
from .three import linear as linear_3d, nearest as nearest_3d
from .nd import linear as linear_nd, nearest as nearest_nd
from .search import find_nearest_index

__all__ = [
    "linear_1d",
    "nearest_1d",
    "left_nearest_1d",
    "right_nearest_1d",
    "linear_2d",
    "nearest_2d",
    "linear_3d",
    "nearest_3d",
    "linear_nd",
    "nearest_nd",
    "find_nearest_index",
]
