"""
A user-defined 2-D strategy, plugged into an interpolator
alongside the built-in ones.
"""

from __future__ import annotations

import numpy as np

from rectinterp import Interp2D, Strategy2D, Enable, Error, ExtrapolateSelection


class Product(Strategy2D):
    """Product of the point's coordinates, ignoring the grid values."""

    def interpolate(self, data, point):
        return float(np.prod(point))

    def allow_extrapolate(self) -> bool:
        # Gives no special treatment to points outside the grid
        return False


if __name__ == "__main__":
    x = np.array([0.0, 2.0, 4.0])
    y = np.array([0.0, 4.0, 8.0])
    values = np.zeros((3, 3))

    interpolator = Interp2D.new(x, y, values, Product(), Error())
    assert interpolator.interpolate([2.0, 3.0]) == 6.0

    try:
        Interp2D.new(x, y, values, Product(), Enable())
    except ExtrapolateSelection as e:
        print(e)
    else:
        raise AssertionError("expected the strategy to refuse extrapolation")
