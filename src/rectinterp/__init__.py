"""
Interpolation on rectilinear grids of any dimensionality,
with pluggable strategies and out-of-bounds policies.
"""

from __future__ import annotations

from typing import Literal, Optional
from collections.abc import Sequence
from importlib.metadata import version

import numpy as np

from numpy.typing import NDArray

from rectinterp import raw
from .errors import (
    RectinterpError,
    ValidateError,
    StrategySelection,
    ExtrapolateSelection,
    EmptyGrid,
    Monotonicity,
    IncompatibleShapes,
    ValidateOther,
    InterpolateError,
    PointLength,
    ExtrapolateError,
    NaNError,
    InterpolateOther,
)
from .serialization import Array, ArrayF32, ArrayF64
from .data import InterpData, InterpData1D, InterpData2D, InterpData3D, InterpDataND
from .cubic import Natural, Clamped, NotAKnot, Periodic, CubicBC
from .strategy import (
    Strategy,
    Strategy1D,
    Strategy2D,
    Strategy3D,
    StrategyND,
    Linear,
    Nearest,
    LeftNearest,
    RightNearest,
    Cubic,
    Strategy1DEnum,
    Strategy2DEnum,
    Strategy3DEnum,
    StrategyNDEnum,
)
from .extrapolate import Enable, Fill, Clamp, Wrap, Error, Extrapolate
from .interpolator import (
    Interpolator,
    Interp0D,
    Interp1D,
    Interp2D,
    Interp3D,
    InterpND,
)
from .enums import InterpolatorEnum
from . import strategy as _strategy

__version__ = version("rectinterp")

__all__ = [
    "__version__",
    "raw",
    "interpn",
    "RectinterpError",
    "ValidateError",
    "StrategySelection",
    "ExtrapolateSelection",
    "EmptyGrid",
    "Monotonicity",
    "IncompatibleShapes",
    "ValidateOther",
    "InterpolateError",
    "PointLength",
    "ExtrapolateError",
    "NaNError",
    "InterpolateOther",
    "Array",
    "ArrayF32",
    "ArrayF64",
    "InterpData",
    "InterpData1D",
    "InterpData2D",
    "InterpData3D",
    "InterpDataND",
    "Natural",
    "Clamped",
    "NotAKnot",
    "Periodic",
    "CubicBC",
    "Strategy",
    "Strategy1D",
    "Strategy2D",
    "Strategy3D",
    "StrategyND",
    "Linear",
    "Nearest",
    "LeftNearest",
    "RightNearest",
    "Cubic",
    "Strategy1DEnum",
    "Strategy2DEnum",
    "Strategy3DEnum",
    "StrategyNDEnum",
    "Enable",
    "Fill",
    "Clamp",
    "Wrap",
    "Error",
    "Extrapolate",
    "Interpolator",
    "Interp0D",
    "Interp1D",
    "Interp2D",
    "Interp3D",
    "InterpND",
    "InterpolatorEnum",
]


def interpn(
    obs: Sequence[NDArray],
    grids: Sequence[NDArray],
    vals: NDArray,
    *,
    method: Literal[
        "linear", "nearest", "left_nearest", "right_nearest", "cubic"
    ] = "linear",
    extrapolate: Optional[Extrapolate] = None,
    out: Optional[NDArray] = None,
) -> NDArray:
    """
    Evaluate an N-dimensional grid at the supplied observation points.

    Builds a throwaway interpolator (1-D, 2-D or 3-D for those dimensionalities,
    N-D otherwise) holding views of the inputs where possible. To avoid the
    setup cost on repeated calls, use the persistent interpolator classes instead.

    Args:
        obs: Observation coordinates, one array per dimension, all of the same shape.
        grids: Grid axis coordinates, one array per dimension.
        vals: Values defined on the full tensor-product grid.
        method: Name of a built-in strategy. Cubic is available in 1-D only.
        extrapolate: Policy for observation points outside the grid. Defaults to Error().
        out: Optional preallocated array that receives the result.

    Raises:
        ValidateError: If the grid, values and method are not compatible
        InterpolateError: If an observation point can't be interpolated

    Returns:
        Interpolated values
    """
    strategy = _strategy.from_name(method)
    vals = np.asarray(vals)

    match len(grids):
        case 1:
            interpolator = Interp1D.new(
                grids[0], vals, strategy, extrapolate, copy=False
            )
        case 2:
            interpolator = Interp2D.new(*grids, vals, strategy, extrapolate, copy=False)
        case 3:
            interpolator = Interp3D.new(*grids, vals, strategy, extrapolate, copy=False)
        case _:
            interpolator = InterpND.new(grids, vals, strategy, extrapolate, copy=False)

    return interpolator.eval(obs, out)
