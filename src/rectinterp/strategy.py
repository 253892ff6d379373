"""
Interpolation strategies.

A strategy is any object implementing the capability ABC for the arity it
supports (``Strategy1D``, ``Strategy2D``, ``Strategy3D`` or ``StrategyND``).
A strategy may implement several of them.

The built-in strategies are pydantic models tagged by ``kind`` and can be
serialized along with the interpolator holding them. User-defined strategies
only need to subclass the relevant ABC; they are usable anywhere a built-in
is, but an interpolator holding one can't be serialized.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Union, Annotated, Literal, Any, Optional

from pydantic import (
    ConfigDict,
    BaseModel,
    Field,
    PlainValidator,
    PrivateAttr,
    TypeAdapter,
)

from . import one, two, three, nd, cubic
from .cubic import CubicBC, Natural, Periodic
from .data import InterpData, InterpData1D, InterpData2D, InterpData3D, InterpDataND
from .errors import InterpolateOther
from .search import bracket, exact_index, wrap


class Strategy(ABC):
    """Capability interface shared by every interpolation strategy."""

    def init(self, data: InterpData) -> None:
        """
        Prepare the strategy for use with ``data``, e.g. precompute coefficients.

        Called whenever the strategy is attached to an interpolator.
        May raise a ``ValidateError``.
        """

    @abstractmethod
    def interpolate(self, data: InterpData, point: Sequence):
        """
        Interpolate ``data`` at ``point``.

        The point has already been checked for length and routed through
        the interpolator's extrapolation policy.
        """

    @abstractmethod
    def allow_extrapolate(self) -> bool:
        """Whether the strategy gives meaningful results under ``Enable`` extrapolation."""


class Strategy1D(Strategy):
    """Strategy usable with 1-D interpolators."""


class Strategy2D(Strategy):
    """Strategy usable with 2-D interpolators."""


class Strategy3D(Strategy):
    """Strategy usable with 3-D interpolators."""


class StrategyND(Strategy):
    """Strategy usable with N-D interpolators."""


class _StrategyModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Linear(_StrategyModel, Strategy1D, Strategy2D, Strategy3D, StrategyND):
    """Multilinear interpolation, continued along the edge interval when extrapolating."""

    kind: Literal["linear"] = "linear"

    def interpolate(self, data: InterpData, point: Sequence):
        match data:
            case InterpData1D():
                return one.linear(data, point)
            case InterpData2D():
                return two.linear(data, point)
            case InterpData3D():
                return three.linear(data, point)
            case InterpDataND():
                return nd.linear(data, point)
            case _:
                raise InterpolateOther(f"unsupported data: {type(data).__name__}")

    def allow_extrapolate(self) -> bool:
        return True


class Nearest(_StrategyModel, Strategy1D, Strategy2D, Strategy3D, StrategyND):
    """
    Take the value at the closest grid point, choosing independently per axis.
    Points exactly halfway between two grid points take the upper one.
    """

    kind: Literal["nearest"] = "nearest"

    def interpolate(self, data: InterpData, point: Sequence):
        match data:
            case InterpData1D():
                return one.nearest(data, point)
            case InterpData2D():
                return two.nearest(data, point)
            case InterpData3D():
                return three.nearest(data, point)
            case InterpDataND():
                return nd.nearest(data, point)
            case _:
                raise InterpolateOther(f"unsupported data: {type(data).__name__}")

    def allow_extrapolate(self) -> bool:
        return False


class LeftNearest(_StrategyModel, Strategy1D):
    """Take the value at the grid point at or to the left of the point."""

    kind: Literal["left_nearest"] = "left_nearest"

    def interpolate(self, data: InterpData1D, point: Sequence):
        return one.left_nearest(data, point)

    def allow_extrapolate(self) -> bool:
        return False


class RightNearest(_StrategyModel, Strategy1D):
    """Take the value at the grid point to the right of the point."""

    kind: Literal["right_nearest"] = "right_nearest"

    def interpolate(self, data: InterpData1D, point: Sequence):
        return one.right_nearest(data, point)

    def allow_extrapolate(self) -> bool:
        return False


class Cubic(_StrategyModel, Strategy1D):
    """
    Cubic spline through the 1-D data under the boundary condition ``bc``.

    Outside the grid, with extrapolation enabled, ``extrapolate="linear"``
    continues along the tangent at the end knot, and ``"spline"`` keeps
    evaluating the end polynomial. A ``Periodic`` spline always wraps.
    """

    kind: Literal["cubic"] = "cubic"
    bc: CubicBC = Natural()
    extrapolate: Literal["linear", "spline"] = "linear"

    # (x, y, second derivatives) for the data last seen.
    # Interpolators hold their own copy of the strategy, so this is per-interpolator
    _coeffs: Optional[tuple] = PrivateAttr(default=None)

    def init(self, data: InterpData1D) -> None:
        self._solve(data)

    def _solve(self, data: InterpData1D) -> tuple:
        x = data.grid[0].data
        y = data.values.data
        coeffs = (x, y, cubic.second_derivatives(x, y, self.bc))
        self._coeffs = coeffs
        return coeffs

    def _coefficients(self, data: InterpData1D) -> tuple:
        coeffs = self._coeffs
        if (
            coeffs is None
            or coeffs[0] is not data.grid[0].data
            or coeffs[1] is not data.values.data
        ):
            coeffs = self._solve(data)
        return coeffs

    def interpolate(self, data: InterpData1D, point: Sequence):
        x, y, z = self._coefficients(data)
        t = point[0]
        i = exact_index(x, t)
        if i is not None:
            return y[i]

        if isinstance(self.bc, Periodic):
            if not x[0] <= t <= x[-1]:
                t = wrap(t, x[0], x[-1])
        elif self.extrapolate == "linear":
            if t < x[0]:
                return y[0] + cubic.slope_start(x, y, z) * (t - x[0])
            if t > x[-1]:
                return y[-1] + cubic.slope_end(x, y, z) * (t - x[-1])

        lower, _, _ = bracket(x, t)
        return cubic.evaluate(x, y, z, lower, t)

    def allow_extrapolate(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        # Cached coefficients are not part of the value
        if not isinstance(other, Cubic):
            return NotImplemented
        return self.bc == other.bc and self.extrapolate == other.extrapolate


Strategy1DEnum = Annotated[
    Union[Linear, Nearest, LeftNearest, RightNearest, Cubic],
    Field(discriminator="kind"),
]
Strategy2DEnum = Annotated[Union[Linear, Nearest], Field(discriminator="kind")]
Strategy3DEnum = Annotated[Union[Linear, Nearest], Field(discriminator="kind")]
StrategyNDEnum = Annotated[Union[Linear, Nearest], Field(discriminator="kind")]

BUILTIN_STRATEGIES = (Linear, Nearest, LeftNearest, RightNearest, Cubic)

_builtin_adapter = TypeAdapter(Strategy1DEnum)


def _validate_strategy(value: Any) -> Strategy:
    # Built-ins are copied so each interpolator owns its cached coefficients,
    # other strategy objects are held as-is,
    # serialized forms are parsed into the built-in models
    if isinstance(value, _StrategyModel):
        return value.model_copy()
    if isinstance(value, Strategy):
        return value
    return _builtin_adapter.validate_python(value)


AnyStrategy = Annotated[Any, PlainValidator(_validate_strategy)]


def strategy_name(strategy: Any) -> str:
    """Short name of a strategy for error messages."""
    return getattr(strategy, "kind", type(strategy).__name__)


def from_name(name: str) -> Strategy:
    """Default-configured built-in strategy with the given ``kind``."""
    for cls in BUILTIN_STRATEGIES:
        if cls.model_fields["kind"].default == name:
            return cls()
    raise ValueError(
        f"unknown strategy {name!r}, expected one of "
        f"{[cls.model_fields['kind'].default for cls in BUILTIN_STRATEGIES]}"
    )


__all__ = [
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
    "BUILTIN_STRATEGIES",
    "AnyStrategy",
]
