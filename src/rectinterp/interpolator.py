"""
Interpolators: grid data combined with a strategy and an extrapolation policy.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Literal, Optional
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from pydantic import (
    model_validator,
    ConfigDict,
    BaseModel,
)

from .data import InterpData, InterpData1D, InterpData2D, InterpData3D, InterpDataND
from .errors import (
    ExtrapolateError,
    ExtrapolateSelection,
    PointLength,
    StrategySelection,
    ValidateOther,
)
from .extrapolate import Clamp, Enable, Error, Extrapolate, Fill, Wrap
from .search import wrap
from .strategy import (
    AnyStrategy,
    Linear,
    Strategy,
    Strategy1D,
    Strategy2D,
    Strategy3D,
    StrategyND,
    strategy_name,
)

logger = logging.getLogger(__name__)


class Interpolator(ABC):
    """Operations common to interpolators of every dimensionality."""

    @abstractmethod
    def ndim(self) -> int:
        """Number of coordinates a query point must have."""

    @abstractmethod
    def validate(self) -> None:
        """Re-run all checks on the data, strategy and extrapolation policy."""

    @abstractmethod
    def interpolate(self, point: Sequence):
        """Interpolate at a single point."""

    @abstractmethod
    def set_extrapolate(self, extrapolate) -> None:
        """Swap the extrapolation policy, if it is compatible with the strategy."""

    def eval(self, obs: Sequence[NDArray], out: Optional[NDArray] = None) -> NDArray:
        """Evaluate the interpolator at a set of observation points,
        optionally writing the output into a preallocated array.

        Args:
            obs: [x, y, ...] coordinates of observation points, all of the same shape.
            out: Optional preallocated array for output. Defaults to None.

        Raises:
            PointLength: If the number of coordinate arrays does not match ndim()
            InterpolateError: If interpolation fails at any observation point

        Returns:
            Array of evaluated values in the same shape as obs[0]
        """
        ndim = self.ndim()
        if len(obs) != ndim:
            raise PointLength(ndim)
        obs = [np.asarray(x) for x in obs]
        shape = obs[0].shape if obs else ()
        flat = [x.ravel() for x in obs]
        size = int(np.prod(shape))

        results = [self.interpolate([x[i] for x in flat]) for i in range(size)]

        out_inner = out if out is not None else np.zeros(shape, dtype=self._out_dtype())
        out_inner[...] = np.reshape(np.asarray(results, dtype=out_inner.dtype), out_inner.shape)
        return out_inner

    def _out_dtype(self) -> np.dtype:
        return np.dtype(np.float64)


class GridInterpolator(BaseModel, Interpolator):
    """
    Interpolator over a rectilinear grid with a fixed number of axes.

    Subclasses set the data type, and the strategy ABC a strategy must
    implement to be used with them.
    """

    # Assigning a field re-runs the full validation
    model_config = ConfigDict(
        extra="forbid", arbitrary_types_allowed=True, validate_assignment=True
    )

    ARITY: ClassVar[type[Strategy]] = StrategyND

    data: InterpData
    strategy: AnyStrategy = Linear()
    extrapolate: Extrapolate = Error()

    @model_validator(mode="after")
    def _validate_model(self):
        self.validate()
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        # A rejected assignment leaves the field as it was
        if name not in type(self).model_fields:
            return super().__setattr__(name, value)
        previous = self.__dict__[name]
        try:
            super().__setattr__(name, value)
        except Exception:
            self.__dict__[name] = previous
            raise

    def ndim(self) -> int:
        return self.data.ndim()

    def validate(self) -> None:
        self.data.validate()
        self._check_strategy(self.strategy)
        self._check_extrapolate(self.strategy, self.extrapolate)
        self.strategy.init(self.data)
        logger.debug(
            "validated %s with strategy %s and extrapolation %s",
            type(self).__name__,
            strategy_name(self.strategy),
            self.extrapolate.kind,
        )

    def _check_strategy(self, strategy: Strategy) -> None:
        if not isinstance(strategy, self.ARITY):
            raise StrategySelection(strategy_name(strategy))

    def _check_extrapolate(self, strategy: Strategy, extrapolate) -> None:
        if not isinstance(extrapolate, Enable):
            return
        if not strategy.allow_extrapolate():
            raise ExtrapolateSelection(extrapolate.kind)
        for i in range(self.ndim()):
            if self.data.grid[i].data.size < 2:
                raise ValidateOther(
                    f"at least 2 grid points are required to extrapolate: dim {i}"
                )

    def set_strategy(self, strategy: Strategy) -> None:
        """
        Swap the strategy.

        The new strategy is checked against the data and the current
        extrapolation policy; on failure the interpolator is unchanged.
        """
        self.strategy = strategy
        logger.debug("%s strategy set to %s", type(self).__name__, strategy_name(strategy))

    def set_extrapolate(self, extrapolate) -> None:
        """
        Swap the extrapolation policy.

        The new policy is checked against the current strategy;
        on failure the interpolator is unchanged.
        """
        self.extrapolate = extrapolate
        logger.debug("%s extrapolation set to %s", type(self).__name__, extrapolate.kind)

    def interpolate(self, point: Sequence):
        """
        Interpolate at ``point``, applying the extrapolation policy
        to any coordinates outside the grid.

        Raises:
            PointLength: If the point does not have ndim() coordinates
            ExtrapolateError: If the point is outside the grid under the ``Error`` policy
            InterpolateError: If the strategy fails
        """
        ndim = self.ndim()
        if len(point) != ndim:
            raise PointLength(ndim)
        point = list(point)

        outside = []
        for i in range(ndim):
            lo, hi = self.data.bounds(i)
            if not lo <= point[i] <= hi:
                outside.append(i)

        if outside:
            match self.extrapolate:
                case Enable():
                    pass
                case Fill(value=value):
                    return self.data.dtype().type(value)
                case Clamp():
                    for i in outside:
                        lo, hi = self.data.bounds(i)
                        point[i] = min(max(point[i], lo), hi)
                case Wrap():
                    for i in outside:
                        lo, hi = self.data.bounds(i)
                        point[i] = wrap(point[i], lo, hi)
                case Error():
                    msgs = []
                    for i in outside:
                        lo, hi = self.data.bounds(i)
                        msgs.append(f"dim {i}: {point[i]} not in [{lo}, {hi}]")
                    raise ExtrapolateError("; ".join(msgs))

        return self.strategy.interpolate(self.data, point)

    def check_bounds(self, obs: Sequence[NDArray], atol: float) -> NDArray[np.bool_]:
        """
        Check if the observation points violated the bounds on each dimension.

        Args:
            obs: [x, y, ...] coordinates of observation points.
            atol: Absolute tolerance on bounds.

        Returns:
            An array of flags for each dimension, each True if that dimension's
            bounds were violated.
        """
        ndim = self.ndim()
        if len(obs) != ndim:
            raise PointLength(ndim)
        out = np.array([False] * ndim)
        for i, x in enumerate(obs):
            lo, hi = self.data.bounds(i)
            x = np.asarray(x)
            out[i] = bool(np.any((x < lo - atol) | (x > hi + atol)))
        return out

    def _out_dtype(self) -> np.dtype:
        return self.data.dtype()


class Interp0D(BaseModel, Interpolator):
    """Constant value, queried with an empty point."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["0d"] = "0d"
    value: float

    @classmethod
    def new(cls, value: float) -> Interp0D:
        return cls(value=value)

    def ndim(self) -> int:
        return 0

    def validate(self) -> None:
        pass

    def interpolate(self, point: Sequence):
        if len(point) != 0:
            raise PointLength(0)
        return self.value

    def set_extrapolate(self, extrapolate) -> None:
        # A 0-D interpolator has no bounds
        pass


class Interp1D(GridInterpolator):
    ARITY: ClassVar[type[Strategy]] = Strategy1D

    kind: Literal["1d"] = "1d"
    data: InterpData1D

    @classmethod
    def new(
        cls,
        x: NDArray,
        f_x: NDArray,
        strategy: Optional[Strategy] = None,
        extrapolate: Optional[Extrapolate] = None,
        copy: bool = True,
    ) -> Interp1D:
        """
        Build and validate a 1-D interpolator.

        Args:
            x: Grid coordinates, strictly increasing.
            f_x: Values at the grid coordinates.
            strategy: Defaults to Linear().
            extrapolate: Defaults to Error().
            copy: When False, hold views of arrays that are already
                  contiguous and of the right data type.

        Returns:
            A new, validated interpolator.
        """
        return cls(
            data=InterpData1D.new(x, f_x, copy=copy),
            strategy=strategy if strategy is not None else Linear(),
            extrapolate=extrapolate if extrapolate is not None else Error(),
        )


class Interp2D(GridInterpolator):
    ARITY: ClassVar[type[Strategy]] = Strategy2D

    kind: Literal["2d"] = "2d"
    data: InterpData2D

    @classmethod
    def new(
        cls,
        x: NDArray,
        y: NDArray,
        f_xy: NDArray,
        strategy: Optional[Strategy] = None,
        extrapolate: Optional[Extrapolate] = None,
        copy: bool = True,
    ) -> Interp2D:
        return cls(
            data=InterpData2D.new(x, y, f_xy, copy=copy),
            strategy=strategy if strategy is not None else Linear(),
            extrapolate=extrapolate if extrapolate is not None else Error(),
        )


class Interp3D(GridInterpolator):
    ARITY: ClassVar[type[Strategy]] = Strategy3D

    kind: Literal["3d"] = "3d"
    data: InterpData3D

    @classmethod
    def new(
        cls,
        x: NDArray,
        y: NDArray,
        z: NDArray,
        f_xyz: NDArray,
        strategy: Optional[Strategy] = None,
        extrapolate: Optional[Extrapolate] = None,
        copy: bool = True,
    ) -> Interp3D:
        return cls(
            data=InterpData3D.new(x, y, z, f_xyz, copy=copy),
            strategy=strategy if strategy is not None else Linear(),
            extrapolate=extrapolate if extrapolate is not None else Error(),
        )


class InterpND(GridInterpolator):
    """
    Interpolator whose number of axes is decided at runtime.

    Slower than the fixed 1-D, 2-D and 3-D interpolators, which
    should give the same results for the same data.
    """

    ARITY: ClassVar[type[Strategy]] = StrategyND

    kind: Literal["nd"] = "nd"
    data: InterpDataND

    @classmethod
    def new(
        cls,
        grid: Sequence[NDArray],
        values: NDArray,
        strategy: Optional[Strategy] = None,
        extrapolate: Optional[Extrapolate] = None,
        copy: bool = True,
    ) -> InterpND:
        """
        Build and validate an N-D interpolator.

        Args:
            grid: One strictly increasing coordinate array per axis.
            values: Values at grid points, as obtained from np.meshgrid(..., indexing="ij").
                    A single value with an empty grid gives a 0-D interpolator.
            strategy: Defaults to Linear().
            extrapolate: Defaults to Error().
            copy: When False, hold views of arrays that are already
                  contiguous and of the right data type.

        Returns:
            A new, validated interpolator.
        """
        return cls(
            data=InterpDataND.new(grid, values, copy=copy),
            strategy=strategy if strategy is not None else Linear(),
            extrapolate=extrapolate if extrapolate is not None else Error(),
        )


__all__ = [
    "Interpolator",
    "GridInterpolator",
    "Interp0D",
    "Interp1D",
    "Interp2D",
    "Interp3D",
    "InterpND",
]
