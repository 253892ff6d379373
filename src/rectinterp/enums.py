"""
A serializable container holding an interpolator of any dimensionality,
restricted to the built-in strategies.
"""

from __future__ import annotations

from typing import Union, Annotated, Optional
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from pydantic import (
    model_validator,
    ConfigDict,
    BaseModel,
    Field,
)

from .errors import StrategySelection
from .extrapolate import Extrapolate
from .interpolator import (
    Interpolator,
    Interp0D,
    Interp1D,
    Interp2D,
    Interp3D,
    InterpND,
)
from .strategy import BUILTIN_STRATEGIES, Strategy, strategy_name


class InterpolatorEnum(BaseModel, Interpolator):
    """
    One of ``Interp0D``, ``Interp1D``, ``Interp2D``, ``Interp3D`` or ``InterpND``,
    chosen at runtime.

    Unlike the interpolators it wraps, it only accepts built-in strategies,
    so that it can always be serialized.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    inner: Annotated[
        Union[Interp0D, Interp1D, Interp2D, Interp3D, InterpND],
        Field(discriminator="kind"),
    ]

    @model_validator(mode="after")
    def _validate_model(self):
        if not isinstance(self.inner, Interp0D):
            self._check_builtin(self.inner.strategy)
        return self

    @staticmethod
    def _check_builtin(strategy: Strategy) -> None:
        if not isinstance(strategy, BUILTIN_STRATEGIES):
            raise StrategySelection(strategy_name(strategy))

    @classmethod
    def new_0d(cls, value: float) -> InterpolatorEnum:
        return cls(inner=Interp0D.new(value))

    @classmethod
    def new_1d(
        cls,
        x: NDArray,
        f_x: NDArray,
        strategy: Optional[Strategy] = None,
        extrapolate: Optional[Extrapolate] = None,
        copy: bool = True,
    ) -> InterpolatorEnum:
        return cls(inner=Interp1D.new(x, f_x, strategy, extrapolate, copy=copy))

    @classmethod
    def new_2d(
        cls,
        x: NDArray,
        y: NDArray,
        f_xy: NDArray,
        strategy: Optional[Strategy] = None,
        extrapolate: Optional[Extrapolate] = None,
        copy: bool = True,
    ) -> InterpolatorEnum:
        return cls(inner=Interp2D.new(x, y, f_xy, strategy, extrapolate, copy=copy))

    @classmethod
    def new_3d(
        cls,
        x: NDArray,
        y: NDArray,
        z: NDArray,
        f_xyz: NDArray,
        strategy: Optional[Strategy] = None,
        extrapolate: Optional[Extrapolate] = None,
        copy: bool = True,
    ) -> InterpolatorEnum:
        return cls(
            inner=Interp3D.new(x, y, z, f_xyz, strategy, extrapolate, copy=copy)
        )

    @classmethod
    def new_nd(
        cls,
        grid: Sequence[NDArray],
        values: NDArray,
        strategy: Optional[Strategy] = None,
        extrapolate: Optional[Extrapolate] = None,
        copy: bool = True,
    ) -> InterpolatorEnum:
        return cls(inner=InterpND.new(grid, values, strategy, extrapolate, copy=copy))

    def ndim(self) -> int:
        return self.inner.ndim()

    def validate(self) -> None:
        self.inner.validate()
        if not isinstance(self.inner, Interp0D):
            self._check_builtin(self.inner.strategy)

    def interpolate(self, point: Sequence):
        return self.inner.interpolate(point)

    def set_strategy(self, strategy: Strategy) -> None:
        """
        Swap the strategy of the wrapped interpolator.

        Raises:
            StrategySelection: If the strategy is not a built-in, is not
                applicable to the wrapped interpolator, or the wrapped
                interpolator is 0-D.
        """
        if isinstance(self.inner, Interp0D):
            raise StrategySelection(strategy_name(strategy))
        self._check_builtin(strategy)
        self.inner.set_strategy(strategy)

    def set_extrapolate(self, extrapolate) -> None:
        self.inner.set_extrapolate(extrapolate)

    def eval(self, obs: Sequence[NDArray], out: Optional[NDArray] = None) -> NDArray:
        return self.inner.eval(obs, out)

    def check_bounds(self, obs: Sequence[NDArray], atol: float) -> NDArray[np.bool_]:
        if isinstance(self.inner, Interp0D):
            return np.array([], dtype=bool)
        return self.inner.check_bounds(obs, atol)


__all__ = ["InterpolatorEnum"]
