"""
Grid and value containers.

``InterpData1D``, ``InterpData2D`` and ``InterpData3D`` hold a fixed number of
grid axes; ``InterpDataND`` holds any number, decided at runtime.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Optional
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from pydantic import (
    model_validator,
    ConfigDict,
    BaseModel,
)

from .errors import EmptyGrid, IncompatibleShapes, Monotonicity, ValidateOther
from .serialization import Array, array_type

logger = logging.getLogger(__name__)


class InterpData(BaseModel):
    """
    Coordinate grid and function values on that grid.

    ``grid`` holds one 1-D coordinate array per axis, and ``values`` the
    tensor of function values, with ``values.shape[i] == len(grid[i])``.
    """

    # Immutable after initialization checks
    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    # Fixed number of axes, or None when decided at runtime
    N: ClassVar[Optional[int]] = None

    grid: list[Array]
    values: Array

    @classmethod
    def from_arrays(
        cls, grid: Sequence[NDArray], values: NDArray, copy: bool = True
    ):
        """
        Build and validate a container, casting the grid arrays to the same
        type as `values` (float32 is kept, anything else becomes float64).

        Args:
            grid: One coordinate array per axis.
            values: Function values, as obtained from np.meshgrid(..., indexing="ij").
            copy: When False, arrays that are already contiguous and of the
                  right data type are held as views instead of being copied.

        Returns:
            A new, validated container.
        """
        values = np.asarray(values)
        arrtype = array_type(values.dtype)
        make = arrtype.view if not copy else (lambda x: arrtype(data=x))
        return cls(
            grid=[make(np.asarray(g).ravel()) for g in grid],
            values=make(values),
        )

    @model_validator(mode="after")
    def _validate_model(self):
        self.validate()
        return self

    def validate(self) -> None:
        """
        Check the grid and values, raising the first violated invariant.

        Checks, per axis in ascending order: the axis is not empty,
        its coordinates are strictly increasing, and its length matches
        the corresponding values axis.
        """
        self._check_rank()
        for i in range(self.ndim()):
            g = self.grid[i].data
            # Check that each grid dimension has elements
            if g.size == 0:
                raise EmptyGrid(i)
            # Check that grid points are strictly increasing
            if not np.all(g[1:] > g[:-1]):
                raise Monotonicity(i)
            # Check that grid and values are compatible shapes
            if g.size != self.values.data.shape[i]:
                raise IncompatibleShapes(i)
        logger.debug(
            "validated %d-D grid data with values shape %s",
            self.ndim(),
            self.values.data.shape,
        )

    def _check_rank(self) -> None:
        if len(self.grid) != self.N:
            raise ValidateOther(
                f"expected {self.N} grid arrays for {self.N}-D data, got {len(self.grid)}"
            )
        if self.values.data.ndim != self.N:
            raise ValidateOther(
                f"expected {self.N}-D values, got {self.values.data.ndim}-D"
            )

    def ndim(self) -> int:
        return self.N

    def dtype(self) -> np.dtype:
        return self.values.data.dtype

    def bounds(self, axis: int) -> tuple:
        """First and last grid coordinate on ``axis``."""
        g = self.grid[axis].data
        return g[0], g[-1]

    def view(self):
        """A container sharing this one's arrays."""
        return self.model_construct(grid=list(self.grid), values=self.values)

    def into_owned(self):
        """A container holding copies of this one's arrays."""
        arrtype = array_type(self.dtype())
        return self.model_construct(
            grid=[arrtype(data=g.data.copy()) for g in self.grid],
            values=arrtype(data=self.values.data.copy()),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InterpData):
            return NotImplemented
        return (
            type(self) is type(other)
            and len(self.grid) == len(other.grid)
            and all(a == b for a, b in zip(self.grid, other.grid))
            and self.values == other.values
        )


class InterpData1D(InterpData):
    N: ClassVar[Optional[int]] = 1

    @classmethod
    def new(cls, x: NDArray, f_x: NDArray, copy: bool = True) -> InterpData1D:
        return cls.from_arrays([x], f_x, copy=copy)


class InterpData2D(InterpData):
    N: ClassVar[Optional[int]] = 2

    @classmethod
    def new(
        cls, x: NDArray, y: NDArray, f_xy: NDArray, copy: bool = True
    ) -> InterpData2D:
        return cls.from_arrays([x, y], f_xy, copy=copy)


class InterpData3D(InterpData):
    N: ClassVar[Optional[int]] = 3

    @classmethod
    def new(
        cls, x: NDArray, y: NDArray, z: NDArray, f_xyz: NDArray, copy: bool = True
    ) -> InterpData3D:
        return cls.from_arrays([x, y, z], f_xyz, copy=copy)


class InterpDataND(InterpData):
    """
    Grid and values whose dimensionality is only known at runtime.

    A values tensor holding exactly one element, with a grid that is empty or
    made only of empty axes, is treated as 0-D data.
    """

    @classmethod
    def new(
        cls, grid: Sequence[NDArray], values: NDArray, copy: bool = True
    ) -> InterpDataND:
        return cls.from_arrays(grid, values, copy=copy)

    def _check_rank(self) -> None:
        if self.ndim() != 0 and len(self.grid) != self.values.data.ndim:
            raise ValidateOther(
                f"grid length {len(self.grid)} does not match values dimensionality {self.values.data.ndim}"
            )

    def ndim(self) -> int:
        if self.values.data.size == 1 and all(g.data.size == 0 for g in self.grid):
            return 0
        return self.values.data.ndim
