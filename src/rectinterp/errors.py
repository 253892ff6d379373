"""
Error types raised by interpolator construction and evaluation.

Two disjoint families exist:

* ``ValidateError`` and its subclasses are raised while building or mutating
  an interpolator (bad grid, bad strategy, bad extrapolation setting).
* ``InterpolateError`` and its subclasses are raised by ``interpolate``.

Neither derives from ``ValueError`` so that pydantic validators let them
propagate unchanged instead of wrapping them in a ``ValidationError``.
"""

from __future__ import annotations


class RectinterpError(Exception):
    """Base class for all errors raised by this package."""


class ValidateError(RectinterpError):
    """Interpolator data or settings failed validation."""


class StrategySelection(ValidateError):
    """Selected strategy is unimplemented/inapplicable for the interpolator."""

    def __init__(self, strategy: str):
        self.strategy = strategy
        super().__init__(
            f"selected `Strategy` ({strategy}) is unimplemented/inapplicable for interpolator"
        )


class ExtrapolateSelection(ValidateError):
    """Selected extrapolation setting is incompatible with the strategy."""

    def __init__(self, extrapolate: str):
        self.extrapolate = extrapolate
        super().__init__(
            f"selected `Extrapolate` variant ({extrapolate}) is unimplemented/inapplicable for interpolator"
        )


class EmptyGrid(ValidateError):
    def __init__(self, axis: int):
        self.axis = axis
        super().__init__(f"supplied grid coordinates cannot be empty: dim {axis}")


class Monotonicity(ValidateError):
    def __init__(self, axis: int):
        self.axis = axis
        super().__init__(
            f"supplied coordinates must be sorted and non-repeating: dim {axis}"
        )


class IncompatibleShapes(ValidateError):
    def __init__(self, axis: int):
        self.axis = axis
        super().__init__(
            f"supplied grid and values are not compatible shapes: dim {axis}"
        )


class ValidateOther(ValidateError):
    """Catch-all validation failure, e.g. grid rank does not match values rank."""


class InterpolateError(RectinterpError):
    """Interpolation at a point failed."""


class PointLength(InterpolateError):
    def __init__(self, expected: int):
        self.expected = expected
        super().__init__(
            f"supplied point should have length {expected} for {expected}-D interpolation"
        )


class ExtrapolateError(InterpolateError):
    """Point lies outside the grid and the extrapolation policy is ``Error``."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(
            f"attempted to interpolate at point beyond grid data: {message}"
        )


class NaNError(InterpolateError):
    """A NaN value was found among the grid values surrounding the point."""


class InterpolateOther(InterpolateError):
    """Catch-all interpolation failure raised by custom strategies."""


__all__ = [
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
]
