"""
Policies for query points outside the grid.

A point is inside the grid when ``grid[0] <= p <= grid[-1]`` on every axis.
The policy is only consulted when at least one axis is outside.
"""

from __future__ import annotations

from typing import Union, Annotated, Literal

from pydantic import ConfigDict, BaseModel, Field


class _Policy(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Enable(_Policy):
    """Pass the point to the strategy unchanged; the strategy must support extrapolation."""

    kind: Literal["enable"] = "enable"


class Fill(_Policy):
    """Return ``value`` without interpolating."""

    model_config = ConfigDict(ser_json_inf_nan="constants")

    kind: Literal["fill"] = "fill"
    value: float


class Clamp(_Policy):
    """Move each out-of-range coordinate onto the nearest grid bound."""

    kind: Literal["clamp"] = "clamp"


class Wrap(_Policy):
    """Wrap each out-of-range coordinate into ``[first, last)`` of its axis."""

    kind: Literal["wrap"] = "wrap"


class Error(_Policy):
    """Raise an ``ExtrapolateError`` naming every out-of-range axis."""

    kind: Literal["error"] = "error"


Extrapolate = Annotated[
    Union[Enable, Fill, Clamp, Wrap, Error], Field(discriminator="kind")
]

__all__ = ["Enable", "Fill", "Clamp", "Wrap", "Error", "Extrapolate"]
