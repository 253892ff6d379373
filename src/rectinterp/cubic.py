"""
Cubic spline coefficients and evaluation on a 1-D grid.

The spline is stored as its second derivatives ``z`` at each knot. On the
interval ``[x[i], x[i + 1]]`` of width ``h``::

    S(t) = z[i] (x[i+1] - t)**3 / (6 h) + z[i+1] (t - x[i])**3 / (6 h)
         + (y[i] / h - z[i] h / 6) (x[i+1] - t)
         + (y[i+1] / h - z[i+1] h / 6) (t - x[i])
"""

from __future__ import annotations

import logging
from typing import Union, Annotated, Literal

import numpy as np
from numpy.typing import NDArray

from pydantic import ConfigDict, BaseModel, Field

from .errors import ValidateOther

logger = logging.getLogger(__name__)


class _BC(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Natural(_BC):
    """Second derivatives at endpoints are 0, thus extrapolation is linear."""

    kind: Literal["natural"] = "natural"


class Clamped(_BC):
    """Specific first derivatives at the endpoints."""

    kind: Literal["clamped"] = "clamped"
    slope_start: float
    slope_end: float


class NotAKnot(_BC):
    """Third derivative is continuous across the second and second-to-last knots."""

    kind: Literal["not_a_knot"] = "not_a_knot"


class Periodic(_BC):
    """First and second derivatives match at both ends; first and last values must be equal."""

    kind: Literal["periodic"] = "periodic"


CubicBC = Annotated[
    Union[Natural, Clamped, NotAKnot, Periodic], Field(discriminator="kind")
]

# Fewest knots each boundary condition can be solved with
MIN_POINTS = {"natural": 2, "clamped": 2, "not_a_knot": 4, "periodic": 3}


def thomas(a: NDArray, b: NDArray, c: NDArray, d: NDArray) -> NDArray:
    """
    Solve ``Ax = d`` for a tridiagonal matrix ``A`` using the Thomas algorithm.

    Args:
        a: Sub-diagonal, one element shorter than `b` and `d`.
        b: Diagonal.
        c: Super-diagonal, one element shorter than `b` and `d`.
        d: Right-hand side.

    Returns:
        The solution vector ``x``.
    """
    n = d.size
    assert a.size == n - 1 and c.size == n - 1 and b.size == n, "Tridiagonal shape mismatch"

    c_prime = np.zeros(max(n - 1, 0), dtype=d.dtype)
    d_prime = np.zeros(n, dtype=d.dtype)
    x = np.zeros(n, dtype=d.dtype)

    # Forward sweep
    if n > 1:
        c_prime[0] = c[0] / b[0]
    d_prime[0] = d[0] / b[0]
    for i in range(1, n):
        denom = b[i] - a[i - 1] * c_prime[i - 1]
        if i < n - 1:
            c_prime[i] = c[i] / denom
        d_prime[i] = (d[i] - a[i - 1] * d_prime[i - 1]) / denom

    # Back substitution
    x[n - 1] = d_prime[n - 1]
    for i in range(n - 2, -1, -1):
        x[i] = d_prime[i] - c_prime[i] * x[i + 1]

    return x


def thomas_cyclic(
    a: NDArray, b: NDArray, c: NDArray, d: NDArray, alpha: float, beta: float
) -> NDArray:
    """
    Solve a cyclic tridiagonal system with corner entries ``A[-1, 0] = alpha``
    and ``A[0, -1] = beta``, via a Sherman-Morrison correction of two
    :func:`thomas` solves.
    """
    n = d.size
    gamma = -b[0]
    bb = b.copy()
    bb[0] = b[0] - gamma
    bb[n - 1] = b[n - 1] - alpha * beta / gamma

    u = np.zeros(n, dtype=d.dtype)
    u[0] = gamma
    u[n - 1] = alpha

    y = thomas(a, bb, c, d)
    q = thomas(a, bb, c, u)
    # v = [1, 0, ..., 0, beta / gamma]
    vy = y[0] + beta / gamma * y[n - 1]
    vq = q[0] + beta / gamma * q[n - 1]
    return y - vy / (1 + vq) * q


def second_derivatives(x: NDArray, y: NDArray, bc) -> NDArray:
    """
    Second derivatives of the cubic spline through ``(x, y)`` at each knot.

    Raises:
        ValidateOther: If there are too few knots for the boundary condition,
            or a periodic spline's end values differ.
    """
    npts = x.size
    if npts < MIN_POINTS[bc.kind]:
        raise ValidateOther(
            f"at least {MIN_POINTS[bc.kind]} data points are required for a {bc.kind} cubic spline"
        )

    # Number of segments
    n = npts - 1
    h = np.diff(x)
    b = np.diff(y) / h
    # Interior rows: h[i-1] z[i-1] + 2 (h[i-1] + h[i]) z[i] + h[i] z[i+1] = u[i-1]
    v = 2.0 * (h[1:] + h[:-1])
    u = 6.0 * np.diff(b)

    match bc:
        case Natural():
            z = thomas(
                np.concatenate([h[: n - 1], [0.0]]),
                np.concatenate([[1.0], v, [1.0]]),
                np.concatenate([[0.0], h[1:]]),
                np.concatenate([[0.0], u, [0.0]]),
            )
        case Clamped(slope_start=start, slope_end=end):
            z = thomas(
                h,
                np.concatenate([[2.0 * h[0]], v, [2.0 * h[n - 1]]]),
                h,
                np.concatenate([[6.0 * (b[0] - start)], u, [6.0 * (end - b[n - 1])]]),
            )
        case NotAKnot():
            # Solve for the interior knots with z[0] and z[n] eliminated
            diag = v.copy()
            diag[0] = (h[0] + h[1]) * (h[0] + 2.0 * h[1])
            diag[-1] = (h[n - 2] + h[n - 1]) * (2.0 * h[n - 2] + h[n - 1])
            sup = h[1 : n - 1].copy()
            sub = h[1 : n - 1].copy()
            sup[0] = h[1] ** 2 - h[0] ** 2
            sub[-1] = h[n - 2] ** 2 - h[n - 1] ** 2
            rhs = u.copy()
            rhs[0] = h[1] * u[0]
            rhs[-1] = h[n - 2] * u[-1]
            interior = thomas(sub, diag, sup, rhs)
            z0 = ((h[0] + h[1]) * interior[0] - h[0] * interior[1]) / h[1]
            zn = (
                (h[n - 2] + h[n - 1]) * interior[-1] - h[n - 1] * interior[-2]
            ) / h[n - 2]
            z = np.concatenate([[z0], interior, [zn]])
        case Periodic():
            if not np.isclose(y[0], y[n]):
                raise ValidateOther(
                    "first and last values must be equal for a periodic cubic spline"
                )
            # Unknowns z[0] .. z[n-1], with z[n] == z[0]
            diag = np.concatenate([[2.0 * (h[n - 1] + h[0])], v])
            rhs = np.concatenate([[6.0 * (b[0] - b[n - 1])], u])
            z = thomas_cyclic(
                h[: n - 1], diag, h[: n - 1], rhs, alpha=h[n - 1], beta=h[n - 1]
            )
            z = np.concatenate([z, [z[0]]])
        case _:
            raise ValidateOther(f"unsupported cubic boundary condition: {bc!r}")

    logger.debug("solved %s cubic spline with %d knots", bc.kind, npts)
    return z


def evaluate(x: NDArray, y: NDArray, z: NDArray, i: int, t):
    """Evaluate the spline polynomial of interval ``i`` at ``t``."""
    h = x[i + 1] - x[i]
    dl = x[i + 1] - t
    du = t - x[i]
    return (
        z[i] * dl**3 / (6.0 * h)
        + z[i + 1] * du**3 / (6.0 * h)
        + (y[i] / h - z[i] * h / 6.0) * dl
        + (y[i + 1] / h - z[i + 1] * h / 6.0) * du
    )


def slope_start(x: NDArray, y: NDArray, z: NDArray):
    """First derivative of the spline at the first knot."""
    h = x[1] - x[0]
    return (y[1] - y[0]) / h - h * (2.0 * z[0] + z[1]) / 6.0


def slope_end(x: NDArray, y: NDArray, z: NDArray):
    """First derivative of the spline at the last knot."""
    h = x[-1] - x[-2]
    return (y[-1] - y[-2]) / h + h * (2.0 * z[-1] + z[-2]) / 6.0
