"""
Compare nearest-neighbor and linear interpolation against SciPy's
``RegularGridInterpolator`` on a slightly irregular rectilinear grid,
using both the 2-D interpolator and the N-D interpolator.
"""

from __future__ import annotations

import numpy as np
from scipy.interpolate import RegularGridInterpolator

from rectinterp import Interp2D, InterpND, Linear, Nearest


def _truth(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    """Synthetic test function with curvature and mixed terms."""
    return np.sin(x) + 0.5 * np.cos(2.0 * y) + 0.15 * x * y


def _build_rectilinear_grid(
    rng: np.random.Generator, size: int, start: float, stop: float
) -> np.ndarray:
    """Create a slightly irregular rectilinear grid that stays monotonic."""
    base = np.linspace(start, stop, size, dtype=np.float64)
    step = (stop - start) / (size - 1)
    deltas = step + rng.uniform(-0.3 * step, 0.3 * step, size - 1)
    deltas = np.maximum(deltas, 0.1 * step)
    coords = np.concatenate(([base[0]], base[0] + np.cumsum(deltas)))
    scale = (stop - start) / (coords[-1] - coords[0])
    coords = (coords - coords[0]) * scale + start
    coords[-1] = stop
    return coords


if __name__ == "__main__":
    rng = np.random.default_rng(6)

    xdata = _build_rectilinear_grid(rng, size=25, start=-3.0, stop=3.0)
    ydata = _build_rectilinear_grid(rng, size=18, start=-2.5, stop=2.5)
    xmesh, ymesh = np.meshgrid(xdata, ydata, indexing="ij")
    zmesh = _truth(xmesh, ymesh)

    x_eval = rng.uniform(-3.0, 3.0, 500)
    y_eval = rng.uniform(-2.5, 2.5, 500)
    z_truth = _truth(x_eval, y_eval)

    for strategy, method in [(Nearest(), "nearest"), (Linear(), "linear")]:
        ours_2d = Interp2D.new(xdata, ydata, zmesh, strategy).eval([x_eval, y_eval])
        ours_nd = InterpND.new([xdata, ydata], zmesh, strategy).eval([x_eval, y_eval])
        scipy_vals = RegularGridInterpolator((xdata, ydata), zmesh, method=method)(
            (x_eval, y_eval)
        )

        print(
            f"{method:>8}: max abs error vs. truth {np.max(np.abs(ours_2d - z_truth)):.3f}, "
            f"max abs difference vs. SciPy {np.max(np.abs(ours_2d - scipy_vals)):.2e}"
        )
        assert np.allclose(ours_2d, ours_nd)
        assert np.allclose(ours_2d, scipy_vals)
