import numpy as np
import pytest
from scipy.interpolate import RegularGridInterpolator

from rectinterp import (
    interpn,
    Clamp,
    Fill,
    ExtrapolateError,
    StrategySelection,
)


@pytest.mark.parametrize("ndims", [1, 2, 3, 4])
@pytest.mark.parametrize("method", ["linear", "nearest"])
def test_interpn_matches_scipy(ndims, method):
    rng = np.random.default_rng(ndims)
    grids = [np.cumsum(rng.uniform(0.1, 1.0, 3 + i)) for i in range(ndims)]
    vals = rng.uniform(-1.0, 1.0, [g.size for g in grids])
    obs = [rng.uniform(g[0], g[-1], (4, 5)) for g in grids]

    out = interpn(obs, grids, vals, method=method)
    expected = RegularGridInterpolator(grids, vals, method=method)(
        np.stack([x.ravel() for x in obs], axis=-1)
    ).reshape(4, 5)

    assert out.shape == (4, 5)
    np.testing.assert_allclose(out, expected, rtol=1e-12, atol=1e-12)


@pytest.mark.parametrize("dtype", [np.float64, np.float32])
def test_interpn_bounds(dtype):
    grid = np.linspace(-1.0, 1.0, 5).astype(dtype)
    vals = np.linspace(0.0, 10.0, grid.size).astype(dtype)

    obs_inside = [np.array([-0.5, 0.5], dtype=dtype)]
    obs_outside = [np.array([-0.5, 1.5], dtype=dtype)]

    inside = interpn(obs=obs_inside, grids=[grid], vals=vals)
    assert inside.shape == obs_inside[0].shape
    assert inside.dtype == dtype
    np.testing.assert_allclose(inside, [2.5, 7.5], rtol=1e-6)

    with pytest.raises(ExtrapolateError):
        interpn(obs=obs_outside, grids=[grid], vals=vals)

    clamped = interpn(obs=obs_outside, grids=[grid], vals=vals, extrapolate=Clamp())
    np.testing.assert_allclose(clamped, [2.5, 10.0], rtol=1e-6)

    filled = interpn(obs=obs_outside, grids=[grid], vals=vals, extrapolate=Fill(value=-1.0))
    np.testing.assert_allclose(filled, [2.5, -1.0], rtol=1e-6)


def test_interpn_out():
    grid = np.array([0.0, 1.0, 2.0])
    vals = grid**2
    out = np.zeros(3)
    result = interpn([np.array([0.5, 1.0, 1.5])], [grid], vals, out=out)
    assert result is out
    np.testing.assert_allclose(out, [0.5, 1.0, 2.5])


def test_interpn_methods():
    grid = np.linspace(0.0, 1.0, 5)
    vals = np.sin(grid)

    cubic = interpn([np.array([0.3])], [grid], vals, method="cubic")
    assert cubic[0] == pytest.approx(np.sin(0.3), abs=1e-3)

    with pytest.raises(StrategySelection):
        interpn([np.array([0.3])] * 2, [grid] * 2, np.outer(vals, vals), method="cubic")
    with pytest.raises(ValueError):
        interpn([np.array([0.3])], [grid], vals, method="quintic")
