import numpy as np
import pytest

from rectinterp import (
    InterpolatorEnum,
    Interp0D,
    Interp1D,
    Interp2D,
    Interp3D,
    InterpND,
    Strategy1D,
    Linear,
    Nearest,
    LeftNearest,
    Cubic,
    Clamp,
    Enable,
    StrategySelection,
    ExtrapolateSelection,
    PointLength,
)


class Custom(Strategy1D):
    def interpolate(self, data, point):
        return 0.0

    def allow_extrapolate(self) -> bool:
        return False


def _all():
    x = np.array([0.0, 1.0])
    values2 = np.array([[0.0, 1.0], [2.0, 3.0]])
    values3 = np.arange(8.0).reshape(2, 2, 2)
    return [
        (InterpolatorEnum.new_0d(2.0), Interp0D, [], 2.0),
        (InterpolatorEnum.new_1d(x, 2.0 * x), Interp1D, [0.25], 0.5),
        (InterpolatorEnum.new_2d(x, x, values2), Interp2D, [0.25, 0.65], 1.15),
        (InterpolatorEnum.new_3d(x, x, x, values3, Nearest()), Interp3D, [0.75] * 3, 7.0),
        (InterpolatorEnum.new_nd([x] * 3, values3, Nearest()), InterpND, [0.75] * 3, 7.0),
    ]


def test_enum_dispatch():
    for interpolator, kind, point, expected in _all():
        assert isinstance(interpolator.inner, kind)
        assert interpolator.ndim() == len(point)
        assert interpolator.interpolate(point) == pytest.approx(expected)
        interpolator.validate()

        with pytest.raises(PointLength):
            interpolator.interpolate(point + [0.0])


def test_enum_roundtrip():
    for interpolator, kind, point, _ in _all():
        roundtrip = InterpolatorEnum.model_validate_json(interpolator.model_dump_json())
        assert isinstance(roundtrip.inner, kind)
        assert roundtrip == interpolator
        assert roundtrip.interpolate(point) == interpolator.interpolate(point)


def test_enum_builtin_strategies_only():
    x = np.array([0.0, 1.0])
    with pytest.raises(StrategySelection):
        InterpolatorEnum.new_1d(x, x, Custom())

    interpolator = InterpolatorEnum.new_1d(x, x)
    with pytest.raises(StrategySelection):
        interpolator.set_strategy(Custom())
    assert interpolator.inner.strategy == Linear()

    interpolator.set_strategy(LeftNearest())
    assert interpolator.interpolate([0.9]) == 0.0
    interpolator.set_strategy(Cubic())

    nd = InterpolatorEnum.new_nd([x], x)
    with pytest.raises(StrategySelection):
        nd.set_strategy(LeftNearest())

    with pytest.raises(StrategySelection):
        InterpolatorEnum.new_0d(1.0).set_strategy(Linear())


def test_enum_set_extrapolate():
    x = np.array([0.0, 1.0])
    interpolator = InterpolatorEnum.new_2d(x, x, np.zeros((2, 2)), Nearest())
    with pytest.raises(ExtrapolateSelection):
        interpolator.set_extrapolate(Enable())
    interpolator.set_extrapolate(Clamp())
    assert interpolator.interpolate([5.0, 5.0]) == 0.0

    # No bounds to speak of
    zero = InterpolatorEnum.new_0d(1.0)
    zero.set_extrapolate(Enable())
    assert zero.interpolate([]) == 1.0


def test_enum_eval():
    x = np.array([0.0, 1.0, 2.0])
    interpolator = InterpolatorEnum.new_1d(x, x**2)
    out = interpolator.eval([np.array([0.5, 1.5])])
    np.testing.assert_allclose(out, [0.5, 2.5])
    np.testing.assert_array_equal(
        interpolator.check_bounds([np.array([0.5, 2.5])], atol=1e-8), [True]
    )

    zero = InterpolatorEnum.new_0d(4.0)
    assert zero.eval([]) == 4.0
    assert zero.check_bounds([], atol=1e-8).size == 0
