import logging

import numpy as np
import pytest

from rectinterp import (
    Interp1D,
    Interp2D,
    InterpND,
    Strategy1D,
    StrategyND,
    Linear,
    Nearest,
    LeftNearest,
    RightNearest,
    Cubic,
    Enable,
    Error,
    Clamp,
    ExtrapolateSelection,
    ExtrapolateError,
    StrategySelection,
    InterpolateOther,
    raw,
)


class Doubled(Strategy1D, StrategyND):
    """Twice the linear interpolant, counting how often it was prepared."""

    def __init__(self):
        self.init_calls = 0

    def init(self, data):
        self.init_calls += 1

    def interpolate(self, data, point):
        if len(point) == 1:
            return 2.0 * raw.linear_1d(data, point)
        return 2.0 * raw.linear_nd(data, point)

    def allow_extrapolate(self) -> bool:
        return True


class Broken(Strategy1D):
    def interpolate(self, data, point):
        raise InterpolateOther("no")

    def allow_extrapolate(self) -> bool:
        return False


def _data():
    return np.array([0.0, 1.0, 2.0]), np.array([0.0, 1.0, 4.0])


def test_builtin_capabilities():
    assert Linear().allow_extrapolate()
    assert Cubic().allow_extrapolate()
    for strategy in [Nearest(), LeftNearest(), RightNearest()]:
        assert not strategy.allow_extrapolate()


def test_custom_strategy():
    x, f = _data()
    strategy = Doubled()
    interpolator = Interp1D.new(x, f, strategy, Enable())

    assert strategy.init_calls == 1
    assert interpolator.interpolate([0.5]) == pytest.approx(1.0)
    assert interpolator.interpolate([3.0]) == pytest.approx(14.0)

    # The same strategy works with the N-D interpolator
    nd = InterpND.new([x, x], np.outer(f, f), strategy)
    assert nd.interpolate([2.0, 2.0]) == pytest.approx(32.0)

    # But it doesn't implement the 2-D capability
    with pytest.raises(StrategySelection):
        Interp2D.new(x, x, np.outer(f, f), strategy)


def test_custom_strategy_errors_propagate():
    x, f = _data()
    interpolator = Interp1D.new(x, f, Broken())
    with pytest.raises(InterpolateOther):
        interpolator.interpolate([0.5])


def test_set_strategy():
    x, f = _data()
    interpolator = Interp1D.new(x, f, extrapolate=Enable())
    assert interpolator.interpolate([1.5]) == pytest.approx(2.5)

    # Incompatible with extrapolation: rejected and nothing changes
    with pytest.raises(ExtrapolateSelection):
        interpolator.set_strategy(Nearest())
    assert interpolator.strategy == Linear()
    assert interpolator.interpolate([1.5]) == pytest.approx(2.5)

    interpolator.set_extrapolate(Clamp())
    interpolator.set_strategy(Nearest())
    assert interpolator.interpolate([1.4]) == 1.0

    strategy = Doubled()
    interpolator.set_strategy(strategy)
    assert strategy.init_calls == 1
    assert interpolator.interpolate([1.5]) == pytest.approx(5.0)


def test_set_strategy_wrong_arity():
    x, f = _data()
    interpolator = InterpND.new([x], f)
    with pytest.raises(StrategySelection):
        interpolator.set_strategy(LeftNearest())
    assert interpolator.strategy == Linear()


def test_set_extrapolate():
    x, f = _data()
    interpolator = Interp1D.new(x, f, Nearest())

    with pytest.raises(ExtrapolateSelection):
        interpolator.set_extrapolate(Enable())
    assert interpolator.extrapolate == Error()

    interpolator.set_extrapolate(Clamp())
    assert interpolator.interpolate([5.0]) == 4.0


def test_validate():
    x, f = _data()
    interpolator = Interp1D.new(x, f, Nearest())
    interpolator.validate()

    # Assigning a field directly is checked like the setters
    with pytest.raises(ExtrapolateSelection):
        interpolator.extrapolate = Enable()
    assert interpolator.extrapolate == Error()
    with pytest.raises(ExtrapolateError):
        interpolator.interpolate([10.0])

    nd = InterpND.new([x], f)
    with pytest.raises(StrategySelection):
        nd.strategy = LeftNearest()
    assert nd.strategy == Linear()

    interpolator.strategy = Linear()
    interpolator.extrapolate = Enable()
    interpolator.validate()
    assert interpolator.interpolate([3.0]) == pytest.approx(7.0)


def test_logging(caplog):
    x, f = _data()
    with caplog.at_level(logging.DEBUG, logger="rectinterp"):
        interpolator = Interp1D.new(x, f)
        interpolator.set_strategy(Nearest())

    messages = [r.getMessage() for r in caplog.records]
    assert any("validated" in m for m in messages)
    assert any("strategy set to nearest" in m for m in messages)
