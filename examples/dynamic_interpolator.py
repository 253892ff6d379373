"""
Hold interpolators of different dimensionality behind one name, either
through the common ``Interpolator`` interface or the serializable
``InterpolatorEnum``.
"""

from __future__ import annotations

import numpy as np

from rectinterp import (
    Interpolator,
    InterpolatorEnum,
    Interp1D,
    Interp2D,
    Linear,
    Nearest,
    Enable,
    Error,
)


if __name__ == "__main__":
    interpolator: Interpolator = Interp2D.new(
        np.array([0.0, 1.0]),
        np.array([0.0, 1.0]),
        np.array([[2.0, 4.0], [4.0, 16.0]]),
        Linear(),
        Enable(),
    )
    assert np.isclose(interpolator.interpolate([1.5, -0.5]), -3.5)

    interpolator = Interp1D.new(
        np.array([0.0, 1.0, 2.0]), np.array([0.0, 4.0, 8.0]), Nearest(), Error()
    )
    assert interpolator.interpolate([1.75]) == 8.0

    # The enum form can be saved and restored, whatever it holds
    stored = InterpolatorEnum.new_1d(np.array([0.0, 1.0, 2.0]), np.array([0.0, 4.0, 8.0]))
    restored = InterpolatorEnum.model_validate_json(stored.model_dump_json())
    assert restored.interpolate([1.75]) == stored.interpolate([1.75]) == 7.0

    restored.set_strategy(Nearest())
    assert restored.interpolate([1.75]) == 8.0
    print(restored.model_dump_json())
