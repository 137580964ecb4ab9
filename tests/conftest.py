import os
import sys

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.forecast import Observation


@pytest.fixture
def line_observations():
    # y = 0.5x + 50, exactly
    return (
        Observation(x=0.0, y=50.0, label="a"),
        Observation(x=10.0, y=55.0, label="b"),
        Observation(x=20.0, y=60.0, label="c"),
    )


@pytest.fixture
def noisy_observations():
    return tuple(
        Observation(x=float(x), y=float(y), label=f"p{x}")
        for x, y in [(0, 1), (1, 3), (2, 2), (3, 4)]
    )


@pytest.fixture
def zigzag_observations():
    # y = 2x with +/-0.5 alternating noise over ten days
    return tuple(
        Observation(x=float(i), y=2.0 * i + (0.5 if i % 2 == 0 else -0.5), label=str(i))
        for i in range(10)
    )
