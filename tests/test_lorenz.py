"""Forward-Euler integration of the Lorenz system."""

import numpy as np
import pytest

from chaosviz.config import LorenzConfig
from chaosviz.lorenz import compute_lorenz, euler_integrate, lorenz_derivatives, time_grid


def test_derivatives_classic_parameters():
    dx, dy, dz = lorenz_derivatives(1.0, 1.0, 1.0, 10.0, 28.0, 8.0 / 3.0)
    assert dx == pytest.approx(0.0)
    assert dy == pytest.approx(26.0)
    assert dz == pytest.approx(1.0 - 8.0 / 3.0)


def test_time_grid():
    t = time_grid(1.0, 0.1)
    assert len(t) == 10
    assert t[0] == 0.0
    np.testing.assert_allclose(np.diff(t), 0.1)


def test_first_state_is_initial_and_single_step_is_euler():
    t = np.array([0.0, 0.01])
    states = euler_integrate((1.0, 1.0, 1.0), t)
    np.testing.assert_array_equal(states[0], [1.0, 1.0, 1.0])
    np.testing.assert_allclose(states[1], [1.0, 1.26, 1.0 + 0.01 * (1.0 - 8.0 / 3.0)])


def test_fixed_point_is_stationary():
    beta, rho = 8.0 / 3.0, 28.0
    c = np.sqrt(beta * (rho - 1))
    states = euler_integrate((c, c, rho - 1), time_grid(1.0, 0.01), 10.0, rho, beta)
    np.testing.assert_allclose(states, np.tile([c, c, rho - 1], (len(states), 1)), atol=1e-9)


def test_trajectory_stays_in_attractor_envelope():
    trajectory = compute_lorenz(LorenzConfig())
    assert trajectory.states.shape == (10000, 3)
    assert np.all(np.isfinite(trajectory.states))
    assert np.max(np.abs(trajectory.x)) < 30
    assert np.max(np.abs(trajectory.y)) < 40
    assert np.max(np.abs(trajectory.z)) < 60


@pytest.mark.parametrize("times", [[], [0.0, 0.0], [0.0, 0.2, 0.1]], ids=["empty", "flat", "decreasing"])
def test_invalid_time_sequence(times):
    with pytest.raises(ValueError):
        euler_integrate((1.0, 1.0, 1.0), np.array(times, dtype=float))
