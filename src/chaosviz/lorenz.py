from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
from numba import njit

from .config import LorenzConfig
from .report import LorenzTrajectory

__all__ = ["lorenz_derivatives", "time_grid", "euler_integrate", "compute_lorenz"]


@njit
def lorenz_derivatives(
    x: float, y: float, z: float, sigma: float, rho: float, beta: float
) -> Tuple[float, float, float]:
    dx = sigma * (y - x)
    dy = x * (rho - z) - y
    dz = x * y - beta * z
    return dx, dy, dz


def time_grid(t_final: float, dt: float) -> np.ndarray:
    """Samples ``0, dt, 2*dt, ...`` strictly below ``t_final``."""
    n_steps = max(1, int(round(t_final / dt)))
    return np.arange(n_steps, dtype=np.float64) * dt


@njit
def _euler(
    x0: float, y0: float, z0: float, times: np.ndarray, sigma: float, rho: float, beta: float
) -> np.ndarray:
    states = np.empty((times.shape[0], 3), dtype=np.float64)
    x, y, z = x0, y0, z0
    states[0, 0] = x
    states[0, 1] = y
    states[0, 2] = z
    for i in range(1, times.shape[0]):
        h = times[i] - times[i - 1]
        dx, dy, dz = lorenz_derivatives(x, y, z, sigma, rho, beta)
        x += h * dx
        y += h * dy
        z += h * dz
        states[i, 0] = x
        states[i, 1] = y
        states[i, 2] = z
    return states


def euler_integrate(
    initial_state: Sequence[float],
    times: np.ndarray,
    sigma: float = 10.0,
    rho: float = 28.0,
    beta: float = 8.0 / 3.0,
) -> np.ndarray:
    """Forward-Euler trajectory of the Lorenz system, one state per entry of ``times``.

    Row 0 is ``initial_state``; no step-size control or error estimate is applied.
    """
    times = np.ascontiguousarray(times, dtype=np.float64)
    if times.ndim != 1 or times.shape[0] == 0:
        raise ValueError("times must be a non-empty 1-D sequence")
    if np.any(np.diff(times) <= 0):
        raise ValueError("times must be strictly increasing")
    x0, y0, z0 = (float(v) for v in initial_state)
    return _euler(x0, y0, z0, times, float(sigma), float(rho), float(beta))


def compute_lorenz(config: LorenzConfig) -> LorenzTrajectory:
    t = time_grid(config.t_final, config.dt)
    states = euler_integrate(config.initial_state, t, config.sigma, config.rho, config.beta)
    return LorenzTrajectory(t=t, states=states)
