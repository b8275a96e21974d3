from __future__ import annotations

import numpy as np

from .config import LogisticConfig, check_sweep_counts
from .report import Bifurcation

__all__ = ["logistic", "bifurcation", "compute_logistic"]


def logistic(r, x):
    return r * x * (1 - x)


def bifurcation(
    r_min: float = 2.5,
    r_max: float = 4.0,
    n: int = 10000,
    iterations: int = 1000,
    last: int = 100,
    x0: float = 1e-5,
) -> Bifurcation:
    """Iterate the logistic map for ``n`` values of r and keep the final ``last`` iterates.

    The Lyapunov exponent is estimated alongside as the mean of
    ``log|r - 2 r x|`` over all iterations.
    """
    check_sweep_counts(n, iterations, last)

    r = np.linspace(r_min, r_max, n)
    x = x0 * np.ones(n)
    lyapunov = np.zeros(n)

    r_total = np.empty((last, n))
    x_total = np.empty((last, n))
    first_kept = iterations - last

    with np.errstate(divide="ignore"):
        for i in range(iterations):
            x = logistic(r, x)
            lyapunov += np.log(np.abs(r - 2 * r * x))
            if i >= first_kept:
                r_total[i - first_kept] = r
                x_total[i - first_kept] = x

    return Bifurcation(r=r_total, x=x_total, r_values=r, lyapunov=lyapunov / iterations)


def compute_logistic(config: LogisticConfig) -> Bifurcation:
    return bifurcation(
        r_min=config.r_min,
        r_max=config.r_max,
        n=config.n,
        iterations=config.iterations,
        last=config.last,
        x0=config.x0,
    )
