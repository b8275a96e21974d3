from __future__ import annotations

from typing import Tuple

import numpy as np
from numba import njit, prange

from .config import MandelbrotConfig
from .report import MandelbrotGrid

__all__ = ["escape_time", "sample_grid", "escape_counts", "compute_mandelbrot"]

ESCAPE_RADIUS_SQ = 4.0


@njit
def escape_time(x_c: float, y_c: float, max_iter: int) -> int:
    """Number of updates of z <- z**2 + c before |z|**2 exceeds 4, capped at ``max_iter``.

    The boundary |z|**2 == 4 counts as bounded.
    """
    x = 0.0
    y = 0.0
    iteration = 0
    while x * x + y * y <= ESCAPE_RADIUS_SQ and iteration < max_iter:
        x, y = x * x - y * y + x_c, 2.0 * x * y + y_c
        iteration += 1
    return iteration


def sample_grid(resolution: int, extent: float = 2.0) -> Tuple[np.ndarray, np.ndarray]:
    """Return flattened coordinates of the (2n+1) x (2n+1) lattice over [-extent, extent]^2.

    Coordinates are built as ``k * extent / n`` so the lattice is exactly
    symmetric under y -> -y.
    """
    steps = np.arange(-resolution, resolution + 1, dtype=np.float64) * (extent / resolution)
    xs, ys = np.meshgrid(steps, steps, indexing="ij")
    return xs.ravel(), ys.ravel()


@njit(parallel=True)
def _escape_counts(xs: np.ndarray, ys: np.ndarray, max_iter: int) -> np.ndarray:
    counts = np.zeros(xs.shape[0], dtype=np.int64)
    for i in prange(xs.shape[0]):
        counts[i] = escape_time(xs[i], ys[i], max_iter)
    return counts


def escape_counts(xs: np.ndarray, ys: np.ndarray, max_iter: int) -> np.ndarray:
    xs = np.ascontiguousarray(xs, dtype=np.float64)
    ys = np.ascontiguousarray(ys, dtype=np.float64)
    if xs.shape != ys.shape:
        raise ValueError(f"Coordinate arrays differ in shape: {xs.shape} vs {ys.shape}")
    return _escape_counts(xs, ys, int(max_iter))


def compute_mandelbrot(config: MandelbrotConfig) -> MandelbrotGrid:
    xs, ys = sample_grid(config.resolution, config.extent)
    counts = escape_counts(xs, ys, config.max_iter)
    return MandelbrotGrid(x=xs, y=ys, counts=counts, max_iter=config.max_iter)
