"""Structured results returned by the three pipelines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

import numpy as np


@dataclass(frozen=True)
class LorenzTrajectory:
    """States visited by the Euler stepper, one row per time sample."""

    t: np.ndarray
    states: np.ndarray

    @property
    def x(self) -> np.ndarray:
        return self.states[:, 0]

    @property
    def y(self) -> np.ndarray:
        return self.states[:, 1]

    @property
    def z(self) -> np.ndarray:
        return self.states[:, 2]

    def summary(self) -> Dict[str, float]:
        return {
            "n_samples": float(len(self.t)),
            "max_abs_x": float(np.max(np.abs(self.x))),
            "max_abs_y": float(np.max(np.abs(self.y))),
            "max_abs_z": float(np.max(np.abs(self.z))),
        }

    def to_records(self, limit: int | None = None) -> List[Dict[str, Any]]:
        rows = slice(None, limit)
        return [
            {"t": float(t), "x": float(x), "y": float(y), "z": float(z)}
            for t, (x, y, z) in zip(self.t[rows], self.states[rows])
        ]


@dataclass(frozen=True)
class MandelbrotGrid:
    """Escape-time counts for every lattice point, flattened row-major."""

    x: np.ndarray
    y: np.ndarray
    counts: np.ndarray
    max_iter: int

    @property
    def in_set(self) -> np.ndarray:
        """Mask of points that never escaped within ``max_iter`` steps."""
        return self.counts == self.max_iter

    def members(self) -> Tuple[np.ndarray, np.ndarray]:
        mask = self.in_set
        return self.x[mask], self.y[mask]

    def summary(self) -> Dict[str, float]:
        return {
            "n_points": float(self.counts.size),
            "n_members": float(np.count_nonzero(self.in_set)),
            "in_set_fraction": float(np.mean(self.in_set)),
            "mean_count": float(np.mean(self.counts)),
        }

    def to_records(self, limit: int | None = None) -> List[Dict[str, Any]]:
        rows = slice(None, limit)
        return [
            {"x": float(x), "y": float(y), "count": int(c)}
            for x, y, c in zip(self.x[rows], self.y[rows], self.counts[rows])
        ]


@dataclass(frozen=True)
class Bifurcation:
    """Retained ``(r, x)`` tail samples of the logistic map.

    ``r`` and ``x`` have shape ``(last, n)``: one row per retained iterate,
    one column per swept parameter value.
    """

    r: np.ndarray
    x: np.ndarray
    r_values: np.ndarray
    lyapunov: np.ndarray

    def points(self) -> Tuple[np.ndarray, np.ndarray]:
        return self.r.ravel(), self.x.ravel()

    def summary(self) -> Dict[str, float]:
        return {
            "n_points": float(self.x.size),
            "n_chaotic": float(np.count_nonzero(self.lyapunov > 0)),
            "mean_lyapunov": float(np.mean(self.lyapunov)),
        }

    def to_records(self, limit: int | None = None) -> List[Dict[str, Any]]:
        rows = slice(None, limit)
        return [
            {"r": float(r), "lyapunov": float(lam)}
            for r, lam in zip(self.r_values[rows], self.lyapunov[rows])
        ]
