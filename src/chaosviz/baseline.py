"""Baseline (pure Python) escape-time implementation."""

from __future__ import annotations

import numpy as np


def compute_escape_counts(xs, ys, max_iter: int) -> np.ndarray:
    """Compute escape-time counts point by point without compilation."""
    counts = np.zeros(len(xs), dtype=np.int64)

    for i, (x_c, y_c) in enumerate(zip(xs, ys)):
        x = 0.0
        y = 0.0
        n = 0
        while x * x + y * y <= 4.0 and n < max_iter:
            x, y = x * x - y * y + x_c, 2.0 * x * y + y_c
            n += 1
        counts[i] = n

    return counts
