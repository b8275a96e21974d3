"""Timing utilities for wall-clock measurement."""

from __future__ import annotations

import time


def time_function(func, *args, **kwargs) -> tuple:
    """Time a function execution and return (result, duration)."""
    start_time = time.perf_counter()
    result = func(*args, **kwargs)
    duration = time.perf_counter() - start_time
    return result, duration
