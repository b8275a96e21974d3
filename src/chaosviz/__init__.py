"""chaosviz - Lorenz, Mandelbrot and logistic-map visualisations with MLflow tracking."""

__version__ = "1.0.0"

# Core computation and config - lightweight, no plotting or tracking imports
from .config import (
    LogisticConfig,
    LorenzConfig,
    MandelbrotConfig,
    RunConfig,
    default_run_config,
    get_config_by_index,
    load_sweep_configs,
)
from .logistic import bifurcation, compute_logistic
from .lorenz import compute_lorenz, euler_integrate
from .mandelbrot import compute_mandelbrot, escape_time, sample_grid
from .report import Bifurcation, LorenzTrajectory, MandelbrotGrid


# Conditional imports - only loaded when needed
def __getattr__(name):
    """Lazy loading of heavy modules."""
    if name in {"run_single_experiment", "run_sweep"}:
        from . import execution

        return getattr(execution, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "RunConfig",
    "LorenzConfig",
    "MandelbrotConfig",
    "LogisticConfig",
    "default_run_config",
    "escape_time",
    "sample_grid",
    "compute_mandelbrot",
    "euler_integrate",
    "compute_lorenz",
    "bifurcation",
    "compute_logistic",
    "LorenzTrajectory",
    "MandelbrotGrid",
    "Bifurcation",
    "run_single_experiment",
    "run_sweep",
    "load_sweep_configs",
    "get_config_by_index",
]
