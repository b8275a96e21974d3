"""Execution helpers for chaosviz CLI workflows."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from . import plotting
from .config import RunConfig, load_sweep_configs
from .logging import log_to_mlflow
from .logistic import compute_logistic
from .lorenz import compute_lorenz
from .mandelbrot import compute_mandelbrot
from .timing import time_function

PIPELINES: Dict[str, Tuple[Callable[[Any], Any], Dict[str, Callable[[Any], Figure]]]] = {
    "lorenz": (
        compute_lorenz,
        {
            "lorenz_projections": plotting.plot_lorenz_projections,
            "lorenz_3d": plotting.plot_lorenz_3d,
        },
    ),
    "mandelbrot": (
        compute_mandelbrot,
        {
            "mandelbrot_members": plotting.plot_mandelbrot_members,
            "mandelbrot_counts": plotting.plot_mandelbrot_counts,
        },
    ),
    "logistic": (
        compute_logistic,
        {"bifurcation": plotting.plot_bifurcation},
    ),
}


def run_single_experiment(
    config: RunConfig,
    suite_name: Optional[str] = None,
    output_dir: str | Path | None = None,
) -> Any:
    """Compute one configuration, render its figures and track the run."""
    compute, plotters = PIPELINES[config.kind]

    print(f"[Run] Starting computation '{config.run_name}' (kind={config.kind})", flush=True)
    result, wall_time = time_function(compute, config)
    print(f"[Timing] Compute: {wall_time:.4f}s")

    plotting.ensure_style()
    figures = {name: plot(result) for name, plot in plotters.items()}

    try:
        if output_dir is not None:
            target = plotting.ensure_output_dir(Path(output_dir) / config.kind)
            for name, fig in figures.items():
                path = plotting.save_figure(fig, target / f"{config.run_name}_{name}.pdf")
                print(f"[Run] Plot saved to {path}")

        suite = suite_name or os.environ.get("CHAOSVIZ_SUITE") or "default"

        if os.environ.get("SKIP_MLFLOW"):
            print("[Run] SKIP_MLFLOW set - skipping MLflow logging.", flush=True)
        else:
            print("[Run] Computation finished, logging to MLflow...", flush=True)

        log_to_mlflow(config, result, figures, suite, wall_time)
    finally:
        for fig in figures.values():
            plt.close(fig)

    return result


def run_sweep(
    config_path: str | Path | None,
    task_id: Optional[int] = None,
    suite_name: Optional[str] = None,
    configs: Optional[list[RunConfig]] = None,
    descriptor: Optional[str] = None,
    output_dir: str | Path | None = None,
) -> int:
    """Run a sweep defined in a YAML configuration file or a pre-loaded list."""
    if configs is None:
        if config_path is None:
            raise ValueError("config_path must be provided when configs is None")
        configs = load_sweep_configs(config_path)
        descriptor = descriptor or str(config_path)
    else:
        descriptor = descriptor or (str(config_path) if config_path else "sweep")

    if not configs:
        print("ERROR: No configurations found in sweep", file=sys.stderr)
        return 1

    if task_id is not None:
        if task_id < 0 or task_id >= len(configs):
            print(f"ERROR: task-id {task_id} out of range [0, {len(configs) - 1}]", file=sys.stderr)
            return 1
        config = configs[task_id]
        print(f"[Task {task_id}] Running: {config.run_name}")
        success = run_single_config(config, task_id, len(configs), suite_name=suite_name,
                                    output_dir=output_dir, show_progress=False)
        return 0 if success else 1

    print("=" * 70)
    print(f"Running {len(configs)} configurations from {descriptor}")
    print("=" * 70)

    successes = 0
    failures: list[tuple[int, str]] = []

    for idx, cfg in enumerate(configs):
        success = run_single_config(cfg, idx, len(configs), suite_name=suite_name, output_dir=output_dir)
        if success:
            successes += 1
        else:
            failures.append((idx, cfg.run_name))

    print("\n" + "=" * 70)
    print("Summary")
    print("=" * 70)
    print(f"Total:      {len(configs)}")
    print(f"Successful: {successes}")
    print(f"Failed:     {len(failures)}")

    if failures:
        print("\nFailed configurations:")
        for idx, name in failures:
            print(f"  [{idx}] {name}")
        return 1

    return 0


def run_single_config(
    config: RunConfig,
    config_idx: int,
    total_configs: int,
    *,
    show_progress: bool = True,
    suite_name: Optional[str] = None,
    output_dir: str | Path | None = None,
) -> bool:
    """Execute a single configuration, reporting failure instead of raising."""
    if show_progress:
        print(f"\n[{config_idx + 1}/{total_configs}] {config.run_name}")
        print("    " + ", ".join(f"{k}={v}" for k, v in config.to_dict().items()))

    try:
        run_single_experiment(config, suite_name, output_dir)
    except Exception as exc:
        print(f"    ✗ FAILED: {type(exc).__name__}: {exc}", file=sys.stderr)
        return False

    if show_progress:
        print("    ✓ Completed")
    return True
