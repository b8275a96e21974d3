"""Figures for the Lorenz, Mandelbrot and logistic-map results."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import scienceplots  # noqa: F401
import seaborn as sns
from matplotlib.figure import Figure

from .report import Bifurcation, LorenzTrajectory, MandelbrotGrid

PLOTS_DIR = Path("Plots")


def ensure_style() -> None:
    """Apply consistent plotting style."""
    plt.style.use(["science", "no-latex"])
    sns.set_style("whitegrid")
    sns.set_palette("colorblind")
    sns.set_context("notebook")


def ensure_output_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def save_figure(fig: Figure, path: str | Path) -> Path:
    path = Path(path)
    ensure_output_dir(path.parent)
    fig.savefig(path, bbox_inches="tight", pad_inches=0.1)
    return path


def plot_lorenz_projections(trajectory: LorenzTrajectory, point_size: float = 0.2) -> Figure:
    """Scatter the trajectory onto the x-y, x-z and y-z planes."""
    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    pairs = [("x", "y"), ("x", "z"), ("y", "z")]
    for ax, (a, b) in zip(axes, pairs):
        ax.scatter(getattr(trajectory, a), getattr(trajectory, b), s=point_size, c=trajectory.t, cmap="viridis")
        ax.set_xlabel(a)
        ax.set_ylabel(b)
        ax.set_title(f"{a}-{b} projection")
    fig.suptitle("Lorenz system (forward Euler)")
    fig.tight_layout()
    return fig


def plot_lorenz_3d(trajectory: LorenzTrajectory, point_size: float = 0.2) -> Figure:
    fig = plt.figure(figsize=(8, 8))
    ax = fig.add_subplot(projection="3d")
    ax.scatter(trajectory.x, trajectory.y, trajectory.z, s=point_size, c=trajectory.t, cmap="viridis")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("z")
    ax.set_title("Lorenz attractor")
    return fig


def plot_mandelbrot_members(grid: MandelbrotGrid, point_size: float = 0.5) -> Figure:
    """Threshold plot: only lattice points that reached ``max_iter``."""
    xs, ys = grid.members()
    fig, ax = plt.subplots(figsize=(8, 8))
    ax.scatter(xs, ys, s=point_size, color="black", marker=".", lw=0)
    ax.set_aspect("equal")
    ax.set_xlabel(r"Re(c)")
    ax.set_ylabel(r"Im(c)")
    ax.set_title(f"Mandelbrot set (K = {grid.max_iter})")
    return fig


def plot_mandelbrot_counts(grid: MandelbrotGrid, point_size: float = 0.5, cmap: str = "magma") -> Figure:
    """Every lattice point coloured by its escape count."""
    fig, ax = plt.subplots(figsize=(9, 8))
    sc = ax.scatter(grid.x, grid.y, s=point_size, c=grid.counts, cmap=cmap, marker=".", lw=0)
    ax.set_aspect("equal")
    ax.set_xlabel(r"Re(c)")
    ax.set_ylabel(r"Im(c)")
    ax.set_title("Escape time")
    fig.colorbar(sc, ax=ax, label="iterations")
    return fig


def plot_bifurcation(result: Bifurcation, show_lyapunov: bool = True) -> Figure:
    r, x = result.points()
    if show_lyapunov:
        fig, (ax, ax_lyap) = plt.subplots(2, 1, figsize=(10, 9), sharex=True)
    else:
        fig, ax = plt.subplots(figsize=(10, 6))

    ax.plot(r, x, ",k", alpha=0.25)
    ax.set_xlim(result.r_values[0], result.r_values[-1])
    ax.set_ylabel("x")
    ax.set_title("Bifurcation diagram")

    if show_lyapunov:
        stable = result.lyapunov < 0
        ax_lyap.axhline(0, color="k", lw=0.5, alpha=0.5)
        ax_lyap.plot(result.r_values[stable], result.lyapunov[stable], ".k", alpha=0.5, ms=0.5)
        ax_lyap.plot(result.r_values[~stable], result.lyapunov[~stable], ".r", alpha=0.5, ms=0.5)
        ax_lyap.set_ylim(-2, 1)
        ax_lyap.set_ylabel("Lyapunov exponent")
        ax_lyap.set_xlabel("r")
    else:
        ax.set_xlabel("r")

    fig.tight_layout()
    return fig
