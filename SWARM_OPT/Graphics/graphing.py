# File: SWARM_OPT/Graphics/graphing.py
# Plots for a swarm run: global best convergence and 2D particle positions.

import matplotlib.pyplot as plt
import numpy as np
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from SWARM_OPT.CONFIG import FIGURES_DIR
from SWARM_OPT.Logs.logger import log_info, log_warning

# --- Module Name for Logging ---
module_name = Path(__file__).stem


def generate_timestamped_filename(base_name: str, extension: str = "png") -> str:
    """Returns "YYYYMMDD_HHMMSS_<base_name>.<extension>"."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{timestamp}_{base_name}.{extension}"


def _finish(fig, base_name: str, output_dir: Optional[str], show: bool) -> Optional[Path]:
    save_path = None
    if output_dir is not None:
        directory = Path(output_dir)
        directory.mkdir(parents=True, exist_ok=True)
        save_path = directory / generate_timestamped_filename(base_name)
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
        log_info(f"Saved plot to {save_path}", module_name)
    if show:
        plt.show()
    plt.close(fig)
    return save_path


def plot_gbest_convergence(history: Sequence[float],
                           title: str = "Global Best Convergence",
                           output_dir: Optional[str] = FIGURES_DIR,
                           show: bool = False) -> Optional[Path]:
    """
    Plots the global best fitness per step (index 0 is the initial swarm).

    Returns:
        Path of the saved figure, or None if nothing was saved.
    """
    if len(history) == 0:
        log_warning("Empty gbest history, nothing to plot.", module_name)
        return None

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(np.arange(len(history)), np.asarray(history, dtype=float), color="tab:blue", linewidth=1.5)
    ax.set_title(title)
    ax.set_xlabel("Step")
    ax.set_ylabel("Global best fitness")
    ax.grid(True, alpha=0.3)
    return _finish(fig, "gbest_convergence", output_dir, show)


def plot_swarm_2d(swarm, resolution: int = 100,
                  output_dir: Optional[str] = FIGURES_DIR,
                  show: bool = False) -> Optional[Path]:
    """Draws the objective's contour, every particle and the global best. 2D functions only."""
    function = swarm.get_function()
    if function is None or function.num_input != 2:
        raise ValueError("plot_swarm_2d only supports 2D objective functions.")

    lower, upper = function.lower_bounds, function.upper_bounds
    x = np.linspace(lower[0], upper[0], resolution)
    y = np.linspace(lower[1], upper[1], resolution)
    X, Y = np.meshgrid(x, y)
    Z = np.array([
        function.evaluate(np.array([x_val, y_val]))
        for x_val, y_val in zip(np.ravel(X), np.ravel(Y))
    ]).reshape(X.shape)

    fig, ax = plt.subplots(figsize=(7, 6))
    ax.contourf(X, Y, Z, levels=50, cmap="viridis", alpha=0.6)
    ax.contour(X, Y, Z, levels=20, colors="k", linewidths=0.2, alpha=0.3)

    positions = np.array([p.get_value() for p in swarm.particles])
    ax.plot(positions[:, 0], positions[:, 1], "bo", markersize=4, label="Particles")
    optimum = swarm.get_optimum()
    ax.plot([optimum[0]], [optimum[1]], "r*", markersize=12, label="Global Best")

    ax.set_xlim(lower[0], upper[0])
    ax.set_ylim(lower[1], upper[1])
    ax.set_title(f"Swarm at step {swarm.get_progress()}")
    ax.set_xlabel("x1")
    ax.set_ylabel("x2")
    ax.legend()
    return _finish(fig, "swarm_positions", output_dir, show)
