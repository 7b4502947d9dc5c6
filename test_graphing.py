#!/usr/bin/env python3
"""
Tests for the swarm plotting helpers.
"""

import pytest

from SWARM_OPT.Graphics.graphing import generate_timestamped_filename, plot_gbest_convergence, plot_swarm_2d
from SWARM_OPT.PSO.ObjectiveFunctions.Functions.Sphere import SphereFunction
from SWARM_OPT.PSO.PSO import SwarmOptimizer
from SWARM_OPT.PSO.Parameters import Parameters


def run_swarm(dim):
    swarm = SwarmOptimizer(function=SphereFunction(dim=dim),
                           params=Parameters(num_particles=6, max_iterations=10), seed=0)
    swarm.optimize()
    return swarm


def test_timestamped_filename_format():
    name = generate_timestamped_filename("gbest", "svg")
    assert name.endswith("_gbest.svg")
    assert len(name.split("_")[0]) == 8


def test_plot_gbest_convergence_saves_png(tmp_path):
    swarm = run_swarm(dim=3)
    path = plot_gbest_convergence(swarm.gbest_history, output_dir=str(tmp_path))
    assert path is not None and path.exists()
    assert path.suffix == ".png"


def test_plot_gbest_convergence_without_output_dir_returns_none():
    assert plot_gbest_convergence([1.0, 2.0], output_dir=None) is None
    assert plot_gbest_convergence([], output_dir=None) is None


def test_plot_swarm_2d(tmp_path):
    path = plot_swarm_2d(run_swarm(dim=2), resolution=20, output_dir=str(tmp_path / "figs"))
    assert path.exists()


def test_plot_swarm_2d_rejects_other_dimensions(tmp_path):
    with pytest.raises(ValueError):
        plot_swarm_2d(run_swarm(dim=3), output_dir=str(tmp_path))


if __name__ == "__main__":
    test_timestamped_filename_format()
    test_plot_gbest_convergence_without_output_dir_returns_none()
