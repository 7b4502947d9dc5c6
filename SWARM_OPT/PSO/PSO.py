# File: SWARM_OPT/PSO/PSO.py
# Particle swarm optimizer maximizing a bounded objective function.

from pathlib import Path
from typing import List, Optional

import numpy as np

from SWARM_OPT.Logs.logger import log_debug, log_info
from SWARM_OPT.PSO.AbstractOptimizer import AbstractOptimizer
from SWARM_OPT.PSO.Parameters import Parameters
from SWARM_OPT.PSO.Particle import Particle
from SWARM_OPT.PSO.Utils import format_vector, require

# --- Module Name for Logging ---
module_name = Path(__file__).stem


class SwarmOptimizer(AbstractOptimizer):
    """
    Global-best particle swarm optimizer.

    The population is created lazily: setting the function or the parameters
    only marks the swarm invalid, and the next query re-seeds every particle.

    Args:
        rng (np.random.Generator): Random stream shared by all particles. Created from `seed` if None.
        function (ObjectiveFunction): Objective to maximize.
        params (Parameters): Swarm configuration, defaults from CONFIG.
        seed (int): Seed for a new generator when rng is not given.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None, function=None,
                 params: Optional[Parameters] = None, seed: Optional[int] = None):
        super().__init__()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.params = params if params is not None else Parameters()
        self.function = function
        self.global_best: Optional[Particle] = None
        self._particles: List[Particle] = []
        self.num_iterations = 0
        self.num_const_iterations = 0
        self.gbest_history: List[float] = []
        self.valid = False

    def set_parameters(self, params: Parameters):
        self.params = params
        self.invalidate()

    def get_parameters(self) -> Parameters:
        return self.params

    def set_function(self, function):
        self.function = function
        self.invalidate()

    def get_function(self):
        return self.function

    @property
    def particles(self) -> List[Particle]:
        self.validate()
        return self._particles

    def get_global_best(self) -> Particle:
        self.validate()
        return self.global_best

    def validate(self):
        """Seeds a fresh population and picks the initial global best. No-op if already valid."""
        if self.valid:
            return
        require(self.function is not None, "function must be set before calling validate()")
        require(self.params.num_particles >= 1, "the swarm needs at least one particle")

        self._particles = [Particle(self.rng, self.function, self.params)
                           for _ in range(self.params.num_particles)]
        best = max(range(len(self._particles)), key=lambda i: self._particles[i].get_fitness())
        self.global_best = self._particles[best].snapshot()
        self.valid = True

        self.reset()
        self.gbest_history = [self.global_best.get_fitness()]
        log_info(f"Swarm initialized: {len(self._particles)} particles, {self.function.num_input} dimensions. "
                 f"Initial GBest: {self.global_best.get_fitness():.6e}", module_name)

    def invalidate(self):
        self.valid = False

    def perform_optimization(self):
        with self._lock:
            self.validate()
            require(not self.end_condition(), "perform_optimization() called after the end condition was reached")

            self.num_iterations += 1
            improved = False

            for particle in self._particles:
                particle.move(self.global_best)

                if not particle.out_of_bounds and particle.get_fitness() > self.global_best.get_fitness():
                    self.global_best = particle.snapshot()
                    improved = True

            if improved:
                self.num_const_iterations = 0
                log_debug(f"Step {self.num_iterations}: GBest improved to {self.global_best.get_fitness():.6e}",
                          module_name)
            else:
                self.num_const_iterations += 1
                log_debug(f"Step {self.num_iterations}: no improvement ({self.num_const_iterations} in a row)",
                          module_name)
            self.gbest_history.append(self.global_best.get_fitness())

            if self.end_condition():
                reason = "stagnation" if self.num_const_iterations >= self.params.max_const_iterations \
                    else "iteration limit"
                log_info(f"Swarm converged after {self.num_iterations} steps ({reason}). "
                         f"GBest: {self.global_best.get_fitness():.6e}", module_name)

    def get_max_progress(self) -> int:
        return self.params.max_iterations

    def get_progress(self) -> int:
        return self.num_iterations

    def end_condition(self) -> bool:
        return (self.num_iterations >= self.params.max_iterations or
                self.num_const_iterations >= self.params.max_const_iterations)

    def get_optimum(self) -> Optional[np.ndarray]:
        best = self.get_global_best()
        if best is None:
            return None
        return best.get_value().copy()

    def get_value(self) -> float:
        best = self.get_global_best()
        if best is None:
            return 0.0
        return best.get_fitness()

    def reset(self):
        self.num_iterations = 0
        self.num_const_iterations = 0

    def write_state(self, writer):
        """
        Writes one line per particle: index, score (negated fitness), position,
        all tab separated. Out-of-bounds particles have no fitness and report nan.
        """
        for i, particle in enumerate(self.particles):
            score = float("nan") if particle.out_of_bounds else -particle.get_fitness()
            writer.write(f"{i}\t{score!r}\t{format_vector(particle.get_value())}\n")
