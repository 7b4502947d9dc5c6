# File: SWARM_OPT/PSO/Particle.py
# A single particle: position, velocity, lazily cached fitness and its own best snapshot.

from typing import Optional

import numpy as np

from SWARM_OPT.PSO.Utils import require, restrict


class Particle:
    """
    A single candidate solution in the N-dimensional search box.

    Velocities are expressed in units of each dimension's range, so one
    max_v and one pair of accelerations apply to differently scaled dimensions.

    Attributes:
        position (np.ndarray): Current position.
        velocity (np.ndarray): Current velocity, normalized by the bound range.
        local_best (Particle | None): Snapshot of the best state this particle reached.
            None for snapshots themselves.
        out_of_bounds (bool): Set by move() if a non-reflecting step left the box.
            The fitness is undefined while set.
    """

    def __init__(self, rng: np.random.Generator, function, params):
        self.rng = rng
        self.function = function
        self.params = params
        self.position: np.ndarray = np.empty(0)
        self.velocity: np.ndarray = np.empty(0)
        self.local_best: Optional["Particle"] = None
        self.out_of_bounds = False
        self._fitness: Optional[float] = None  # None while stale
        self.reset()

    def reset(self):
        """Draws a uniform random position inside the bounds and a random velocity in [-max_v, max_v]."""
        lower, upper = self.function.lower_bounds, self.function.upper_bounds
        dim = self.function.num_input

        self.position = np.array([lower[i] + self.rng.random() * (upper[i] - lower[i]) for i in range(dim)])
        self.velocity = np.array([self.params.max_v * (1.0 - 2.0 * self.rng.random()) for _ in range(dim)])
        self.invalidate()

        self.local_best = self.snapshot()
        self.out_of_bounds = False

    def snapshot(self) -> "Particle":
        """Independent copy of position, velocity and cached fitness, without a local best."""
        copy = Particle.__new__(Particle)
        copy.rng = self.rng
        copy.function = self.function
        copy.params = self.params
        copy.position = self.position.copy()
        copy.velocity = self.velocity.copy()
        copy.local_best = None
        copy.out_of_bounds = False
        copy._fitness = self._fitness
        return copy

    def invalidate(self):
        self._fitness = None

    def get_value(self) -> np.ndarray:
        return self.position

    def get_velocity(self) -> np.ndarray:
        return self.velocity

    def get_local_best(self) -> Optional["Particle"]:
        return self.local_best

    @property
    def fitness_valid(self) -> bool:
        return self._fitness is not None

    def get_fitness(self) -> float:
        """Returns the cached fitness, evaluating the objective at the current position if stale."""
        require(not self.out_of_bounds, "fitness of an out-of-bounds particle is undefined")
        if self._fitness is None:
            self.function.set_input(self.position)
            self._fitness = self.function.get_output()
        return self._fitness

    def move(self, global_best: "Particle"):
        """
        Applies one PSO step towards global_best and the local best, then
        re-evaluates and updates the local best unless the particle left the box.
        """
        lower, upper = self.function.lower_bounds, self.function.upper_bounds
        params = self.params
        self.out_of_bounds = False

        for i in range(len(self.velocity)):
            span = upper[i] - lower[i]
            if span <= 0.0:
                # fixed dimension
                self.velocity[i] = 0.0
                continue

            self.velocity[i] += (params.c_global * self.rng.random() * (global_best.position[i] - self.position[i]) +
                                 params.c_local * self.rng.random() * (self.local_best.position[i] - self.position[i])) / span
            self.velocity[i] = restrict(self.velocity[i], -params.max_v, params.max_v)

            self.position[i] += self.velocity[i] * span

            if self.position[i] < lower[i]:
                if params.reflect:
                    self.position[i] = lower[i]
                    self.velocity[i] = abs(self.velocity[i])
                else:
                    self.out_of_bounds = True
            elif self.position[i] > upper[i]:
                if params.reflect:
                    self.position[i] = upper[i]
                    self.velocity[i] = -abs(self.velocity[i])
                else:
                    self.out_of_bounds = True

        self.invalidate()

        if not self.out_of_bounds and self.get_fitness() > self.local_best.get_fitness():
            self.local_best = self.snapshot()
