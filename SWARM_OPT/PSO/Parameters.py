# File: SWARM_OPT/PSO/Parameters.py
# Parameter bundle for the swarm optimizer, with in-place range correction.

import dataclasses
from dataclasses import dataclass
from pathlib import Path

from SWARM_OPT.CONFIG import (
    NUM_PARTICLES, C_GLOBAL, C_LOCAL, MAX_V, MAX_ITERATIONS, MAX_CONST_ITERATIONS, REFLECT,
    NUM_PARTICLES_RANGE, ACCELERATION_RANGE, MAX_V_RANGE, MAX_ITERATIONS_RANGE, MIN_CONST_ITERATIONS,
)
from SWARM_OPT.Logs.logger import log_debug
from SWARM_OPT.PSO.Utils import restrict

module_name = Path(__file__).stem


@dataclass
class Parameters:
    """
    Configuration of a SwarmOptimizer.

    Attributes:
        num_particles (int): Size of the swarm.
        c_global (float): Acceleration towards the global best.
        c_local (float): Acceleration towards the particle's own best.
        max_v (float): Maximum velocity per dimension, as a fraction of that dimension's range.
        max_iterations (int): Hard iteration cap.
        max_const_iterations (int): Iterations without global best improvement before convergence.
        reflect (bool): Reflect at the bounding box; otherwise particles leaving it are marked out of bounds.
    """
    num_particles: int = NUM_PARTICLES
    c_global: float = C_GLOBAL
    c_local: float = C_LOCAL
    max_v: float = MAX_V
    max_iterations: int = MAX_ITERATIONS
    max_const_iterations: int = MAX_CONST_ITERATIONS
    reflect: bool = REFLECT

    def check(self) -> bool:
        """
        Clamps every field into its valid range, in place.

        max_const_iterations is bounded by the already clamped max_iterations,
        so the order below matters.

        Returns:
            bool: True if nothing had to be changed.
        """
        changed = False
        for name, lower, upper in (
                ("num_particles", *NUM_PARTICLES_RANGE),
                ("c_global", *ACCELERATION_RANGE),
                ("c_local", *ACCELERATION_RANGE),
                ("max_v", *MAX_V_RANGE),
                ("max_iterations", *MAX_ITERATIONS_RANGE),
                ("max_const_iterations", MIN_CONST_ITERATIONS, None),
        ):
            if upper is None:
                upper = self.max_iterations
            old = getattr(self, name)
            new = restrict(old, lower, upper)
            if new != old:
                log_debug(f"Parameter '{name}' corrected from {old} to {new}.", module_name)
                setattr(self, name, new)
                changed = True
        return not changed

    def copy(self) -> "Parameters":
        return dataclasses.replace(self)
