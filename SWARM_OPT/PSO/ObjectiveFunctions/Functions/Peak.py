# --- Peak Function ---
# Concave paraboloid, maximized at `centre`: f(x) = -sum((x - centre)^2)
import numpy as np

from SWARM_OPT.PSO.ObjectiveFunctions.ObjectiveFunction import ObjectiveFunction


class PeakFunction(ObjectiveFunction):
    def __init__(self, dim=30, centre=0.7):
        super().__init__(dim, bounds=(0.0, 1.0))
        self.centre = np.broadcast_to(np.asarray(centre, dtype=float), (dim,)).copy()

    def evaluate(self, x: np.ndarray) -> float:
        return float(-np.sum((x - self.centre) ** 2))
