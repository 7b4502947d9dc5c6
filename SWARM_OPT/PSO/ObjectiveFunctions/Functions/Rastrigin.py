# --- Rastrigin Function Implementation ---
import numpy as np

from SWARM_OPT.PSO.ObjectiveFunctions.ObjectiveFunction import ObjectiveFunction


class RastriginFunction(ObjectiveFunction):
    def __init__(self, dim=30):
        super().__init__(dim, bounds=(-5.12, 5.12), minimize=True)

    def evaluate(self, x: np.ndarray) -> float:
        return float(10 * self.dim + np.sum(x ** 2 - 10 * np.cos(2 * np.pi * x)))
