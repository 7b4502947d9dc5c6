# --- Ackley Function Implementation ---
import numpy as np

from SWARM_OPT.PSO.ObjectiveFunctions.ObjectiveFunction import ObjectiveFunction


class AckleyFunction(ObjectiveFunction):
    def __init__(self, dim=30):
        super().__init__(dim, bounds=(-32, 32), minimize=True)

    def evaluate(self, x: np.ndarray) -> float:
        return float(-20 * np.exp(-0.2 * np.sqrt(np.sum(x ** 2) / self.dim))
                     - np.exp(np.sum(np.cos(2 * np.pi * x)) / self.dim) + 20 + np.e)
