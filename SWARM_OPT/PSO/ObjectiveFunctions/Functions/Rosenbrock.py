import numpy as np

from SWARM_OPT.PSO.ObjectiveFunctions.ObjectiveFunction import ObjectiveFunction


class RosenbrockFunction(ObjectiveFunction):
    def __init__(self, dim=30):
        super().__init__(dim, bounds=(-30, 30), minimize=True)

    def evaluate(self, x: np.ndarray) -> float:
        return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (x[:-1] - 1) ** 2))
