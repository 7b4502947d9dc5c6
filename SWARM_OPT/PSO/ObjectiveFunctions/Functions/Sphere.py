import numpy as np

from SWARM_OPT.PSO.ObjectiveFunctions.ObjectiveFunction import ObjectiveFunction


class SphereFunction(ObjectiveFunction):
    def __init__(self, dim=30):
        super().__init__(dim, bounds=(-5.12, 5.12), minimize=True)

    def evaluate(self, x: np.ndarray) -> float:
        return float(np.dot(x, x))
