# --- Objective Function Base Class ---
# A bounded black box: dimensionality, per-dimension bounds, and a scalar
# output for the most recently written input. The swarm maximizes the output.
from abc import ABC, abstractmethod
from typing import Callable, Optional

import numpy as np
from matplotlib import pyplot as plt

from SWARM_OPT.PSO.Utils import require


class ObjectiveFunction(ABC):
    def __init__(self, dim=30, bounds=(-5.12, 5.12), minimize=False):
        """
        Args:
            dim (int): Number of inputs.
            bounds (tuple): (low, high) applied to every dimension, or a pair of per-dimension sequences.
            minimize (bool): If True, evaluate() is a cost and get_output() reports its negation.
        """
        if dim < 1:
            raise ValueError(f"dim must be >= 1, got {dim}")
        self.dim = dim
        self.minimize = minimize
        self.bounds = bounds
        self._input: Optional[np.ndarray] = None

    @property
    def bounds(self):
        return self._bounds

    @bounds.setter
    def bounds(self, bounds):
        low, high = bounds
        lower = np.broadcast_to(np.asarray(low, dtype=float), (self.dim,)).copy()
        upper = np.broadcast_to(np.asarray(high, dtype=float), (self.dim,)).copy()
        if np.any(upper < lower):
            raise ValueError(f"Upper bounds must be >= lower bounds, got {lower} / {upper}")
        self._bounds = bounds
        self._lower = lower
        self._upper = upper

    @property
    def num_input(self) -> int:
        return self.dim

    @property
    def lower_bounds(self) -> np.ndarray:
        return self._lower

    @property
    def upper_bounds(self) -> np.ndarray:
        return self._upper

    def set_input(self, x):
        x = np.array(x, dtype=float)
        if x.shape != (self.dim,):
            raise ValueError(f"Expected an input of shape ({self.dim},), got {x.shape}")
        self._input = x

    def get_output(self) -> float:
        require(self._input is not None, "set_input() must be called before get_output()")
        value = float(self.evaluate(self._input))
        return -value if self.minimize else value

    @abstractmethod
    def evaluate(self, x: np.ndarray) -> float:
        pass

    def plot_3d_surface(self, resolution=100, save_path=None, show=True):
        if self.dim != 2:
            raise ValueError("3D surface plot only supports 2D objective functions.")

        x = np.linspace(self.lower_bounds[0], self.upper_bounds[0], resolution)
        y = np.linspace(self.lower_bounds[1], self.upper_bounds[1], resolution)
        X, Y = np.meshgrid(x, y)

        Z = np.array([
            self.evaluate(np.array([x_val, y_val]))
            for x_val, y_val in zip(np.ravel(X), np.ravel(Y))
        ]).reshape(X.shape)

        fig = plt.figure(figsize=(10, 7))
        ax = fig.add_subplot(111, projection='3d')
        ax.plot_surface(X, Y, Z, cmap='viridis', edgecolor='k', alpha=0.8)
        ax.set_title(f"3D Surface of {self.__class__.__name__}")
        ax.set_xlabel("x1")
        ax.set_ylabel("x2")
        ax.set_zlabel("f(x)")

        if save_path is not None:
            fig.savefig(save_path)
        if show:
            plt.show()
        plt.close(fig)


class CallableFunction(ObjectiveFunction):
    """Wraps a plain Python callable f(x) -> float."""

    def __init__(self, func: Callable[[np.ndarray], float], lower, upper, minimize=False):
        super().__init__(dim=len(np.atleast_1d(lower)), bounds=(lower, upper), minimize=minimize)
        self.func = func

    def evaluate(self, x: np.ndarray) -> float:
        return self.func(x)
