# File: SWARM_OPT/PSO/AbstractOptimizer.py
# Generic iterative optimizer: one perform_optimization() call is one step,
# optimize() drives steps until the end condition is reached.

import threading
import traceback
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional

from SWARM_OPT.Logs.logger import log_error, log_info, log_debug

module_name = Path(__file__).stem

ProgressCallback = Callable[[int, int, float], None]


class AbstractOptimizer(ABC):
    """
    Base class for step-wise optimizers.

    Subclasses implement a single step in perform_optimization() and must hold
    self._lock for its whole duration, so steps on one instance never overlap.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._stop_requested = False

    @abstractmethod
    def perform_optimization(self):
        """Executes exactly one optimization step."""

    @abstractmethod
    def end_condition(self) -> bool:
        pass

    @abstractmethod
    def get_progress(self) -> int:
        pass

    @abstractmethod
    def get_max_progress(self) -> int:
        pass

    @abstractmethod
    def reset(self):
        """Zeroes the progress counters without discarding the optimizer's state."""

    @abstractmethod
    def get_optimum(self):
        pass

    @abstractmethod
    def get_value(self) -> float:
        pass

    def stop(self):
        """Asks a running optimize() loop to return after the current step."""
        self._stop_requested = True

    def optimize(self, progress_callback: Optional[ProgressCallback] = None):
        """
        Runs steps until end_condition() holds or stop() is called.

        Args:
            progress_callback: Called as callback(progress, max_progress, value) after every step.

        Returns:
            The optimum found so far.
        """
        self._stop_requested = False
        try:
            while not self.end_condition() and not self._stop_requested:
                self.perform_optimization()
                if progress_callback is not None:
                    progress_callback(self.get_progress(), self.get_max_progress(), self.get_value())
        except Exception as e:
            log_error(f"Optimization aborted after {self.get_progress()} steps: {e}", module_name)
            log_debug(traceback.format_exc(), module_name)
            raise

        if self._stop_requested:
            log_info(f"Optimization stopped at step {self.get_progress()}/{self.get_max_progress()}.", module_name)
        return self.get_optimum()
