# File: SWARM_OPT/PSO/ObjectiveFunctions/Loader.py
# Name -> class registry for the bundled objective functions.

from SWARM_OPT.PSO.ObjectiveFunctions.Functions.Ackley import AckleyFunction
from SWARM_OPT.PSO.ObjectiveFunctions.Functions.Peak import PeakFunction
from SWARM_OPT.PSO.ObjectiveFunctions.Functions.Rastrigin import RastriginFunction
from SWARM_OPT.PSO.ObjectiveFunctions.Functions.Rosenbrock import RosenbrockFunction
from SWARM_OPT.PSO.ObjectiveFunctions.Functions.Sphere import SphereFunction

objective_function_classes = {
    "ackley": AckleyFunction,
    "peak": PeakFunction,
    "rastrigin": RastriginFunction,
    "rosenbrock": RosenbrockFunction,
    "sphere": SphereFunction,
}


def create_function(name: str, dim: int):
    try:
        function_class = objective_function_classes[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown objective function '{name}'. "
                         f"Available: {', '.join(sorted(objective_function_classes))}") from None
    return function_class(dim=dim)
