# File: SWARM_OPT/PSO/Utils.py
# Numeric helpers and the contract-violation error shared by the PSO modules.


class PreconditionError(RuntimeError):
    """Raised when a caller breaks an optimizer contract (programmer error, not a runtime condition)."""


def require(condition: bool, message: str):
    if not condition:
        raise PreconditionError(message)


def restrict(value, lower, upper):
    """Clamps a scalar into [lower, upper], keeping int inputs as int. lower wins if upper < lower."""
    return max(lower, min(value, upper))


def format_vector(values, separator: str = "\t") -> str:
    return separator.join(repr(float(v)) for v in values)
