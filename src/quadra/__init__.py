from .function import exp, log, pow, sqrt
from .integrate import Options, available_methods, definite_integral, get_integrator
from .interval import CLOSED, CLOSED_OPEN, OPEN, OPEN_CLOSED, Interval
from .sequence import ConvergenceResult

__all__ = [
    "exp",
    "log",
    "pow",
    "sqrt",
    "Options",
    "available_methods",
    "definite_integral",
    "get_integrator",
    "ConvergenceResult",
    "CLOSED",
    "CLOSED_OPEN",
    "OPEN",
    "OPEN_CLOSED",
    "Interval",
]
