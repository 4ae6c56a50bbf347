"""Dirac spinor evolution on the Schwarzschild background.

Subpackages
- geom: metric, vierbein, Christoffel symbols and spin connection
- operators: flat Clifford generators, curved gammas, spin-connection terms
- field: spinor validation, Dirac adjoint, conserved current
- dynamics: evolution right-hand side and fixed-step integrators
- utils: structured logging and CSV metric sink
"""

from .errors import DomainViolation, GRDiracError, SingularOperator, TypeMismatch
from .config import SolverConfig, load_config
from .geom import (
    EQUATORIAL,
    christoffel_symbols,
    inverse_metric,
    inverse_vierbein,
    metric,
    spin_connection,
    vierbein,
)
from .operators import FLAT_GAMMAS, curved_gamma, spin_connection_term
from .field import current
from .dynamics import Trajectory, integrate, rhs

__version__ = "0.1.0"

__all__ = [
    "GRDiracError",
    "DomainViolation",
    "SingularOperator",
    "TypeMismatch",
    "SolverConfig",
    "load_config",
    "EQUATORIAL",
    "metric",
    "inverse_metric",
    "vierbein",
    "inverse_vierbein",
    "christoffel_symbols",
    "spin_connection",
    "FLAT_GAMMAS",
    "curved_gamma",
    "spin_connection_term",
    "current",
    "rhs",
    "integrate",
    "Trajectory",
]
