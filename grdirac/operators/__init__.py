"""Clifford generators and the curved Dirac operator pieces."""

from .clifford import (
    CLIFFORD_METRIC,
    FLAT_GAMMAS,
    GAMMA0,
    GAMMA1,
    GAMMA2,
    GAMMA3,
    anticommutator,
    clifford_residual,
)
from .assembler import curved_gamma, spin_connection_term, spin_connection_terms

__all__ = [
    "CLIFFORD_METRIC",
    "FLAT_GAMMAS",
    "GAMMA0",
    "GAMMA1",
    "GAMMA2",
    "GAMMA3",
    "anticommutator",
    "clifford_residual",
    "curved_gamma",
    "spin_connection_term",
    "spin_connection_terms",
]
