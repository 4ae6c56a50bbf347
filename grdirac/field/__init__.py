"""Spinor field helpers and the conserved current."""

from .spinor import SPINOR_DIM, as_spinor, dirac_adjoint, normalize
from .current import current, probability_density

__all__ = [
    "SPINOR_DIM",
    "as_spinor",
    "dirac_adjoint",
    "normalize",
    "current",
    "probability_density",
]
