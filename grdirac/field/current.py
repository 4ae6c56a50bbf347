"""Conserved Dirac current j^μ = ψ̄ γ^μ ψ.

Invariant: for ψ with only upper components, j^t = |ψ|²/√f is real and
positive. Evaluations at different radii are independent.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from ..geom.schwarzschild import EQUATORIAL
from ..operators.assembler import curved_gamma
from .spinor import as_spinor, dirac_adjoint

__all__ = ["current", "probability_density"]


def current(psi: Any, r: float, M: float, *, theta: float = EQUATORIAL) -> np.ndarray:
    """
    Current components (j^t, j^r, j^θ, j^φ) at radius r.

    Returns
    -------
    np.ndarray
        Shape (4,), complex128.
    """
    p = as_spinor(psi)
    gammas = curved_gamma(r, M, theta=theta)
    psi_bar = dirac_adjoint(p)
    return np.einsum("i,mij,j->m", psi_bar, gammas, p)


def probability_density(psi: Any, r: float, M: float, *, theta: float = EQUATORIAL) -> float:
    """Re j^t."""
    return float(np.real(current(psi, r, M, theta=theta)[0]))
