"""Position-dependent Dirac operators.

- curved_gamma:         γ^μ = e^μ_a γ^a
- spin_connection_term: Γ_μ = ¼ ω_{abμ} γ^a γ^b

ω_{abμ} is lowered with the Clifford metric η_D so that the flat generators
are covariantly constant in the frame:
    [Γ_μ, γ^a] + ω^a_{bμ} γ^b = 0.

Invariants
- {γ^μ, γ^ν} = −2 g^{μν} I (g in the (−,+,+,+) convention).
- Each Γ_μ is 4×4 complex128; Γ_μ for all μ is recomputed per call.
"""

from __future__ import annotations

import numpy as np

from ..errors import DomainViolation
from ..geom.schwarzschild import EQUATORIAL, inverse_vierbein
from ..geom.spin_connection import lower_frame_index, spin_connection
from .clifford import CLIFFORD_METRIC, FLAT_GAMMAS

__all__ = ["curved_gamma", "spin_connection_term", "spin_connection_terms"]

# γ^a γ^b for all frame pairs, shape (4, 4, 4, 4) = (a, b, i, j)
_GAMMA_PAIRS = np.einsum("aij,bjk->abik", FLAT_GAMMAS, FLAT_GAMMAS)
_GAMMA_PAIRS.setflags(write=False)


def curved_gamma(r: float, M: float, *, theta: float = EQUATORIAL) -> np.ndarray:
    """
    Curved-space gamma matrices γ^μ = Σ_a e^μ_a γ^a_flat.

    Returns
    -------
    np.ndarray
        Shape (4, 4, 4) complex128; index 0 is μ (t, r, θ, φ).
    """
    e_inv = inverse_vierbein(r, M, theta=theta)
    return np.einsum("ma,aij->mij", e_inv.astype(np.complex128), FLAT_GAMMAS)


def _omega_lowered(r: float, M: float, theta: float, include_frame_derivative: bool) -> np.ndarray:
    omega = spin_connection(r, M, theta=theta, include_frame_derivative=include_frame_derivative)
    return lower_frame_index(omega, CLIFFORD_METRIC)


def spin_connection_terms(
    r: float,
    M: float,
    *,
    theta: float = EQUATORIAL,
    include_frame_derivative: bool = True,
) -> np.ndarray:
    """All four Γ_μ stacked as shape (4, 4, 4) complex128, index 0 is μ."""
    omega_low = _omega_lowered(r, M, theta, include_frame_derivative)
    return 0.25 * np.einsum("abm,abij->mij", omega_low.astype(np.complex128), _GAMMA_PAIRS)


def spin_connection_term(
    r: float,
    M: float,
    mu: int,
    *,
    theta: float = EQUATORIAL,
    include_frame_derivative: bool = True,
) -> np.ndarray:
    """
    Spin-connection matrix Γ_μ = ¼ Σ_{a,b} ω_{abμ} γ^a γ^b for one direction.

    Raises
    ------
    DomainViolation
        If mu is not an integer in 0..3, or (r, M) is outside the exterior.
    """
    if isinstance(mu, bool) or not isinstance(mu, (int, np.integer)):
        raise DomainViolation(f"mu must be an integer coordinate index, got {mu!r}")
    if not 0 <= int(mu) <= 3:
        raise DomainViolation(f"mu must be in 0..3, got {mu}")
    omega_low = _omega_lowered(r, M, theta, include_frame_derivative)
    w = omega_low[:, :, int(mu)].astype(np.complex128)
    return 0.25 * np.einsum("ab,abij->ij", w, _GAMMA_PAIRS)
