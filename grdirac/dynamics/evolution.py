"""Right-hand side of the curved-space Dirac equation.

From (iγ^μ(∂_μ + Γ_μ) − m)ψ = 0:

    ∂_t ψ = −Γ_t ψ − (γ^t)⁻¹ [ Σ_j γ^j (∂_j ψ + Γ_j ψ) + i m ψ ],  j ∈ {r, θ, φ}

Approximation "stationary-equatorial": ∂_j ψ = 0. The spatial derivative is
isolated in spatial_derivative() so another approximation can be dropped in
without touching rhs().

Invariants
- Output is a fresh complex128 vector of shape (4,); inputs are not mutated.
- Never returns non-finite values; raises instead.
- For M = 0 and ψ = [1, 0, 0, 0] the mass part is −i m ψ (rest energy +m).
"""

from __future__ import annotations

import math
from typing import Any, Optional

import numpy as np

from ..config import SolverConfig
from ..errors import DomainViolation, SingularOperator
from ..field.spinor import SPINOR_DIM, as_spinor
from ..operators.assembler import curved_gamma, spin_connection_terms

__all__ = ["check_particle_mass", "invert_gamma0", "spatial_derivative", "rhs"]

_DEFAULT_CONFIG = SolverConfig()


def check_particle_mass(m: Any) -> float:
    try:
        mm = float(m)
    except (TypeError, ValueError) as e:
        raise DomainViolation(f"particle mass must be a real number, got {m!r}") from e
    if not math.isfinite(mm) or mm < 0.0:
        raise DomainViolation(f"particle mass must be finite and >= 0, got {mm}")
    return mm


def invert_gamma0(gamma0: np.ndarray, cond_max: float = 1e12) -> np.ndarray:
    """
    Invert the time gamma matrix, refusing singular or ill-conditioned input.

    Raises
    ------
    SingularOperator
        If γ^t is singular, non-finite or has condition number above cond_max.
    """
    G = np.asarray(gamma0, dtype=np.complex128)
    if G.shape != (SPINOR_DIM, SPINOR_DIM):
        raise ValueError(f"gamma0 must have shape (4, 4); got {G.shape}")
    if not np.all(np.isfinite(G)):
        raise SingularOperator("gamma0 contains non-finite entries")
    with np.errstate(divide="ignore", invalid="ignore"):
        cond = float(np.linalg.cond(G))
    if not math.isfinite(cond) or cond > float(cond_max):
        raise SingularOperator(f"gamma0 is singular or ill-conditioned (cond={cond:.3g})")
    try:
        return np.linalg.inv(G)
    except np.linalg.LinAlgError as e:
        raise SingularOperator("gamma0 is singular") from e


def spatial_derivative(
    psi: np.ndarray,
    r: float,
    M: float,
    approximation: str = "stationary-equatorial",
) -> np.ndarray:
    """∂_j ψ for j = r, θ, φ as a (3, 4) complex array."""
    if approximation == "stationary-equatorial":
        return np.zeros((3, SPINOR_DIM), dtype=np.complex128)
    raise ValueError(f"unsupported approximation {approximation!r}")


def rhs(
    psi: Any,
    r: float,
    M: float,
    m: float,
    config: Optional[SolverConfig] = None,
) -> np.ndarray:
    """
    Evaluate dψ/dt at radius r.

    Parameters
    ----------
    psi : sequence of 4 numbers or np.ndarray
        Spinor; promoted to complex128.
    r, M : float
        Radius and mass parameter, r > 2M.
    m : float
        Particle mass, m >= 0.
    config : SolverConfig, optional
        Approximation and connection switches; defaults to SolverConfig().

    Returns
    -------
    np.ndarray
        dψ/dt, shape (4,), complex128.

    Raises
    ------
    DomainViolation
        r ≤ 2M, bad spinor length, negative mass, or a non-finite result.
    SingularOperator
        γ^t cannot be inverted.
    TypeMismatch
        Non-numeric spinor components.
    """
    cfg = config if config is not None else _DEFAULT_CONFIG
    p = as_spinor(psi)
    mass = check_particle_mass(m)

    gammas = curved_gamma(r, M, theta=cfg.theta)
    conns = spin_connection_terms(
        r, M, theta=cfg.theta, include_frame_derivative=cfg.include_frame_derivative
    )
    g0_inv = invert_gamma0(gammas[0], cfg.gamma0_cond_max)

    dpsi = spatial_derivative(p, r, M, cfg.approximation)
    spatial = np.zeros(SPINOR_DIM, dtype=np.complex128)
    for j in range(1, 4):
        spatial = spatial + gammas[j] @ (dpsi[j - 1] + conns[j] @ p)

    mass_term = -1j * mass * p
    out = -(g0_inv @ (spatial - mass_term))
    if cfg.include_time_connection:
        out = out - conns[0] @ p

    if not np.all(np.isfinite(out)):
        raise DomainViolation(f"rhs produced non-finite values at r={r}, M={M}")
    return out
