"""Spin connection of the diagonal Schwarzschild tetrad.

    ω^a_{bμ} = e^a_ν Γ^ν_{μλ} e^λ_b + e^a_ν ∂_μ e^ν_b

Invariants
- With the frame-derivative term, ω_{abμ} = η_ac ω^c_{bμ} is antisymmetric
  in (a, b) for every μ.
- Recomputed from scratch per call; no caching across radii.
"""

from __future__ import annotations

import math

import numpy as np

from .christoffel import christoffel_symbols
from .schwarzschild import (
    EQUATORIAL,
    MINKOWSKI,
    check_equatorial,
    horizon_factor,
    inverse_vierbein,
    vierbein,
)

__all__ = ["frame_derivative", "spin_connection", "lower_frame_index"]


def frame_derivative(r: float, M: float, *, theta: float = EQUATORIAL) -> np.ndarray:
    """
    Coordinate derivatives of the inverse tetrad, de[μ, ν, a] = ∂_μ e^ν_a.

    Only μ = r is non-zero on the equatorial plane:
        ∂_r (1/√f) = −f'/(2 f^{3/2}),  ∂_r √f = f'/(2√f),  ∂_r (1/r) = −1/r².
    """
    check_equatorial(theta)
    f = horizon_factor(r, M)
    r = float(r)
    df = 2.0 * float(M) / (r * r)
    sf = math.sqrt(f)
    de = np.zeros((4, 4, 4), dtype=float)
    de[1, 0, 0] = -0.5 * df / (f * sf)
    de[1, 1, 1] = 0.5 * df / sf
    de[1, 2, 2] = -1.0 / (r * r)
    de[1, 3, 3] = -1.0 / (r * r)
    return de


def spin_connection(
    r: float,
    M: float,
    *,
    theta: float = EQUATORIAL,
    include_frame_derivative: bool = True,
) -> np.ndarray:
    """
    Spin connection ω^a_{bμ} with shape (4, 4, 4), ordered omega[a, b, mu].

    Parameters
    ----------
    r, M : float
        Radius and mass parameter; r > 2M.
    theta : float
        Polar angle, pinned to π/2.
    include_frame_derivative : bool
        If False, return only the contraction e^a_ν Γ^ν_{μλ} e^λ_b, the
        literal textbook formula and the reference form. It omits
        e^a_ν ∂_μ e^ν_b and so is not antisymmetric along μ = r; the default
        adds that term so the antisymmetry invariant holds.
    """
    e = vierbein(r, M, theta=theta)
    e_inv = inverse_vierbein(r, M, theta=theta)
    Gamma = christoffel_symbols(r, M, theta=theta)

    # Gamma[nu, mu, lam] = Γ^ν_{μλ}
    omega = np.einsum("an,nml,lb->abm", e, Gamma, e_inv)
    if include_frame_derivative:
        de = frame_derivative(r, M, theta=theta)
        omega = omega + np.einsum("an,mnb->abm", e, de)
    return omega


def lower_frame_index(omega: np.ndarray, eta: np.ndarray = MINKOWSKI) -> np.ndarray:
    """Return ω_{abμ} = η_ac ω^c_{bμ} for an (n, n, n) array."""
    omega = np.asarray(omega)
    eta = np.asarray(eta, dtype=float)
    if omega.ndim != 3 or omega.shape[0] != omega.shape[1]:
        raise ValueError("omega must have shape (n, n, m).")
    if eta.shape != (omega.shape[0], omega.shape[0]):
        raise ValueError("eta must be (n, n) matching omega's frame indices.")
    return np.einsum("ac,cbm->abm", eta, omega)
