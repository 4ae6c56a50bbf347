"""Levi-Civita connection (Christoffel symbols).

Invariants
- Torsion-free: Γ^a_{bc} = Γ^a_{cb}.
- Closed-form Schwarzschild symbols agree with the general formula applied to
  metric() and metric_derivative().
- Entries outside the known non-zero set are exactly 0.0.
"""

from __future__ import annotations

import numpy as np

from .schwarzschild import EQUATORIAL, check_equatorial, horizon_factor

__all__ = ["christoffel", "christoffel_symbols"]


def christoffel(g: np.ndarray, dg: np.ndarray) -> np.ndarray:
    """
    Compute the Christoffel symbols Γ^a_{bc} of the Levi-Civita connection
    from a metric tensor and its first partial derivatives.

    Shapes and conventions
    - g has shape (n, n), symmetric and non-degenerate (any signature).
    - dg has shape (n, n, n) with dg[k, i, j] = ∂_k g_{ij}.
    - Return Γ with shape (n, n, n) where Γ[a, b, c] = Γ^a_{bc}.

    Formula
    Γ^a_{bc} = 0.5 * g^{aδ} * ( ∂_b g_{δc} + ∂_c g_{δb} − ∂_δ g_{bc} )

    Raises
    ------
    ValueError
        If shapes are inconsistent, inputs are non-finite, g is not symmetric
        or g is singular.
    """
    g = np.asarray(g, dtype=float)
    dg = np.asarray(dg, dtype=float)

    if g.ndim != 2 or g.shape[0] != g.shape[1]:
        raise ValueError("g must be a square 2D array with shape (n, n).")
    n = g.shape[0]
    if dg.shape != (n, n, n):
        raise ValueError(f"dg must have shape (n, n, n) matching g; got {dg.shape} for n={n}.")
    if not (np.all(np.isfinite(g)) and np.all(np.isfinite(dg))):
        raise ValueError("g and dg must contain only finite values.")
    if not np.allclose(g, g.T, atol=1e-12):
        raise ValueError("g must be symmetric within tolerance.")

    g_sym = 0.5 * (g + g.T)
    # Lorentzian metrics are allowed; only degeneracy is rejected
    w = np.linalg.eigvalsh(g_sym)
    if np.min(np.abs(w)) <= 1e-14 * max(1.0, float(np.max(np.abs(w)))):
        raise ValueError("g must be non-degenerate (no zero eigenvalues).")
    g_inv = np.linalg.inv(g_sym)

    Gamma = np.zeros((n, n, n), dtype=float)
    for b in range(n):
        for c in range(n):
            S = dg[b, :, c] + dg[c, :, b] - dg[:, b, c]  # shape (n,)
            Gamma[:, b, c] = 0.5 * (g_inv @ S)
    return Gamma


def christoffel_symbols(r: float, M: float, *, theta: float = EQUATORIAL) -> np.ndarray:
    """
    Closed-form Schwarzschild Christoffel symbols on the equatorial plane.

    Non-zero components (f = 1 − 2M/r, f' = 2M/r²):
        Γ^t_tr = Γ^t_rt = f'/(2f)
        Γ^r_tt = f f'/2
        Γ^r_rr = −f'/(2f)
        Γ^r_θθ = −r f
        Γ^r_φφ = −r f sin²θ           (sin²θ = 1)
        Γ^θ_rθ = Γ^θ_θr = 1/r
        Γ^φ_rφ = Γ^φ_φr = 1/r
    The angular couplings Γ^θ_φφ = −sinθ cosθ and Γ^φ_θφ = cotθ vanish at
    θ = π/2 and are stored as exact zeros.

    Returns
    -------
    np.ndarray
        Γ with shape (4, 4, 4), Γ[a, b, c] = Γ^a_{bc}.
    """
    check_equatorial(theta)
    f = horizon_factor(r, M)
    r = float(r)
    df = 2.0 * float(M) / (r * r)

    Gamma = np.zeros((4, 4, 4), dtype=float)
    Gamma[0, 0, 1] = Gamma[0, 1, 0] = 0.5 * df / f
    Gamma[1, 0, 0] = 0.5 * f * df
    Gamma[1, 1, 1] = -0.5 * df / f
    Gamma[1, 2, 2] = -r * f
    Gamma[1, 3, 3] = -r * f
    Gamma[2, 1, 2] = Gamma[2, 2, 1] = 1.0 / r
    Gamma[3, 1, 3] = Gamma[3, 3, 1] = 1.0 / r
    return Gamma
