"""Schwarzschild metric and orthonormal frame on the equatorial plane.

Coordinates are (t, r, θ, φ) with signature (−,+,+,+) and f = 1 − 2M/r.

Invariants
- g is diagonal; off-diagonal entries are exactly zero.
- e^a_μ e^b_ν η_ab = g_μν with η = diag(−1, 1, 1, 1).
- vierbein @ inverse_vierbein = I.
- All functions are pure and refuse r ≤ 2M instead of returning inf/NaN.

The polar angle is an explicit argument pinned to θ = π/2; off-plane geometry
is not supported.
"""

from __future__ import annotations

import math

import numpy as np

from ..errors import DomainViolation

__all__ = [
    "EQUATORIAL",
    "MINKOWSKI",
    "check_equatorial",
    "horizon_factor",
    "metric",
    "inverse_metric",
    "metric_derivative",
    "vierbein",
    "inverse_vierbein",
]

EQUATORIAL = 0.5 * math.pi

# Frame metric η_ab matching the (−,+,+,+) coordinate signature.
MINKOWSKI = np.diag([-1.0, 1.0, 1.0, 1.0])
MINKOWSKI.setflags(write=False)

_THETA_ATOL = 1e-12


def check_equatorial(theta: float) -> float:
    """Return theta as float; raise DomainViolation unless θ = π/2."""
    try:
        th = float(theta)
    except (TypeError, ValueError) as e:
        raise DomainViolation(f"theta must be a real number, got {theta!r}") from e
    if not math.isfinite(th) or abs(th - EQUATORIAL) > _THETA_ATOL:
        raise DomainViolation(
            f"only the equatorial plane theta=pi/2 is supported, got theta={th}"
        )
    return th


def horizon_factor(r: float, M: float) -> float:
    """
    Validate (r, M) and return f = 1 − 2M/r.

    Raises
    ------
    DomainViolation
        If r or M are not finite reals, M < 0, r ≤ 0, or r ≤ 2M.
    """
    try:
        rr = float(r)
        mm = float(M)
    except (TypeError, ValueError) as e:
        raise DomainViolation("r and M must be real numbers") from e
    if not (math.isfinite(rr) and math.isfinite(mm)):
        raise DomainViolation(f"r and M must be finite, got r={rr}, M={mm}")
    if mm < 0.0:
        raise DomainViolation(f"mass parameter M must be >= 0, got M={mm}")
    if rr <= 0.0:
        raise DomainViolation(f"radius must be > 0, got r={rr}")
    if rr <= 2.0 * mm:
        raise DomainViolation(
            f"radius r={rr} is at or inside the horizon 2M={2.0 * mm}"
        )
    f = 1.0 - 2.0 * mm / rr
    if not f > 0.0:
        # r marginally above 2M can still round f to zero
        raise DomainViolation(f"horizon factor f={f} is not positive at r={rr}, M={mm}")
    return f


def metric(r: float, M: float, *, theta: float = EQUATORIAL) -> np.ndarray:
    """
    Covariant metric g_μν = diag(−f, 1/f, r², r² sin²θ) at θ = π/2.

    Returns
    -------
    np.ndarray
        Shape (4, 4), float64.
    """
    check_equatorial(theta)
    f = horizon_factor(r, M)
    r = float(r)
    return np.diag([-f, 1.0 / f, r * r, r * r])


def inverse_metric(r: float, M: float, *, theta: float = EQUATORIAL) -> np.ndarray:
    """Contravariant metric g^μν = diag(−1/f, f, 1/r², 1/r²), analytic."""
    check_equatorial(theta)
    f = horizon_factor(r, M)
    r = float(r)
    return np.diag([-1.0 / f, f, 1.0 / (r * r), 1.0 / (r * r)])


def metric_derivative(r: float, M: float, *, theta: float = EQUATORIAL) -> np.ndarray:
    """
    Coordinate derivatives of the metric, dg[k, i, j] = ∂_k g_ij.

    Only the radial slice k=1 is populated. The θ-derivative of g_φφ is
    2r² sinθ cosθ, which vanishes on the equatorial plane.

    Returns
    -------
    np.ndarray
        Shape (4, 4, 4), float64; ordering matches christoffel(g, dg).
    """
    check_equatorial(theta)
    f = horizon_factor(r, M)
    r = float(r)
    df = 2.0 * float(M) / (r * r)
    dg = np.zeros((4, 4, 4), dtype=float)
    dg[1, 0, 0] = -df
    dg[1, 1, 1] = -df / (f * f)
    dg[1, 2, 2] = 2.0 * r
    dg[1, 3, 3] = 2.0 * r
    return dg


def vierbein(r: float, M: float, *, theta: float = EQUATORIAL) -> np.ndarray:
    """
    Tetrad e^a_μ = diag(√f, 1/√f, r, r sinθ); rows are frame indices a,
    columns are coordinate indices μ.
    """
    check_equatorial(theta)
    f = horizon_factor(r, M)
    r = float(r)
    sf = math.sqrt(f)
    return np.diag([sf, 1.0 / sf, r, r])


def inverse_vierbein(r: float, M: float, *, theta: float = EQUATORIAL) -> np.ndarray:
    """
    Inverse tetrad e^μ_a = diag(1/√f, √f, 1/r, 1/(r sinθ)); rows are
    coordinate indices μ, columns are frame indices a.
    """
    check_equatorial(theta)
    f = horizon_factor(r, M)
    r = float(r)
    sf = math.sqrt(f)
    return np.diag([1.0 / sf, sf, 1.0 / r, 1.0 / r])
