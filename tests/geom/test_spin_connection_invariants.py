"""Spin connection of the Schwarzschild tetrad: contraction, antisymmetry, values."""

import math
import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

from grdirac.geom import (
    MINKOWSKI,
    christoffel_symbols,
    frame_derivative,
    inverse_vierbein,
    lower_frame_index,
    spin_connection,
    vierbein,
)


def _bare_contraction_loops(r: float, M: float) -> np.ndarray:
    e = vierbein(r, M)
    e_inv = inverse_vierbein(r, M)
    Gamma = christoffel_symbols(r, M)
    out = np.zeros((4, 4, 4))
    for a in range(4):
        for b in range(4):
            for mu in range(4):
                s = 0.0
                for nu in range(4):
                    for lam in range(4):
                        s += e[a, nu] * e_inv[lam, b] * Gamma[nu, mu, lam]
                out[a, b, mu] = s
    return out


def test_bare_contraction_matches_explicit_loops() -> None:
    r, M = 9.0, 1.2
    omega = spin_connection(r, M, include_frame_derivative=False)
    assert np.allclose(omega, _bare_contraction_loops(r, M), atol=1e-14)


@pytest.mark.parametrize("r,M", [(10.0, 1.0), (2.2, 1.0), (5.0, 0.0), (100.0, 3.0)])
def test_lowered_connection_is_antisymmetric(r, M) -> None:
    omega_low = lower_frame_index(spin_connection(r, M), MINKOWSKI)
    assert omega_low.shape == (4, 4, 4)
    assert np.allclose(omega_low, -np.swapaxes(omega_low, 0, 1), atol=1e-12)


def test_bare_contraction_is_not_antisymmetric_along_r() -> None:
    r, M = 10.0, 1.0
    f = 1.0 - 2.0 * M / r
    omega = spin_connection(r, M, include_frame_derivative=False)
    # diagonal frame entry survives without the ∂_r e term
    assert omega[0, 0, 1] == pytest.approx(M / (r * r * f))


def test_known_components() -> None:
    r, M = 10.0, 1.0
    sf = math.sqrt(1.0 - 2.0 * M / r)
    omega = spin_connection(r, M)
    assert omega[0, 1, 0] == pytest.approx(M / (r * r))
    assert omega[1, 0, 0] == pytest.approx(M / (r * r))
    assert omega[1, 2, 2] == pytest.approx(-sf)
    assert omega[2, 1, 2] == pytest.approx(sf)
    assert omega[1, 3, 3] == pytest.approx(-sf)
    assert omega[3, 1, 3] == pytest.approx(sf)
    assert np.allclose(omega[:, :, 1], 0.0, atol=1e-15)


def test_frame_derivative_matches_central_difference() -> None:
    r, M, h = 6.0, 1.0, 1e-5
    fd = (inverse_vierbein(r + h, M) - inverse_vierbein(r - h, M)) / (2.0 * h)
    de = frame_derivative(r, M)
    assert np.allclose(de[1], fd, rtol=1e-6, atol=1e-9)
    assert np.all(de[[0, 2, 3]] == 0.0)


def test_recomputed_fresh_per_call() -> None:
    a = spin_connection(10.0, 1.0)
    b = spin_connection(10.0, 1.0)
    assert a is not b
    a[0, 1, 0] = 123.0
    assert spin_connection(10.0, 1.0)[0, 1, 0] == pytest.approx(0.01)
    assert not np.allclose(spin_connection(20.0, 1.0), b)


def test_lower_frame_index_validation() -> None:
    with pytest.raises(ValueError):
        lower_frame_index(np.zeros((4, 4)))
    with pytest.raises(ValueError):
        lower_frame_index(np.zeros((4, 4, 4)), np.eye(3))
