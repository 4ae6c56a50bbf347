"""Dirac right-hand side: sign convention, flat limit, failure modes."""

import math
import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

from grdirac.config import SolverConfig
from grdirac.dynamics import invert_gamma0, rhs, spatial_derivative
from grdirac.errors import DomainViolation, SingularOperator, TypeMismatch
from grdirac.operators import GAMMA0

PSI_UP = [1.0, 0.0, 0.0, 0.0]


def test_shape_dtype_and_no_mutation() -> None:
    psi = np.array([1.0, 0.2j, -0.3, 0.1 + 0.1j])
    before = psi.copy()
    out = rhs(psi, 10.0, 1.0, 0.1)
    assert out.shape == (4,)
    assert out.dtype == np.complex128
    assert np.array_equal(psi, before)


def test_real_input_is_promoted() -> None:
    out = rhs([1, 0, 0, 0], 10.0, 1.0, 0.5)
    assert out.dtype == np.complex128


@pytest.mark.parametrize("r", [3.0, 50.0, 1e5])
def test_flat_space_mass_term_is_rest_energy(r) -> None:
    m = 0.7
    d = rhs(PSI_UP, r, 0.0, m) - rhs(PSI_UP, r, 0.0, 0.0)
    assert np.allclose(d, -1j * m * np.array(PSI_UP), atol=1e-14)


def test_mass_term_general_spinor_and_mass() -> None:
    r, M, m = 10.0, 1.0, 0.3
    psi = np.array([0.5, 1j, -0.25, 0.75])
    sf = math.sqrt(1.0 - 2.0 * M / r)
    d = rhs(psi, r, M, m) - rhs(psi, r, M, 0.0)
    assert np.allclose(d, -1j * m * sf * (GAMMA0 @ psi), atol=1e-14)


def test_massless_upper_spinor_value() -> None:
    # rhs = −(f/r + M/(2r²)) γ^0 γ^1 ψ and γ^0 γ^1 e_0 = e_3
    r, M = 10.0, 1.0
    out = rhs(PSI_UP, r, M, 0.0)
    assert np.allclose(out, [0.0, 0.0, 0.0, -0.085], atol=1e-14)


def test_time_connection_switch() -> None:
    cfg = SolverConfig(include_time_connection=False)
    out = rhs(PSI_UP, 10.0, 1.0, 0.0, cfg)
    assert np.allclose(out, [0.0, 0.0, 0.0, -0.08], atol=1e-14)


def test_flat_space_large_radius_limit() -> None:
    out = rhs(PSI_UP, 1e8, 0.0, 1.0)
    assert np.allclose(out, [-1j, 0.0, 0.0, 0.0], atol=1e-7)


def test_deterministic() -> None:
    psi = [0.3, 0.1j, 0.0, 0.2]
    a = rhs(psi, 4.0, 1.0, 0.2)
    b = rhs(psi, 4.0, 1.0, 0.2)
    assert a.tobytes() == b.tobytes()


def test_stationary_spatial_derivative_is_zero() -> None:
    d = spatial_derivative(np.ones(4, dtype=complex), 10.0, 1.0)
    assert d.shape == (3, 4)
    assert np.all(d == 0.0)
    with pytest.raises(ValueError):
        spatial_derivative(np.ones(4, dtype=complex), 10.0, 1.0, "finite-difference")


def test_invert_gamma0_refuses_singular() -> None:
    with pytest.raises(SingularOperator):
        invert_gamma0(np.zeros((4, 4)))
    with pytest.raises(SingularOperator):
        invert_gamma0(np.diag([1.0, 1.0, 1.0, 1e-14]), cond_max=1e12)
    with pytest.raises(np.linalg.LinAlgError):
        invert_gamma0(np.full((4, 4), np.nan))
    assert np.allclose(invert_gamma0(GAMMA0), GAMMA0)


@pytest.mark.parametrize("r,M", [(2.0, 1.0), (1.0, 1.0), (0.0, 0.0)])
def test_horizon_and_interior_fail_loudly(r, M) -> None:
    with pytest.raises(DomainViolation):
        rhs(PSI_UP, r, M, 0.1)


def test_bad_inputs() -> None:
    with pytest.raises(DomainViolation):
        rhs([1, 0, 0], 10.0, 1.0, 0.1)
    with pytest.raises(TypeMismatch):
        rhs([1, 0, 0, "0"], 10.0, 1.0, 0.1)
    with pytest.raises(DomainViolation):
        rhs(PSI_UP, 10.0, 1.0, -0.1)
    with pytest.raises(DomainViolation):
        rhs(PSI_UP, 10.0, 1.0, float("nan"))
