"""Spinor promotion, Dirac adjoint and normalisation."""

import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

from grdirac.errors import DomainViolation, TypeMismatch
from grdirac.field import as_spinor, dirac_adjoint, normalize


def test_promotes_mixed_numeric_sequence_to_complex() -> None:
    psi = as_spinor([1, 0.5, 2j, np.float32(3.0)])
    assert psi.dtype == np.complex128
    assert psi.shape == (4,)
    assert np.array_equal(psi, [1.0, 0.5, 2j, 3.0])


def test_array_input_is_copied() -> None:
    src = np.array([1.0, 2.0, 3.0, 4.0])
    psi = as_spinor(src)
    src[0] = 99.0
    assert psi[0] == 1.0


@pytest.mark.parametrize("bad", [[1, 0, 0], [1, 0, 0, 0, 0], [], np.zeros(3), np.zeros((2, 2))])
def test_wrong_component_count(bad) -> None:
    with pytest.raises(DomainViolation):
        as_spinor(bad)


@pytest.mark.parametrize(
    "bad",
    [
        [1, 0, 0, True],
        [1, "0", 0, 0],
        [1, None, 0, 0],
        [1, [0], 0, 0],
        "abcd",
        42,
        np.array([1, 0, 0, 0], dtype=object),
        np.array([True, False, False, False]),
    ],
)
def test_non_numeric_components_raise_type_mismatch(bad) -> None:
    with pytest.raises(TypeMismatch):
        as_spinor(bad)


@pytest.mark.parametrize(
    "bad",
    [
        {0: 9.0, 1: 8.0, 2: 7.0, 3: 6.0},
        {3.0, 1.0, 2.0, 0.5},
        frozenset({1.0, 2.0, 3.0, 4.0}),
        (x for x in (1.0, 0.0, 0.0, 0.0)),
    ],
    ids=["dict", "set", "frozenset", "generator"],
)
def test_unordered_containers_raise_type_mismatch(bad) -> None:
    with pytest.raises(TypeMismatch):
        as_spinor(bad)


def test_tuple_input_keeps_component_order() -> None:
    psi = as_spinor((3.0, 1.0, 2.0, 0.5j))
    assert np.array_equal(psi, [3.0, 1.0, 2.0, 0.5j])


def test_type_mismatch_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        as_spinor([1, 0, 0, "x"])


def test_non_finite_components_rejected() -> None:
    with pytest.raises(DomainViolation):
        as_spinor([1.0, np.nan, 0.0, 0.0])
    with pytest.raises(DomainViolation):
        as_spinor([1.0, complex(0.0, np.inf), 0.0, 0.0])


def test_dirac_adjoint_conjugates_and_flips_lower_components() -> None:
    bar = dirac_adjoint([1j, 2.0, 3.0 - 1j, 0.0])
    assert np.allclose(bar, [-1j, 2.0, -(3.0 + 1j), 0.0])


def test_normalize() -> None:
    psi = normalize([3.0, 4j, 0.0, 0.0])
    assert np.linalg.norm(psi) == pytest.approx(1.0)
    assert np.allclose(psi, [0.6, 0.8j, 0.0, 0.0])
    with pytest.raises(DomainViolation):
        normalize([0, 0, 0, 0])
