"""Dirac spinor helpers.

A spinor is always a fresh complex128 vector of shape (4,). Inputs may be any
length-4 sequence of int/float/complex scalars or a numeric numpy array.
"""

from __future__ import annotations

import numbers
from collections.abc import Sequence
from typing import Any

import numpy as np

from ..errors import DomainViolation, TypeMismatch
from ..operators.clifford import GAMMA0

__all__ = ["SPINOR_DIM", "as_spinor", "dirac_adjoint", "normalize"]

SPINOR_DIM = 4


def _is_scalar_number(x: Any) -> bool:
    if isinstance(x, (bool, np.bool_)):
        return False
    return isinstance(x, (numbers.Number, np.number))


def as_spinor(psi: Any, name: str = "psi") -> np.ndarray:
    """
    Validate and promote psi to a complex128 vector of shape (4,).

    Accepts a numpy array or an ordered sequence (list, tuple). Mixed int,
    float and complex components are promoted to complex128 rather than
    rejected, since every spinor is stored complex.

    Raises
    ------
    TypeMismatch
        Unordered or non-sequence containers (dict, set, generator), or
        non-numeric, boolean or object-typed components.
    DomainViolation
        Wrong component count or non-finite components.
    """
    if isinstance(psi, np.ndarray):
        if psi.dtype.kind not in "iufc":
            raise TypeMismatch(f"{name} must have a numeric dtype, got {psi.dtype}")
        if psi.ndim != 1:
            raise DomainViolation(f"{name} must be 1-D with {SPINOR_DIM} components; got shape {psi.shape}")
        arr = psi.astype(np.complex128, copy=True)
    else:
        if isinstance(psi, (str, bytes)) or not isinstance(psi, Sequence):
            raise TypeMismatch(f"{name} must be a sequence of numbers, got {type(psi).__name__}")
        comps = list(psi)
        for k, c in enumerate(comps):
            if not _is_scalar_number(c):
                raise TypeMismatch(
                    f"{name}[{k}] must be an int, float or complex scalar, got {type(c).__name__}"
                )
        arr = np.array([complex(c) for c in comps], dtype=np.complex128)

    if arr.shape != (SPINOR_DIM,):
        raise DomainViolation(f"{name} must have exactly {SPINOR_DIM} components, got {arr.shape[0]}")
    if not np.all(np.isfinite(arr)):
        raise DomainViolation(f"{name} must contain only finite values")
    return arr


def dirac_adjoint(psi: Any) -> np.ndarray:
    """ψ̄ = ψ† γ^0 (complex conjugate, then contract with the flat γ^0)."""
    p = as_spinor(psi)
    return np.conj(p) @ GAMMA0


def normalize(psi: Any) -> np.ndarray:
    """Return ψ / ||ψ||₂; the zero spinor cannot be normalised."""
    p = as_spinor(psi)
    nrm = float(np.linalg.norm(p))
    if nrm == 0.0:
        raise DomainViolation("cannot normalize the zero spinor")
    return p / nrm
