"""Flat-space Dirac matrices (Dirac representation).

γ^0 = diag(I, −I),  γ^k = [[0, σ_k], [−σ_k, 0]].

γ^2 carries its factor i explicitly, so every generator is a complex128
matrix and no call site has to remember a deferred imaginary unit.

Invariants
- {γ^a, γ^b} = 2 η_D^{ab} I with η_D = diag(+1, −1, −1, −1) = −MINKOWSKI.
- Generators are read-only module constants.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..geom.schwarzschild import MINKOWSKI

__all__ = [
    "GAMMA0",
    "GAMMA1",
    "GAMMA2",
    "GAMMA3",
    "FLAT_GAMMAS",
    "CLIFFORD_METRIC",
    "anticommutator",
    "clifford_residual",
]

GAMMA0 = np.array(
    [[1, 0, 0, 0],
     [0, 1, 0, 0],
     [0, 0, -1, 0],
     [0, 0, 0, -1]],
    dtype=np.complex128,
)

GAMMA1 = np.array(
    [[0, 0, 0, 1],
     [0, 0, 1, 0],
     [0, -1, 0, 0],
     [-1, 0, 0, 0]],
    dtype=np.complex128,
)

GAMMA2 = 1j * np.array(
    [[0, 0, 0, -1],
     [0, 0, 1, 0],
     [0, 1, 0, 0],
     [-1, 0, 0, 0]],
    dtype=np.complex128,
)

GAMMA3 = np.array(
    [[0, 0, 1, 0],
     [0, 0, 0, -1],
     [-1, 0, 0, 0],
     [0, 1, 0, 0]],
    dtype=np.complex128,
)

FLAT_GAMMAS = np.stack([GAMMA0, GAMMA1, GAMMA2, GAMMA3])

# Metric the generators square to; opposite sign to the geometry's frame metric.
CLIFFORD_METRIC = -np.asarray(MINKOWSKI, dtype=float)

for _arr in (GAMMA0, GAMMA1, GAMMA2, GAMMA3, FLAT_GAMMAS, CLIFFORD_METRIC):
    _arr.setflags(write=False)
del _arr


def anticommutator(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """{A, B} = AB + BA."""
    A = np.asarray(A)
    B = np.asarray(B)
    return A @ B + B @ A


def clifford_residual(gammas: Sequence[np.ndarray], target: np.ndarray) -> float:
    """
    Max-abs deviation of {γ^μ, γ^ν} from 2 target^{μν} I over all (μ, ν).

    Parameters
    ----------
    gammas : sequence of (d, d) matrices
        n matrices γ^0..γ^{n−1}.
    target : np.ndarray
        (n, n) symmetric form the gammas should reproduce.
    """
    G = np.asarray(gammas)
    T = np.asarray(target, dtype=float)
    if G.ndim != 3 or G.shape[1] != G.shape[2]:
        raise ValueError("gammas must have shape (n, d, d).")
    n, d = G.shape[0], G.shape[1]
    if T.shape != (n, n):
        raise ValueError(f"target must have shape ({n}, {n}); got {T.shape}.")
    I = np.eye(d, dtype=np.complex128)
    worst = 0.0
    for mu in range(n):
        for nu in range(n):
            dev = anticommutator(G[mu], G[nu]) - 2.0 * T[mu, nu] * I
            worst = max(worst, float(np.max(np.abs(dev))))
    return worst
