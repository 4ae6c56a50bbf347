"""Fixed-step explicit integrators for the spinor along the radial grid.

Steps
- Euler:  ψ_{n+1} = ψ_n + dr · F(ψ_n, r_n)
- RK4:    classical four-stage scheme, stages at r_n, r_n + dr/2 (twice),
          r_n + dr, combined with weights 1-2-2-1 scaled by dr/6.

Grid: r_n = r0 + n·dr; the march stops at the first r_n ≥ r_final.

Invariants
- Deterministic: identical arguments give byte-identical trajectories.
- Trajectory radii increase strictly; entry n pairs r_n with ψ before step n.
- Starting at or inside the horizon fails before any step is taken.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

import numpy as np

from ..config import METHODS, SolverConfig
from ..errors import DomainViolation
from ..field.spinor import SPINOR_DIM, as_spinor
from ..geom.schwarzschild import horizon_factor
from ..utils.logging import csv_logger, log_metrics
from .evolution import check_particle_mass, rhs

__all__ = [
    "TRAJECTORY_COLUMNS",
    "Trajectory",
    "euler_step",
    "rk4_step",
    "integrate",
    "write_trajectory_csv",
]

StepFn = Callable[[np.ndarray, float, float, float, float, SolverConfig], np.ndarray]

TRAJECTORY_COLUMNS: Tuple[str, ...] = ("r", "norm") + tuple(
    f"psi{c}_{part}" for c in range(SPINOR_DIM) for part in ("re", "im")
)


@dataclass(frozen=True, eq=False)
class Trajectory:
    """Ordered (r, ψ) samples; radii (N,) float64, spinors (N, 4) complex128."""

    radii: np.ndarray
    spinors: np.ndarray

    def __post_init__(self) -> None:
        radii = np.asarray(self.radii, dtype=np.float64)
        spinors = np.asarray(self.spinors, dtype=np.complex128)
        if radii.ndim != 1 or radii.shape[0] < 1:
            raise ValueError("radii must be a non-empty 1-D array")
        if spinors.shape != (radii.shape[0], SPINOR_DIM):
            raise ValueError(f"spinors must have shape ({radii.shape[0]}, {SPINOR_DIM}); got {spinors.shape}")
        radii.setflags(write=False)
        spinors.setflags(write=False)
        object.__setattr__(self, "radii", radii)
        object.__setattr__(self, "spinors", spinors)

    def __len__(self) -> int:
        return int(self.radii.shape[0])

    def __iter__(self) -> Iterator[Tuple[float, np.ndarray]]:
        for k in range(len(self)):
            yield float(self.radii[k]), self.spinors[k]

    def __getitem__(self, k: int) -> Tuple[float, np.ndarray]:
        return float(self.radii[k]), self.spinors[k]

    @property
    def final(self) -> Tuple[float, np.ndarray]:
        return self[len(self) - 1]

    def as_pairs(self) -> List[Tuple[float, np.ndarray]]:
        return list(self)

    def norms(self) -> np.ndarray:
        return np.linalg.norm(self.spinors, axis=1)

    def to_rows(self) -> List[Dict[str, float]]:
        """Flat real-valued rows keyed by TRAJECTORY_COLUMNS."""
        rows: List[Dict[str, float]] = []
        norms = self.norms()
        for k, (r, psi) in enumerate(self):
            row: Dict[str, float] = {"r": r, "norm": float(norms[k])}
            for c in range(SPINOR_DIM):
                row[f"psi{c}_re"] = float(psi[c].real)
                row[f"psi{c}_im"] = float(psi[c].imag)
            rows.append(row)
        return rows

    def summary(self) -> Dict[str, float]:
        """End radius and the spinor norm at both ends of the march."""
        norms = self.norms()
        return {
            "r_final": float(self.radii[-1]),
            "norm_initial": float(norms[0]),
            "norm_final": float(norms[-1]),
        }


def euler_step(
    psi: np.ndarray,
    r: float,
    dr: float,
    M: float,
    m: float,
    config: Optional[SolverConfig] = None,
) -> np.ndarray:
    """One explicit Euler step; local error O(dr²)."""
    return psi + dr * rhs(psi, r, M, m, config)


def rk4_step(
    psi: np.ndarray,
    r: float,
    dr: float,
    M: float,
    m: float,
    config: Optional[SolverConfig] = None,
) -> np.ndarray:
    """One classical Runge-Kutta step; local error O(dr⁵)."""
    half = 0.5 * dr
    k1 = rhs(psi, r, M, m, config)
    k2 = rhs(psi + half * k1, r + half, M, m, config)
    k3 = rhs(psi + half * k2, r + half, M, m, config)
    k4 = rhs(psi + dr * k3, r + dr, M, m, config)
    return psi + (dr / 6.0) * (k1 + 2.0 * k2 + 2.0 * k3 + k4)


_STEPS: Dict[str, StepFn] = {"euler": euler_step, "rk4": rk4_step}


def _check_finite_float(x: Any, name: str) -> float:
    try:
        val = float(x)
    except (TypeError, ValueError) as e:
        raise DomainViolation(f"{name} must be a real number, got {x!r}") from e
    if not math.isfinite(val):
        raise DomainViolation(f"{name} must be finite, got {val}")
    return val


def integrate(
    r0: float,
    r_final: float,
    dr: float,
    psi0: Any,
    M: float,
    m: float,
    method: Optional[str] = None,
    config: Optional[SolverConfig] = None,
    logger: Optional[logging.Logger] = None,
) -> Trajectory:
    """
    March ψ from r0 towards r_final in fixed increments of dr.

    Parameters
    ----------
    r0, r_final : float
        Start and end radius. If r0 >= r_final only the start point is returned.
    dr : float
        Step size, > 0.
    psi0 : sequence of 4 numbers or np.ndarray
        Initial spinor.
    M, m : float
        Mass parameter (r0 > 2M) and particle mass (>= 0).
    method : {"euler", "rk4"}, optional
        Overrides config.method; default "rk4".
    config : SolverConfig, optional
    logger : logging.Logger, optional
        If given, receives a metrics summary line after the march.

    Returns
    -------
    Trajectory

    Raises
    ------
    DomainViolation
        dr ≤ 0, r0 ≤ 2M, bad spinor, or a non-finite intermediate state.
    ValueError
        Unknown method.
    """
    cfg = config if config is not None else SolverConfig()
    if method is not None:
        if method not in METHODS:
            raise ValueError(f"method must be one of {METHODS}, got {method!r}")
        if method != cfg.method:
            cfg = cfg.replace(method=method)
    step = _STEPS[cfg.method]

    r0 = _check_finite_float(r0, "r0")
    r_final = _check_finite_float(r_final, "r_final")
    dr = _check_finite_float(dr, "dr")
    if dr <= 0.0:
        raise DomainViolation(f"step size dr must be > 0, got {dr}")
    horizon_factor(r0, M)
    m = check_particle_mass(m)
    psi = as_spinor(psi0, "psi0")

    radii: List[float] = []
    spinors: List[np.ndarray] = []
    n = 0
    r = r0
    while r < r_final:
        radii.append(r)
        spinors.append(psi)
        psi = step(psi, r, dr, M, m, cfg)
        if not np.all(np.isfinite(psi)):
            raise DomainViolation(f"{cfg.method} step from r={r} produced non-finite values")
        n += 1
        r = r0 + n * dr
    radii.append(r)
    spinors.append(psi)

    traj = Trajectory(np.asarray(radii), np.stack(spinors))
    if logger is not None:
        log_metrics(traj.summary(), step=n, logger=logger)
    return traj


def write_trajectory_csv(traj: Trajectory, path: str) -> None:
    """Append the trajectory rows to a CSV file; the header is written once, in TRAJECTORY_COLUMNS order."""
    write = csv_logger(path, TRAJECTORY_COLUMNS)
    for row in traj.to_rows():
        write(row)
