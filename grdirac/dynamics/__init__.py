"""Spinor evolution: Dirac right-hand side and fixed-step integrators."""

from .evolution import check_particle_mass, invert_gamma0, rhs, spatial_derivative
from .integrator import TRAJECTORY_COLUMNS, Trajectory, euler_step, integrate, rk4_step, write_trajectory_csv

__all__ = [
    "check_particle_mass",
    "invert_gamma0",
    "rhs",
    "spatial_derivative",
    "TRAJECTORY_COLUMNS",
    "Trajectory",
    "euler_step",
    "rk4_step",
    "integrate",
    "write_trajectory_csv",
]
