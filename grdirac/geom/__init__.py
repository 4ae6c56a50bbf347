"""Geometry engine for the Schwarzschild background.

Modules
- schwarzschild: metric, inverse metric, metric derivative, tetrad
- christoffel: closed-form symbols and the general Levi-Civita formula
- spin_connection: ω^a_{bμ} from tetrad and connection
"""

from .schwarzschild import (
    EQUATORIAL,
    MINKOWSKI,
    check_equatorial,
    horizon_factor,
    inverse_metric,
    inverse_vierbein,
    metric,
    metric_derivative,
    vierbein,
)
from .christoffel import christoffel, christoffel_symbols
from .spin_connection import frame_derivative, lower_frame_index, spin_connection

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
    "christoffel",
    "christoffel_symbols",
    "frame_derivative",
    "spin_connection",
    "lower_frame_index",
]
