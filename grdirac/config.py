"""Solver configuration.

SolverConfig is a frozen dataclass validated on construction. It can be built
from a plain dict (unknown keys rejected) or loaded from a JSON file:

    {
      "method": "rk4",                         # {"euler","rk4"}
      "approximation": "stationary-equatorial",
      "theta": 1.5707963267948966,             # must be pi/2
      "include_time_connection": true,
      "include_frame_derivative": true,
      "gamma0_cond_max": 1e12
    }
"""

from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping

from .geom.schwarzschild import EQUATORIAL, check_equatorial

__all__ = ["METHODS", "APPROXIMATIONS", "SolverConfig", "load_config"]

METHODS = ("euler", "rk4")
APPROXIMATIONS = ("stationary-equatorial",)


@dataclass(frozen=True)
class SolverConfig:
    method: str = "rk4"                                  # {"euler","rk4"}
    approximation: str = "stationary-equatorial"         # ∂_j ψ = 0 for j = r, θ, φ
    theta: float = EQUATORIAL                            # fixed polar angle
    include_time_connection: bool = True                 # keep −Γ_t ψ in rhs
    include_frame_derivative: bool = True                # antisymmetric ω
    gamma0_cond_max: float = 1e12                        # > 1

    def __post_init__(self) -> None:
        if self.method not in METHODS:
            raise ValueError(f"method must be one of {METHODS}, got {self.method!r}")
        if self.approximation not in APPROXIMATIONS:
            raise ValueError(
                f"approximation must be one of {APPROXIMATIONS}, got {self.approximation!r}"
            )
        check_equatorial(self.theta)
        if not isinstance(self.include_time_connection, bool):
            raise ValueError("include_time_connection must be a bool")
        if not isinstance(self.include_frame_derivative, bool):
            raise ValueError("include_frame_derivative must be a bool")
        cm = float(self.gamma0_cond_max)
        if not (math.isfinite(cm) and cm > 1.0):
            raise ValueError("gamma0_cond_max must be a finite float > 1")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SolverConfig":
        if not isinstance(data, Mapping):
            raise ValueError("config must be a mapping")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown config keys: {unknown}")
        return cls(**dict(data))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def replace(self, **changes: Any) -> "SolverConfig":
        d = self.to_dict()
        d.update(changes)
        return SolverConfig.from_dict(d)


def load_config(path: str) -> SolverConfig:
    """Read a JSON object from path into a SolverConfig."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return SolverConfig.from_dict(data)
