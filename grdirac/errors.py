"""Error kinds raised by the geometry, operator and evolution layers.

All errors are deterministic input violations: they are raised eagerly at the
start of the offending call and are never retried.
"""

from __future__ import annotations

import numpy as np

__all__ = ["GRDiracError", "DomainViolation", "SingularOperator", "TypeMismatch"]


class GRDiracError(Exception):
    pass


class DomainViolation(GRDiracError, ValueError):
    """Radius at or inside the horizon, bad step size, bad spinor length."""


class SingularOperator(GRDiracError, np.linalg.LinAlgError):
    """γ^t or the vierbein cannot be inverted (f ≤ 0)."""


class TypeMismatch(GRDiracError, TypeError):
    """Spinor components that are not a consistent numeric family."""
