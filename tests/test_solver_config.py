import json
import math

import pytest

from grdirac.config import SolverConfig, load_config
from grdirac.errors import DomainViolation


def test_defaults():
    cfg = SolverConfig()
    assert cfg.method == "rk4"
    assert cfg.approximation == "stationary-equatorial"
    assert cfg.theta == pytest.approx(0.5 * math.pi)
    assert cfg.include_time_connection is True
    assert cfg.include_frame_derivative is True


@pytest.mark.parametrize(
    "kwargs",
    [
        {"method": "midpoint"},
        {"approximation": "finite-difference"},
        {"include_time_connection": 1},
        {"include_frame_derivative": "yes"},
        {"gamma0_cond_max": 1.0},
        {"gamma0_cond_max": float("inf")},
    ],
)
def test_invalid_fields(kwargs):
    with pytest.raises(ValueError):
        SolverConfig(**kwargs)


def test_off_plane_theta_rejected():
    with pytest.raises(DomainViolation):
        SolverConfig(theta=1.0)


def test_frozen():
    cfg = SolverConfig()
    with pytest.raises(Exception):
        cfg.method = "euler"  # type: ignore[misc]


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError):
        SolverConfig.from_dict({"method": "rk4", "adaptive": True})
    with pytest.raises(ValueError):
        SolverConfig.from_dict(["rk4"])  # type: ignore[arg-type]


def test_replace_revalidates():
    cfg = SolverConfig().replace(method="euler")
    assert cfg.method == "euler"
    with pytest.raises(ValueError):
        cfg.replace(method="bogus")


def test_load_config_roundtrip(tmp_path):
    path = tmp_path / "solver.json"
    path.write_text(json.dumps({"method": "euler", "include_time_connection": False}), encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg.method == "euler"
    assert cfg.include_time_connection is False
    assert SolverConfig.from_dict(cfg.to_dict()) == cfg
