#!/usr/bin/env python3
"""Deterministic worked example on the Schwarzschild background.

Wires: geometry (metric and Clifford check at r0) -> march of a complex
spinor -> current and density at the end point. An optional --config JSON
selects the solver settings. Logs metrics, writes the trajectory to CSV and,
when matplotlib is installed, saves a plot of |ψ_k|(r).

Runtime: < 1s. Deterministic.
"""
from __future__ import annotations

import argparse
import os
import sys

import numpy as np

# Ensure imports resolve when running as a script
THIS_DIR = os.path.dirname(__file__)
PKG_ROOT = os.path.abspath(os.path.join(THIS_DIR, ".."))
if PKG_ROOT not in sys.path:
    sys.path.insert(0, PKG_ROOT)

from grdirac.config import SolverConfig, load_config
from grdirac.dynamics import integrate, write_trajectory_csv
from grdirac.field import current, normalize, probability_density
from grdirac.geom import inverse_metric, metric
from grdirac.operators import clifford_residual, curved_gamma
from grdirac.utils.logging import get_logger, log_metrics


def _plot(traj, path: str) -> bool:
    try:
        import matplotlib
    except ImportError:
        return False
    matplotlib.use("Agg")
    from matplotlib.figure import Figure

    fig = Figure(figsize=(6, 4))
    ax = fig.add_subplot(111)
    for k in range(4):
        ax.plot(traj.radii, np.abs(traj.spinors[:, k]), label=f"|psi_{k}|")
    ax.set_xlabel("r")
    ax.set_ylabel("amplitude")
    ax.legend()
    fig.tight_layout()
    fig.savefig(path)
    return True


def main() -> None:
    ap = argparse.ArgumentParser(description="Dirac spinor march on a Schwarzschild background")
    ap.add_argument("--config", default=None, help="Path to a SolverConfig JSON (default: RK4 with all terms)")
    ap.add_argument("--out-dir", default=THIS_DIR, help="Directory for the CSV and plot outputs")
    args = ap.parse_args()
    cfg = load_config(args.config) if args.config else SolverConfig()

    M, m = 1.0, 0.1
    r0, r_final, dr = 10.0, 12.0, 0.05

    # 1) Geometry at the start radius; curved gammas must satisfy {γ^μ, γ^ν} = -2 g^{μν}
    g = metric(r0, M)
    residual = clifford_residual(curved_gamma(r0, M), -inverse_metric(r0, M))

    # 2) Complex initial spinor, unit norm
    psi0 = normalize([1.0, 0.5j, 0.0, 0.0])

    # 3) March
    traj = integrate(r0, r_final, dr, psi0, M, m, config=cfg)
    r_end, psi_end = traj.final

    # 4) Current at the end point
    j = current(psi_end, r_end, M)
    rho = probability_density(psi_end, r_end, M)

    print(
        f"Schwarzschild M={M}: g_tt({r0})={g[0, 0]:.6g} g_rr({r0})={g[1, 1]:.6g} "
        f"steps={len(traj) - 1} |psi(r={r_end:.6g})|={np.linalg.norm(psi_end):.6g} "
        f"rho={rho:.6g} method={cfg.method}"
    )

    logger = get_logger()
    log_metrics(
        {
            "g_tt": float(g[0, 0]),
            "g_rr": float(g[1, 1]),
            "norm_final": float(np.linalg.norm(psi_end)),
            "clifford_residual": residual,
            "rho": rho,
            "j_r": float(j[1].real),
        },
        step=len(traj) - 1,
        logger=logger,
    )
    csv_path = os.path.join(args.out_dir, "schwarzschild_trajectory.csv")
    if os.path.exists(csv_path):
        os.remove(csv_path)
    write_trajectory_csv(traj, csv_path)
    _plot(traj, os.path.join(args.out_dir, "schwarzschild_trajectory.png"))

    sys.exit(0)


if __name__ == "__main__":
    main()
