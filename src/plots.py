"""Utilization curves: how L and Wq blow up as rho approaches 1."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, List, Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from queuecalc import compute_mm1, compute_mmc


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot L and Wq against utilization.")
    parser.add_argument("--mu", type=float, default=1.0, help="Service rate mu per server.")
    parser.add_argument(
        "--servers",
        type=int,
        nargs="+",
        default=[1, 2, 3],
        help="Server counts to draw (1 uses the M/M/1 formulas).",
    )
    parser.add_argument("--points", type=int, default=50, help="Samples along rho.")
    parser.add_argument("--rho-max", type=float, default=0.95, help="Largest rho plotted (< 1).")
    parser.add_argument(
        "--reports-dir",
        type=Path,
        default=Path("reports"),
        help="Directory where PNG files will be saved.",
    )
    args = parser.parse_args(argv)
    if args.mu <= 0:
        parser.error("--mu must be positive.")
    if any(c < 1 for c in args.servers):
        parser.error("Every server count must be >= 1.")
    if not 0 < args.rho_max < 1:
        parser.error("--rho-max must lie in (0, 1).")
    return args


def utilization_curve(
    mu: float, c_values: Iterable[int], points: int = 50, rho_max: float = 0.95
) -> pd.DataFrame:
    """Tabulate L, Lq, W, Wq on a rho grid for each server count."""
    grid = np.linspace(rho_max / points, rho_max, points)
    rows = []
    for c in c_values:
        for rho in grid:
            lam = float(rho) * c * mu
            result = compute_mm1(lam, mu) if c == 1 else compute_mmc(lam, mu, c)
            rows.append(
                {
                    "c": c,
                    "rho": result.rho,
                    "L": result.L,
                    "Lq": result.Lq,
                    "W": result.W,
                    "Wq": result.Wq,
                }
            )
    return pd.DataFrame(rows)


def plot_curves(curves: pd.DataFrame, out: Path) -> None:
    fig, (ax_l, ax_wq) = plt.subplots(1, 2, figsize=(10, 4), sharex=True)
    for c, group in curves.groupby("c"):
        ax_l.plot(group["rho"], group["L"], label=f"c={c}")
        ax_wq.plot(group["rho"], group["Wq"], label=f"c={c}")
    ax_l.set_title("L vs. rho")
    ax_l.set_xlabel("rho")
    ax_l.set_ylabel("L")
    ax_wq.set_title("Wq vs. rho")
    ax_wq.set_xlabel("rho")
    ax_wq.set_ylabel("Wq")
    ax_l.legend()
    fig.tight_layout()
    fig.savefig(out, dpi=150)
    plt.close(fig)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    curves = utilization_curve(args.mu, sorted(set(args.servers)), args.points, args.rho_max)

    args.reports_dir.mkdir(parents=True, exist_ok=True)
    out = args.reports_dir / "curvas_rho.png"
    plot_curves(curves, out)
    print(f"Figura guardada en {out.resolve()}")


if __name__ == "__main__":
    main()
