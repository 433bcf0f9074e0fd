"""Sweep the M/M/C model over server counts and recommend a pool size."""

from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path
from typing import Iterable, List, Optional

import matplotlib.pyplot as plt
import pandas as pd
from tqdm import tqdm

from queuecalc import compute_mmc, erlang_c, probability_empty

logger = logging.getLogger("compare")

METRIC_COLUMNS = ["L", "Lq", "W", "Wq"]


def parse_c_list(spec: str) -> List[int]:
    values = []
    for chunk in spec.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        try:
            c = int(chunk)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"Invalid c value '{chunk}'.") from exc
        if c < 1:
            raise argparse.ArgumentTypeError("Every c must be >= 1.")
        values.append(c)
    if not values:
        raise argparse.ArgumentTypeError("Provide at least one server count via --c-list.")
    if 1 not in values:
        values.append(1)
    return sorted(set(values))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare M/M/1 vs. M/M/C metrics across c.")
    parser.add_argument("--lam", type=float, help="Arrival rate lambda (ignored with --rho).")
    parser.add_argument("--mu", type=float, required=True, help="Service rate mu per server.")
    parser.add_argument(
        "--rho",
        type=float,
        help="Hold per-server utilization constant; lambda becomes rho*c*mu for each c.",
    )
    parser.add_argument(
        "--c-list",
        type=parse_c_list,
        default="1,2,3,4",
        help='Comma-separated list of server counts to evaluate (e.g. "1,2,3,4").',
    )
    parser.add_argument(
        "--summary-out",
        type=Path,
        default=None,
        help="Optional CSV export of the sweep table.",
    )
    parser.add_argument(
        "--reports-dir",
        type=Path,
        default=None,
        help="Directory where comparison figures will be written.",
    )
    parser.add_argument(
        "--decision-mode",
        type=str,
        choices=["weights", "costs"],
        default="weights",
        help="Strategy for recommending c: weighted metric or explicit costs.",
    )
    parser.add_argument("--alpha", type=float, default=0.5, help="Weight for Wq (weights mode).")
    parser.add_argument("--beta", type=float, default=0.5, help="Weight for Pwait (weights mode).")
    parser.add_argument(
        "--c-server", type=float, default=1.0, dest="c_server", help="Cost per server (costs mode)."
    )
    parser.add_argument(
        "--c-wait", type=float, default=1.0, dest="c_wait", help="Cost per unit of Wq (costs mode)."
    )
    args = parser.parse_args(argv)
    if args.mu <= 0:
        parser.error("--mu must be positive.")
    if args.rho is None and (args.lam is None or args.lam <= 0):
        parser.error("Provide a positive --lam or a target --rho.")
    if args.rho is not None and args.rho <= 0:
        parser.error("--rho must be positive.")
    return args


def sweep_servers(
    lam: Optional[float],
    mu: float,
    c_values: Iterable[int],
    target_rho: Optional[float] = None,
) -> pd.DataFrame:
    """Evaluate M/M/C for every c; unstable rows keep rho and carry NaN metrics."""
    rows = []
    for c in tqdm(list(c_values), desc="M/M/C", unit="c", disable=None):
        lam_c = target_rho * c * mu if target_rho is not None else lam
        result = compute_mmc(lam_c, mu, c)
        row = {"c": c, "lam": lam_c, "mu": mu, "rho": result.rho, "error": result.error}
        if result.ok:
            row["Pwait"] = erlang_c(lam_c, mu, c)
            row["P0"] = probability_empty(lam_c, mu, c)
            for column in METRIC_COLUMNS:
                row[column] = getattr(result, column)
        else:
            logger.info("c=%d skipped: %s", c, result.error)
            row["Pwait"] = math.nan
            row["P0"] = math.nan
            for column in METRIC_COLUMNS:
                row[column] = math.nan
        rows.append(row)
    return pd.DataFrame(rows).sort_values("c").reset_index(drop=True)


def decision_score(
    row: pd.Series,
    mode: str,
    alpha: float,
    beta: float,
    c_server: float,
    c_wait: float,
) -> float:
    if mode == "weights":
        return alpha * row["Wq"] + beta * row["Pwait"]
    return c_server * row["c"] + c_wait * row["Wq"]


def annotate_decision(
    summary: pd.DataFrame, args: argparse.Namespace
) -> tuple[pd.DataFrame, int | None]:
    if summary.empty:
        return summary, None

    summary = summary.copy()
    summary["decision_mode"] = args.decision_mode
    summary["score"] = summary.apply(
        lambda row: decision_score(
            row,
            args.decision_mode,
            args.alpha,
            args.beta,
            args.c_server,
            args.c_wait,
        ),
        axis=1,
    )
    stable = summary[summary["error"].isna()]
    if stable.empty:
        return summary, None
    best_idx = stable["score"].idxmin()
    return summary, int(summary.loc[best_idx, "c"])


def plot_bar_metrics(summary: pd.DataFrame, reports_dir: Path) -> None:
    stable = summary[summary["error"].isna()]
    if stable.empty:
        return
    fig, axes = plt.subplots(2, 2, figsize=(10, 6), sharex=True)
    axes = axes.flatten()
    cs = stable["c"].astype(int).tolist()
    for ax, label in zip(axes, METRIC_COLUMNS):
        ax.bar(cs, stable[label])
        ax.set_title(label)
        ax.set_xlabel("c")
        ax.set_ylabel(label)
    fig.suptitle("Metricas M/M/C por numero de servidores")
    fig.tight_layout()
    fig.savefig(reports_dir / "mmc_barras.png", dpi=150)
    plt.close(fig)


def plot_metrics_vs_c(summary: pd.DataFrame, reports_dir: Path) -> None:
    c_values = summary["c"].astype(int).tolist()
    fig, ax = plt.subplots(figsize=(10, 5))
    for label in METRIC_COLUMNS:
        ax.plot(c_values, summary[label], marker="o", label=label)
    ax2 = ax.twinx()
    ax2.plot(c_values, summary["Pwait"], color="black", linestyle="--", marker="s", label="Pwait")
    ax.set_xlabel("c")
    ax.set_ylabel("L, Lq, W, Wq")
    ax2.set_ylabel("Pwait")
    lines, labels = ax.get_legend_handles_labels()
    lines2, labels2 = ax2.get_legend_handles_labels()
    ax.legend(lines + lines2, labels + labels2, loc="upper right")
    ax.set_title("Metricas vs. numero de servidores")
    fig.tight_layout()
    fig.savefig(reports_dir / "metricas_vs_c.png", dpi=150)
    plt.close(fig)


def plot_decision(summary: pd.DataFrame, best_c: int | None, reports_dir: Path) -> None:
    if summary.empty:
        return
    fig, ax = plt.subplots(figsize=(8, 4))
    ax.plot(summary["c"].astype(int).tolist(), summary["score"].tolist(), marker="o", label="Score")
    ax.set_xlabel("c")
    ax.set_ylabel("Score (menor es mejor)")
    ax.set_title("Funcion de decision vs. numero de servidores")
    if best_c is not None:
        best_row = summary[summary["c"] == best_c].iloc[0]
        ax.scatter([best_c], [best_row["score"]], color="black", zorder=5, label="c*")
    ax.legend()
    fig.tight_layout()
    fig.savefig(reports_dir / "decision_vs_c.png", dpi=150)
    plt.close(fig)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    summary = sweep_servers(args.lam, args.mu, args.c_list, target_rho=args.rho)
    summary, best_c = annotate_decision(summary, args)

    with pd.option_context("display.max_columns", None, "display.width", 120):
        print(summary.drop(columns=["decision_mode"]).to_string(index=False))

    if best_c is None:
        print("\nNingun c estabiliza el sistema; aumente c o mu.")
    else:
        print(f"\nc recomendado ({args.decision_mode}): {best_c}")

    if args.summary_out is not None:
        args.summary_out.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(args.summary_out, index=False)
        print(f"Resumen comparativo: {args.summary_out.resolve()}")

    if args.reports_dir is not None:
        args.reports_dir.mkdir(parents=True, exist_ok=True)
        plot_bar_metrics(summary, args.reports_dir)
        plot_metrics_vs_c(summary, args.reports_dir)
        plot_decision(summary, best_c, args.reports_dir)
        print(f"Graficos guardados en {args.reports_dir.resolve()}")


if __name__ == "__main__":
    main()
