"""Command line interface to evaluate one queueing model."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from queuecalc import (
    MODEL_DESCRIPTIONS,
    MODEL_FORMULAS,
    InvalidInputError,
    ModelInput,
    ModelKind,
    build_input,
    evaluate,
    format_metric,
    format_result,
    get_input,
    list_scenarios,
    render_diagram,
    server_count,
)
from queuecalc.inputs import DEFAULT_CAPACITY, DEFAULT_INITIAL_COUNT, DEFAULT_SERVERS, DEFAULT_TIME

logger = logging.getLogger("run_calc")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute analytical metrics for D/D/1/K-1, M/M/1 and M/M/C queues."
    )
    parser.add_argument(
        "--model",
        type=str,
        choices=[kind.value for kind in ModelKind],
        default=ModelKind.DD1K1.value,
        help="Queueing model to evaluate.",
    )
    parser.add_argument("--lam", type=float, help="Arrival rate lambda (required unless --scenario).")
    parser.add_argument("--mu", type=float, help="Service rate mu (required unless --scenario).")
    parser.add_argument("--K", type=int, default=DEFAULT_CAPACITY, help="System capacity (D/D/1/K-1).")
    parser.add_argument(
        "--n0", type=int, default=DEFAULT_INITIAL_COUNT, help="Initial customers (D/D/1/K-1)."
    )
    parser.add_argument("--t", type=float, default=DEFAULT_TIME, help="Time point (D/D/1/K-1).")
    parser.add_argument("--c", type=int, default=DEFAULT_SERVERS, help="Number of servers (M/M/C).")
    parser.add_argument(
        "--scenario",
        type=str,
        choices=list(list_scenarios()),
        help="Named preset; overrides --model and the numeric parameters.",
    )
    parser.add_argument(
        "--diagram",
        type=Path,
        default=None,
        help="Write an SVG schematic of the queue to this path.",
    )
    parser.add_argument("--precision", type=int, default=3, help="Decimals shown per metric.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def resolve_input(args: argparse.Namespace) -> ModelInput:
    """Turn parsed arguments into a validated model input."""
    if args.scenario:
        return get_input(args.scenario)
    if args.lam is None or args.mu is None:
        raise SystemExit("Either --scenario or both --lam and --mu must be provided.")
    try:
        return build_input(
            ModelKind(args.model), args.lam, args.mu, K=args.K, n0=args.n0, t=args.t, c=args.c
        )
    except InvalidInputError as exc:
        raise SystemExit(f"Invalid input: {exc}") from exc


def print_report(model_input: ModelInput, precision: int) -> int:
    """Print the metrics block and return the process exit status."""
    result = evaluate(model_input)
    kind = model_input.kind

    print(f"\nModelo {kind.label}: {MODEL_DESCRIPTIONS[kind]}")
    for line in MODEL_FORMULAS[kind]:
        print(f"  {line}")

    if not result.ok:
        print(f"\nError: {result.error}")
        print(f"  ρ  : {format_metric(result.rho, precision):>10}")
        return 1

    print("\nMetricas:")
    for label, text in format_result(result, precision):
        print(f"  {label:<4}: {text:>10}")
    return 0


def write_diagram(model_input: ModelInput, path: Path) -> None:
    result = evaluate(model_input)
    svg = render_diagram(model_input.kind, result.Lq, server_count(model_input))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(svg, encoding="utf-8")
    logger.info("Diagram written to %s", path.resolve())


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    model_input = resolve_input(args)
    logger.debug("Evaluating %s", model_input)
    status = print_report(model_input, args.precision)
    if args.diagram is not None:
        write_diagram(model_input, args.diagram)
    return status


if __name__ == "__main__":
    raise SystemExit(main())
