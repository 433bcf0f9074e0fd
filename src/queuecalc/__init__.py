"""Analytical metrics for D/D/1/K-1, M/M/1 and M/M/C queues."""

from .diagram import render_diagram
from .formatting import MODEL_DESCRIPTIONS, MODEL_FORMULAS, format_metric, format_result
from .inputs import (
    DD1K1Input,
    InvalidInputError,
    MM1Input,
    MMCInput,
    ModelInput,
    ModelKind,
    build_input,
    evaluate,
    server_count,
)
from .metrics import UNBOUNDED, Bound, MetricsResult, compute_mm1, is_unbounded, utilization
from .metrics_dd1k import compute_dd1k1, instantaneous_count
from .metrics_mmc import compute_mmc, erlang_c, offered_load, probability_empty
from .scenarios import Scenario, get_input, list_scenarios

__all__ = [
    "Bound",
    "DD1K1Input",
    "InvalidInputError",
    "MM1Input",
    "MMCInput",
    "MODEL_DESCRIPTIONS",
    "MODEL_FORMULAS",
    "MetricsResult",
    "ModelInput",
    "ModelKind",
    "Scenario",
    "UNBOUNDED",
    "build_input",
    "compute_dd1k1",
    "compute_mm1",
    "compute_mmc",
    "erlang_c",
    "evaluate",
    "format_metric",
    "format_result",
    "get_input",
    "instantaneous_count",
    "is_unbounded",
    "list_scenarios",
    "offered_load",
    "probability_empty",
    "render_diagram",
    "server_count",
    "utilization",
]
