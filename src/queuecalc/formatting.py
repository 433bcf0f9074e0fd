"""Display helpers: metric text, model descriptions and formula cheat-sheets."""

from __future__ import annotations

import math
from typing import List, Tuple

from .inputs import ModelKind
from .metrics import Metric, MetricsResult, is_unbounded

UNBOUNDED_TOKEN = "∞"
MISSING_TOKEN = "-"

MODEL_DESCRIPTIONS = {
    ModelKind.DD1K1: "Deterministic arrival and service with single server and finite capacity K-1",
    ModelKind.MM1: "Markovian (Poisson) arrivals and exponential service with single server",
    ModelKind.MMC: "Markovian arrivals and exponential service with multiple (C) servers",
}

MODEL_FORMULAS = {
    ModelKind.DD1K1: (
        "n(t) = n0 + (λ - μ)t  bounded by [0, K-1]",
        "ρ = λ / μ  (utilization)",
    ),
    ModelKind.MM1: (
        "requires λ < μ",
        "ρ = λ / μ",
        "L = ρ / (1 - ρ)",
        "Lq = ρ² / (1 - ρ)",
        "W = 1 / (μ - λ)",
        "Wq = ρ / (μ(1 - ρ))",
    ),
    ModelKind.MMC: (
        "requires λ < c×μ",
        "ρ = λ / (c × μ)",
        "P0 = [Σ(r^n/n!) + (r^c/c!)×(1/(1-ρ))]⁻¹",
        "Lq = P0 × r^c × ρ / (c! × (1-ρ)²)",
        "L = Lq + λ/μ",
    ),
}

METRIC_LABELS = (
    ("nt", "n(t)"),
    ("L", "L"),
    ("Lq", "Lq"),
    ("W", "W"),
    ("Wq", "Wq"),
    ("rho", "ρ"),
)


def format_metric(value: Metric, precision: int = 3) -> str:
    if value is None:
        return MISSING_TOKEN
    if is_unbounded(value):
        return UNBOUNDED_TOKEN
    if math.isnan(value):
        return MISSING_TOKEN
    return f"{value:.{precision}f}"


def format_result(result: MetricsResult, precision: int = 3) -> List[Tuple[str, str]]:
    """Return (label, text) rows in display order."""
    return [
        (label, format_metric(getattr(result, field), precision))
        for field, label in METRIC_LABELS
    ]
