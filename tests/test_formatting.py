"""Display formatting of metric values."""

import math

from queuecalc.formatting import (
    MISSING_TOKEN,
    MODEL_DESCRIPTIONS,
    MODEL_FORMULAS,
    UNBOUNDED_TOKEN,
    format_metric,
    format_result,
)
from queuecalc.inputs import ModelKind
from queuecalc.metrics import UNBOUNDED, compute_mm1


def test_format_metric_tokens():
    assert format_metric(UNBOUNDED) == UNBOUNDED_TOKEN == "∞"
    assert format_metric(math.inf) == "∞"
    assert format_metric(math.nan) == MISSING_TOKEN == "-"
    assert format_metric(2.0 / 3.0) == "0.667"
    assert format_metric(2.0 / 3.0, precision=1) == "0.7"


def test_format_result_orders_rows():
    rows = format_result(compute_mm1(2.0, 5.0))
    assert [label for label, _ in rows] == ["n(t)", "L", "Lq", "W", "Wq", "ρ"]
    assert dict(rows)["ρ"] == "0.400"


def test_unstable_result_formats_as_unbounded():
    rows = dict(format_result(compute_mm1(5.0, 4.0)))
    assert rows["L"] == "∞"
    assert rows["ρ"] == "1.250"


def test_every_model_has_description_and_formulas():
    for kind in ModelKind:
        assert MODEL_DESCRIPTIONS[kind]
        assert MODEL_FORMULAS[kind]
