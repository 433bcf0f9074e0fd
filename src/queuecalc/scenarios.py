"""Pre-defined calculator inputs covering each model's regimes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from .inputs import DD1K1Input, MM1Input, MMCInput, ModelInput


@dataclass(frozen=True)
class Scenario:
    name: str
    description: str
    model_input: ModelInput


SCENARIOS: Dict[str, Scenario] = {
    "A": Scenario("A", "M/M/1 at moderate load", MM1Input(lam=2.0, mu=5.0)),  # ρ = 0.40
    "B": Scenario("B", "M/M/1 overloaded", MM1Input(lam=5.0, mu=4.0)),  # ρ = 1.25
    "C": Scenario("C", "M/M/C with three servers", MMCInput(lam=10.0, mu=4.0, c=3)),  # ρ ≈ 0.83
    "D": Scenario(
        "D", "D/D/1/K-1 filling up", DD1K1Input(lam=3.0, mu=2.0, K=10, n0=0, t=4.0)
    ),
    "E": Scenario(
        "E", "D/D/1/K-1 with balanced rates", DD1K1Input(lam=2.0, mu=2.0, K=10, n0=5, t=1.0)
    ),
}


def list_scenarios() -> Iterable[str]:
    """Return available scenario identifiers."""
    return sorted(SCENARIOS.keys())


def get_input(name: str) -> ModelInput:
    """Return the model input for a named scenario."""
    key = name.upper()
    if key not in SCENARIOS:
        raise KeyError(f"Scenario '{name}' is not defined. Available: {list_scenarios()}")
    return SCENARIOS[key].model_input
