"""Validated model inputs and dispatch to the matching calculator."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .metrics import MetricsResult, compute_mm1
from .metrics_dd1k import compute_dd1k1
from .metrics_mmc import compute_mmc

DEFAULT_CAPACITY = 10
DEFAULT_INITIAL_COUNT = 0
DEFAULT_TIME = 0.0
DEFAULT_SERVERS = 2


class InvalidInputError(ValueError):
    """Raised when parameters fall outside a calculator's precondition."""


class ModelKind(str, Enum):
    DD1K1 = "dd1k1"
    MM1 = "mm1"
    MMC = "mmc"

    @property
    def label(self) -> str:
        return {
            ModelKind.DD1K1: "D/D/1/K-1",
            ModelKind.MM1: "M/M/1",
            ModelKind.MMC: "M/M/C",
        }[self]


def _is_positive(value: float) -> bool:
    return value is not None and not math.isnan(value) and value > 0


def _check_integer(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{name} must be an integer")


def _check_rates(lam: float, mu: float) -> None:
    if not _is_positive(lam):
        raise InvalidInputError("Arrival rate (λ) must be a positive number")
    if not _is_positive(mu):
        raise InvalidInputError("Service rate (μ) must be a positive number")


@dataclass(frozen=True)
class DD1K1Input:
    lam: float
    mu: float
    K: int = DEFAULT_CAPACITY
    n0: int = DEFAULT_INITIAL_COUNT
    t: float = DEFAULT_TIME

    kind = ModelKind.DD1K1

    def __post_init__(self) -> None:
        _check_rates(self.lam, self.mu)
        _check_integer(self.K, "System capacity (K)")
        if self.K < 1:
            raise InvalidInputError("System capacity (K) must be at least 1")
        _check_integer(self.n0, "Initial customers (n0)")
        if self.n0 < 0:
            raise InvalidInputError("Initial customers (n0) must be non-negative")
        if math.isnan(self.t) or self.t < 0:
            raise InvalidInputError("Time (t) must be non-negative")


@dataclass(frozen=True)
class MM1Input:
    lam: float
    mu: float

    kind = ModelKind.MM1

    def __post_init__(self) -> None:
        _check_rates(self.lam, self.mu)


@dataclass(frozen=True)
class MMCInput:
    lam: float
    mu: float
    c: int = DEFAULT_SERVERS

    kind = ModelKind.MMC

    def __post_init__(self) -> None:
        _check_rates(self.lam, self.mu)
        _check_integer(self.c, "Number of servers (c)")
        if self.c < 1:
            raise InvalidInputError("Number of servers (c) must be at least 1")


ModelInput = Union[DD1K1Input, MM1Input, MMCInput]


def build_input(
    kind: ModelKind,
    lam: float,
    mu: float,
    *,
    K: int = DEFAULT_CAPACITY,
    n0: int = DEFAULT_INITIAL_COUNT,
    t: float = DEFAULT_TIME,
    c: int = DEFAULT_SERVERS,
) -> ModelInput:
    """Construct the input variant for ``kind``, ignoring unrelated parameters."""
    kind = ModelKind(kind)
    if kind is ModelKind.DD1K1:
        return DD1K1Input(lam=lam, mu=mu, K=K, n0=n0, t=t)
    if kind is ModelKind.MM1:
        return MM1Input(lam=lam, mu=mu)
    return MMCInput(lam=lam, mu=mu, c=c)


def server_count(model_input: ModelInput) -> int:
    """Number of servers the model actually has (1 unless M/M/C)."""
    if isinstance(model_input, MMCInput):
        return model_input.c
    return 1


def evaluate(model_input: ModelInput) -> MetricsResult:
    """Run the calculator matching the input variant."""
    if isinstance(model_input, DD1K1Input):
        return compute_dd1k1(
            model_input.lam, model_input.mu, model_input.K, model_input.n0, model_input.t
        )
    if isinstance(model_input, MM1Input):
        return compute_mm1(model_input.lam, model_input.mu)
    if isinstance(model_input, MMCInput):
        return compute_mmc(model_input.lam, model_input.mu, model_input.c)
    raise TypeError(f"Unsupported model input: {type(model_input).__name__}")
