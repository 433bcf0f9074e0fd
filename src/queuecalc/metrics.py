"""Closed-form performance metrics for an M/M/1 queue and the shared result shape."""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Mapping, Optional, Union

logger = logging.getLogger(__name__)


class Bound(Enum):
    """Explicit marker for a metric that grows without bound."""

    UNBOUNDED = "unbounded"

    def __repr__(self) -> str:
        return "UNBOUNDED"


UNBOUNDED = Bound.UNBOUNDED

Metric = Union[float, Bound]


@dataclass(frozen=True)
class MetricsResult:
    """
    Six-field metrics bundle returned by every calculator.

    When ``error`` is set the system is unstable: ``rho`` still carries the
    computed utilization for diagnostics and every other field is ``UNBOUNDED``.
    """

    nt: Metric
    L: Metric
    Lq: Metric
    W: Metric
    Wq: Metric
    rho: float
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def rounded(self, ndigits: int = 3) -> "MetricsResult":
        """Return a copy rounded for display; ``UNBOUNDED`` is left untouched."""

        def _round(value: Metric) -> Metric:
            if value is UNBOUNDED:
                return value
            return round(value, ndigits)

        return replace(
            self,
            nt=_round(self.nt),
            L=_round(self.L),
            Lq=_round(self.Lq),
            W=_round(self.W),
            Wq=_round(self.Wq),
            rho=round(self.rho, ndigits),
        )

    def as_dict(self) -> Mapping[str, object]:
        """Return the metrics as a plain dictionary (handy for printing)."""
        return asdict(self)


def utilization(lam: float, mu: float, servers: int = 1) -> float:
    """Return λ / (servers·μ), the fraction of service capacity consumed."""
    return lam / (servers * mu)


def unstable_result(rho: float, message: str) -> MetricsResult:
    """Build the error-flagged result used when ρ ≥ 1."""
    return MetricsResult(
        nt=UNBOUNDED,
        L=UNBOUNDED,
        Lq=UNBOUNDED,
        W=UNBOUNDED,
        Wq=UNBOUNDED,
        rho=rho,
        error=message,
    )


def is_unbounded(value: Metric) -> bool:
    """True for the sentinel and for non-finite floats coming from outside the engine."""
    if value is UNBOUNDED:
        return True
    return math.isinf(value)


def compute_mm1(lam: float, mu: float) -> MetricsResult:
    """
    Compute steady-state M/M/1 metrics.

    Callers guarantee λ > 0 and μ > 0. An unstable system (ρ ≥ 1) is reported
    through ``MetricsResult.error`` rather than raised.
    """
    r = utilization(lam, mu)
    if r >= 1.0:
        logger.debug("M/M/1 unstable: lam=%s mu=%s rho=%s", lam, mu, r)
        return unstable_result(r, "System unstable: λ must be less than μ for M/M/1")

    denom = 1.0 - r
    L = r / denom
    Lq = (r * r) / denom
    W = 1.0 / (mu - lam)
    Wq = r / (mu * denom)
    return MetricsResult(nt=L, L=L, Lq=Lq, W=W, Wq=Wq, rho=r)
