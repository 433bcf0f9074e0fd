"""Deterministic single-server finite-capacity queue (D/D/1/K-1)."""

from __future__ import annotations

import logging

from .metrics import MetricsResult, utilization

logger = logging.getLogger(__name__)

RATE_TOLERANCE = 1e-9


def instantaneous_count(lam: float, mu: float, K: int, n0: float, t: float) -> float:
    """Return n(t) = n0 + (λ-μ)·t clamped into [0, K-1]."""
    raw = n0 + (lam - mu) * t
    return max(0.0, min(float(K - 1), raw))


def compute_dd1k1(lam: float, mu: float, K: int, n0: float, t: float) -> MetricsResult:
    """
    Compute D/D/1/K-1 metrics at time ``t``.

    There is no instability here: with λ > μ the system saturates at K-1.
    The λ < μ mean-count formula is an educational approximation kept for
    compatibility, not an exact transient result.
    """
    nt = instantaneous_count(lam, mu, K, n0, t)
    rho = utilization(lam, mu)

    if abs(lam - mu) < RATE_TOLERANCE:
        L = float(n0)
        Lq = max(0.0, n0 - 1.0)
        policy = "balanced"
    elif lam < mu:
        L = (lam * lam) / (2.0 * mu * (mu - lam))
        Lq = max(0.0, L - lam / mu)
        policy = "draining"
    else:
        L = float(K - 1)
        Lq = max(0.0, K - 2.0)
        policy = "saturated"
    logger.debug("D/D/1/K-1 policy=%s lam=%s mu=%s K=%s nt=%s", policy, lam, mu, K, nt)

    W = L / lam if lam > 0 else 0.0
    Wq = Lq / lam if lam > 0 else 0.0
    return MetricsResult(nt=nt, L=L, Lq=Lq, W=W, Wq=Wq, rho=rho)
