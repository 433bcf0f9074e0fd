"""Closed-form metrics for the M/M/c queue (Erlang-C)."""

from __future__ import annotations

import logging

from .metrics import MetricsResult, unstable_result, utilization

logger = logging.getLogger(__name__)


def offered_load(lam: float, mu: float) -> float:
    """Return r = λ/μ, the load offered to the whole server pool."""
    return lam / mu


def _scaled_head(r: float, c: int) -> float:
    """
    Return Σ_{n<c} (r^n/n!) / (r^c/c!).

    Accumulated from n = c-1 downwards as a running product so that neither
    c! nor r^c is ever formed. Overflow saturates to inf, which drives the
    waiting probability to its limit of 0 instead of raising.
    """
    total = 0.0
    ratio = 1.0
    for n in range(c - 1, -1, -1):
        ratio *= (n + 1) / r
        total += ratio
    return total


def erlang_c(lam: float, mu: float, c: int) -> float:
    """
    Probability that an arriving customer has to wait (tail · P0).

    Only meaningful for a stable pool (λ < c·μ).
    """
    rho = utilization(lam, mu, c)
    head = _scaled_head(offered_load(lam, mu), c)
    return 1.0 / (1.0 + (1.0 - rho) * head)


def probability_empty(lam: float, mu: float, c: int) -> float:
    """P0 = 1 / (Σ_{n<c} r^n/n! + (r^c/c!) · 1/(1-ρ))."""
    r = offered_load(lam, mu)
    rho = utilization(lam, mu, c)
    head = 0.0
    term = 1.0
    for n in range(c):
        if n:
            term *= r / n
        head += term
    term *= r / c
    tail = term / (1.0 - rho)
    return 1.0 / (head + tail)


def compute_mmc(lam: float, mu: float, c: int) -> MetricsResult:
    """
    Compute M/M/c steady-state metrics using the Erlang-C formulas.

    Lq = P0·r^c·ρ / (c!·(1-ρ)²), evaluated as Pwait·ρ/(1-ρ) which is the
    same quantity without the factorial and power terms.
    """
    r = offered_load(lam, mu)
    rho = utilization(lam, mu, c)
    if rho >= 1.0:
        logger.debug("M/M/c unstable: lam=%s mu=%s c=%s rho=%s", lam, mu, c, rho)
        return unstable_result(rho, "System unstable: λ must be less than c×μ for M/M/C")

    pwait = erlang_c(lam, mu, c)
    Lq = pwait * rho / (1.0 - rho)
    L = Lq + r
    W = L / lam
    Wq = Lq / lam
    return MetricsResult(nt=L, L=L, Lq=Lq, W=W, Wq=Wq, rho=rho)
