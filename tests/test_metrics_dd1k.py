"""Unit tests for the deterministic D/D/1/K-1 calculator."""

import math

from queuecalc.metrics_dd1k import compute_dd1k1, instantaneous_count


def test_saturating_system_fills_to_capacity():
    result = compute_dd1k1(3.0, 2.0, 10, 0, 4.0)
    assert result.ok
    assert result.nt == 4.0
    assert result.L == 9.0
    assert result.Lq == 8.0
    assert math.isclose(result.rho, 1.5)
    assert math.isclose(result.W, 3.0)
    assert math.isclose(result.Wq, 8.0 / 3.0)


def test_balanced_rates_keep_initial_count():
    result = compute_dd1k1(2.0, 2.0, 10, 5, 1.0)
    assert result.nt == 5.0
    assert result.L == 5.0
    assert result.Lq == 4.0
    assert math.isclose(result.W, 2.5)
    assert math.isclose(result.Wq, 2.0)


def test_balanced_rates_within_tolerance():
    result = compute_dd1k1(2.0 + 1e-12, 2.0, 10, 0, 3.0)
    assert result.L == 0.0
    assert result.Lq == 0.0


def test_lambda_just_below_mu_counts_as_balanced():
    result = compute_dd1k1(2.0 - 1e-12, 2.0, 10, 4, 1.0)
    assert result.L == 4.0
    assert result.Lq == 3.0


def test_draining_system_uses_cycle_average():
    result = compute_dd1k1(1.0, 2.0, 10, 3, 1.0)
    assert math.isclose(result.L, 0.25)
    assert result.Lq == 0.0
    assert math.isclose(result.rho, 0.5)
    assert result.nt == 2.0


def test_count_is_clamped_to_capacity():
    assert instantaneous_count(3.0, 2.0, 10, 0, 100.0) == 9.0
    assert compute_dd1k1(3.0, 2.0, 10, 0, 100.0).nt == 9.0


def test_count_is_clamped_at_zero():
    assert instantaneous_count(1.0, 2.0, 10, 3, 10.0) == 0.0


def test_single_slot_capacity():
    result = compute_dd1k1(5.0, 1.0, 1, 0, 2.0)
    assert result.nt == 0.0
    assert result.L == 0.0
    assert result.Lq == 0.0


def test_queue_never_exceeds_system():
    for lam, mu, K, n0, t in [(1.0, 3.0, 5, 0, 1.0), (3.0, 3.0, 5, 2, 1.0), (4.0, 3.0, 5, 0, 1.0)]:
        result = compute_dd1k1(lam, mu, K, n0, t)
        assert 0 <= result.Lq <= result.L
        assert 0 <= result.nt <= K - 1
