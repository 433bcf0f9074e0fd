"""Validation and dispatch of model inputs."""

import math

import pytest

from queuecalc.inputs import (
    DD1K1Input,
    InvalidInputError,
    MM1Input,
    MMCInput,
    ModelKind,
    build_input,
    evaluate,
    server_count,
)
from queuecalc.metrics import compute_mm1


@pytest.mark.parametrize("lam", [0.0, -1.0, math.nan, None])
def test_non_positive_arrival_rate_is_rejected(lam):
    with pytest.raises(InvalidInputError, match="Arrival rate"):
        MM1Input(lam=lam, mu=1.0)


def test_non_positive_service_rate_is_rejected():
    with pytest.raises(InvalidInputError, match="Service rate"):
        MMCInput(lam=1.0, mu=0.0, c=2)


def test_capacity_and_server_count_must_be_positive():
    with pytest.raises(InvalidInputError, match="capacity"):
        DD1K1Input(lam=1.0, mu=1.0, K=0)
    with pytest.raises(InvalidInputError, match="servers"):
        MMCInput(lam=1.0, mu=1.0, c=0)


def test_negative_initial_count_or_time_is_rejected():
    with pytest.raises(InvalidInputError):
        DD1K1Input(lam=1.0, mu=1.0, n0=-1)
    with pytest.raises(InvalidInputError):
        DD1K1Input(lam=1.0, mu=1.0, t=-0.5)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        MM1Input(lam=-1.0, mu=1.0)


def test_build_input_picks_variant_and_defaults():
    dd = build_input(ModelKind.DD1K1, 1.0, 2.0)
    assert isinstance(dd, DD1K1Input)
    assert (dd.K, dd.n0, dd.t) == (10, 0, 0.0)
    assert isinstance(build_input("mm1", 1.0, 2.0, c=7), MM1Input)
    mmc = build_input(ModelKind.MMC, 1.0, 2.0)
    assert isinstance(mmc, MMCInput)
    assert mmc.c == 2


def test_evaluate_dispatches_to_matching_calculator():
    assert evaluate(MM1Input(lam=2.0, mu=5.0)) == compute_mm1(2.0, 5.0)
    assert evaluate(DD1K1Input(lam=3.0, mu=2.0, K=10, n0=0, t=4.0)).L == 9.0
    assert evaluate(MMCInput(lam=10.0, mu=4.0, c=3)).ok


def test_evaluate_returns_unstable_result_instead_of_raising():
    result = evaluate(MMCInput(lam=10.0, mu=1.0, c=3))
    assert not result.ok
    assert result.rho > 1


def test_evaluate_rejects_unknown_objects():
    with pytest.raises(TypeError):
        evaluate(object())


def test_server_count_only_counts_mmc_pools():
    assert server_count(MMCInput(lam=1.0, mu=1.0, c=4)) == 4
    assert server_count(MM1Input(lam=1.0, mu=2.0)) == 1
    assert server_count(DD1K1Input(lam=1.0, mu=2.0)) == 1


def test_model_kind_labels():
    assert ModelKind.MMC.label == "M/M/C"
    assert DD1K1Input(lam=1.0, mu=1.0).kind is ModelKind.DD1K1


@pytest.mark.parametrize("c", [2.5, math.nan, True])
def test_fractional_or_nan_server_count_is_rejected(c):
    with pytest.raises(InvalidInputError, match="servers"):
        MMCInput(lam=1.0, mu=1.0, c=c)


@pytest.mark.parametrize("K", [math.nan, 9.5])
def test_non_integer_capacity_is_rejected(K):
    with pytest.raises(InvalidInputError, match="capacity"):
        DD1K1Input(lam=3.0, mu=2.0, K=K, n0=0, t=1.0)


def test_non_integer_initial_count_is_rejected():
    with pytest.raises(InvalidInputError, match="n0"):
        DD1K1Input(lam=1.0, mu=1.0, n0=1.5)
