"""Named scenario presets."""

import pytest

from queuecalc.inputs import evaluate
from queuecalc.scenarios import get_input, list_scenarios


def test_scenarios_are_sorted_and_resolvable():
    names = list(list_scenarios())
    assert names == sorted(names)
    for name in names:
        assert evaluate(get_input(name.lower())) is not None


def test_overloaded_scenario_reports_error():
    assert not evaluate(get_input("B")).ok


def test_unknown_scenario_raises_key_error():
    with pytest.raises(KeyError):
        get_input("Z")
