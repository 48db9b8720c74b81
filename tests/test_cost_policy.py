import logging

import pytest

from multimodal_route_model.config import Policy, PolicyParams
from multimodal_route_model.cost_policy import (
    UnknownPolicyError, make_weight_function, parse_policy, policy_label
)

from conftest import make_edge

TAXI = make_edge("Tambaram", "Anna Nagar", "taxi", time=35, cost=775, distance=28)


@pytest.mark.parametrize(
    "policy, expected",
    [("time", 35), ("cost", 775), ("distance", 28)],
)
def test_single_dimension_is_passthrough(policy, expected):
    assert make_weight_function(policy)(TAXI) == expected


def test_combined_normalizes_against_fixed_maximums():
    weight = make_weight_function(Policy.COMBINED, (0.5, 0.5))
    assert weight(TAXI) == pytest.approx(35 / 120 * 0.5 + 775 / 775 * 0.5)


def test_combined_defaults_to_even_split():
    assert make_weight_function(Policy.COMBINED)(TAXI) == make_weight_function(
        Policy.COMBINED, (0.5, 0.5)
    )(TAXI)


def test_combined_honors_caller_weights():
    assert make_weight_function("combined", (1.0, 0.0))(TAXI) == pytest.approx(35 / 120)
    assert make_weight_function("combined", (0.0, 1.0))(TAXI) == pytest.approx(1.0)


def test_combined_uses_configured_maximums():
    params = PolicyParams(max_time=70, max_cost=1550)
    weight = make_weight_function("combined", (0.5, 0.5), params)
    assert weight(TAXI) == pytest.approx(0.25 + 0.25)


def test_combo_is_raw_and_differs_from_combined():
    combo = make_weight_function(Policy.COMBO)(TAXI)
    assert combo == pytest.approx(35 + 775 * 0.5)
    assert combo != pytest.approx(make_weight_function(Policy.COMBINED)(TAXI))


def test_combo_cost_factor_is_configurable():
    weight = make_weight_function("combo", params=PolicyParams(combo_cost_factor=0.0))
    assert weight(TAXI) == 35


def test_unknown_policy_is_rejected():
    with pytest.raises(UnknownPolicyError, match="fastest"):
        make_weight_function("fastest")
    with pytest.raises(ValueError):
        parse_policy("")


def test_parse_policy_normalizes_input():
    assert parse_policy(" Time ") == Policy.TIME
    assert parse_policy(Policy.COMBO) is Policy.COMBO


def test_negative_weights_are_rejected():
    with pytest.raises(ValueError, match="non-negative"):
        make_weight_function("combined", (-0.5, 1.5))


def test_weights_not_summing_to_one_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="route_model"):
        make_weight_function("combined", (0.5, 0.7))
    assert "sum to 1.200" in caplog.text


def test_policy_labels():
    assert policy_label("time") == "Time Only"
    assert policy_label("distance") == "Distance Only"
    assert policy_label("combined") == "Time & Cost Compromise (50/50)"
    assert policy_label("combined", (0.7, 0.3)) == "Time & Cost Compromise (70/30)"
    assert policy_label("combo") == "Time + Half Cost"
    assert policy_label("combo", params=PolicyParams(combo_cost_factor=0.25)) == "Time + Cost x 0.25"


def test_policy_label_does_not_repeat_weight_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="route_model"):
        assert policy_label("combined", (0.9, 0.9)) == "Time & Cost Compromise (90/90)"
    assert "sum to" not in caplog.text
