import pytest

from bidguard.core.free_bid_guard import apply_two_level_free_bid_guard


def test_new_suit_after_prior_pass_with_low_hcp(make_input, hand):
    # South opens 1C, West overcalls 1S, North has already passed with 5 HCP
    result = apply_two_level_free_bid_guard(make_input(
        "2D", "N", ["S:1C", "W:1S", "N:PASS"], hand(5, C=2, D=5, H=3, S=3),
        explanation="Test free bid",
    ))
    assert result.token == "PASS"
    assert result.explanation.startswith("Pass")
    assert "after passing earlier" in result.explanation


def test_raise_of_partner_suit_allowed(make_input, hand):
    result = apply_two_level_free_bid_guard(make_input(
        "2H", "N", ["S:1H"], hand(7, H=3, S=3, D=3, C=4),
    ))
    assert result.token == "2H"


@pytest.mark.parametrize("hcp, expected", [(5, "PASS"), (6, "2H"), (7, "2H")])
def test_raise_needs_six_hcp(make_input, hand, hcp, expected):
    result = apply_two_level_free_bid_guard(make_input("2H", "N", ["S:1H"], hand(hcp, H=3)))
    assert result.token == expected


def test_raise_needs_three_card_support(make_input, hand):
    result = apply_two_level_free_bid_guard(make_input("2H", "N", ["S:1H"], hand(7, H=2)))
    assert result.token == "PASS"
    assert "free two-level" in result.explanation


@pytest.mark.parametrize("support", [0, 2, 3, 5])
def test_new_suit_flips_between_seven_and_eight(make_input, hand, support):
    calls = ["S:1H", "W:PASS"]
    seven = apply_two_level_free_bid_guard(make_input("2C", "N", calls, hand(7, H=support, C=5)))
    eight = apply_two_level_free_bid_guard(make_input("2C", "N", calls, hand(8, H=support, C=5)))
    assert seven.token == "PASS"
    assert eight.token == "2C"


def test_partner_double_counts_as_action(make_input, hand):
    result = apply_two_level_free_bid_guard(make_input("2D", "N", ["E:1C", "S:X", "W:PASS"], hand(6, D=5)))
    assert result.token == "PASS"
    assert "free two-level" in result.explanation


def test_prior_pass_rule_wins_over_raise_exception(make_input, hand):
    # 7 HCP with support would pass the free-bid rule, but we passed earlier
    result = apply_two_level_free_bid_guard(make_input(
        "2H", "N", ["N:PASS", "E:PASS", "S:1H", "W:PASS"], hand(7, H=4),
    ))
    assert result.token == "PASS"
    assert "after passing earlier" in result.explanation


def test_passed_hand_with_values_is_left_alone(make_input, hand):
    result = apply_two_level_free_bid_guard(make_input(
        "2D", "N", ["N:PASS", "E:PASS", "S:1H", "W:PASS"], hand(10, D=5),
    ))
    assert result.token == "2D"


def test_prior_pass_without_partner_suit_uses_free_bid_rule(make_input, hand):
    # Partner only doubled: no anchor suit, so the free-bid rule decides
    result = apply_two_level_free_bid_guard(make_input(
        "2D", "N", ["N:PASS", "E:1C", "S:X", "W:PASS"], hand(5, D=5),
    ))
    assert result.token == "PASS"
    assert "free two-level" in result.explanation


def test_no_partner_action_is_left_alone(make_input, hand):
    result = apply_two_level_free_bid_guard(make_input("2D", "N", ["E:1S", "S:PASS", "W:PASS"], hand(4, D=6)))
    assert result.token == "2D"


@pytest.mark.parametrize("token, seat, calls", [
    ("1D", "N", ["S:1C", "W:1S", "N:PASS"]),
    ("3D", "N", ["S:1C", "W:1S", "N:PASS"]),
    ("2NT", "N", ["S:1C", "W:1S", "N:PASS"]),
    ("PASS", "N", ["S:1C", "W:1S", "N:PASS"]),
    (None, "N", ["S:1C", "W:1S", "N:PASS"]),
    ("2D", "N", None),
    ("2D", "?", ["S:1C", "W:1S", "N:PASS"]),
])
def test_passthrough(make_input, hand, token, seat, calls):
    guard_input = make_input(token, seat, calls, hand(3, D=5), explanation="keep me")
    assert apply_two_level_free_bid_guard(guard_input) == guard_input.passthrough()


def test_forced_bid_is_never_touched(make_input, hand):
    guard_input = make_input("2D", "N", ["S:1C", "W:1S", "N:PASS"], hand(0, D=5),
                             explanation="transfer", forced=True)
    assert apply_two_level_free_bid_guard(guard_input) == guard_input.passthrough()


def test_unreadable_hand_means_passthrough(make_input):
    guard_input = make_input("2D", "N", ["S:1C", "W:1S", "N:PASS"], {"hcp": "5", "lengths": {"D": 5}},
                             explanation="orig")
    assert apply_two_level_free_bid_guard(guard_input) == guard_input.passthrough()
