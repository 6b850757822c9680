"""
bidguard/core/free_bid_guard.py

Stops speculative two-level suit bids when partner has already acted (a
"free" bid) or when we passed earlier and hold very little.

The pass-after-pass rule is checked first and wins when both apply.
"""

from loguru import logger

from bidguard.core.auction import last_action_by, last_suit_contract_by, seat_has_passed
from bidguard.core.bids import PASS
from bidguard.core.guard_types import GuardInput, GuardResult, never_raises
from bidguard.core.seats import partner

PASSED_HAND_MAX_HCP = 7
FREE_BID_MIN_HCP = 8
RAISE_MIN_HCP = 6
RAISE_MIN_SUPPORT = 3


class TwoLevelFreeBidGuard:

    @staticmethod
    def apply(guard_input: GuardInput) -> GuardResult:
        bid = guard_input.recommended_bid
        seat = guard_input.current_turn
        history = guard_input.auction_history

        if guard_input.forced_bid or not guard_input.hand.readable:
            return guard_input.passthrough()
        if bid is None or seat is None or history is None:
            return guard_input.passthrough()
        if not bid.is_suit_bid_at(2):
            return guard_input.passthrough()

        hand = guard_input.hand
        hcp = hand.hcp
        partner_seat = partner(seat)

        have_prior_pass = seat_has_passed(history, seat)
        partner_anchor = last_suit_contract_by(history, partner_seat)

        if have_prior_pass and partner_anchor and hcp <= PASSED_HAND_MAX_HCP:
            logger.info(f"Free-bid guard: {bid.token} -> PASS for {seat.value} (passed earlier, {hcp} HCP)")
            return GuardResult(
                PASS,
                "Pass - insufficient values to introduce a new suit at the two-level after passing earlier"
            )

        partner_last_action = last_action_by(history, partner_seat)
        if partner_last_action and hcp < FREE_BID_MIN_HCP:
            # A simple raise of partner's suit is fine on modest values
            is_raise = partner_anchor is not None and bid.strain is partner_anchor.bid.strain
            support = hand.length(partner_anchor.bid.strain) if partner_anchor else 0
            if is_raise and support >= RAISE_MIN_SUPPORT and hcp >= RAISE_MIN_HCP:
                return guard_input.passthrough()

            logger.info(f"Free-bid guard: {bid.token} -> PASS for {seat.value} ({hcp} HCP)")
            return GuardResult(
                PASS,
                "Pass - need stronger values for a free two-level suit bid"
            )

        return guard_input.passthrough()


@never_raises
def apply_two_level_free_bid_guard(guard_input: GuardInput) -> GuardResult:
    return TwoLevelFreeBidGuard.apply(guard_input)
