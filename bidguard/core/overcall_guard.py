"""
bidguard/core/overcall_guard.py

THE OVERCALL GATE (Module)
--------------------------
A simple 1- or 2-level suit overcall needs a 5-card suit. Shorter overcalls
from the recommender are turned into PASS.

Cue-bids of the opening suit (Michaels and friends) are not natural and are
left alone.
"""

from loguru import logger

from bidguard.core.auction import first_contract, side_has_contract
from bidguard.core.bids import PASS
from bidguard.core.guard_types import GuardInput, GuardResult, never_raises

MIN_OVERCALL_LENGTH = 5


class OvercallLengthGuard:

    @staticmethod
    def apply(guard_input: GuardInput) -> GuardResult:
        bid = guard_input.recommended_bid
        seat = guard_input.current_turn
        history = guard_input.auction_history

        if guard_input.forced_bid or not guard_input.hand.readable:
            return guard_input.passthrough()
        if bid is None or not bid.is_suit_bid_at(1, 2):
            return guard_input.passthrough()
        if seat is None or history is None:
            return guard_input.passthrough()

        # Only a first action over an opponent's opening counts as an overcall
        opening = first_contract(history)
        if opening is None:
            return guard_input.passthrough()
        if side_has_contract(history, seat):
            return guard_input.passthrough()
        if not guard_input.capabilities.is_opponent_position(opening.seat, seat):
            return guard_input.passthrough()

        if bid.strain is opening.bid.strain:
            logger.debug(f"Overcall guard: {bid.token} is a cue-bid of the opening suit, exempt")
            return guard_input.passthrough()

        suit_len = guard_input.hand.length(bid.strain)
        if suit_len < MIN_OVERCALL_LENGTH:
            logger.info(f"Overcall guard: {bid.token} -> PASS for {seat.value} ({suit_len} cards)")
            return GuardResult(
                PASS,
                f"Pass (need {MIN_OVERCALL_LENGTH}+ cards to overcall {bid.token})"
            )
        return guard_input.passthrough()


@never_raises
def apply_overcall_length_guard(guard_input: GuardInput) -> GuardResult:
    return OvercallLengthGuard.apply(guard_input)
