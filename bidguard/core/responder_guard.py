"""
bidguard/core/responder_guard.py

THE RESPONDER GUARD (Module)
----------------------------
Catches a PASS from responder when partner has opened a suit and we hold
something worth showing.

Priorities:
1. 1S (spades outrank a minor or heart opening)
2. 1H (only over a minor)
3. Notrump ladder over a minor, no 4-card major, no interference

Input: GuardInput whose recommendation is PASS
Output: GuardResult (replacement, or the original untouched)
"""

from typing import Optional
from loguru import logger

from bidguard.core.auction import (
    AuctionEntry,
    last_suit_contract_by,
    opponents_have_contract,
    seat_has_contract,
)
from bidguard.core.bids import Bid, Strain
from bidguard.core.guard_types import GuardInput, GuardResult, never_raises
from bidguard.core.seats import partner

MAJOR_LENGTH = 4
MAJOR_LENGTH_AFTER_INTERFERENCE = 5

# (min HCP, max HCP, level) over partner's minor
NOTRUMP_LADDER = (
    (5, 10, 1),
    (11, 12, 2),
    (13, 14, 3),
)


def min_points_for_level(level: int) -> int:
    return 10 if level >= 2 else 6


class ResponderMajorGuard:

    @staticmethod
    def _find_anchor(guard_input: GuardInput) -> Optional[AuctionEntry]:
        """Partner's most recent suit opening, if the guard should look at all."""
        if guard_input.forced_bid or not guard_input.hand.readable:
            return None
        bid = guard_input.recommended_bid
        if bid is None or not bid.is_pass:
            return None
        seat = guard_input.current_turn
        history = guard_input.auction_history
        if seat is None or history is None or len(history) < 2:
            return None

        if seat_has_contract(history, seat):
            logger.debug(f"Responder guard: {seat.value} has already bid, leaving PASS alone")
            return None

        return last_suit_contract_by(history, partner(seat))

    @staticmethod
    def _major_response(suit: Strain, required_len: int, anchor: Strain, intervened: bool) -> GuardResult:
        name = 'spades' if suit is Strain.SPADES else 'hearts'
        token = f"1{suit.value}"
        tail = " after interference" if intervened else ""
        over = " over partner's 1H" if anchor is Strain.HEARTS else ""
        return GuardResult(
            Bid.contract(1, suit),
            f"{token} response: {required_len}+ {name} and {min_points_for_level(1)}+ HCP{over} "
            f"(show major instead of passing{tail})"
        )

    @staticmethod
    def _notrump_response(hcp: int) -> Optional[GuardResult]:
        for low, high, level in NOTRUMP_LADDER:
            if low <= hcp <= high:
                return GuardResult(
                    Bid.contract(level, Strain.NOTRUMP),
                    f"{level}NT response: {low}-{high} HCP, no 4-card major over partner's minor"
                )
        return None

    @classmethod
    def apply(cls, guard_input: GuardInput) -> GuardResult:
        anchor_entry = cls._find_anchor(guard_input)
        if anchor_entry is None:
            return guard_input.passthrough()

        seat = guard_input.current_turn
        history = guard_input.auction_history
        hand = guard_input.hand
        caps = guard_input.capabilities
        anchor = anchor_entry.bid.strain

        # 1. INTERFERENCE RAISES THE BAR
        intervened = opponents_have_contract(history, seat)
        required_len = MAJOR_LENGTH_AFTER_INTERFERENCE if intervened else MAJOR_LENGTH

        # 2. STRENGTH
        total_points = caps.compute_total_points(hand)
        enough = total_points >= min_points_for_level(1)

        spades = hand.length(Strain.SPADES)
        hearts = hand.length(Strain.HEARTS)

        can_bid_spades = (
            anchor is not Strain.SPADES
            and spades >= required_len
            and enough
            and (anchor.is_minor or anchor is Strain.HEARTS)
        )
        can_bid_hearts = anchor.is_minor and hearts >= required_len and enough

        # 3. PICK (majors high to low, then notrump)
        guarded = None
        if can_bid_spades:
            guarded = cls._major_response(Strain.SPADES, required_len, anchor, intervened)
        elif can_bid_hearts:
            guarded = cls._major_response(Strain.HEARTS, required_len, anchor, intervened)
        elif anchor.is_minor and not intervened and spades < 4 and hearts < 4:
            guarded = cls._notrump_response(hand.hcp)

        if guarded is None:
            return guard_input.passthrough()

        # 4. SYSTEM CHECK
        if not caps.is_valid_system_bid(guarded.token, seat):
            logger.debug(f"Responder guard: {guarded.token} rejected by system check")
            return guard_input.passthrough()

        logger.info(f"Responder guard: PASS -> {guarded.token} for {seat.value} ({guarded.explanation})")
        return guarded


@never_raises
def apply_responder_major_guard(guard_input: GuardInput) -> GuardResult:
    return ResponderMajorGuard.apply(guard_input)
