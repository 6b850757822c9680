"""
bidguard

Guard layer that sits behind a bidding recommender and corrects
convention-breaking recommendations.
"""

from bidguard.core.bids import Bid, BidKind, PASS, Strain
from bidguard.core.capabilities import BiddingCapabilities, CallbackCapabilities
from bidguard.core.free_bid_guard import apply_two_level_free_bid_guard
from bidguard.core.guard_types import GuardInput, GuardResult
from bidguard.core.hand import Hand
from bidguard.core.overcall_guard import apply_overcall_length_guard
from bidguard.core.pipeline import GUARD_ORDER, apply_guards
from bidguard.core.responder_guard import apply_responder_major_guard
from bidguard.core.seats import Seat, Side, partner, same_side, side

__all__ = [
    "Bid", "BidKind", "PASS", "Strain",
    "BiddingCapabilities", "CallbackCapabilities",
    "GuardInput", "GuardResult", "Hand",
    "Seat", "Side", "partner", "same_side", "side",
    "GUARD_ORDER", "apply_guards",
    "apply_responder_major_guard",
    "apply_overcall_length_guard",
    "apply_two_level_free_bid_guard",
]
