"""
bidguard/core/capabilities.py

Collaborators the guards consult but do not own: the bidding-system legality
check, opponent classification and total-point scoring.

`BiddingCapabilities` is the interface and also the default behaviour:
every bid is legal, opponents are the other side, total points are HCP.
"""

from typing import Any, Callable, Optional

from bidguard.core.hand import Hand
from bidguard.core.seats import Seat, side


class BiddingCapabilities:

    def is_valid_system_bid(self, token: str, seat: Seat) -> bool:
        return True

    def is_opponent_position(self, seat: Optional[Seat], reference: Seat) -> bool:
        seat_side = side(seat)
        reference_side = side(reference)
        if seat_side is None or reference_side is None:
            return False
        return seat_side != reference_side

    def compute_total_points(self, hand: Hand) -> int:
        return hand.hcp


DEFAULT_CAPABILITIES = BiddingCapabilities()


class CallbackCapabilities(BiddingCapabilities):
    """
    Adapts plain callables (e.g. handed over from a UI layer) to the interface.
    Callables see wire values: seat letters and the {hcp, lengths} hand dict.
    Anything that is not callable is ignored and the default is used instead.
    """

    def __init__(self,
                 is_valid_system_bid: Optional[Callable[..., Any]] = None,
                 is_opponent_position: Optional[Callable[..., Any]] = None,
                 compute_total_points: Optional[Callable[..., Any]] = None):
        self._is_valid_system_bid = is_valid_system_bid if callable(is_valid_system_bid) else None
        self._is_opponent_position = is_opponent_position if callable(is_opponent_position) else None
        self._compute_total_points = compute_total_points if callable(compute_total_points) else None

    def is_valid_system_bid(self, token: str, seat: Seat) -> bool:
        if self._is_valid_system_bid is None:
            return super().is_valid_system_bid(token, seat)
        return bool(self._is_valid_system_bid(token, seat.value))

    def is_opponent_position(self, seat: Optional[Seat], reference: Seat) -> bool:
        if self._is_opponent_position is None:
            return super().is_opponent_position(seat, reference)
        return bool(self._is_opponent_position(seat.value if seat else None, reference.value))

    def compute_total_points(self, hand: Hand) -> int:
        if self._compute_total_points is None:
            return super().compute_total_points(hand)
        points = self._compute_total_points(hand.to_dict())
        if isinstance(points, bool) or not isinstance(points, (int, float)):
            return hand.hcp
        return points
