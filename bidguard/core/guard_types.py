"""
bidguard/core/guard_types.py

Common input/output shape for every guard, plus the boundary builder that
turns the raw wire shape into it.
"""

import functools
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional
from loguru import logger

from bidguard.core.auction import AuctionHistory, history_from_raw
from bidguard.core.bids import Bid
from bidguard.core.capabilities import BiddingCapabilities, CallbackCapabilities, DEFAULT_CAPABILITIES
from bidguard.core.hand import Hand
from bidguard.core.seats import Seat, parse_seat
from bidguard.parsers.bid_parser import coerce_bid


@dataclass(frozen=True)
class GuardResult:
    bid: Optional[Bid]
    explanation: str

    @property
    def token(self) -> Optional[str]:
        return self.bid.token if self.bid else None

    def to_dict(self) -> dict:
        return {
            "recommendedBid": self.bid.to_dict() if self.bid else None,
            "explanation": self.explanation,
        }


@dataclass(frozen=True)
class GuardInput:
    recommended_bid: Optional[Bid]
    explanation: str = ""
    forced_bid: bool = False
    current_turn: Optional[Seat] = None
    # None means the caller supplied no history at all.
    auction_history: Optional[AuctionHistory] = None
    hand: Hand = field(default_factory=Hand)
    capabilities: BiddingCapabilities = DEFAULT_CAPABILITIES

    def passthrough(self) -> GuardResult:
        return GuardResult(self.recommended_bid, self.explanation)

    def with_result(self, result: GuardResult) -> 'GuardInput':
        """Next guard's input: same context, new recommendation."""
        return replace(self, recommended_bid=result.bid, explanation=result.explanation)

    @classmethod
    def from_raw(cls,
                 recommended_bid: Any = None,
                 explanation: Any = "",
                 forced_bid: Any = False,
                 current_turn: Any = None,
                 auction_history: Any = None,
                 hand: Any = None,
                 is_valid_system_bid: Any = None,
                 is_opponent_position: Any = None,
                 compute_total_points: Any = None,
                 capabilities: Optional[BiddingCapabilities] = None) -> 'GuardInput':
        """
        Boundary builder. Accepts the loose shapes an upstream engine produces
        and degrades anything unreadable to None/defaults instead of raising.
        """
        if capabilities is None:
            if any(callable(f) for f in (is_valid_system_bid, is_opponent_position, compute_total_points)):
                capabilities = CallbackCapabilities(
                    is_valid_system_bid=is_valid_system_bid,
                    is_opponent_position=is_opponent_position,
                    compute_total_points=compute_total_points,
                )
            else:
                capabilities = DEFAULT_CAPABILITIES

        return cls(
            recommended_bid=coerce_bid(recommended_bid),
            explanation=explanation if isinstance(explanation, str) else "",
            forced_bid=bool(forced_bid),
            current_turn=parse_seat(current_turn),
            auction_history=history_from_raw(auction_history),
            hand=Hand.from_raw(hand),
            capabilities=capabilities,
        )


GuardFn = Callable[[GuardInput], GuardResult]


def never_raises(guard: GuardFn) -> GuardFn:
    """
    Guards decline rather than fail. Any error (usually from an injected
    collaborator) is logged and the original recommendation is returned.
    """
    @functools.wraps(guard)
    def wrapper(guard_input: GuardInput) -> GuardResult:
        try:
            return guard(guard_input)
        except Exception as e:
            logger.error(f"{guard.__name__} failed, keeping original recommendation: {e}")
            return guard_input.passthrough()
    return wrapper
