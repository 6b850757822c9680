"""
bidguard/core/auction.py

HISTORY ANALYST
---------------
Auction entries and the read-only questions the guards ask of them.
A history is an ordered tuple; "most recent" always means scanning from the end.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Tuple
from loguru import logger

from bidguard.core.bids import Bid
from bidguard.core.seats import Seat, parse_seat, same_side
from bidguard.parsers.bid_parser import coerce_bid


@dataclass(frozen=True)
class AuctionEntry:
    seat: Optional[Seat]
    bid: Bid


AuctionHistory = Tuple[AuctionEntry, ...]


def history_from_raw(raw: Any) -> Optional[AuctionHistory]:
    """
    Converts [{'position': 'S', 'bid': {'token': '1C'}}, ...] into entries.
    A non-sequence returns None (history absent). Unreadable items are kept as
    entries with an unknown seat or an OTHER bid so positions stay aligned.
    """
    if isinstance(raw, (str, bytes)) or not isinstance(raw, (list, tuple)):
        return None

    entries = []
    for item in raw:
        if isinstance(item, AuctionEntry):
            entries.append(item)
            continue
        if not isinstance(item, dict):
            logger.debug(f"Keeping malformed auction entry as a blank call: {item!r}")
            entries.append(AuctionEntry(seat=None, bid=coerce_bid('')))
            continue
        seat = parse_seat(item.get('position'))
        bid = coerce_bid(item.get('bid')) or coerce_bid('')
        entries.append(AuctionEntry(seat=seat, bid=bid))
    return tuple(entries)


def last_entry(history: Sequence[AuctionEntry],
               predicate: Callable[[AuctionEntry], bool]) -> Optional[AuctionEntry]:
    for entry in reversed(history):
        if predicate(entry):
            return entry
    return None


def first_contract(history: Sequence[AuctionEntry]) -> Optional[AuctionEntry]:
    for entry in history:
        if entry.bid.is_contract:
            return entry
    return None


def seat_has_contract(history: Sequence[AuctionEntry], seat: Seat) -> bool:
    return any(e.seat == seat and e.bid.is_contract for e in history)


def seat_has_passed(history: Sequence[AuctionEntry], seat: Seat) -> bool:
    return any(e.seat == seat and e.bid.is_pass for e in history)


def side_has_contract(history: Sequence[AuctionEntry], seat: Seat) -> bool:
    """Any contract bid by `seat` or its partner."""
    return any(e.bid.is_contract and same_side(e.seat, seat) for e in history)


def opponents_have_contract(history: Sequence[AuctionEntry], seat: Seat) -> bool:
    return any(
        e.bid.is_contract and e.seat is not None and not same_side(e.seat, seat)
        for e in history
    )


def last_suit_contract_by(history: Sequence[AuctionEntry], seat: Optional[Seat]) -> Optional[AuctionEntry]:
    """Most recent suit (not NT) contract bid made by `seat`."""
    if seat is None:
        return None
    return last_entry(history, lambda e: e.seat == seat and e.bid.is_suit_contract)


def last_action_by(history: Sequence[AuctionEntry], seat: Optional[Seat]) -> Optional[AuctionEntry]:
    """Most recent call by `seat` that is not a pass (doubles included)."""
    if seat is None:
        return None
    return last_entry(history, lambda e: e.seat == seat and bool(e.bid.token) and not e.bid.is_pass)
