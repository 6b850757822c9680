"""
bidguard/parsers/bid_parser.py

Handles the conversion of raw call text into structured Bid objects.
Accepts the canonical tokens ('1S', '2NT', 'PASS') as well as the short
LIN/BBO spellings ('1n', 'p', 'd', 'r').
"""

import re
from typing import Any, Optional
from loguru import logger

from bidguard.core.bids import Bid, BidKind, PASS, Strain


class BidParseError(ValueError):
    """Raised by parse_bid when a call cannot be read."""


CONTRACT_PATTERN = re.compile(r"^([1-7])(C|D|H|S|NT|N)$")

PASS_WORDS = {'P', 'PASS'}
DOUBLE_WORDS = {'X', 'D', 'DBL', 'DOUBLE'}
REDOUBLE_WORDS = {'XX', 'R', 'RDBL', 'REDOUBLE'}


def _clean(raw: str) -> str:
    # LIN marks alerted calls with a trailing '!'
    return raw.strip().upper().rstrip('!')


def parse_bid(raw: str) -> Bid:
    """
    Parses a single call. '1n' -> Bid(1NT), 'p' -> PASS, 'd' -> Bid(X).
    Raises BidParseError for anything else.
    """
    if not isinstance(raw, str):
        raise BidParseError(f"Call must be text, got {type(raw).__name__}")

    text = _clean(raw)
    if text in PASS_WORDS:
        return PASS
    if text in DOUBLE_WORDS:
        return Bid(BidKind.OTHER, 'X')
    if text in REDOUBLE_WORDS:
        return Bid(BidKind.OTHER, 'XX')

    match = CONTRACT_PATTERN.match(text)
    if not match:
        raise BidParseError(f"Unrecognised call: {raw!r}")

    level = int(match.group(1))
    strain_code = match.group(2)
    strain = Strain.NOTRUMP if strain_code in ('N', 'NT') else Strain(strain_code)
    return Bid.contract(level, strain)


def coerce_bid(raw: Any) -> Optional[Bid]:
    """
    Lenient boundary conversion used for guard inputs.
    Accepts a Bid, a {'token': ...} mapping or a bare string.
    Unreadable text becomes an OTHER bid so it never matches a guard.
    None stays None.
    """
    if raw is None:
        return None
    if isinstance(raw, Bid):
        return raw
    if isinstance(raw, dict):
        raw = raw.get('token')
    else:
        raw = getattr(raw, 'token', raw)

    if not isinstance(raw, str):
        return Bid(BidKind.OTHER, '')
    try:
        return parse_bid(raw)
    except BidParseError:
        logger.debug(f"Treating unreadable call {raw!r} as a non-contract token")
        return Bid(BidKind.OTHER, raw)
