"""
bidguard/core/hand.py

Hand snapshot handed over by the caller. HCP and suit lengths are computed
elsewhere; this only carries them.

A hand whose values cannot be read is kept but flagged, and every guard
leaves the recommendation alone for it.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from bidguard.core.bids import Strain, SUITS


def _whole_number(value: Any) -> Optional[int]:
    """5 and 5.0 -> 5. Anything else (bools, 5.5, '5', negatives) -> None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    if value < 0:
        return None
    return int(value)


@dataclass(frozen=True)
class Hand:
    hcp: int = 0
    lengths: Mapping[Strain, int] = field(default_factory=dict)
    readable: bool = True

    def length(self, suit: Strain) -> int:
        return self.lengths.get(suit, 0)

    def to_dict(self) -> dict:
        """Wire shape: {'hcp': 9, 'lengths': {'S': 5, 'H': 2, 'D': 3, 'C': 3}}."""
        return {
            "hcp": self.hcp,
            "lengths": {suit.value: self.length(suit) for suit in SUITS},
        }

    @classmethod
    def from_raw(cls, raw: Any) -> 'Hand':
        """
        Builds a Hand from {'hcp': 9, 'lengths': {'S': 5, 'H': 2, ...}}.
        Missing values count as 0. Values that are present but are not
        whole non-negative numbers make the hand unreadable.
        """
        if isinstance(raw, Hand):
            return raw
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            return cls(readable=False)

        readable = True

        hcp = 0
        if raw.get('hcp') is not None:
            hcp = _whole_number(raw['hcp'])
            if hcp is None:
                hcp, readable = 0, False

        raw_lengths = raw.get('lengths')
        lengths = {}
        if isinstance(raw_lengths, dict):
            for suit in SUITS:
                value = raw_lengths.get(suit.value)
                if value is None:
                    continue
                length = _whole_number(value)
                if length is None:
                    readable = False
                elif length > 0:
                    lengths[suit] = length
        elif raw_lengths is not None:
            readable = False

        return cls(hcp=hcp, lengths=MappingProxyType(lengths), readable=readable)
