"""
bidguard/core/bids.py

Structured bid tokens. Text is parsed once (see bidguard.parsers.bid_parser);
everything downstream works on `Bid` objects.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Strain(str, Enum):
    CLUBS = 'C'
    DIAMONDS = 'D'
    HEARTS = 'H'
    SPADES = 'S'
    NOTRUMP = 'NT'

    @property
    def is_suit(self) -> bool:
        return self is not Strain.NOTRUMP

    @property
    def is_minor(self) -> bool:
        return self in (Strain.CLUBS, Strain.DIAMONDS)

    @property
    def is_major(self) -> bool:
        return self in (Strain.HEARTS, Strain.SPADES)


SUITS = (Strain.SPADES, Strain.HEARTS, Strain.DIAMONDS, Strain.CLUBS)


class BidKind(str, Enum):
    PASS = 'pass'
    CONTRACT = 'contract'
    # Doubles, redoubles and anything we could not read.
    OTHER = 'other'


@dataclass(frozen=True)
class Bid:
    kind: BidKind
    token: str
    level: Optional[int] = None
    strain: Optional[Strain] = None

    @classmethod
    def contract(cls, level: int, strain: Strain) -> 'Bid':
        return cls(BidKind.CONTRACT, f"{level}{strain.value}", level, strain)

    @classmethod
    def pass_(cls) -> 'Bid':
        return PASS

    @property
    def is_pass(self) -> bool:
        return self.kind is BidKind.PASS

    @property
    def is_contract(self) -> bool:
        return self.kind is BidKind.CONTRACT

    @property
    def is_suit_contract(self) -> bool:
        return self.is_contract and self.strain is not None and self.strain.is_suit

    def is_suit_bid_at(self, *levels: int) -> bool:
        """True for a suit (not NT) contract bid at one of the given levels."""
        return self.is_suit_contract and self.level in levels

    def to_dict(self) -> dict:
        return {"token": self.token}

    def __str__(self) -> str:
        return self.token


PASS = Bid(BidKind.PASS, 'PASS')
