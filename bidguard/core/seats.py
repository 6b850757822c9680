"""
bidguard/core/seats.py

THE TABLE (Module)
------------------
Seat topology shared by every guard: who partners whom and which side a
seat sits on.

Unknown seats never belong to a side, so `same_side` answers False instead
of guessing. Guards treat that as "do not act".
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Optional, Tuple


class Seat(str, Enum):
    NORTH = 'N'
    EAST = 'E'
    SOUTH = 'S'
    WEST = 'W'


class Side(str, Enum):
    NS = 'NS'
    EW = 'EW'


@dataclass(frozen=True)
class SeatRecord:
    partner: Seat
    side: Side


# Read-only topology table.
TOPOLOGY = MappingProxyType({
    Seat.NORTH: SeatRecord(partner=Seat.SOUTH, side=Side.NS),
    Seat.EAST: SeatRecord(partner=Seat.WEST, side=Side.EW),
    Seat.SOUTH: SeatRecord(partner=Seat.NORTH, side=Side.NS),
    Seat.WEST: SeatRecord(partner=Seat.EAST, side=Side.EW),
})

_SEAT_NAMES = {
    'N': Seat.NORTH, 'NORTH': Seat.NORTH,
    'E': Seat.EAST, 'EAST': Seat.EAST,
    'S': Seat.SOUTH, 'SOUTH': Seat.SOUTH,
    'W': Seat.WEST, 'WEST': Seat.WEST,
}


def parse_seat(value: Any) -> Optional[Seat]:
    """Accepts 'N', 'north', 'North' or a Seat. Returns None for anything else."""
    if isinstance(value, Seat):
        return value
    if not isinstance(value, str):
        return None
    return _SEAT_NAMES.get(value.strip().upper())


def _record(seat: Any) -> Optional[SeatRecord]:
    if not isinstance(seat, Seat):
        return None
    return TOPOLOGY.get(seat)


def partner(seat: Any) -> Optional[Seat]:
    record = _record(seat)
    return record.partner if record else None


def side(seat: Any) -> Optional[Side]:
    record = _record(seat)
    return record.side if record else None


def same_side(seat_a: Any, seat_b: Any) -> bool:
    side_a = side(seat_a)
    side_b = side(seat_b)
    if side_a is None or side_b is None:
        return False
    return side_a == side_b


def opponents(seat: Any) -> Tuple[Seat, ...]:
    """The two seats of the other partnership (empty for an unknown seat)."""
    own_side = side(seat)
    if own_side is None:
        return ()
    return tuple(s for s, rec in TOPOLOGY.items() if rec.side != own_side)
