from __future__ import annotations

import pytest

from bidguard.core.guard_types import GuardInput


# ---------------------------------------------------------------------------
# Raw wire-shape builders
# ---------------------------------------------------------------------------

def _history(*calls: str) -> list:
    """'S:1C', 'W:PASS' -> [{'position': 'S', 'bid': {'token': '1C'}}, ...]"""
    entries = []
    for call in calls:
        seat, token = call.split(":")
        entries.append({"position": seat, "bid": {"token": token}})
    return entries


def _hand(hcp: int, **lengths: int) -> dict:
    return {"hcp": hcp, "lengths": dict(lengths)}


@pytest.fixture
def history():
    return _history


@pytest.fixture
def hand():
    return _hand


@pytest.fixture
def make_input():
    """
    Factory returning a GuardInput built through the raw boundary, the same
    way an upstream engine hands data over.
    """
    def _make(token, seat, calls, hand, explanation="", forced=False, **collaborators) -> GuardInput:
        return GuardInput.from_raw(
            recommended_bid={"token": token} if token is not None else None,
            explanation=explanation,
            forced_bid=forced,
            current_turn=seat,
            auction_history=_history(*calls) if calls is not None else None,
            hand=hand,
            **collaborators,
        )

    return _make
