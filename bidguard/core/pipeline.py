"""
bidguard/core/pipeline.py

Runs the guards in their fixed order, each one seeing the previous result.
"""

from typing import Tuple

from bidguard.core.free_bid_guard import apply_two_level_free_bid_guard
from bidguard.core.guard_types import GuardFn, GuardInput, GuardResult
from bidguard.core.overcall_guard import apply_overcall_length_guard
from bidguard.core.responder_guard import apply_responder_major_guard

GUARD_ORDER: Tuple[GuardFn, ...] = (
    apply_responder_major_guard,
    apply_overcall_length_guard,
    apply_two_level_free_bid_guard,
)


def apply_guards(guard_input: GuardInput) -> GuardResult:
    current = guard_input
    result = guard_input.passthrough()
    for guard in GUARD_ORDER:
        result = guard(current)
        current = current.with_result(result)
    return result
