"""Equality and total ordering over sign/digit pairs.

Both operands must already be normalized (no leading zeros, no negative
zero); the cheap sign and length checks rely on that.
"""
from __future__ import annotations

from collections.abc import Sequence


def compare_magnitudes(left: Sequence[int], right: Sequence[int]) -> int:
    """Compare two magnitudes, returning -1, 0 or 1."""
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    for a, b in zip(left, right):
        if a != b:
            return -1 if a < b else 1
    return 0


def equal(
    left: Sequence[int], left_negative: bool, right: Sequence[int], right_negative: bool
) -> bool:
    """Return True if both sign/digit pairs denote the same value."""
    if left_negative != right_negative:
        return False
    if len(left) != len(right):
        return False
    return all(a == b for a, b in zip(left, right))


def less_than(
    left: Sequence[int], left_negative: bool, right: Sequence[int], right_negative: bool
) -> bool:
    """Return True if ``left`` is algebraically smaller than ``right``."""
    if left_negative and not right_negative:
        return True
    if not left_negative and right_negative:
        return False
    if left_negative:
        # both negative: the larger magnitude is the smaller value
        return compare_magnitudes(left, right) > 0
    return compare_magnitudes(left, right) < 0
