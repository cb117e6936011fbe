"""Helpers over raw digit sequences shared by the arithmetic cores.

Digit sequences are most-significant-first lists of ints in ``[0, 9]``.
None of these helpers know about ``Integer``; they only see digits and
sign flags.
"""
from __future__ import annotations

from collections.abc import Sequence


def strip_leading_zeros(digits: list[int]) -> list[int]:
    """Drop leading zero digits, always keeping at least one digit."""
    start = 0
    last = len(digits) - 1
    while start < last and digits[start] == 0:
        start += 1
    if start:
        del digits[:start]
    return digits


def is_zero(digits: Sequence[int]) -> bool:
    """Return True if a normalized digit sequence denotes zero."""
    return len(digits) == 1 and digits[0] == 0


def pad_front(digits: Sequence[int], width: int) -> list[int]:
    """Return a copy of ``digits`` left-padded with zeros to ``width``."""
    return [0] * (width - len(digits)) + list(digits)


def normalize(digits: list[int], negative: bool) -> tuple[list[int], bool]:
    """Strip leading zeros and collapse negative zero.

    Returns
    -------
    tuple[list[int], bool]
        The normalized digits and sign flag.
    """
    if not digits:
        digits.append(0)
    strip_leading_zeros(digits)
    if is_zero(digits):
        negative = False
    return digits, negative


def digits_of(value: int) -> tuple[list[int], bool]:
    """Split a Python int into most-significant-first digits and a sign.

    Digits are peeled off the magnitude with ``% 10`` and ``// 10`` and
    inserted at the front until the quotient reaches zero.
    """
    negative = value < 0
    magnitude = -value if negative else value
    digits: list[int] = []
    while True:
        digits.insert(0, magnitude % 10)
        magnitude //= 10
        if not magnitude:
            break
    return digits, negative
