"""Schoolbook multiplication over sign/digit pairs."""
from __future__ import annotations

from collections.abc import Sequence

from decint.core.digits import normalize


def multiply_signed(
    multiplicand: Sequence[int],
    multiplicand_negative: bool,
    multiplier: Sequence[int],
    multiplier_negative: bool,
) -> tuple[list[int], bool]:
    """Return ``multiplicand * multiplier`` as ``(digits, negative)``.

    The product buffer is sized for the longest possible product,
    ``len(multiplicand) + len(multiplier)`` digits.  Zero digits of the
    multiplier contribute nothing and are skipped.
    """
    result = [0] * (len(multiplicand) + len(multiplier))
    negative = multiplicand_negative != multiplier_negative
    last = len(result) - 1

    for shift, y in enumerate(reversed(multiplier)):
        if not y:
            continue
        carry = 0
        z = last - shift
        for x in reversed(multiplicand):
            product = x * y + result[z] + carry
            result[z] = product % 10
            carry = product // 10
            z -= 1
        result[z] = carry

    return normalize(result, negative)
