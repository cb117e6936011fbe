"""Addition and subtraction over sign/digit pairs.

Both operations run through :func:`add_signed`.  When the effective
signs agree the magnitudes are added with an ordinary carry; when they
differ the bottom operand is subtracted with ten's complement
arithmetic, which replaces borrow handling by a second complement pass:

1. add the top digits to ``9 - bottom`` digits with an initial carry of 1;
2. a final carry of 1 means the digits already hold ``top - bottom``;
3. a final carry of 0 means ``bottom > top``: complementing the digits
   once more (again with an initial carry of 1) yields ``bottom - top``.
"""
from __future__ import annotations

from collections.abc import Sequence

from decint.core.digits import normalize, pad_front
from decint.engine.comparison import compare_magnitudes


def add_signed(
    top: Sequence[int],
    top_negative: bool,
    bottom: Sequence[int],
    bottom_negative: bool,
    *,
    subtract: bool = False,
) -> tuple[list[int], bool]:
    """Return ``top + bottom`` (or ``top - bottom``) as ``(digits, negative)``.

    Parameters
    ----------
    top, bottom:
        Normalized most-significant-first digit sequences.
    top_negative, bottom_negative:
        Sign flags of the two operands.
    subtract:
        When True the bottom operand's sign is flipped, turning the
        addition into a subtraction.
    """
    if subtract:
        bottom_negative = not bottom_negative

    bottom_is_bigger = compare_magnitudes(bottom, top) > 0
    width = max(len(top), len(bottom))
    upper = pad_front(top, width)
    lower = pad_front(bottom, width)

    if top_negative == bottom_negative:
        result = _add_magnitudes(upper, lower)
        negative = top_negative
    else:
        result = _complement_subtract(upper, lower)
        negative = top_negative
        if bottom_is_bigger:
            negative = not negative

    return normalize(result, negative)


def subtract_signed(
    top: Sequence[int],
    top_negative: bool,
    bottom: Sequence[int],
    bottom_negative: bool,
) -> tuple[list[int], bool]:
    """Return ``top - bottom`` as ``(digits, negative)``."""
    return add_signed(top, top_negative, bottom, bottom_negative, subtract=True)


def _add_magnitudes(upper: list[int], lower: list[int]) -> list[int]:
    """Add two equal-width magnitudes, growing by one digit on overflow."""
    carry = 0
    for i in range(len(upper) - 1, -1, -1):
        total = upper[i] + lower[i] + carry
        carry = total // 10
        upper[i] = total % 10
    if carry:
        upper.insert(0, carry)
    return upper


def _complement_subtract(upper: list[int], lower: list[int]) -> list[int]:
    """Return ``|upper - lower|`` for two equal-width magnitudes."""
    carry = 1
    for i in range(len(upper) - 1, -1, -1):
        total = upper[i] + (9 - lower[i]) + carry
        carry = total // 10
        upper[i] = total % 10

    if not carry:
        carry = 1
        for i in range(len(upper) - 1, -1, -1):
            total = 9 - upper[i] + carry
            carry = total // 10
            upper[i] = total % 10

    return upper
