"""Long division and the restricted modulo built on top of it.

Division truncates toward zero: the quotient's magnitude is
``|dividend| // |divisor|`` and its sign is the XOR of the operand signs.
The operands are never modified; their signs are read into locals and
the algorithm only touches magnitude copies.
"""
from __future__ import annotations

from collections.abc import Sequence

from decint.core.digits import is_zero, normalize, strip_leading_zeros
from decint.core.errors import DivisionByZeroError, DomainError
from decint.engine.additive import subtract_signed
from decint.engine.comparison import compare_magnitudes
from decint.engine.multiplicative import multiply_signed


def divide_signed(
    dividend: Sequence[int],
    dividend_negative: bool,
    divisor: Sequence[int],
    divisor_negative: bool,
) -> tuple[list[int], bool]:
    """Return the truncated quotient ``dividend / divisor``.

    Raises
    ------
    DivisionByZeroError
        If ``divisor`` is zero.
    """
    if is_zero(divisor):
        raise DivisionByZeroError("divide")

    if compare_magnitudes(divisor, dividend) > 0:
        return [0], False

    quotient = [0] * len(dividend)
    remainder: list[int] = []

    for position, digit in enumerate(dividend):
        remainder.append(digit)
        strip_leading_zeros(remainder)

        t = _quotient_digit(divisor, remainder)
        quotient[position] = t
        if t:
            product, _ = multiply_signed(divisor, False, [t], False)
            remainder, _ = subtract_signed(remainder, False, product, False)

    return normalize(quotient, dividend_negative != divisor_negative)


def modulo_signed(
    dividend: Sequence[int],
    dividend_negative: bool,
    divisor: Sequence[int],
    divisor_negative: bool,
) -> tuple[list[int], bool]:
    """Return ``dividend - (dividend / divisor) * divisor``.

    Only defined for ``divisor > 0`` and ``dividend >= 0``.

    Raises
    ------
    DomainError
        If the divisor is not positive or the dividend is negative.
    """
    if divisor_negative or is_zero(divisor):
        raise DomainError("modulo", "divisor must be positive")
    if dividend_negative:
        raise DomainError("modulo", "dividend must be non-negative")

    quotient, quotient_negative = divide_signed(dividend, False, divisor, False)
    product, product_negative = multiply_signed(quotient, quotient_negative, divisor, False)
    return subtract_signed(dividend, False, product, product_negative)


def _quotient_digit(divisor: Sequence[int], remainder: Sequence[int]) -> int:
    """Return the greatest ``t`` in ``[0, 9]`` with ``divisor * t <= remainder``."""
    t = 0
    while t < 9:
        product, _ = multiply_signed(divisor, False, [t + 1], False)
        if compare_magnitudes(product, remainder) > 0:
            break
        t += 1
    return t
