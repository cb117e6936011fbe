"""Operations composed from the arithmetic cores.

Nothing here touches digits directly: every function is written in terms
of ``Integer`` comparison and arithmetic, using ``ZERO`` and ``ONE`` as
base cases.  Loops are iterative so very large inputs cannot exhaust the
call stack.
"""
from __future__ import annotations

from decint.core.errors import DomainError
from decint.core.integer import ONE, ZERO, Integer, IntegerLike, as_integer


def absolute(value: IntegerLike) -> Integer:
    """Return a copy of ``value`` with a non-negative sign."""
    x = as_integer(value, "absolute")
    return -x if x < ZERO else x.copy()


def factorial(value: IntegerLike) -> Integer:
    """Return ``value!``.

    Raises
    ------
    DomainError
        If ``value`` is negative.
    """
    x = as_integer(value, "factorial")
    if x < ZERO:
        raise DomainError("factorial", f"undefined for negative input {x}")
    if x == ZERO:
        return ONE.copy()

    result = ONE.copy()
    counter = x.copy()
    while counter > ONE:
        result *= counter
        counter.decrement()
    return result


def gcd(left: IntegerLike, right: IntegerLike) -> Integer:
    """Return the greatest common divisor of two non-negative integers.

    Raises
    ------
    DomainError
        If both operands are zero or either is negative.
    """
    x = as_integer(left, "gcd")
    y = as_integer(right, "gcd")
    if x == ZERO and y == ZERO:
        raise DomainError("gcd", "undefined when both operands are zero")
    if x < ZERO or y < ZERO:
        raise DomainError("gcd", f"operands must be non-negative, got {x} and {y}")

    # keep the divisor nonzero from the first step
    if y == ZERO:
        a, b = y.copy(), x.copy()
    else:
        a, b = x.copy(), y.copy()

    while b != ZERO:
        t = b
        b = a % b
        a.swap(t)
    return a


def power(base: IntegerLike, exponent: IntegerLike) -> Integer:
    """Return ``base`` raised to a non-negative integer ``exponent``.

    Exponentiation by squaring, walking the exponent's bits from the most
    significant: square the running result, then multiply by ``base``
    when the bit is set.  This is the iterative form of
    ``x**e == (x**(e//2))**2 * (x if e is odd else 1)``.

    Raises
    ------
    DomainError
        If ``exponent`` is negative.
    """
    x = as_integer(base, "power")
    e = int(as_integer(exponent, "power"))
    if e < 0:
        raise DomainError("power", f"negative exponent {e}")
    if e == 0:
        return ONE.copy()

    result = ONE.copy()
    for bit in bin(e)[2:]:
        result *= result
        if bit == "1":
            result *= x
    return result
