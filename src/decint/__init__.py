"""decint — arbitrary-precision signed decimal integers.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import decint
    from decint import Integer

    x = Integer("123456789012345678901234567890")
    y = Integer(-42)

    x + y, x - y, x * y       # arithmetic with carry-exact digits
    x // y                    # truncates toward zero
    x % 97                    # dividend >= 0, divisor > 0 only

    decint.factorial(25)
    decint.gcd(12, 18)        # Integer('6')
    Integer(2) ** 100

    decint.__version__
    '0.1.0'
"""
from __future__ import annotations

from decint.core.errors import (
    DigitIndexError,
    DivisionByZeroError,
    DomainError,
    FrozenIntegerError,
    IntegerError,
    InvalidFormatError,
)
from decint.core.integer import ONE, ZERO, Integer, IntegerLike
from decint.derived.operations import absolute, factorial, gcd, power
from decint.storage.registry import get_default_storage, set_default_storage

__version__: str = "0.1.0"


def parse(text: str, storage: str | None = None) -> Integer:
    """Parse decimal text such as ``"-00123"`` into an ``Integer``.

    Parameters
    ----------
    text:
        An optional ``-`` followed by one or more decimal digits.
    storage:
        Storage backend name; ``None`` uses the default backend.

    Raises
    ------
    InvalidFormatError
        If ``text`` is not a decimal integer literal.
    """
    return Integer(text, storage=storage)


__all__ = [
    "__version__",
    "Integer",
    "IntegerLike",
    "ZERO",
    "ONE",
    "parse",
    "absolute",
    "factorial",
    "gcd",
    "power",
    "set_default_storage",
    "get_default_storage",
    "IntegerError",
    "InvalidFormatError",
    "DivisionByZeroError",
    "DomainError",
    "DigitIndexError",
    "FrozenIntegerError",
]
