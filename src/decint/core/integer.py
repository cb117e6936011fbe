"""The arbitrary-precision ``Integer`` type.

An ``Integer`` is a sign flag plus a most-significant-first sequence of
decimal digits held in a pluggable :class:`~decint.storage.DigitStorage`.
It behaves as a mutable value: copies never share digits, and only the
augmented assignment operators, ``increment``/``decrement`` and ``swap``
change an instance in place.

Representation invariants, checked after every mutation:

- the digit sequence is never empty;
- there is no leading zero unless the value is zero, stored as ``[0]``;
- zero is never negative;
- every digit lies in ``[0, 9]``.

Arithmetic is delegated to the free functions in :mod:`decint.engine`,
which only see the operands' ``digits`` and ``negative`` accessors.
"""
from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import TYPE_CHECKING, ClassVar, Union

from decint.core.digits import digits_of
from decint.core.errors import DigitIndexError, FrozenIntegerError
from decint.engine import (
    add_signed,
    divide_signed,
    equal,
    less_than,
    modulo_signed,
    multiply_signed,
    subtract_signed,
)
from decint.formatter.formatter import format_integer
from decint.parser.scanner import parse_decimal
from decint.storage.registry import storage_registry

if TYPE_CHECKING:
    from decint.storage.backends import DigitStorage

IntegerLike = Union["Integer", int]

_Core = Callable[[Sequence[int], bool, Sequence[int], bool], "tuple[list[int], bool]"]


class Integer:
    """Arbitrary-precision signed decimal integer.

    Parameters
    ----------
    value:
        A Python ``int``, decimal text such as ``"-12345"``, or another
        ``Integer`` to copy.
    storage:
        Name of the digit storage backend.  ``None`` uses the default
        backend (or, when copying, the source's backend).

    Raises
    ------
    InvalidFormatError
        If ``value`` is a string that is not a decimal integer literal.
    TypeError
        If ``value`` has any other type.

    Example
    -------
    ::

        >>> from decint import Integer
        >>> Integer("123456789") * Integer(-987654321)
        Integer('-121932631112635269')
    """

    __slots__ = ("_digits", "_negative", "_frozen_as")

    __hash__ = None  # type: ignore[assignment]

    ZERO: ClassVar[Integer]
    ONE: ClassVar[Integer]

    def __init__(self, value: IntegerLike | str = 0, *, storage: str | None = None) -> None:
        if isinstance(value, Integer) and storage is None:
            storage_cls = value.storage
        else:
            storage_cls = storage_registry.get(storage)

        self._frozen_as: str | None = None
        self._negative: bool = False
        self._digits: DigitStorage = storage_cls([0])

        if isinstance(value, Integer):
            digits, negative = list(value.digits), value.negative
        elif isinstance(value, int):
            digits, negative = digits_of(value)
        elif isinstance(value, str):
            digits, negative = parse_decimal(value)
        else:
            raise TypeError(
                f"Integer() argument must be int, str or Integer, not {type(value).__name__}"
            )
        self._assign(digits, negative)

    @classmethod
    def _from_parts(
        cls, digits: Sequence[int], negative: bool, storage_cls: type[DigitStorage]
    ) -> Integer:
        """Build an instance from already-normalized parts."""
        obj = cls.__new__(cls)
        obj._frozen_as = None
        obj._negative = negative
        obj._digits = storage_cls(digits)
        obj._check_invariants()
        return obj

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def digits(self) -> tuple[int, ...]:
        """Snapshot of the digits, most significant first."""
        return tuple(self._digits)

    @property
    def negative(self) -> bool:
        """True if the value is below zero."""
        return self._negative

    @property
    def storage(self) -> type[DigitStorage]:
        """The storage backend class holding the digits."""
        return type(self._digits)

    @property
    def frozen(self) -> bool:
        """True for shared constants such as ``ZERO`` and ``ONE``."""
        return self._frozen_as is not None

    def size(self) -> int:
        """Return the number of digits."""
        return len(self._digits)

    def __len__(self) -> int:
        return len(self._digits)

    def __bool__(self) -> bool:
        return not (len(self._digits) == 1 and self._digits[0] == 0)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the digits from most to least significant."""
        return iter(self._digits)

    def __getitem__(self, index: int) -> int:
        """Return the digit ``index`` places from the right, without a range check."""
        return self._digits[len(self._digits) - index - 1]

    def at(self, index: int) -> int:
        """Return the digit ``index`` places from the right.

        Raises
        ------
        DigitIndexError
            If ``index`` is outside ``[0, size())``.
        """
        size = len(self._digits)
        if not 0 <= index < size:
            raise DigitIndexError(index, size)
        return self._digits[size - index - 1]

    # ------------------------------------------------------------------
    # Copying and mutation
    # ------------------------------------------------------------------

    def copy(self) -> Integer:
        """Return an independent, mutable copy."""
        return Integer._from_parts(self._digits, self._negative, self.storage)

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, object]) -> Integer:
        return self.copy()

    def swap(self, other: Integer) -> None:
        """Exchange digits and sign with ``other``."""
        self._ensure_mutable("swap")
        other._ensure_mutable("swap")
        self._digits, other._digits = other._digits, self._digits
        self._negative, other._negative = other._negative, self._negative

    def increment(self) -> Integer:
        """Add one in place and return ``self``."""
        self._ensure_mutable("increment")
        self._assign(*add_signed(self.digits, self._negative, ONE.digits, False))
        return self

    def decrement(self) -> Integer:
        """Subtract one in place and return ``self``."""
        self._ensure_mutable("decrement")
        self._assign(*subtract_signed(self.digits, self._negative, ONE.digits, False))
        return self

    def post_increment(self) -> Integer:
        """Add one in place and return a copy of the previous value."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> Integer:
        """Subtract one in place and return a copy of the previous value."""
        previous = self.copy()
        self.decrement()
        return previous

    def _freeze(self, name: str) -> Integer:
        self._frozen_as = name
        return self

    def _ensure_mutable(self, method: str) -> None:
        if self._frozen_as is not None:
            raise FrozenIntegerError(self._frozen_as, method)

    def _assign(self, digits: Sequence[int], negative: bool) -> None:
        self._digits = self.storage(digits)
        self._negative = negative
        self._check_invariants()

    def _check_invariants(self) -> None:
        digits = self._digits
        assert len(digits) > 0, "digit sequence is empty"
        assert digits[0] != 0 or len(digits) == 1, "leading zero digit"
        assert not (self._negative and len(digits) == 1 and digits[0] == 0), "negative zero"
        assert all(0 <= d <= 9 for d in digits), "digit out of range"

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return equal(self.digits, self._negative, rhs.digits, rhs.negative)

    def __lt__(self, other: IntegerLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return less_than(self.digits, self._negative, rhs.digits, rhs.negative)

    def __le__(self, other: IntegerLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return not less_than(rhs.digits, rhs.negative, self.digits, self._negative)

    def __gt__(self, other: IntegerLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return less_than(rhs.digits, rhs.negative, self.digits, self._negative)

    def __ge__(self, other: IntegerLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return not less_than(self.digits, self._negative, rhs.digits, rhs.negative)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _binary(self, other: object, core: _Core) -> Integer:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        digits, negative = core(self.digits, self._negative, rhs.digits, rhs.negative)
        return Integer._from_parts(digits, negative, self.storage)

    def _reflected(self, other: object, core: _Core) -> Integer:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        digits, negative = core(lhs.digits, lhs.negative, self.digits, self._negative)
        return Integer._from_parts(digits, negative, self.storage)

    def _inplace(self, other: object, core: _Core) -> Integer:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        digits, negative = core(self.digits, self._negative, rhs.digits, rhs.negative)
        if self._frozen_as is not None:
            return Integer._from_parts(digits, negative, self.storage)
        self._assign(digits, negative)
        return self

    def __add__(self, other: IntegerLike) -> Integer:
        return self._binary(other, add_signed)

    def __radd__(self, other: IntegerLike) -> Integer:
        return self._reflected(other, add_signed)

    def __iadd__(self, other: IntegerLike) -> Integer:
        return self._inplace(other, add_signed)

    def __sub__(self, other: IntegerLike) -> Integer:
        return self._binary(other, subtract_signed)

    def __rsub__(self, other: IntegerLike) -> Integer:
        return self._reflected(other, subtract_signed)

    def __isub__(self, other: IntegerLike) -> Integer:
        return self._inplace(other, subtract_signed)

    def __mul__(self, other: IntegerLike) -> Integer:
        return self._binary(other, multiply_signed)

    def __rmul__(self, other: IntegerLike) -> Integer:
        return self._reflected(other, multiply_signed)

    def __imul__(self, other: IntegerLike) -> Integer:
        return self._inplace(other, multiply_signed)

    # Division truncates toward zero, unlike ``int.__floordiv__``.
    def __floordiv__(self, other: IntegerLike) -> Integer:
        return self._binary(other, divide_signed)

    def __rfloordiv__(self, other: IntegerLike) -> Integer:
        return self._reflected(other, divide_signed)

    def __ifloordiv__(self, other: IntegerLike) -> Integer:
        return self._inplace(other, divide_signed)

    def __mod__(self, other: IntegerLike) -> Integer:
        return self._binary(other, modulo_signed)

    def __rmod__(self, other: IntegerLike) -> Integer:
        return self._reflected(other, modulo_signed)

    def __imod__(self, other: IntegerLike) -> Integer:
        return self._inplace(other, modulo_signed)

    def __divmod__(self, other: IntegerLike) -> tuple[Integer, Integer]:
        remainder = self._binary(other, modulo_signed)
        if remainder is NotImplemented:
            return NotImplemented
        return self._binary(other, divide_signed), remainder

    def __rdivmod__(self, other: IntegerLike) -> tuple[Integer, Integer]:
        remainder = self._reflected(other, modulo_signed)
        if remainder is NotImplemented:
            return NotImplemented
        return self._reflected(other, divide_signed), remainder

    def __pow__(self, exponent: IntegerLike, modulus: None = None) -> Integer:
        if modulus is not None:
            raise TypeError("pow() with a modulus is not supported for Integer")
        if not isinstance(exponent, (Integer, int)):
            return NotImplemented
        from decint.derived.operations import power

        return power(self, exponent)

    def __rpow__(self, base: int) -> Integer:
        if not isinstance(base, int):
            return NotImplemented
        from decint.derived.operations import power

        return power(Integer(base), self)

    def __neg__(self) -> Integer:
        result = self.copy()
        if result:
            result._negative = not result._negative
        return result

    def __pos__(self) -> Integer:
        return self.copy()

    def __abs__(self) -> Integer:
        from decint.derived.operations import absolute

        return absolute(self)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def __int__(self) -> int:
        value = 0
        for digit in self._digits:
            value = value * 10 + digit
        return -value if self._negative else value

    def __str__(self) -> str:
        return format_integer(self)

    def __repr__(self) -> str:
        return f"Integer({format_integer(self)!r})"


def _coerce(value: object) -> Integer | None:
    """Return ``value`` as an ``Integer``, or None if it is not integer-like."""
    if isinstance(value, Integer):
        return value
    if isinstance(value, int):
        return Integer(value)
    return None


def as_integer(value: IntegerLike, operation: str) -> Integer:
    """Convert an operand of a derived operation to ``Integer``.

    Raises
    ------
    TypeError
        If ``value`` is neither an ``Integer`` nor an ``int``.
    """
    coerced = _coerce(value)
    if coerced is None:
        raise TypeError(f"{operation}() expected an integer, got {type(value).__name__}")
    return coerced


ZERO: Integer = Integer(0)._freeze("ZERO")
ONE: Integer = Integer(1)._freeze("ONE")

Integer.ZERO = ZERO
Integer.ONE = ONE
