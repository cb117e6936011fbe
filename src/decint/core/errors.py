"""Error types raised by decint.

Every error derives from :class:`IntegerError` and from the builtin
exception a caller would naturally expect (``ValueError``,
``ZeroDivisionError``, ``IndexError`` or ``TypeError``), so both
``except decint.IntegerError`` and ``except ValueError`` work.

Representation invariants are checked with ``assert`` and are not part
of this hierarchy: a failed invariant is a bug in decint, not bad input.
"""
from __future__ import annotations


class IntegerError(Exception):
    """Base class for all decint errors."""


class InvalidFormatError(IntegerError, ValueError):
    """Raised when decimal text cannot be parsed into an ``Integer``.

    Parameters
    ----------
    reason:
        Short description of what is wrong with the text.
    text:
        The complete text that was being parsed.
    offset:
        0-based index of the offending character, or ``None`` when the
        problem is not tied to one position (e.g. empty input).
    """

    def __init__(self, reason: str, text: str, offset: int | None = None) -> None:
        if offset is None:
            message = f"Invalid integer literal {text!r}: {reason}"
        else:
            message = f"Invalid integer literal {text!r} at offset {offset}: {reason}"
        super().__init__(message)
        self.reason = reason
        self.text = text
        self.offset = offset


class DivisionByZeroError(IntegerError, ZeroDivisionError):
    """Raised when the divisor of an integer division is zero."""

    def __init__(self, operation: str = "divide") -> None:
        super().__init__(f"{operation}: division by zero")
        self.operation = operation


class DomainError(IntegerError, ValueError):
    """Raised when an operand lies outside an operation's domain.

    Parameters
    ----------
    operation:
        Name of the operation that rejected its input (``"factorial"``,
        ``"gcd"``, ``"power"``, ``"modulo"``).
    message:
        Human-readable description of the violated precondition.
    """

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation


class DigitIndexError(IntegerError, IndexError):
    """Raised by bounds-checked digit access outside ``[0, size)``."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(
            f"Digit index {index} out of range for an integer with {size} digit(s)"
        )
        self.index = index
        self.size = size


class FrozenIntegerError(IntegerError, TypeError):
    """Raised when a mutating method is called on a shared constant."""

    def __init__(self, name: str, method: str) -> None:
        super().__init__(
            f"{name} is a shared constant and cannot be modified by {method}(); "
            "work on a copy instead"
        )
        self.name = name
        self.method = method
