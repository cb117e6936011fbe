"""Core representation: the ``Integer`` type, its constants and errors.

Submodules in core/ should not import from cli/ or serializer/.
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

__all__ = [
    "Integer",
    "IntegerLike",
    "ZERO",
    "ONE",
    "IntegerError",
    "InvalidFormatError",
    "DivisionByZeroError",
    "DomainError",
    "DigitIndexError",
    "FrozenIntegerError",
]
