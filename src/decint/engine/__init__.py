"""Digit-level arithmetic engine.

Every function here works on most-significant-first digit sequences plus
a sign flag and returns a fresh ``(digits, negative)`` pair.  The
``Integer`` type feeds these functions through its public read
accessors and never hands them its own storage to mutate.
"""
from __future__ import annotations

from decint.engine.additive import add_signed, subtract_signed
from decint.engine.comparison import compare_magnitudes, equal, less_than
from decint.engine.divisive import divide_signed, modulo_signed
from decint.engine.multiplicative import multiply_signed

__all__ = [
    "add_signed",
    "subtract_signed",
    "compare_magnitudes",
    "equal",
    "less_than",
    "multiply_signed",
    "divide_signed",
    "modulo_signed",
]
