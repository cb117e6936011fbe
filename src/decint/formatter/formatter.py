"""Plain-text rendering of ``Integer`` values.

The renderer only needs read access: the ``negative`` flag and forward
iteration over the digits.  Output is an optional ``-`` followed by the
digits with no grouping separators, so ``Integer(format_integer(x)) == x``
for every ``x``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decint.core.integer import Integer


def format_integer(value: "Integer") -> str:
    """Render ``value`` as decimal text."""
    text = "".join(map(str, value))
    return "-" + text if value.negative else text


def format_digits_table(value: "Integer") -> list[tuple[int, int]]:
    """Return ``(position, digit)`` rows, position 0 being the units digit.

    Rows are ordered from the most significant digit down, matching the
    order a reader scans the rendered number.
    """
    size = value.size()
    return [(size - i - 1, digit) for i, digit in enumerate(value)]
