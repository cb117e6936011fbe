#!/usr/bin/env python3
"""Example: digit access, in-place updates and storage backends.

Usage:
    python examples/02_digits_and_mutation.py
"""
from __future__ import annotations

from decint import ONE, Integer, set_default_storage


def main() -> None:
    x = Integer(90817)

    # Index 0 is the units digit; at() is the bounds-checked form
    print("digits from the right:", [x[i] for i in range(len(x))])
    print("most significant first:", list(x))
    print("x.at(4) =", x.at(4))

    # Augmented assignment mutates in place; increment() is prefix ++
    alias = x
    x += 1000
    x.increment()
    print("alias sees the update:", alias)

    # post_decrement() returns the prior value, like postfix --
    before = x.post_decrement()
    print(f"before={before}, after={x}")

    # Shared constants are never modified
    y = ONE
    y += 1
    print(f"y={y}, ONE={ONE}")

    # One byte per digit instead of one list slot
    set_default_storage("bytearray")
    big = Integer("7" * 40)
    print(f"{big.storage.__name__}: {big * big}")


if __name__ == "__main__":
    main()
