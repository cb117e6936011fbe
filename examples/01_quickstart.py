#!/usr/bin/env python3
"""Example: Quickstart — decint

Minimal working example: build integers from ints and text, do
arithmetic, and use the derived operations.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install decint
"""
from __future__ import annotations

import decint
from decint import Integer


def main() -> None:
    print(f"decint version: {decint.__version__}")

    # Step 1: Construct from a Python int and from decimal text
    a = Integer(-12345678901234567890)
    b = decint.parse("98765432109876543210")
    print(f"a = {a}")
    print(f"b = {b}")

    # Step 2: Arithmetic
    print(f"a + b  = {a + b}")
    print(f"a - b  = {a - b}")
    print(f"a * b  = {a * b}")
    print(f"b // a = {b // a}  (truncates toward zero)")
    print(f"b % 97 = {b % 97}")

    # Step 3: Derived operations
    print(f"25!        = {decint.factorial(25)}")
    print(f"gcd(a, b)  = {decint.gcd(abs(a), b)}")
    print(f"2 ** 128   = {Integer(2) ** 128}")

    # Step 4: Errors are typed
    try:
        Integer("12three")
    except decint.InvalidFormatError as exc:
        print(f"Rejected: {exc}")


if __name__ == "__main__":
    main()
