"""Derived operations: absolute value, factorial, gcd and integer power."""
from __future__ import annotations

from decint.derived.operations import absolute, factorial, gcd, power

__all__ = ["absolute", "factorial", "gcd", "power"]
