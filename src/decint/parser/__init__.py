"""Decimal text parsing.

Exports the ``DecimalScanner`` class and the ``parse_decimal``
convenience function.
"""
from __future__ import annotations

from decint.parser.scanner import DecimalScanner, parse_decimal

__all__ = ["DecimalScanner", "parse_decimal"]
