"""Text rendering for ``Integer`` values."""
from __future__ import annotations

from decint.formatter.formatter import format_digits_table, format_integer

__all__ = ["format_integer", "format_digits_table"]
