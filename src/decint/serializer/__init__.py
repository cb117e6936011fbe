"""JSON and YAML serialization for ``Integer`` values."""
from __future__ import annotations

from decint.serializer.serializer import IntegerSerializer

__all__ = ["IntegerSerializer"]
