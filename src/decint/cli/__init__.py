"""Command-line interface for decint."""
from __future__ import annotations
