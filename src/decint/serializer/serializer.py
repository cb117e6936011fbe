"""Serialization of ``Integer`` values to and from JSON and YAML.

The serialized form is a small dict with a ``"kind"`` discriminator::

    {"kind": "Integer", "negative": true, "digits": "12345"}

Digits are kept as a string rather than a number so that values of any
size survive JSON and YAML readers that would otherwise coerce them to
floats or machine integers.

Usage
-----
::

    from decint.serializer import IntegerSerializer

    serializer = IntegerSerializer()
    text = serializer.to_json(Integer("-12345"))
    assert serializer.from_json(text) == Integer("-12345")
"""
from __future__ import annotations

import json

import yaml

from decint.core.errors import InvalidFormatError
from decint.core.integer import Integer
from decint.formatter.formatter import format_integer

_KIND = "Integer"


class IntegerSerializer:
    """Converts between ``Integer`` objects and plain Python dicts.

    Parameters
    ----------
    storage:
        Storage backend name for deserialized values; ``None`` uses the
        default backend.
    """

    def __init__(self, storage: str | None = None) -> None:
        self._storage = storage

    # ------------------------------------------------------------------
    # Serialization (Integer → dict)
    # ------------------------------------------------------------------

    def to_dict(self, value: Integer) -> dict[str, object]:
        """Serialize an ``Integer`` to a JSON-compatible dict."""
        return {
            "kind": _KIND,
            "negative": value.negative,
            "digits": format_integer(abs(value)),
        }

    # ------------------------------------------------------------------
    # Deserialization (dict → Integer)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, object]) -> Integer:
        """Deserialize an ``Integer`` from a dict produced by ``to_dict``.

        Raises
        ------
        ValueError
            If ``data`` is not a mapping, or the ``kind`` discriminator is
            missing or unknown.
        InvalidFormatError
            If ``digits`` is not a string of decimal digits, or
            ``negative`` is not a boolean.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping, got {type(data).__name__}")
        kind = data.get("kind")
        if kind != _KIND:
            raise ValueError(f"Unknown value kind: {kind!r}")
        digits = data.get("digits")
        if not isinstance(digits, str):
            raise InvalidFormatError("digits must be a string", repr(digits))
        if digits.startswith("-"):
            raise InvalidFormatError("digits must not carry a sign", digits, 0)
        negative = data.get("negative", False)
        if not isinstance(negative, bool):
            raise InvalidFormatError("negative must be a boolean", repr(negative))
        text = "-" + digits if negative else digits
        return Integer(text, storage=self._storage)

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, value: Integer, indent: int | None = 2) -> str:
        """Serialize an ``Integer`` to a JSON string."""
        return json.dumps(self.to_dict(value), indent=indent)

    def from_json(self, text: str) -> Integer:
        """Deserialize an ``Integer`` from a JSON string."""
        data: dict[str, object] = json.loads(text)
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, value: Integer) -> str:
        """Serialize an ``Integer`` to a YAML string."""
        return yaml.safe_dump(self.to_dict(value), default_flow_style=False, sort_keys=False)

    def from_yaml(self, text: str) -> Integer:
        """Deserialize an ``Integer`` from a YAML string."""
        data: dict[str, object] = yaml.safe_load(text)
        return self.from_dict(data)
