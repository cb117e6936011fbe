#!/usr/bin/env python3
"""Example: JSON and YAML serialization of Integer values.

Usage:
    python examples/03_serialization.py
"""
from __future__ import annotations

from decint import Integer, factorial
from decint.serializer import IntegerSerializer


def main() -> None:
    serializer = IntegerSerializer()
    value = -factorial(30)

    json_text = serializer.to_json(value)
    print("JSON:")
    print(json_text)

    yaml_text = serializer.to_yaml(value)
    print("YAML:")
    print(yaml_text)

    restored = serializer.from_yaml(yaml_text)
    assert restored == value
    assert serializer.from_json(json_text) == Integer(str(value))
    print("Round trip OK")


if __name__ == "__main__":
    main()
