"""Test that the quickstart API works for decint."""
from __future__ import annotations


def test_quickstart_imports() -> None:
    import decint

    assert callable(decint.parse)
    assert callable(decint.factorial)


def test_version_matches(expected_version: str) -> None:
    import decint

    assert decint.__version__ == expected_version


def test_quickstart_parse_and_multiply() -> None:
    import decint

    x = decint.parse("123456789123456789")
    assert str(x * 2) == "246913578246913578"


def test_quickstart_integer_from_int() -> None:
    from decint import Integer

    assert str(Integer(-42)) == "-42"


def test_quickstart_derived() -> None:
    import decint

    assert decint.factorial(5) == 120
    assert decint.gcd(12, 18) == 6
    assert decint.power(2, 10) == 1024
