"""Unit tests for decint.core.errors — the error hierarchy."""
from __future__ import annotations

import pytest

from decint import (
    DigitIndexError,
    DivisionByZeroError,
    DomainError,
    FrozenIntegerError,
    IntegerError,
    InvalidFormatError,
)


@pytest.mark.parametrize("error, builtin", [
    (InvalidFormatError("bad", "x", 0), ValueError),
    (DivisionByZeroError(), ZeroDivisionError),
    (DomainError("gcd", "bad"), ValueError),
    (DigitIndexError(5, 2), IndexError),
    (FrozenIntegerError("ONE", "increment"), TypeError),
])
def test_hierarchy(error: IntegerError, builtin: type[Exception]) -> None:
    assert isinstance(error, IntegerError)
    assert isinstance(error, builtin)


class TestMessages:
    def test_invalid_format_with_offset(self) -> None:
        error = InvalidFormatError("unexpected character 'x'", "1x", 1)
        assert str(error) == "Invalid integer literal '1x' at offset 1: unexpected character 'x'"

    def test_invalid_format_without_offset(self) -> None:
        assert str(InvalidFormatError("no digits", "")) == "Invalid integer literal '': no digits"

    def test_division_by_zero(self) -> None:
        assert str(DivisionByZeroError()) == "divide: division by zero"

    def test_domain(self) -> None:
        error = DomainError("power", "negative exponent -1")
        assert str(error) == "power: negative exponent -1"
        assert error.operation == "power"

    def test_digit_index(self) -> None:
        assert "Digit index 5" in str(DigitIndexError(5, 2))

    def test_frozen(self) -> None:
        error = FrozenIntegerError("ZERO", "swap")
        assert "ZERO" in str(error)
        assert error.method == "swap"
