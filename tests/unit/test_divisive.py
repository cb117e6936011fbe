"""Unit tests for decint.engine.divisive — long division and modulo."""
from __future__ import annotations

import pytest

from decint import Integer
from decint.core.errors import DivisionByZeroError, DomainError
from decint.engine.divisive import divide_signed, modulo_signed


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


class TestDivideSigned:
    def test_simple(self) -> None:
        assert divide_signed([1, 0, 0, 0], False, [7], False) == ([1, 4, 2], False)

    def test_divisor_larger_gives_zero(self) -> None:
        assert divide_signed([5], True, [1, 0], False) == ([0], False)

    def test_exact(self) -> None:
        assert divide_signed([1, 4, 4], False, [1, 2], False) == ([1, 2], False)

    def test_sign_is_xor(self) -> None:
        assert divide_signed([9], True, [2], False) == ([4], True)
        assert divide_signed([9], True, [2], True) == ([4], False)

    def test_quotient_digit_nine(self) -> None:
        assert divide_signed([9, 9], False, [1, 1], False) == ([9], False)

    def test_zero_divisor(self) -> None:
        with pytest.raises(DivisionByZeroError):
            divide_signed([5], False, [0], False)

    def test_zero_divided(self) -> None:
        assert divide_signed([0], False, [3], True) == ([0], False)

    def test_operands_not_mutated(self) -> None:
        dividend, divisor = [1, 0, 0], [3]
        divide_signed(dividend, True, divisor, True)
        assert dividend == [1, 0, 0]
        assert divisor == [3]


class TestModuloSigned:
    def test_simple(self) -> None:
        assert modulo_signed([1, 0, 0], False, [7], False) == ([2], False)

    def test_zero_remainder(self) -> None:
        assert modulo_signed([4, 9], False, [7], False) == ([0], False)

    def test_dividend_smaller(self) -> None:
        assert modulo_signed([5], False, [1, 0], False) == ([5], False)

    @pytest.mark.parametrize("divisor, negative", [([0], False), ([3], True)])
    def test_non_positive_divisor(self, divisor: list[int], negative: bool) -> None:
        with pytest.raises(DomainError) as exc_info:
            modulo_signed([9], False, divisor, negative)
        assert exc_info.value.operation == "modulo"

    def test_negative_dividend(self) -> None:
        with pytest.raises(DomainError):
            modulo_signed([9], True, [2], False)


# ---------------------------------------------------------------------------
# Integer operators
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("a, b", [
    (0, 1), (7, 7), (100, 7), (-100, 7), (100, -7), (-100, -7), (5, 10),
    (10**30 + 12345, 97), (-(10**30), 10**15 + 3), (123456789123456789, 123456789),
])
def test_floordiv_truncates_toward_zero(a: int, b: int) -> None:
    assert int(Integer(a) // Integer(b)) == _trunc_div(a, b)


def test_floordiv_differs_from_int_for_negative_operands() -> None:
    assert Integer(-7) // 2 == -3
    assert -7 // 2 == -4


def test_division_by_zero_integer() -> None:
    with pytest.raises(ZeroDivisionError):
        Integer(5) // 0


@pytest.mark.parametrize("a, b", [(0, 1), (1, 1), (100, 7), (10**25 + 9, 12345), (99, 100)])
def test_mod_matches_int(a: int, b: int) -> None:
    assert int(Integer(a) % Integer(b)) == a % b


def test_modulo_restrictions() -> None:
    with pytest.raises(DomainError):
        Integer(-5) % 3
    with pytest.raises(DomainError):
        Integer(5) % -3
    with pytest.raises(DomainError):
        Integer(5) % 0


def test_divmod() -> None:
    q, r = divmod(Integer(1000), 7)
    assert (q, r) == (142, 6)
    q, r = divmod(1000, Integer(7))
    assert (q, r) == (142, 6)
    with pytest.raises(DomainError):
        divmod(Integer(-1000), 7)


def test_true_division_not_supported() -> None:
    with pytest.raises(TypeError):
        Integer(10) / Integer(2)  # type: ignore[operator]


def test_in_place_division_and_modulo() -> None:
    x = Integer(1000)
    x //= 7
    assert x == 142
    x %= 10
    assert x == 2
