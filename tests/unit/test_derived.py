"""Unit tests for decint.derived — absolute, factorial, gcd and power."""
from __future__ import annotations

import math

import pytest

from decint import ONE, ZERO, Integer
from decint.core.errors import DomainError
from decint.derived import absolute, factorial, gcd, power


class TestAbsolute:
    @pytest.mark.parametrize("value", [0, 5, -5, -(10**30)])
    def test_matches_int(self, value: int) -> None:
        assert int(absolute(Integer(value))) == abs(value)

    def test_returns_copy(self) -> None:
        x = Integer(5)
        result = absolute(x)
        assert result is not x
        result += 1
        assert x == 5

    def test_builtin_abs(self) -> None:
        assert abs(Integer(-12)) == 12
        assert abs(Integer(-12)).negative is False

    def test_accepts_int(self) -> None:
        assert absolute(-3) == 3


class TestFactorial:
    def test_zero(self) -> None:
        assert factorial(Integer(0)) == 1

    def test_zero_result_is_not_the_constant(self) -> None:
        result = factorial(0)
        assert result is not ONE
        result.increment()
        assert ONE == 1

    def test_small(self) -> None:
        assert factorial(Integer(5)) == 120
        assert factorial(1) == 1

    def test_large(self) -> None:
        assert int(factorial(30)) == math.factorial(30)

    def test_input_untouched(self) -> None:
        x = Integer(6)
        factorial(x)
        assert x == 6

    def test_negative(self) -> None:
        with pytest.raises(DomainError) as exc_info:
            factorial(Integer(-1))
        assert exc_info.value.operation == "factorial"

    def test_rejects_non_integers(self) -> None:
        with pytest.raises(TypeError):
            factorial(2.5)  # type: ignore[arg-type]


class TestGcd:
    @pytest.mark.parametrize("a, b, expected", [
        (0, 7, 7),
        (7, 0, 7),
        (12, 18, 6),
        (18, 12, 6),
        (17, 5, 1),
        (100, 100, 100),
        (2**40 * 3, 2**35 * 9, 2**35 * 3),
    ])
    def test_values(self, a: int, b: int, expected: int) -> None:
        assert int(gcd(Integer(a), Integer(b))) == expected

    def test_matches_math_gcd(self) -> None:
        a, b = 123456789012345678901234567890, 987654321098765432109876543210
        assert int(gcd(a, b)) == math.gcd(a, b)

    def test_both_zero(self) -> None:
        with pytest.raises(DomainError):
            gcd(ZERO, ZERO)

    @pytest.mark.parametrize("a, b", [(-4, 6), (4, -6), (-4, -6), (0, -3)])
    def test_negative(self, a: int, b: int) -> None:
        with pytest.raises(DomainError):
            gcd(a, b)

    def test_inputs_untouched(self) -> None:
        a, b = Integer(12), Integer(18)
        gcd(a, b)
        assert (a, b) == (12, 18)


class TestPower:
    def test_two_to_ten(self) -> None:
        assert power(Integer(2), 10) == 1024

    @pytest.mark.parametrize("base", [0, 1, -1, 7, -(10**20)])
    def test_zero_exponent(self, base: int) -> None:
        assert power(Integer(base), 0) == 1

    @pytest.mark.parametrize("base, exponent", [
        (3, 1), (-3, 3), (-3, 4), (10, 25), (0, 5), (123456789, 7), (-2, 101),
    ])
    def test_matches_int(self, base: int, exponent: int) -> None:
        assert int(power(base, exponent)) == base**exponent

    def test_integer_exponent(self) -> None:
        assert power(5, Integer(3)) == 125

    def test_negative_exponent(self) -> None:
        with pytest.raises(DomainError) as exc_info:
            power(Integer(2), -1)
        assert exc_info.value.operation == "power"

    def test_pow_operator(self) -> None:
        assert Integer(2) ** 100 == 2**100
        assert 2 ** Integer(10) == 1024
        assert pow(Integer(-3), 3) == -27

    def test_pow_with_modulus_unsupported(self) -> None:
        with pytest.raises(TypeError):
            pow(Integer(2), 10, 7)
