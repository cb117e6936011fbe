"""Unit tests for decint.engine.multiplicative — schoolbook multiplication."""
from __future__ import annotations

import pytest

from decint import Integer
from decint.engine.multiplicative import multiply_signed


class TestMultiplySigned:
    def test_single_digits(self) -> None:
        assert multiply_signed([7], False, [8], False) == ([5, 6], False)

    def test_sign_is_xor(self) -> None:
        assert multiply_signed([3], True, [4], False) == ([1, 2], True)
        assert multiply_signed([3], False, [4], True) == ([1, 2], True)
        assert multiply_signed([3], True, [4], True) == ([1, 2], False)

    def test_zero_product_is_unsigned(self) -> None:
        assert multiply_signed([0], False, [9, 9], True) == ([0], False)
        assert multiply_signed([5], True, [0], False) == ([0], False)

    def test_multiplier_with_zero_digits(self) -> None:
        assert multiply_signed([1, 2, 3], False, [1, 0, 0, 1], False) == ([1, 2, 3, 1, 2, 3], False)

    def test_full_length_product(self) -> None:
        assert multiply_signed([9, 9], False, [9, 9], False) == ([9, 8, 0, 1], False)

    def test_operands_not_mutated(self) -> None:
        left, right = [4, 5], [6, 7]
        multiply_signed(left, False, right, False)
        assert left == [4, 5]
        assert right == [6, 7]


@pytest.mark.parametrize("a, b", [
    (0, 123), (1, -1), (-1, -1), (12, 12), (999, 999),
    (123456789, 987654321), (-(10**25) + 1, 10**12 - 1), (2**64, -(2**64)),
])
def test_integer_multiplication_matches_int(a: int, b: int) -> None:
    assert int(Integer(a) * Integer(b)) == a * b
    assert int(b * Integer(a)) == a * b


def test_identity_and_absorbing() -> None:
    x = Integer("-31415926535897932384626")
    assert x * 1 == x
    assert x * 0 == 0
    assert (x * 0).negative is False
