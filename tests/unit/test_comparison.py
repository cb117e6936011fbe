"""Unit tests for decint.engine.comparison and the Integer comparison operators."""
from __future__ import annotations

import itertools

import pytest

from decint import Integer
from decint.engine.comparison import compare_magnitudes, equal, less_than


class TestCompareMagnitudes:
    @pytest.mark.parametrize("left, right, expected", [
        ([0], [0], 0),
        ([5], [7], -1),
        ([7], [5], 1),
        ([1, 0], [9], 1),
        ([9], [1, 0], -1),
        ([1, 2, 3], [1, 2, 3], 0),
        ([1, 2, 4], [1, 2, 3], 1),
    ])
    def test_results(self, left: list[int], right: list[int], expected: int) -> None:
        assert compare_magnitudes(left, right) == expected


class TestEqual:
    def test_sign_mismatch(self) -> None:
        assert not equal([5], False, [5], True)

    def test_length_mismatch(self) -> None:
        assert not equal([5], False, [5, 0], False)

    def test_element_mismatch(self) -> None:
        assert not equal([5, 1], False, [5, 2], False)

    def test_same(self) -> None:
        assert equal([5, 1], True, [5, 1], True)


class TestLessThan:
    def test_negative_below_non_negative(self) -> None:
        assert less_than([1], True, [0], False)
        assert not less_than([0], False, [1], True)

    def test_both_negative_longer_is_smaller(self) -> None:
        assert less_than([1, 0, 0], True, [9, 9], True)

    def test_both_negative_lexicographically_larger_is_smaller(self) -> None:
        assert less_than([5], True, [3], True)
        assert not less_than([3], True, [5], True)

    def test_both_non_negative(self) -> None:
        assert less_than([9, 9], False, [1, 0, 0], False)
        assert less_than([3], False, [5], False)
        assert not less_than([5], False, [5], False)


# ---------------------------------------------------------------------------
# Integer operators
# ---------------------------------------------------------------------------


ORDERED = [-1000, -100, -99, -5, -3, -1, 0, 1, 3, 5, 99, 100, 1000]


class TestIntegerOrdering:
    def test_sorted_sample(self) -> None:
        values = [Integer(v) for v in reversed(ORDERED)]
        assert [int(v) for v in sorted(values)] == ORDERED

    def test_chain(self) -> None:
        assert Integer(-5) < Integer(-3) < Integer(0) < Integer(3) < Integer(5)
        assert Integer(-100) < Integer(-99)

    @pytest.mark.parametrize("a, b", list(itertools.product(ORDERED, repeat=2)))
    def test_operators_agree_with_int(self, a: int, b: int) -> None:
        x, y = Integer(a), Integer(b)
        assert (x < y) == (a < b)
        assert (x <= y) == (a <= b)
        assert (x > y) == (a > b)
        assert (x >= y) == (a >= b)
        assert (x == y) == (a == b)
        assert (x != y) == (a != b)

    def test_transitive(self) -> None:
        values = [Integer(v) for v in ORDERED]
        for a, b, c in itertools.combinations(values, 3):
            assert a < b and b < c and a < c


class TestIntInterop:
    def test_compare_with_int(self) -> None:
        assert Integer(5) == 5
        assert 5 == Integer(5)
        assert Integer(-2) < 1
        assert 3 > Integer(-3)

    def test_compare_with_other_types(self) -> None:
        assert Integer(5) != "5"
        assert Integer(5) != 5.0
        with pytest.raises(TypeError):
            Integer(5) < "6"  # noqa: B015
