"""Tests for LambdaComparer."""

import pytest

from extkit.collections.comparers import LambdaComparer
from extkit.exceptions import InvalidArgumentError


class TestLambdaComparer:
    """Test LambdaComparer behaviour."""

    def test_equals_uses_predicate(self):
        comparer = LambdaComparer(lambda a, b: a.lower() == b.lower())
        assert comparer.equals("Foo", "fOO")
        assert not comparer.equals("Foo", "bar")

    def test_hash_is_constant(self):
        comparer = LambdaComparer(lambda a, b: a == b)
        assert comparer.hash("x") == comparer.hash(12345) == 0

    def test_unique_keeps_first_occurrence(self):
        comparer = LambdaComparer(lambda a, b: abs(a) == abs(b))
        assert list(comparer.unique([1, -1, 2, -2, 3])) == [1, 2, 3]

    def test_contains(self):
        comparer = LambdaComparer(lambda a, b: a % 10 == b % 10)
        assert comparer.contains([11, 22], 31)
        assert not comparer.contains([11, 22], 33)

    def test_none_predicate(self):
        with pytest.raises(InvalidArgumentError):
            LambdaComparer(None)
