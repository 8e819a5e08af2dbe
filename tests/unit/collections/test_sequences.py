"""Tests for iterable helpers and chunking."""

import pytest

from extkit.collections.sequences import (
    as_not_null,
    contains_where,
    distinct_by,
    except_by,
    for_each,
    for_each_indexed,
    index_of,
    index_where,
    intersect_by,
    is_empty,
    is_null_or_empty,
    split,
    union_by,
)
from extkit.exceptions import InvalidArgumentError, MissingCollectionError


def same_first_letter(a, b):
    return a[0] == b[0]


class TestSplit:
    """Test split chunking."""

    def test_even_split(self):
        assert split(range(1, 11), 5) == [[1, 2, 3, 4, 5], [6, 7, 8, 9, 10]]

    def test_uneven_split(self):
        assert split(range(1, 10), 5) == [[1, 2, 3, 4, 5], [6, 7, 8, 9]]

    @pytest.mark.parametrize("size", [1, 2, 5, 100])
    def test_empty_sequence(self, size):
        assert split([], size) == []

    @pytest.mark.parametrize("size", [0, -1, -10])
    def test_non_positive_size(self, size):
        with pytest.raises(InvalidArgumentError):
            split([1, 2, 3], size)

    def test_non_positive_size_on_empty_sequence(self):
        with pytest.raises(InvalidArgumentError):
            split([], 0)

    def test_none_sequence(self):
        with pytest.raises(MissingCollectionError):
            split(None, 2)

    @pytest.mark.parametrize("length,size", [(7, 3), (9, 3), (1, 4), (13, 1)])
    def test_chunks_reassemble_to_input(self, length, size):
        """Concatenated chunks equal the input and only the last may be short."""
        data = list(range(length))
        chunks = split(data, size)

        assert [x for chunk in chunks for x in chunk] == data
        assert all(len(chunk) == size for chunk in chunks[:-1])
        assert 0 < len(chunks[-1]) <= size

    def test_consumes_generator_once(self):
        generator = (x * x for x in range(5))
        assert split(generator, 2) == [[0, 1], [4, 9], [16]]
        assert list(generator) == []


class TestEmptiness:
    """Test is_empty, is_null_or_empty and as_not_null."""

    def test_is_empty(self):
        assert is_empty([])
        assert not is_empty([0])

    def test_is_empty_generator(self):
        assert is_empty(x for x in [])
        assert not is_empty(x for x in [1])

    def test_is_empty_none(self):
        with pytest.raises(MissingCollectionError):
            is_empty(None)

    def test_is_null_or_empty(self):
        assert is_null_or_empty(None)
        assert is_null_or_empty(())
        assert not is_null_or_empty("a")

    def test_as_not_null(self):
        assert list(as_not_null(None)) == []
        items = [1]
        assert as_not_null(items) is items


class TestIteration:
    """Test for_each and for_each_indexed."""

    def test_for_each(self):
        seen = []
        for_each(["a", "b"], seen.append)
        assert seen == ["a", "b"]

    def test_for_each_indexed(self):
        seen = []
        for_each_indexed(["a", "b"], lambda item, index: seen.append((index, item)))
        assert seen == [(0, "a"), (1, "b")]

    def test_none_action(self):
        with pytest.raises(InvalidArgumentError):
            for_each([1], None)
        with pytest.raises(InvalidArgumentError):
            for_each_indexed([1], None)

    def test_none_sequence(self):
        with pytest.raises(MissingCollectionError):
            for_each(None, print)


class TestSearch:
    """Test index_of, index_where and contains_where."""

    def test_index_of(self):
        assert index_of(["a", "b", "b"], "b") == 1
        assert index_of(["a"], "z") == -1

    def test_index_where(self):
        assert index_where([1, 4, 9], lambda x: x > 3) == 1
        assert index_where([1, 4, 9], lambda x: x > 30) == -1

    def test_contains_where(self):
        assert contains_where([1, 2], lambda x: x == 2)
        assert not contains_where([], lambda x: True)

    def test_none_predicate(self):
        with pytest.raises(InvalidArgumentError):
            index_where([1], None)
        with pytest.raises(InvalidArgumentError):
            contains_where([1], None)


class TestComparerSetOperations:
    """Test set operations driven by an equality predicate."""

    def test_distinct_by(self):
        words = ["apple", "avocado", "banana", "blueberry", "cherry"]
        assert distinct_by(words, same_first_letter) == ["apple", "banana", "cherry"]

    def test_union_by(self):
        result = union_by(["apple", "banana"], ["berry", "cherry"], same_first_letter)
        assert result == ["apple", "banana", "cherry"]

    def test_except_by(self):
        result = except_by(["apple", "banana", "cherry"], ["bean"], same_first_letter)
        assert result == ["apple", "cherry"]

    def test_intersect_by(self):
        result = intersect_by(["apple", "banana", "cherry"], ["bean", "cake"], same_first_letter)
        assert result == ["banana", "cherry"]

    def test_none_comparer(self):
        with pytest.raises(InvalidArgumentError):
            distinct_by([1], None)
        with pytest.raises(InvalidArgumentError):
            intersect_by([1], [1], None)

    def test_none_sequences(self):
        with pytest.raises(MissingCollectionError):
            union_by(None, [1], lambda a, b: a == b)
        with pytest.raises(MissingCollectionError):
            except_by([1], None, lambda a, b: a == b)
