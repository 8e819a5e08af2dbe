"""Tests for in-place list reordering helpers."""

import pytest

from extkit.collections.lists import (
    last_element_index,
    move_down_by_index,
    move_down_by_value,
    move_up_by_index,
    move_up_by_value,
    remove_matching,
    swap_by_index,
    swap_by_value,
)
from extkit.exceptions import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidOperationError,
    MissingCollectionError,
    ValueNotFoundError,
)


class TestLastElementIndex:
    """Test last_element_index."""

    def test_empty_list(self):
        assert last_element_index([]) == -1

    def test_non_empty_list(self):
        assert last_element_index([1, 2, 3]) == 2

    def test_none_list(self):
        with pytest.raises(MissingCollectionError):
            last_element_index(None)


class TestMoveUp:
    """Test moving elements towards the front."""

    def test_move_up_by_value(self):
        """Moving the second element swaps it with the first."""
        items = [12, 37]
        move_up_by_value(items, 37)
        assert items == [37, 12]

    def test_move_up_by_value_first_element_is_noop(self):
        items = [12, 37]
        move_up_by_value(items, 12)
        assert items == [12, 37]

    def test_move_up_by_value_uses_first_occurrence(self):
        items = ["a", "b", "c", "b"]
        move_up_by_value(items, "b")
        assert items == ["b", "a", "c", "b"]

    def test_move_up_by_value_missing(self):
        with pytest.raises(ValueNotFoundError) as exc_info:
            move_up_by_value([1, 2], 5)
        assert exc_info.value.value == 5

    def test_move_up_by_index(self):
        items = ["a", "b", "c"]
        move_up_by_index(items, 2)
        assert items == ["a", "c", "b"]

    def test_move_up_by_index_zero_is_noop(self):
        items = ["a", "b"]
        move_up_by_index(items, 0)
        assert items == ["a", "b"]

    def test_move_up_by_index_zero_on_empty_list_is_noop(self):
        items = []
        move_up_by_index(items, 0)
        assert items == []

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_move_up_by_index_out_of_range(self, index):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            move_up_by_index(["a", "b", "c"], index)
        assert exc_info.value.index == index

    def test_none_list(self):
        with pytest.raises(MissingCollectionError):
            move_up_by_index(None, 1)
        with pytest.raises(MissingCollectionError):
            move_up_by_value(None, 1)


class TestMoveDown:
    """Test moving elements towards the end."""

    def test_move_down_by_value(self):
        items = [12, 37, 50]
        move_down_by_value(items, 12)
        assert items == [37, 12, 50]

    def test_move_down_by_value_last_element_is_noop(self):
        items = [12, 37]
        move_down_by_value(items, 37)
        assert items == [12, 37]

    def test_move_down_by_value_missing(self):
        with pytest.raises(ValueNotFoundError):
            move_down_by_value([1, 2], 3)

    def test_move_down_by_index(self):
        items = ["a", "b", "c"]
        move_down_by_index(items, 0)
        assert items == ["b", "a", "c"]

    def test_move_down_by_index_last_is_noop(self):
        items = ["a", "b", "c"]
        move_down_by_index(items, 2)
        assert items == ["a", "b", "c"]

    def test_move_down_by_index_on_empty_list(self):
        with pytest.raises(IndexOutOfRangeError):
            move_down_by_index([], 0)

    @pytest.mark.parametrize("index", [-1, 3])
    def test_move_down_by_index_out_of_range(self, index):
        with pytest.raises(IndexOutOfRangeError):
            move_down_by_index(["a", "b", "c"], index)

    def test_none_list(self):
        with pytest.raises(MissingCollectionError):
            move_down_by_index(None, 0)
        with pytest.raises(MissingCollectionError):
            move_down_by_value(None, 0)

    @pytest.mark.parametrize("index", [1, 2, 3])
    def test_move_up_then_down_restores_order(self, index):
        """Moving up and then back down returns every element to its place."""
        original = ["a", "b", "c", "d"]
        items = list(original)
        move_up_by_index(items, index)
        move_down_by_index(items, index - 1)
        assert items == original


class TestSwap:
    """Test swapping elements."""

    def test_swap_by_index(self):
        items = [1, 2, 4, 17]
        swap_by_index(items, 1, 2)
        assert items == [1, 4, 2, 17]

    def test_swap_by_index_same_index_is_noop(self):
        items = [1, 2, 3]
        swap_by_index(items, 1, 1)
        assert items == [1, 2, 3]

    def test_swap_by_index_empty_list(self):
        with pytest.raises(InvalidOperationError):
            swap_by_index([], 0, 0)

    def test_swap_by_index_reports_bad_from_index(self):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            swap_by_index([1, 2], 5, 0)
        assert exc_info.value.argument_name == "from_index"

    def test_swap_by_index_reports_bad_to_index(self):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            swap_by_index([1, 2], 0, -1)
        assert exc_info.value.argument_name == "to_index"

    def test_swap_by_value(self):
        items = ["x", "y", "z"]
        swap_by_value(items, "x", "z")
        assert items == ["z", "y", "x"]

    def test_swap_by_value_same_value_is_noop(self):
        items = ["x", "y", "x"]
        swap_by_value(items, "x", "x")
        assert items == ["x", "y", "x"]

    def test_swap_by_value_missing_value(self):
        with pytest.raises(ValueNotFoundError) as exc_info:
            swap_by_value(["x", "y"], "x", "q")
        assert exc_info.value.value == "q"

    def test_swap_by_value_empty_list(self):
        with pytest.raises(InvalidOperationError):
            swap_by_value([], 1, 2)

    def test_error_kinds_are_distinct(self):
        """Missing list, bad index and missing value are separate errors."""
        assert not issubclass(MissingCollectionError, IndexOutOfRangeError)
        assert not issubclass(IndexOutOfRangeError, ValueNotFoundError)
        assert not issubclass(ValueNotFoundError, MissingCollectionError)

    def test_none_list(self):
        with pytest.raises(MissingCollectionError):
            swap_by_index(None, 0, 1)
        with pytest.raises(MissingCollectionError):
            swap_by_value(None, 0, 1)


class TestRemoveMatching:
    """Test remove_matching."""

    def test_removes_all_matches(self):
        items = [1, 2, 3, 4, 5, 6]
        remove_matching(items, lambda x: x % 2 == 0)
        assert items == [1, 3, 5]

    def test_removes_nothing(self):
        items = [1, 3]
        remove_matching(items, lambda x: x > 10)
        assert items == [1, 3]

    def test_empty_list(self):
        items = []
        remove_matching(items, lambda x: True)
        assert items == []

    def test_none_predicate(self):
        with pytest.raises(InvalidArgumentError):
            remove_matching([1], None)

    def test_none_list(self):
        with pytest.raises(MissingCollectionError):
            remove_matching(None, lambda x: True)
