"""In-place reordering helpers for mutable sequences.

Every function mutates the sequence it is given and never changes its length.
A ``None`` sequence is reported as :class:`MissingCollectionError` before any
other check runs, so callers can always tell a missing list apart from a bad
index (:class:`IndexOutOfRangeError`) or a missing value
(:class:`ValueNotFoundError`).
"""

from typing import Any, Callable, MutableSequence, TypeVar

from extkit.exceptions import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidOperationError,
    MissingCollectionError,
    ValueNotFoundError,
)

T = TypeVar("T")

EMPTY_LIST_MESSAGE = "Unable to swap elements in an empty list."


def _require_list(items: Any) -> None:
    if items is None:
        raise MissingCollectionError("items")


def _find(items: MutableSequence[T], value: T) -> int:
    for index, element in enumerate(items):
        if element == value:
            return index
    return -1


def _swap(items: MutableSequence[T], from_index: int, to_index: int) -> None:
    temp = items[to_index]
    items[to_index] = items[from_index]
    items[from_index] = temp


def last_element_index(items: MutableSequence[T]) -> int:
    """Return the last valid index of ``items``, or -1 when it is empty.

    Raises:
        MissingCollectionError: If ``items`` is None
    """
    _require_list(items)
    return len(items) - 1


def move_up_by_index(items: MutableSequence[T], index: int) -> None:
    """Move the element at ``index`` one position towards the front.

    Moving the first element is a no-op.

    Raises:
        MissingCollectionError: If ``items`` is None
        IndexOutOfRangeError: If ``index`` is negative or past the last element
    """
    _require_list(items)

    last = last_element_index(items)
    if index < 0:
        raise IndexOutOfRangeError("index", index, last)

    if index == 0:
        return

    if index > last:
        raise IndexOutOfRangeError("index", index, last)

    _swap(items, index, index - 1)


def move_up_by_value(items: MutableSequence[T], value: T) -> None:
    """Move the first element equal to ``value`` one position towards the front.

    Raises:
        MissingCollectionError: If ``items`` is None
        ValueNotFoundError: If no element equals ``value``
    """
    _require_list(items)

    index = _find(items, value)
    if index < 0:
        raise ValueNotFoundError(value)

    if index == 0:
        return

    _swap(items, index, index - 1)


def move_down_by_index(items: MutableSequence[T], index: int) -> None:
    """Move the element at ``index`` one position towards the end.

    Moving the last element is a no-op.

    Raises:
        MissingCollectionError: If ``items`` is None
        IndexOutOfRangeError: If ``index`` is negative or past the last element
    """
    _require_list(items)

    last = last_element_index(items)
    if index < 0:
        raise IndexOutOfRangeError("index", index, last)

    if index == last:
        return

    if index > last:
        raise IndexOutOfRangeError("index", index, last)

    _swap(items, index, index + 1)


def move_down_by_value(items: MutableSequence[T], value: T) -> None:
    """Move the first element equal to ``value`` one position towards the end.

    Raises:
        MissingCollectionError: If ``items`` is None
        ValueNotFoundError: If no element equals ``value``
    """
    _require_list(items)

    index = _find(items, value)
    if index < 0:
        raise ValueNotFoundError(value)

    if index == last_element_index(items):
        return

    _swap(items, index, index + 1)


def swap_by_index(items: MutableSequence[T], from_index: int, to_index: int) -> None:
    """Exchange the elements at ``from_index`` and ``to_index``.

    Raises:
        MissingCollectionError: If ``items`` is None
        InvalidOperationError: If ``items`` is empty
        IndexOutOfRangeError: If either index is outside the list. The error's
            ``argument_name`` says which one.
    """
    _require_list(items)

    if not items:
        raise InvalidOperationError(EMPTY_LIST_MESSAGE)

    last = last_element_index(items)
    if from_index < 0 or from_index > last:
        raise IndexOutOfRangeError("from_index", from_index, last)

    if to_index < 0 or to_index > last:
        raise IndexOutOfRangeError("to_index", to_index, last)

    _swap(items, from_index, to_index)


def swap_by_value(items: MutableSequence[T], from_value: T, to_value: T) -> None:
    """Exchange the first occurrences of ``from_value`` and ``to_value``.

    Raises:
        MissingCollectionError: If ``items`` is None
        InvalidOperationError: If ``items`` is empty
        ValueNotFoundError: If either value is absent. The error's ``value``
            is the one that was not found.
    """
    _require_list(items)

    if not items:
        raise InvalidOperationError(EMPTY_LIST_MESSAGE)

    from_index = -1
    to_index = -1

    for index, element in enumerate(items):
        if from_index < 0 and element == from_value:
            from_index = index
        if to_index < 0 and element == to_value:
            to_index = index
        if from_index >= 0 and to_index >= 0:
            break

    if from_index < 0:
        raise ValueNotFoundError(from_value)
    if to_index < 0:
        raise ValueNotFoundError(to_value)

    if from_index == to_index:
        return

    _swap(items, from_index, to_index)


def remove_matching(items: MutableSequence[T], predicate: Callable[[T], bool]) -> None:
    """Remove every element for which ``predicate`` returns True.

    Raises:
        MissingCollectionError: If ``items`` is None
        InvalidArgumentError: If ``predicate`` is None
    """
    _require_list(items)

    if predicate is None:
        raise InvalidArgumentError("predicate")

    if not items:
        return

    # Walk backwards so deleting doesn't shift unvisited positions
    for index in range(len(items) - 1, -1, -1):
        if predicate(items[index]):
            del items[index]
