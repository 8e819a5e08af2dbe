"""Helpers for arbitrary iterables: emptiness checks, searching, set
operations with predicate equality, and chunking."""

import itertools
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from extkit.collections.comparers import LambdaComparer
from extkit.exceptions import InvalidArgumentError, MissingCollectionError

T = TypeVar("T")


def _require_sequence(sequence: Any, name: str = "sequence") -> None:
    if sequence is None:
        raise MissingCollectionError(name)


def _require_callable(value: Any, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(name)


def is_empty(sequence: Iterable[T]) -> bool:
    """Return True if ``sequence`` yields no elements.

    Sized collections are checked with ``len``; other iterables have at most
    one element consumed.

    Raises:
        MissingCollectionError: If ``sequence`` is None
    """
    _require_sequence(sequence)

    if hasattr(sequence, "__len__"):
        return len(sequence) == 0

    for _ in sequence:
        return False
    return True


def is_null_or_empty(sequence: Optional[Iterable[T]]) -> bool:
    return sequence is None or is_empty(sequence)


def as_not_null(sequence: Optional[Iterable[T]]) -> Iterable[T]:
    """Return ``sequence`` or an empty tuple when it is None."""
    return () if sequence is None else sequence


def for_each(sequence: Iterable[T], action: Callable[[T], Any]) -> None:
    _require_sequence(sequence)
    _require_callable(action, "action")

    for element in sequence:
        action(element)


def for_each_indexed(sequence: Iterable[T], action: Callable[[T, int], Any]) -> None:
    """Call ``action(element, index)`` for every element in order."""
    _require_sequence(sequence)
    _require_callable(action, "action")

    for index, element in enumerate(sequence):
        action(element, index)


def index_of(sequence: Iterable[T], item: T) -> int:
    """Return the position of the first element equal to ``item``, or -1."""
    _require_sequence(sequence)

    for index, element in enumerate(sequence):
        if element == item:
            return index
    return -1


def index_where(sequence: Iterable[T], predicate: Callable[[T], bool]) -> int:
    """Return the position of the first element matching ``predicate``, or -1."""
    _require_sequence(sequence)
    _require_callable(predicate, "predicate")

    for index, element in enumerate(sequence):
        if predicate(element):
            return index
    return -1


def contains_where(sequence: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    _require_sequence(sequence)
    _require_callable(predicate, "predicate")

    return any(predicate(element) for element in sequence)


def distinct_by(sequence: Iterable[T], comparer: Callable[[T, T], bool]) -> List[T]:
    """Return the elements of ``sequence`` without predicate-equal repeats.

    The first occurrence of each group of equal elements is kept.
    """
    _require_sequence(sequence)
    _require_callable(comparer, "comparer")

    return list(LambdaComparer(comparer).unique(sequence))


def union_by(
    first: Iterable[T], second: Iterable[T], comparer: Callable[[T, T], bool]
) -> List[T]:
    """Return the distinct elements of ``first`` followed by new ones of ``second``."""
    _require_sequence(first, "first")
    _require_sequence(second, "second")
    _require_callable(comparer, "comparer")

    return list(LambdaComparer(comparer).unique(itertools.chain(first, second)))


def except_by(
    first: Iterable[T], second: Iterable[T], comparer: Callable[[T, T], bool]
) -> List[T]:
    """Return the distinct elements of ``first`` that have no equal in ``second``."""
    _require_sequence(first, "first")
    _require_sequence(second, "second")
    _require_callable(comparer, "comparer")

    lambda_comparer = LambdaComparer(comparer)
    excluded = list(second)
    return [
        element
        for element in lambda_comparer.unique(first)
        if not lambda_comparer.contains(excluded, element)
    ]


def intersect_by(
    first: Iterable[T], second: Iterable[T], comparer: Callable[[T, T], bool]
) -> List[T]:
    """Return the distinct elements of ``first`` that have an equal in ``second``."""
    _require_sequence(first, "first")
    _require_sequence(second, "second")
    _require_callable(comparer, "comparer")

    lambda_comparer = LambdaComparer(comparer)
    included = list(second)
    return [
        element
        for element in lambda_comparer.unique(first)
        if lambda_comparer.contains(included, element)
    ]


def split(sequence: Iterable[T], size: int) -> List[List[T]]:
    """Partition ``sequence`` into consecutive chunks of at most ``size`` elements.

    The sequence is consumed once, front to back. The element at position
    ``i`` lands in chunk ``i // size``, so every chunk except possibly the
    last holds exactly ``size`` elements.

    Args:
        sequence: Any iterable, including one-shot iterators
        size: Maximum chunk length, must be positive

    Returns:
        List of chunks; an empty list for an empty sequence

    Raises:
        MissingCollectionError: If ``sequence`` is None
        InvalidArgumentError: If ``size`` is zero or negative
    """
    _require_sequence(sequence)

    if size <= 0:
        raise InvalidArgumentError("size", f"Chunk size must be positive, got {size}")

    chunks: List[List[T]] = []
    for position, element in enumerate(sequence):
        if position % size == 0:
            chunks.append([])
        chunks[-1].append(element)
    return chunks
