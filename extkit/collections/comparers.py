"""Equality comparison driven by a two-argument predicate."""

from typing import Callable, Generic, Iterable, Iterator, TypeVar

from extkit.exceptions import InvalidArgumentError

T = TypeVar("T")


class LambdaComparer(Generic[T]):
    """Compare values with a caller-supplied equality predicate.

    The predicate gives no way to derive a hash, so :meth:`hash` is constant
    and every lookup falls back to pairwise comparison.
    """

    __slots__ = ("_predicate",)

    def __init__(self, predicate: Callable[[T, T], bool]):
        if predicate is None:
            raise InvalidArgumentError("predicate")
        self._predicate = predicate

    def equals(self, first: T, second: T) -> bool:
        return bool(self._predicate(first, second))

    def hash(self, value: T) -> int:
        # Values the predicate calls equal must hash alike
        return 0

    def contains(self, items: Iterable[T], value: T) -> bool:
        """Return True if any element of ``items`` equals ``value``."""
        return any(self.equals(item, value) for item in items)

    def unique(self, items: Iterable[T]) -> Iterator[T]:
        """Yield elements not equal to any previously yielded element."""
        seen = []
        for item in items:
            if not self.contains(seen, item):
                seen.append(item)
                yield item
