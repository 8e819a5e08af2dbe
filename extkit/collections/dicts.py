"""Lookup and bulk-insert helpers for mutable mappings.

``add_range`` and ``add_range_by`` insert, they never overwrite: a key that is
already present raises :class:`DuplicateKeyError` and entries inserted before
the failure are kept.
"""

from typing import (
    Callable,
    Iterable,
    Mapping,
    MutableMapping,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from extkit.exceptions import (
    DuplicateKeyError,
    InvalidArgumentError,
    InvalidOperationError,
    MissingCollectionError,
)

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")

NULL_KEY_MESSAGE = "A mapping key must not be None."


def value_or_default(
    mapping: Mapping[K, V],
    key: K,
    default: Optional[V] = None,
    value_type: Optional[Callable[[], V]] = None,
) -> Optional[V]:
    """Return the value stored under ``key`` or a fallback.

    Args:
        mapping: Mapping to read from
        key: Key to look up
        default: Value returned when ``key`` is absent
        value_type: Optional factory for the zero value of the value type
            (``int``, ``str``, ``list``...), used when ``default`` is None

    Returns:
        The stored value, which may itself be None or falsy, or the fallback

    Raises:
        MissingCollectionError: If ``mapping`` is None
    """
    if mapping is None:
        raise MissingCollectionError("mapping")

    if key in mapping:
        return mapping[key]

    if default is None and value_type is not None:
        return value_type()
    return default


def _check_key(mapping: MutableMapping[K, V], key: K) -> None:
    if key is None:
        raise InvalidOperationError(NULL_KEY_MESSAGE)
    if key in mapping:
        raise DuplicateKeyError(key)


def _insert(mapping: MutableMapping[K, V], key: K, value: V) -> None:
    _check_key(mapping, key)
    mapping[key] = value


def add_range(
    mapping: MutableMapping[K, V],
    source: Union[Mapping[K, V], Iterable[Tuple[K, V]], None],
) -> None:
    """Insert every entry of ``source`` into ``mapping``.

    Args:
        mapping: Destination mapping
        source: Another mapping, or an iterable of ``(key, value)`` pairs.
            None is ignored.

    Raises:
        MissingCollectionError: If ``mapping`` is None
        InvalidOperationError: If a source key is None
        DuplicateKeyError: If a source key already exists in ``mapping``
    """
    if mapping is None:
        raise MissingCollectionError("mapping")

    if source is None:
        return

    pairs = source.items() if isinstance(source, Mapping) else source
    for key, value in pairs:
        _insert(mapping, key, value)


def add_range_by(
    mapping: MutableMapping[K, V],
    items: Iterable[T],
    key_selector: Callable[[T], K],
    value_selector: Callable[[T], V],
) -> None:
    """Insert one entry per element of ``items`` using the two selectors.

    Raises:
        MissingCollectionError: If ``mapping`` or ``items`` is None
        InvalidArgumentError: If either selector is None
        InvalidOperationError: If ``key_selector`` yields None
        DuplicateKeyError: If a selected key already exists in ``mapping``
    """
    if mapping is None:
        raise MissingCollectionError("mapping")

    if key_selector is None:
        raise InvalidArgumentError("key_selector")

    if value_selector is None:
        raise InvalidArgumentError("value_selector")

    if items is None:
        raise MissingCollectionError("items")

    for element in items:
        key = key_selector(element)
        # The value is only computed for a usable key
        _check_key(mapping, key)
        mapping[key] = value_selector(element)
