"""Generic object helpers: null checks, coalescing and JSON-based cloning."""

import dataclasses
import json
from typing import Any, Iterator, Optional, Tuple, TypeVar

from extkit.exceptions import MissingValueError
from extkit.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def is_null(value: Any) -> bool:
    return value is None


def coalesce(value: Optional[T], fallback: T) -> T:
    """Return ``value`` unless it is None, otherwise ``fallback``."""
    return fallback if value is None else value


def to_iterable(value: Optional[T]) -> Iterator[T]:
    """Yield ``value`` once, or nothing when it is None."""
    if value is None:
        return
    yield value


def _encode(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _restore(template: Any, data: Any) -> Any:
    """Rebuild ``data`` with the container and dataclass types of ``template``."""
    if dataclasses.is_dataclass(template) and not isinstance(template, type):
        values = {
            f.name: _restore(getattr(template, f.name), data[f.name])
            for f in dataclasses.fields(template)
        }
        init_values = {
            f.name: values[f.name] for f in dataclasses.fields(template) if f.init
        }
        instance = type(template)(**init_values)
        for f in dataclasses.fields(template):
            if not f.init:
                object.__setattr__(instance, f.name, values[f.name])
        return instance

    if isinstance(template, dict):
        # JSON turns every key into a string; keep the original keys
        if len(data) != len(template):
            raise ValueError("Dictionary keys collide once converted to JSON strings")
        return {
            key: _restore(original, restored)
            for (key, original), restored in zip(template.items(), data.values())
        }

    if isinstance(template, (list, tuple)):
        items = [_restore(original, restored) for original, restored in zip(template, data)]
        return type(template)(items) if isinstance(template, tuple) else items

    return data


def clone(value: T) -> T:
    """Deep-copy ``value`` through a JSON round trip.

    JSON-native values, dataclass instances and any nesting of lists, tuples
    and dicts of them are supported.

    Raises:
        MissingValueError: If ``value`` is None
        TypeError: If ``value`` contains something JSON cannot encode
        ValueError: If a value cannot be encoded (e.g. circular references or
            dict keys such as 1 and "1" that collide as JSON strings)
    """
    if value is None:
        raise MissingValueError("value")

    payload = json.dumps(value, default=_encode)
    return _restore(value, json.loads(payload))


def try_clone(value: T) -> Tuple[bool, Optional[T]]:
    """Like :func:`clone` but report failure instead of raising.

    Returns:
        ``(True, copy)`` on success, ``(False, None)`` if serialization failed

    Raises:
        MissingValueError: If ``value`` is None
    """
    if value is None:
        raise MissingValueError("value")

    try:
        return True, clone(value)
    except (TypeError, ValueError) as e:
        logger.debug(f"Unable to clone {type(value).__name__}: {e}")
        return False, None
