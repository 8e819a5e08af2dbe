"""String helpers: emptiness checks, enum parsing, whole-token trimming,
encodings, hashing and regex matching."""

import base64
import hashlib
import re
from enum import Enum
from typing import Optional, Type, TypeVar

from extkit.exceptions import InvalidArgumentError, MissingValueError

E = TypeVar("E", bound=Enum)

DEFAULT_TEXT_ENCODING = "utf-8"
# Characters outside ASCII hash as "?"
DEFAULT_HASH_ENCODING = "ascii"


def is_null_or_empty(text: Optional[str]) -> bool:
    return text is None or text == ""


def is_null_or_whitespace(text: Optional[str]) -> bool:
    return text is None or text.strip() == ""


def is_null_or_empty_or_whitespace(text: Optional[str]) -> bool:
    return is_null_or_empty(text) or is_null_or_whitespace(text)


def _require_enum_type(enum_type: Type[E]) -> None:
    if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
        raise InvalidArgumentError("enum_type", f"{enum_type!r} is not a valid enum.")


def _parse_enum(text: Optional[str], enum_type: Type[E]) -> Optional[E]:
    if is_null_or_whitespace(text):
        return None

    wanted = text.strip().casefold()
    for name, member in enum_type.__members__.items():
        if name.casefold() == wanted:
            return member

    # Numeric strings select a member by value
    try:
        return enum_type(int(wanted))
    except ValueError:
        return None


def to_enum(text: Optional[str], enum_type: Type[E]) -> E:
    """Parse ``text`` into a member of ``enum_type``, ignoring case.

    Raises:
        InvalidArgumentError: If ``enum_type`` is not an Enum or ``text``
            matches no member
    """
    _require_enum_type(enum_type)

    member = _parse_enum(text, enum_type)
    if member is None:
        raise InvalidArgumentError(
            "text",
            f"The specified string value {text} cannot be converted to an enum "
            f"value of type: {enum_type.__name__}",
        )
    return member


def to_enum_or_default(
    text: Optional[str], enum_type: Type[E], default: Optional[E] = None
) -> E:
    """Parse ``text`` into a member of ``enum_type`` or return a fallback.

    When ``default`` is omitted the enum's first member is the fallback.

    Raises:
        InvalidArgumentError: If ``enum_type`` is not an Enum, or a fallback
            is needed and the enum has no members
    """
    _require_enum_type(enum_type)

    member = _parse_enum(text, enum_type)
    if member is not None:
        return member
    if default is not None:
        return default

    first = next(iter(enum_type), None)
    if first is None:
        raise InvalidArgumentError("enum_type", f"{enum_type.__name__} has no members.")
    return first


def contains(text: str, value: Optional[str], ignore_case: bool = False) -> bool:
    """Return True if ``value`` occurs in ``text``.

    Raises:
        MissingValueError: If ``text`` is None
    """
    if text is None:
        raise MissingValueError("text")

    if value is None:
        return False

    if ignore_case:
        return value.casefold() in text.casefold()
    return value in text


def _flags(case_sensitive: bool) -> int:
    return 0 if case_sensitive else re.IGNORECASE


def remove(text: Optional[str], what: Optional[str], case_sensitive: bool = True) -> Optional[str]:
    """Remove the first occurrence of ``what`` from ``text``."""
    if is_null_or_empty(text) or is_null_or_empty(what):
        return text

    match = re.search(re.escape(what), text, _flags(case_sensitive))
    if match is None:
        return text

    return text[: match.start()] + text[match.end() :]


def trim_start(text: Optional[str], what: Optional[str], case_sensitive: bool = True) -> Optional[str]:
    """Remove one leading occurrence of ``what`` (matched as a whole)."""
    if is_null_or_empty(text) or is_null_or_empty(what):
        return text

    match = re.match(re.escape(what), text, _flags(case_sensitive))
    return text[match.end() :] if match else text


def trim_end(text: Optional[str], what: Optional[str], case_sensitive: bool = True) -> Optional[str]:
    """Remove one trailing occurrence of ``what`` (matched as a whole)."""
    if is_null_or_empty(text) or is_null_or_empty(what):
        return text

    match = re.search(re.escape(what) + r"\Z", text, _flags(case_sensitive))
    return text[: match.start()] if match else text


def trim(text: Optional[str], what: Optional[str], case_sensitive: bool = True) -> Optional[str]:
    """Remove one occurrence of ``what`` from both ends of ``text``.

    >>> trim("--value--", "--")
    'value'
    """
    return trim_end(trim_start(text, what, case_sensitive), what, case_sensitive)


def to_base64(text: Optional[str], encoding: Optional[str] = None) -> Optional[str]:
    if text is None:
        return None

    data = text.encode(encoding or DEFAULT_TEXT_ENCODING)
    return base64.b64encode(data).decode("ascii")


def from_base64(text: Optional[str], encoding: Optional[str] = None) -> Optional[str]:
    """Decode a base64 string. Malformed input raises ``binascii.Error``."""
    if text is None:
        return None

    data = base64.b64decode(text, validate=True)
    return data.decode(encoding or DEFAULT_TEXT_ENCODING)


def _hex_digest(algorithm: str, text: Optional[str]) -> Optional[str]:
    if is_null_or_empty(text):
        return None

    data = text.encode(DEFAULT_HASH_ENCODING, errors="replace")
    return hashlib.new(algorithm, data).hexdigest()


def to_sha1_hash(text: Optional[str]) -> Optional[str]:
    """Return the lowercase hex SHA-1 digest of ``text``, or None if empty."""
    return _hex_digest("sha1", text)


def to_md5_hash(text: Optional[str]) -> Optional[str]:
    """Return the lowercase hex MD5 digest of ``text``, or None if empty."""
    return _hex_digest("md5", text)


def to_hex(text: str) -> str:
    return text.encode("utf-8").hex()


def from_hex(text: str) -> str:
    """Decode a string produced by :func:`to_hex`.

    A trailing odd character is ignored.
    """
    even = text[: len(text) - len(text) % 2]
    return bytes.fromhex(even).decode("utf-8")


def to_bytes(text: Optional[str]) -> bytes:
    if is_null_or_empty(text):
        return b""
    return text.encode("ascii", errors="replace")


def is_regex_match(text: Optional[str], pattern: Optional[str]) -> bool:
    """Return True if ``pattern`` matches anywhere in ``text``."""
    if is_null_or_empty(text) or is_null_or_empty(pattern):
        return False

    return re.search(pattern, text) is not None
