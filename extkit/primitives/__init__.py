"""Helpers for strings, bytes, enums, exceptions and plain objects."""

from .bytes import get_sha1_hash, gzip_compress, gzip_decompress, to_stream
from .enums import describe, get_description
from .errors import unwrap
from .objects import clone, coalesce, is_null, to_iterable, try_clone

__all__ = [
    "get_sha1_hash",
    "gzip_compress",
    "gzip_decompress",
    "to_stream",
    "describe",
    "get_description",
    "unwrap",
    "clone",
    "coalesce",
    "is_null",
    "to_iterable",
    "try_clone",
]
