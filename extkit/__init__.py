"""extkit - helper functions for Python collections, primitives and DB-API access."""

__version__ = "0.1.0"
__package_name__ = "extkit"

from .exceptions import (
    DataAccessError,
    DbColumnNotFoundError,
    DbColumnRequiredValueError,
    DuplicateKeyError,
    ExtkitError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidOperationError,
    MissingCollectionError,
    MissingValueError,
    ValueNotFoundError,
)

__all__ = [
    "ExtkitError",
    "MissingValueError",
    "MissingCollectionError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "InvalidOperationError",
    "ValueNotFoundError",
    "DuplicateKeyError",
    "DataAccessError",
    "DbColumnNotFoundError",
    "DbColumnRequiredValueError",
]
