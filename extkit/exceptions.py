"""Exception hierarchy for extkit helpers.

Every error derives from :class:`ExtkitError` and from the closest built-in
exception, so callers catching ``ValueError`` or ``IndexError`` keep working.
"""

from typing import Any, Optional


class ExtkitError(Exception):
    """Base exception for all extkit errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingValueError(ExtkitError, TypeError):
    """Raised when a required argument is None."""

    def __init__(self, argument_name: str, message: Optional[str] = None):
        self.argument_name = argument_name
        super().__init__(message or f"Argument '{argument_name}' must not be None")


class MissingCollectionError(MissingValueError):
    """Raised when the collection being operated on is None."""

    def __init__(self, argument_name: str):
        super().__init__(
            argument_name, f"Collection argument '{argument_name}' must not be None"
        )


class InvalidArgumentError(ExtkitError, ValueError):
    """Raised for a missing callback or an out-of-range numeric argument."""

    def __init__(self, argument_name: str, message: Optional[str] = None):
        self.argument_name = argument_name
        super().__init__(message or f"Invalid value for argument '{argument_name}'")


class IndexOutOfRangeError(ExtkitError, IndexError):
    """Raised when an index falls outside the bounds of a sequence."""

    def __init__(self, argument_name: str, index: int, last_index: int):
        self.argument_name = argument_name
        self.index = index
        self.last_index = last_index
        super().__init__(
            f"Index {index} given for '{argument_name}' is outside the valid "
            f"range [0, {last_index}]"
        )


class InvalidOperationError(ExtkitError, RuntimeError):
    """Raised when an operation cannot run against the current state."""


class ValueNotFoundError(InvalidOperationError, LookupError):
    """Raised when a value-based lookup finds no matching element."""

    def __init__(self, value: Any, message: Optional[str] = None):
        self.value = value
        super().__init__(message or f"The item {value!r} is not part of this list.")


class DuplicateKeyError(InvalidOperationError, KeyError):
    """Raised when inserting a key that already exists in a mapping."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"An item with the same key has already been added: {key!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.message


class DataAccessError(ExtkitError):
    """Base exception for data reader and command errors."""


class DbColumnNotFoundError(DataAccessError, LookupError):
    """Raised when a column name does not exist in the result set."""

    def __init__(self, column_name: str):
        self.column_name = column_name
        super().__init__(
            f'The specified column: "{column_name}" does not exist in the '
            "returned result set."
        )


class DbColumnRequiredValueError(DataAccessError, ValueError):
    """Raised when a required column value is null."""

    def __init__(self, column_name: str, data_type: str):
        self.column_name = column_name
        self.data_type = data_type
        super().__init__(
            f"Unable to read a {data_type} value from column {column_name} "
            "because it's null."
        )
