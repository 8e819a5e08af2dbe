"""Forward-only row reader with typed, null-aware column access.

A :class:`DataReader` walks the rows of a DB-API cursor (or a pandas
DataFrame) one at a time. The module-level ``get_*`` functions read a column
of the current row by name, raising :class:`DbColumnNotFoundError` for an
unknown column and :class:`DbColumnRequiredValueError` for a null value. The
``try_get_*`` variants return a default for nulls instead.
"""

import datetime as dt
import uuid
from decimal import Decimal
from typing import Any, Callable, Iterable, Iterator, List, Optional, Sequence, TypeVar

import pandas as pd

from extkit.exceptions import (
    DbColumnNotFoundError,
    DbColumnRequiredValueError,
    InvalidOperationError,
    MissingValueError,
)
from extkit.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

COLUMN_ORDINAL_NOT_FOUND = -1


class DataReader:
    """Read rows one at a time and look up columns by name."""

    def __init__(
        self,
        columns: Sequence[str],
        rows: Iterable[Sequence[Any]],
        cursor: Any = None,
    ):
        """Initialize a DataReader.

        Args:
        ----
            columns: Column names, in row order
            rows: Iterable producing one sequence of values per row
            cursor: Optional DB-API cursor closed together with the reader

        """
        self._columns: List[str] = list(columns)
        self._rows: Iterator[Sequence[Any]] = iter(rows)
        self._cursor = cursor
        self._row: Optional[Sequence[Any]] = None
        self._closed = False

    @classmethod
    def from_cursor(cls, cursor: Any) -> "DataReader":
        """Wrap a DB-API cursor that has just executed a query.

        Raises
        ------
            MissingValueError: If ``cursor`` is None
            InvalidOperationError: If the last statement produced no result set

        """
        if cursor is None:
            raise MissingValueError("cursor")

        if cursor.description is None:
            raise InvalidOperationError("The executed statement returned no result set.")

        columns = [column[0] for column in cursor.description]
        return cls(columns, iter(cursor.fetchone, None), cursor=cursor)

    @classmethod
    def from_dataframe(cls, frame: pd.DataFrame) -> "DataReader":
        """Read the rows of a pandas DataFrame."""
        if frame is None:
            raise MissingValueError("frame")

        columns = [str(column) for column in frame.columns]
        return cls(columns, frame.itertuples(index=False, name=None))

    @property
    def column_names(self) -> List[str]:
        return list(self._columns)

    @property
    def field_count(self) -> int:
        return len(self._columns)

    @property
    def is_closed(self) -> bool:
        return self._closed

    def read(self) -> bool:
        """Advance to the next row.

        Returns
        -------
            True if a row is available, False once the rows are exhausted

        """
        if self._closed:
            raise InvalidOperationError("The reader is closed.")

        self._row = next(self._rows, None)
        return self._row is not None

    def get_ordinal(self, column_name: str) -> int:
        """Return the position of ``column_name``, or -1 if there is none.

        An exact match wins; otherwise the first case-insensitive match is used.
        """
        try:
            return self._columns.index(column_name)
        except ValueError:
            pass

        wanted = column_name.casefold()
        for ordinal, name in enumerate(self._columns):
            if name.casefold() == wanted:
                logger.debug(f"Matched column '{column_name}' to '{name}' ignoring case")
                return ordinal
        return COLUMN_ORDINAL_NOT_FOUND

    def get_value(self, ordinal: int) -> Any:
        if self._row is None:
            raise InvalidOperationError("No current row. Call read() first.")
        return self._row[ordinal]

    def is_db_null(self, ordinal: int) -> bool:
        """Return True if the value is None, NaN or NaT."""
        value = self.get_value(ordinal)
        if value is None:
            return True
        return bool(pd.api.types.is_scalar(value) and pd.isna(value))

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._row = None
        if self._cursor is not None and hasattr(self._cursor, "close"):
            self._cursor.close()

    def __enter__(self) -> "DataReader":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def _to_bool(value: Any) -> bool:
    if pd.api.types.is_bool(value) or pd.api.types.is_integer(value):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1"):
            return True
        if lowered in ("false", "0"):
            return False
    raise TypeError(f"Cannot read {type(value).__name__} value {value!r} as bool")


def _to_int(value: Any) -> int:
    if pd.api.types.is_integer(value) or pd.api.types.is_bool(value):
        return int(value)
    if isinstance(value, (float, Decimal)) and value == int(value):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise TypeError(f"Cannot read {type(value).__name__} value {value!r} as int")


def _to_float(value: Any) -> float:
    return float(value)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() keeps the shortest repr instead of the binary expansion
        return Decimal(str(value))
    return Decimal(value)


def _to_datetime(value: Any) -> dt.datetime:
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, dt.datetime):
        return value
    if isinstance(value, dt.date):
        return dt.datetime.combine(value, dt.time())
    if isinstance(value, str):
        return dt.datetime.fromisoformat(value)
    raise TypeError(f"Cannot read {type(value).__name__} value {value!r} as datetime")


def _to_uuid(value: Any) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    if isinstance(value, (bytes, bytearray)):
        return uuid.UUID(bytes=bytes(value))
    return uuid.UUID(str(value))


def _ordinal(reader: DataReader, column_name: str) -> int:
    if reader is None:
        raise MissingValueError("reader")

    ordinal = reader.get_ordinal(column_name)
    if ordinal == COLUMN_ORDINAL_NOT_FOUND:
        raise DbColumnNotFoundError(column_name)
    return ordinal


def _get_required(
    reader: DataReader, column_name: str, data_type: str, convert: Callable[[Any], T]
) -> T:
    ordinal = _ordinal(reader, column_name)
    if reader.is_db_null(ordinal):
        raise DbColumnRequiredValueError(column_name, data_type)
    return convert(reader.get_value(ordinal))


def _get_optional(
    reader: DataReader,
    column_name: str,
    default: Optional[T],
    convert: Callable[[Any], T],
) -> Optional[T]:
    ordinal = _ordinal(reader, column_name)
    if reader.is_db_null(ordinal):
        return default
    return convert(reader.get_value(ordinal))


def get_bool(reader: DataReader, column_name: str) -> bool:
    return _get_required(reader, column_name, "bool", _to_bool)


def try_get_bool(
    reader: DataReader, column_name: str, default: Optional[bool] = None
) -> Optional[bool]:
    return _get_optional(reader, column_name, default, _to_bool)


def get_int(reader: DataReader, column_name: str) -> int:
    return _get_required(reader, column_name, "int", _to_int)


def try_get_int(
    reader: DataReader, column_name: str, default: Optional[int] = None
) -> Optional[int]:
    return _get_optional(reader, column_name, default, _to_int)


def get_float(reader: DataReader, column_name: str) -> float:
    return _get_required(reader, column_name, "float", _to_float)


def try_get_float(
    reader: DataReader, column_name: str, default: Optional[float] = None
) -> Optional[float]:
    return _get_optional(reader, column_name, default, _to_float)


def get_decimal(reader: DataReader, column_name: str) -> Decimal:
    return _get_required(reader, column_name, "Decimal", _to_decimal)


def try_get_decimal(
    reader: DataReader, column_name: str, default: Optional[Decimal] = None
) -> Optional[Decimal]:
    return _get_optional(reader, column_name, default, _to_decimal)


def get_datetime(reader: DataReader, column_name: str) -> dt.datetime:
    return _get_required(reader, column_name, "datetime", _to_datetime)


def try_get_datetime(
    reader: DataReader, column_name: str, default: Optional[dt.datetime] = None
) -> Optional[dt.datetime]:
    return _get_optional(reader, column_name, default, _to_datetime)


def get_uuid(reader: DataReader, column_name: str) -> uuid.UUID:
    return _get_required(reader, column_name, "UUID", _to_uuid)


def try_get_uuid(
    reader: DataReader, column_name: str, default: Optional[uuid.UUID] = None
) -> Optional[uuid.UUID]:
    return _get_optional(reader, column_name, default, _to_uuid)


def get_string(reader: DataReader, column_name: str, required: bool = False) -> Optional[str]:
    """Read a text column.

    Args:
        reader: Reader positioned on a row
        column_name: Column to read
        required: Raise instead of returning None when the value is null

    Raises:
        DbColumnNotFoundError: If the column does not exist
        DbColumnRequiredValueError: If ``required`` and the value is null
    """
    if required:
        return _get_required(reader, column_name, "str", str)
    return _get_optional(reader, column_name, None, str)
