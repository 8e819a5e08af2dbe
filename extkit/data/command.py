"""Command objects over DB-API 2.0 connections.

A :class:`DbCommand` collects a statement (or stored procedure name) and its
parameters, then runs them on a fresh cursor of the connection it was built
for. Parameter names are kept with a leading ``@`` and bound by their bare
name, so the statement text uses the driver's own named placeholder syntax
(``$name`` for DuckDB, ``%(name)s`` for psycopg2).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from extkit.data.identifiers import validate_qualified_name
from extkit.data.reader import DataReader
from extkit.exceptions import InvalidOperationError, MissingValueError
from extkit.logging import get_logger

logger = get_logger(__name__)

PARAMETER_PREFIX = "@"


class CommandType(Enum):
    TEXT = "text"
    STORED_PROCEDURE = "stored_procedure"


class ParameterDirection(Enum):
    INPUT = "input"
    OUTPUT = "output"
    INPUT_OUTPUT = "input_output"
    RETURN_VALUE = "return_value"


class DbType(Enum):
    """Logical SQL type of a parameter."""

    BOOLEAN = "boolean"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    STRING = "string"
    DATE = "date"
    DATETIME = "datetime"
    GUID = "guid"
    BINARY = "binary"
    OBJECT = "object"


@dataclass
class DbParameter:
    """A named command parameter."""

    name: str = ""
    db_type: DbType = DbType.OBJECT
    value: Any = None
    direction: ParameterDirection = ParameterDirection.INPUT
    size: Optional[int] = None

    @property
    def bind_name(self) -> str:
        """Name without the ``@`` prefix, as drivers expect it."""
        if self.name.startswith(PARAMETER_PREFIX):
            return self.name[len(PARAMETER_PREFIX) :]
        return self.name

    @property
    def is_input(self) -> bool:
        return self.direction in (ParameterDirection.INPUT, ParameterDirection.INPUT_OUTPUT)


class DbCommand:
    """A statement or stored procedure call bound to a DB-API connection."""

    def __init__(
        self,
        connection: Any,
        command_text: str = "",
        command_type: CommandType = CommandType.TEXT,
    ):
        if connection is None:
            raise MissingValueError("connection")

        self.connection = connection
        self.command_text = command_text
        self.command_type = command_type
        self.parameters: List[DbParameter] = []

    def create_parameter(self) -> DbParameter:
        """Return a new, unattached parameter."""
        return DbParameter()

    def _named_values(self) -> Dict[str, Any]:
        return {p.bind_name: p.value for p in self.parameters if p.is_input}

    def _positional_values(self) -> List[Any]:
        return [p.value for p in self.parameters if p.is_input]

    def _execute(self, cursor: Any) -> None:
        if not self.command_text:
            raise InvalidOperationError("The command text has not been set.")

        if self.command_type is CommandType.STORED_PROCEDURE:
            callproc = getattr(cursor, "callproc", None)
            if callproc is None:
                raise InvalidOperationError(
                    f"{type(cursor).__name__} does not support stored procedures."
                )
            values = self._positional_values()
            logger.debug(f"Calling procedure {self.command_text} with {len(values)} parameters")
            callproc(self.command_text, values)
            return

        values = self._named_values()
        logger.debug(f"Executing: {self.command_text} with parameters {sorted(values)}")
        if values:
            cursor.execute(self.command_text, values)
        else:
            cursor.execute(self.command_text)

    def execute_reader(self) -> DataReader:
        """Run the command and return a reader over its result set.

        The cursor is closed when the reader is closed.
        """
        cursor = self.connection.cursor()
        try:
            self._execute(cursor)
            return DataReader.from_cursor(cursor)
        except Exception:
            cursor.close()
            raise

    def execute_non_query(self) -> int:
        """Run the command and return the affected row count (-1 if unknown)."""
        cursor = self.connection.cursor()
        try:
            self._execute(cursor)
            rowcount = getattr(cursor, "rowcount", -1)
            return -1 if rowcount is None else rowcount
        finally:
            cursor.close()

    def execute_scalar(self) -> Any:
        """Run the command and return the first column of the first row."""
        with self.execute_reader() as reader:
            if not reader.read() or reader.field_count == 0:
                return None
            return None if reader.is_db_null(0) else reader.get_value(0)


def add_parameter(
    command: DbCommand,
    name: str,
    db_type: DbType,
    value: Any,
    direction: ParameterDirection = ParameterDirection.INPUT,
    size: Optional[int] = None,
) -> DbParameter:
    """Create a parameter, attach it to ``command`` and return it.

    Args:
        command: Command receiving the parameter
        name: Parameter name; ``@`` is prepended when missing
        db_type: Logical SQL type of the value
        value: Parameter value
        direction: Parameter direction
        size: Optional size, for sized types such as strings

    Raises:
        MissingValueError: If ``command`` or ``name`` is None
    """
    if command is None:
        raise MissingValueError("command")
    if name is None:
        raise MissingValueError("name")

    if not name.startswith(PARAMETER_PREFIX):
        name = f"{PARAMETER_PREFIX}{name}"

    parameter = command.create_parameter()
    parameter.name = name
    parameter.db_type = db_type
    parameter.value = value
    parameter.direction = direction

    if size is not None:
        parameter.size = size

    command.parameters.append(parameter)
    return parameter


def create_command(connection: Any, command_text: str) -> DbCommand:
    return DbCommand(connection, command_text, CommandType.TEXT)


def create_stored_procedure(connection: Any, procedure_name: str) -> DbCommand:
    """Create a command that calls ``procedure_name``.

    Raises:
        MissingValueError: If ``connection`` is None
        InvalidArgumentError: If the procedure name is not a valid identifier
    """
    validate_qualified_name(procedure_name)
    return DbCommand(connection, procedure_name, CommandType.STORED_PROCEDURE)
