"""DB-API command and reader helpers."""

from .command import (
    CommandType,
    DbCommand,
    DbParameter,
    DbType,
    ParameterDirection,
    add_parameter,
    create_command,
    create_stored_procedure,
)
from .reader import DataReader

__all__ = [
    "CommandType",
    "DbCommand",
    "DbParameter",
    "DbType",
    "ParameterDirection",
    "add_parameter",
    "create_command",
    "create_stored_procedure",
    "DataReader",
]
