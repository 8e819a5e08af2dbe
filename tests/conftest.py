"""Pytest configuration for extkit tests."""

import logging
import tempfile
from typing import Generator

import duckdb
import pytest

from extkit.config import reset_settings
from extkit.logging import DEFAULT_FORMAT, TECHNICAL_MODULES


@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    """Create a temporary directory for tests.

    Yields
    ------
        Path to the temporary directory

    """
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield tmp_dir


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path) -> Generator[None, None, None]:
    """Run every test with default settings.

    The working directory is moved to an empty folder so no project
    extkit.yaml or .env is picked up, and EXTKIT_* variables are cleared.
    """
    for name in ("EXTKIT_CONFIG", "EXTKIT_LOG_LEVEL", "EXTKIT_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def duckdb_connection() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """Return an in-memory DuckDB connection with a small ``users`` table.

    Yields
    ------
        Open DuckDB connection

    """
    connection = duckdb.connect(":memory:")
    connection.execute(
        """
        CREATE TABLE users (
            id INTEGER,
            name VARCHAR,
            active BOOLEAN,
            balance DECIMAL(10, 2),
            score DOUBLE,
            created_at TIMESTAMP,
            external_id UUID
        )
        """
    )
    connection.execute(
        """
        INSERT INTO users VALUES
            (1, 'Alice', true, 100.50, 4.5, TIMESTAMP '2024-01-02 03:04:05',
             '6f9619ff-8b86-d011-b42d-00c04fc964ff'),
            (2, NULL, NULL, NULL, NULL, NULL, NULL)
        """
    )
    try:
        yield connection
    finally:
        connection.close()


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Put the root and extkit loggers back the way they were."""
    names = ["", *TECHNICAL_MODULES]
    saved = {}
    for name in names:
        logger = logging.getLogger(name)
        saved[name] = (logger.level, logger.handlers[:], logger.propagate)

    yield

    for name, (level, handlers, propagate) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers[:] = handlers
        logger.propagate = propagate
    formatter = logging.Formatter(DEFAULT_FORMAT)
    for name in logging.root.manager.loggerDict:
        if name.startswith("extkit"):
            for handler in logging.getLogger(name).handlers:
                handler.setFormatter(formatter)
