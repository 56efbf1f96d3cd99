import sqlite3
from unittest.mock import MagicMock

import pytest

from urlshortener.dao.sqlite import ShortURLSQLiteDAO


@pytest.fixture
def dao():
    """Provide a DAO backed by a private in-memory SQLite database."""
    _dao = ShortURLSQLiteDAO(storage_path=':memory:')
    yield _dao
    _dao.close()


@pytest.fixture
def storage_file(tmp_path) -> str:
    """Provide a database file location inside a not-yet-existing directory."""
    return str(tmp_path / 'storage' / 'storage.db')


@pytest.fixture
def sqlite_connection():
    """Mock a SQLite connection which passes the healthcheck and schema initialization."""
    connection = MagicMock(spec=sqlite3.Connection)
    connection.execute.return_value.fetchone.return_value = (1,)
    return connection


@pytest.fixture
def broken_dao(sqlite_connection):
    """Create a DAO whose connection starts failing after initialization."""
    _dao = ShortURLSQLiteDAO(sqlite_connection=sqlite_connection)
    sqlite_connection.execute.side_effect = sqlite3.OperationalError('database is locked')
    return _dao


@pytest.fixture
def integrity_error():
    """Build IntegrityErrors carrying an extended result code, as the driver does."""

    def _integrity_error(message: str, error_code: int) -> sqlite3.IntegrityError:
        error = sqlite3.IntegrityError(message)
        error.sqlite_errorcode = error_code
        return error

    return _integrity_error
