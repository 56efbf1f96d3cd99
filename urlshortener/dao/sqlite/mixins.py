"""SQLite mixin providing shared connection setup, healthcheck and schema initialization.

Responsibilities:
    - Open (or adopt) a SQLite connection
    - Healthcheck the SQLite connection
    - Ensure the short URL schema exists
    - Release the connection on close

Classes:
    - SQLiteClientMixin: Base mixin to inject SQLite client setup, healthcheck & schema into DAOs.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortURLSQLiteDAO(SQLiteClientMixin, ShortURLBaseDAO):
        ...     pass
        ...
        >>> dao = ShortURLSQLiteDAO(storage_path=':memory:')
        >>> dao._healthcheck()
        True
"""

import os
import logging
import sqlite3
from pathlib import Path
from typing import Optional

from urlshortener.dao.sqlite.schema import SCHEMA_SQL, PING_SQL
from urlshortener.dao.exceptions import (
    DataStoreInitError,
    DataStoreOpenError,
    DataStoreConnectivityError,
    SchemaInitError,
)
from urlshortener.utils.config import storage_path as default_storage_path, sqlite_timeout as default_sqlite_timeout
from urlshortener.utils.constants import IN_MEMORY_STORAGE_PATH


logger = logging.getLogger(__name__)


class SQLiteClientMixin:
    """Mixin SQLite client setup, health check and schema creation for SQLite-backed DAOs.

    The connection is opened with `check_same_thread=False` so one DAO can be
    shared between request threads, and in autocommit mode so every statement
    runs as its own transaction. Writers are serialized by SQLite's own locking.

    Attributes:
        sqlite (sqlite3.Connection):
            Active SQLite connection used by subclasses.

        storage_path (str | None):
            Location of the database. None when an existing connection was adopted.

    Methods:
        _healthcheck(raise_error: bool = True) -> bool:
            Ping SQLite to verify the connection works.
            Optionally raise a DataStoreConnectivityError if it doesn't.

        _initialize_schema() -> None:
            Create the url table and its alias index if missing.

        close() -> None:
            Close the connection if this DAO opened it.
    """

    def __init__(
        self,
        storage_path: Optional[str | os.PathLike] = None,
        sqlite_timeout: Optional[float] = None,
        sqlite_connection: Optional[sqlite3.Connection] = None,
    ):
        """Initialize a SQLite-based DAO for short URL management

        The option is given to either use an existing SQLite connection or
        open one at the given storage path.

        Args:
            storage_path (Optional[str | os.PathLike]):
                Filesystem path of the database file, ':memory:' or a 'file:' URI.
                Defaults to `urlshortener.utils.config.storage_path()`.
                Ignored when `sqlite_connection` is given.

            sqlite_timeout (Optional[float]):
                Seconds to wait for a database lock before failing.
                Defaults to `urlshortener.utils.config.sqlite_timeout()`.

            sqlite_connection (Optional[sqlite3.Connection]):
                Pre-opened SQLite connection. If None, a new connection is opened.

        Raises:
            DataStoreOpenError:
                If the database cannot be opened or created.
            DataStoreConnectivityError:
                If SQLite healthcheck fails.
            SchemaInitError:
                If the schema cannot be created.
        """
        self._owns_connection = sqlite_connection is None
        if sqlite_connection is None:
            storage_path = default_storage_path() if storage_path is None else os.fspath(storage_path)
            if sqlite_timeout is None:
                sqlite_timeout = default_sqlite_timeout()
            sqlite_connection = self._connect(storage_path, sqlite_timeout)
        else:
            storage_path = None

        self.sqlite = sqlite_connection
        self.storage_path = storage_path

        try:
            self._healthcheck()
            self._initialize_schema()
        except DataStoreInitError:
            self.close()
            raise

        logger.debug('SQLite data store ready.', extra={'storagePath': self.storage_path})

    @staticmethod
    def _connect(storage_path: str, sqlite_timeout: float) -> sqlite3.Connection:
        """Open a SQLite connection, creating the database file and its directory if absent

        Raises:
            DataStoreOpenError:
                If the directory or the database file cannot be created or opened.
        """
        is_uri = storage_path.startswith('file:')
        try:
            if not is_uri and storage_path != IN_MEMORY_STORAGE_PATH:
                Path(storage_path).parent.mkdir(parents=True, exist_ok=True)

            return sqlite3.connect(
                storage_path,
                timeout=float(sqlite_timeout),
                isolation_level=None,
                check_same_thread=False,
                uri=is_uri,
            )
        except (sqlite3.Error, OSError) as e:
            raise DataStoreOpenError(f"Can't open SQLite database at '{storage_path}'. Check the provided storage path.") from e

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """Ping SQLite to healthcheck the connection

        Args:
            raise_error (bool):
                If True, raises DataStoreConnectivityError on failure. Defaults to True.

        Returns:
            bool:
                True if SQLite answers, False otherwise (only if raise_error=False).

        Raises:
            DataStoreConnectivityError:
                If the ping fails and raise_error=True.

        Example:
            >>> self._healthcheck()
            True
        """
        try:
            self.sqlite.execute(PING_SQL).fetchone()
        except sqlite3.Error as e:
            if raise_error:
                raise DataStoreConnectivityError(f"Can't ping SQLite database at '{self.storage_path}'.") from e
            return False
        else:
            return True

    def _initialize_schema(self) -> None:
        """Create the url table and the alias index if they don't exist yet

        Raises:
            SchemaInitError:
                If any DDL statement fails.
        """
        try:
            self.sqlite.executescript(SCHEMA_SQL)
        except sqlite3.Error as e:
            raise SchemaInitError(f"Can't initialize schema in SQLite database at '{self.storage_path}'.") from e

    def close(self) -> None:
        """Close the SQLite connection if it was opened by this DAO

        Adopted connections are left open for their owner to close.
        """
        if self._owns_connection:
            self.sqlite.close()
            logger.debug('SQLite data store closed.', extra={'storagePath': self.storage_path})

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
