"""Utility functions for application configuration management.

The storage layer receives its database location programmatically. These
helpers resolve the values a caller usually passes in from the process
environment.

Environment variables:
    PROJECT_ROOT            – Project root directory, the parent of the package by default.
    STORAGE_PATH            – Path to the SQLite database file.
    SQLITE_TIMEOUT_SECONDS  – Seconds to wait on a locked database before failing.

Functions:
    project_root() -> Path
        Return the absolute path to the project root directory, using
        `PROJECT_ROOT` when available.

    storage_path() -> str
        Return the SQLite database location, using `STORAGE_PATH` when available.

    sqlite_timeout() -> float
        Return the SQLite lock wait timeout in seconds.

Example:
    Typical usage inside an API layer:

        >>> from urlshortener.dao.sqlite import ShortURLSQLiteDAO
        >>> from urlshortener.utils.config import storage_path, sqlite_timeout
        >>> dao = ShortURLSQLiteDAO(storage_path=storage_path(), sqlite_timeout=sqlite_timeout())
"""

import os
import logging
from pathlib import Path

from urlshortener.utils.constants import (
    PROJECT_ROOT_ENV,
    STORAGE_PATH_ENV,
    SQLITE_TIMEOUT_ENV,
    DEFAULT_STORAGE_FILENAME,
    DEFAULT_SQLITE_TIMEOUT_SECONDS,
)


logger = logging.getLogger(__name__)


def project_root() -> Path:
    """Return the absolute path to the project root directory

    Falls back to the directory containing the `urlshortener` package.

    Returns:
        Path:
            Absolute path to the project root directory.
    """
    return Path(os.environ.get(PROJECT_ROOT_ENV, Path(__file__).resolve().parents[2]))


def storage_path() -> str:
    """Return the location of the SQLite database

    Returns:
        str:
            Value of `STORAGE_PATH`, or `<project root>/storage/storage.db`.

    Example:
        >>> os.environ['STORAGE_PATH'] = '/var/lib/urlshortener/storage.db'
        >>> storage_path()
        '/var/lib/urlshortener/storage.db'
    """
    path = os.environ.get(STORAGE_PATH_ENV)
    if not path:
        path = str(project_root() / DEFAULT_STORAGE_FILENAME)
        logger.debug('STORAGE_PATH not set, using default storage path.', extra={'storagePath': path})
    return path


def sqlite_timeout() -> float:
    """Return the SQLite lock wait timeout in seconds

    Returns:
        float: Value of `SQLITE_TIMEOUT_SECONDS`, 5.0 by default.

    Raises:
        ValueError:
            If the variable is set but is not a non-negative number.
    """
    raw = os.environ.get(SQLITE_TIMEOUT_ENV)
    if not raw:
        return DEFAULT_SQLITE_TIMEOUT_SECONDS

    try:
        timeout = float(raw)
    except ValueError as e:
        raise ValueError(f"Invalid {SQLITE_TIMEOUT_ENV} value '{raw}': expected a number of seconds.") from e

    if timeout < 0:
        raise ValueError(f"Invalid {SQLITE_TIMEOUT_ENV} value '{raw}': must not be negative.")
    return timeout
