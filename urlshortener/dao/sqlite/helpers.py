import logging
import sqlite3
import functools
from typing import Any, TypeVar
from collections.abc import Callable

from urlshortener.dao.exceptions import DataStoreError


__all__ = ['handle_sqlite_error', 'is_unique_violation']

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])

# Only the alias column carries a UNIQUE constraint. Re-derive this set if the
# schema gains further unique columns.
UNIQUE_VIOLATION_ERROR_CODES = frozenset({sqlite3.SQLITE_CONSTRAINT_UNIQUE})


def is_unique_violation(error: BaseException) -> bool:
    """Check whether a driver error is a UNIQUE constraint violation

    Inspects the extended result code attached by the sqlite3 driver rather
    than the error message.

    Args:
        error (BaseException):
            Exception raised by a sqlite3 call.

    Returns:
        bool: True if the error reports a UNIQUE constraint violation.

    Example:
        >>> try:
        ...     conn.execute('INSERT INTO url(url, alias) VALUES(?, ?)', ('https://a.com', 'taken'))
        ... except sqlite3.IntegrityError as e:
        ...     is_unique_violation(e)
        True
    """
    if not isinstance(error, sqlite3.IntegrityError):
        return False
    return getattr(error, 'sqlite_errorcode', None) in UNIQUE_VIOLATION_ERROR_CODES


def handle_sqlite_error(method: F) -> F:
    """Wrap SQLite-interacting DAO methods to handle driver errors

    Any sqlite3.Error escaping the wrapped method is re-raised as DataStoreError,
    and so is a UnicodeEncodeError from binding a str the driver cannot encode
    (e.g. lone surrogates),
    prefixed with the operation name (`<Class>.<method>`). DAO exceptions raised
    by the method itself pass through untouched.

    Args:
        method (Callable[..., Any]):
            DAO method performing SQLite operations which may raise sqlite3.Error.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on SQLite failures.

    Example:
        >>> @handle_sqlite_error
        ... def count(self):
        ...     return self.sqlite.execute('SELECT COUNT(*) FROM url').fetchone()[0]
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (sqlite3.Error, UnicodeEncodeError) as e:
            operation = f'{type(self).__name__}.{method.__name__}'
            logger.error(
                'SQLite operation failed.',
                extra={'operation': operation, 'sqliteErrorName': getattr(e, 'sqlite_errorname', None)},
            )
            raise DataStoreError(f'{operation}: {e}') from e

    return wrapper
