"""Data Access Object (DAO) implementation for managing shortened URLs in SQLite

This module provides a SQLite-based implementation of ShortURLBaseDAO for
create, resolve and delete operations on alias to URL mappings.

Responsibilities:
    - Insert, look up and remove short URLs in an embedded SQLite database;
    - Recognize alias uniqueness violations from the driver's error codes;
    - Raise appropriate DAO exceptions for missing aliases and driver failures.

Classes:
    ShortURLSQLiteDAO:
        DAO for storing and retrieving short URLs in a SQLite datastore.

Example:
    >>> from urlshortener.dao.sqlite import ShortURLSQLiteDAO

    >>> dao = ShortURLSQLiteDAO(storage_path=':memory:')

    >>> dao.create('https://example.com', 'ex1')
    1
    >>> dao.resolve('ex1')
    'https://example.com'
    >>> dao.create('https://other.com', 'ex1')
    Traceback (most recent call last):
        ...
    urlshortener.dao.exceptions.ShortURLAlreadyExistsError: Short URL with alias 'ex1' already exists.
    >>> dao.delete('ex1')
    >>> dao.resolve('ex1')
    Traceback (most recent call last):
        ...
    urlshortener.dao.exceptions.ShortURLNotFoundError: Short URL with alias 'ex1' not found.
"""

import logging
import sqlite3

from beartype import beartype

from urlshortener.models import ShortURLModel
from urlshortener.dao.base import ShortURLBaseDAO
from urlshortener.dao.sqlite.mixins import SQLiteClientMixin
from urlshortener.dao.sqlite.helpers import handle_sqlite_error, is_unique_violation
from urlshortener.dao.sqlite.schema import INSERT_URL_SQL, SELECT_URL_SQL, SELECT_RECORD_SQL, DELETE_URL_SQL
from urlshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


logger = logging.getLogger(__name__)


class ShortURLSQLiteDAO(SQLiteClientMixin, ShortURLBaseDAO):
    """SQLite-based Data Access Object (DAO) for managing short URL mappings

    This class implements the ShortURLBaseDAO interface using SQLite as a data store.
    Every method issues exactly one statement. Nothing is cached.

    Attributes (see SQLiteClientMixin):
        sqlite (sqlite3.Connection):
            SQLite connection shared by all callers of this DAO.
        storage_path (str | None):
            Location of the database file.

    Methods:
        create(url: str, alias: str) -> int:
            Insert a mapping and return its record id.
            Raises ShortURLAlreadyExistsError when the alias is taken.
            Raises DataStoreError on any other SQLite failure.

        resolve(alias: str) -> str:
            Return the URL stored under the alias.
            Raises ShortURLNotFoundError when the alias doesn't exist.
            Raises DataStoreError on any other SQLite failure.

        get(alias: str) -> ShortURLModel:
            Return the whole record stored under the alias.
            Raises ShortURLNotFoundError when the alias doesn't exist.
            Raises DataStoreError on any other SQLite failure.

        delete(alias: str) -> None:
            Remove the mapping stored under the alias.
            Raises ShortURLNotFoundError when no row was removed.
            Raises DataStoreError on any other SQLite failure.
    """

    @handle_sqlite_error
    @beartype
    def create(self, url: str, alias: str) -> int:
        """Insert a short URL mapping into SQLite

        Uniqueness is enforced by the UNIQUE constraint on the alias column,
        so concurrent inserts of the same alias cannot both succeed.

        Args:
            url (str):
                Destination URL. No format checks are done here.
            alias (str):
                Candidate unique alias.

        Returns:
            int: Id of the inserted row.

        Raises:
            ShortURLAlreadyExistsError:
                If a short URL with the same alias already exists.
            DataStoreError:
                If any other SQLite error occurs.

        Example:
            >>> dao.create('https://example.com', 'ex1')
            1
        """
        try:
            cursor = self.sqlite.execute(INSERT_URL_SQL, (url, alias))
        except sqlite3.IntegrityError as e:
            if is_unique_violation(e):
                logger.debug('Alias already taken.', extra={'alias': alias})
                raise ShortURLAlreadyExistsError(f"Short URL with alias '{alias}' already exists.") from e
            raise

        # Drain the cursor so the autocommit transaction completes
        record_id = cursor.fetchall()[0][0]
        logger.debug('Inserted short URL.', extra={'alias': alias, 'id': record_id})
        return record_id

    @handle_sqlite_error
    @beartype
    def resolve(self, alias: str) -> str:
        """Retrieve the destination URL stored under an alias

        The match is exact and case-sensitive.

        Args:
            alias (str):
                Alias to look up.

        Returns:
            str: The destination URL.

        Raises:
            ShortURLNotFoundError:
                If the alias does not exist.
            DataStoreError:
                If any other SQLite error occurs.

        Example:
            >>> dao.resolve('ex1')
            'https://example.com'
        """
        row = self.sqlite.execute(SELECT_URL_SQL, (alias,)).fetchone()
        if row is None:
            logger.debug('Alias not found.', extra={'alias': alias})
            raise ShortURLNotFoundError(f"Short URL with alias '{alias}' not found.")

        return row[0]

    @handle_sqlite_error
    @beartype
    def get(self, alias: str) -> ShortURLModel:
        """Retrieve the whole record stored under an alias

        Example:
            >>> dao.get('ex1')
            ShortURLModel(id=1, alias='ex1', url='https://example.com')
        """
        row = self.sqlite.execute(SELECT_RECORD_SQL, (alias,)).fetchone()
        if row is None:
            logger.debug('Alias not found.', extra={'alias': alias})
            raise ShortURLNotFoundError(f"Short URL with alias '{alias}' not found.")

        record_id, stored_alias, url = row
        return ShortURLModel(id=record_id, alias=stored_alias, url=url)

    @handle_sqlite_error
    @beartype
    def delete(self, alias: str) -> None:
        """Remove the short URL mapping stored under an alias

        NOTE: deleting a missing alias is an error, not a silent no-op. The
              ids returned by the statement decide which case happened.

        Args:
            alias (str):
                Alias of the mapping to remove.

        Raises:
            ShortURLNotFoundError:
                If no row matched the alias.
            DataStoreError:
                If any other SQLite error occurs.

        Example:
            >>> dao.delete('ex1')
            >>> dao.delete('ex1')
            Traceback (most recent call last):
                ...
            urlshortener.dao.exceptions.ShortURLNotFoundError: Short URL with alias 'ex1' not found.
        """
        deleted = self.sqlite.execute(DELETE_URL_SQL, (alias,)).fetchall()
        if not deleted:
            logger.debug('Alias not found.', extra={'alias': alias})
            raise ShortURLNotFoundError(f"Short URL with alias '{alias}' not found.")

        logger.debug('Deleted short URL.', extra={'alias': alias})
