"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when no short URL with the requested alias exists in the data store.

    ShortURLAlreadyExistsError:
        Raised when attempting to insert a short URL whose alias is already taken.

    DataStoreError:
        Raised when there is an error in the data store (e.g., locked database, I/O, corrupt file, etc.).

    DataStoreInitError:
        Base class for failures while opening a data store. Fatal to DAO creation.

    DataStoreOpenError:
        Raised when the database file cannot be opened or created.

    DataStoreConnectivityError:
        Raised when an opened database does not answer a ping.

    SchemaInitError:
        Raised when the schema cannot be created.

Example:
    >>> from urlshortener.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with alias 'ex1' not found.")
    Traceback (most recent call last):
        ...
    urlshortener.dao.exceptions.ShortURLNotFoundError: Short URL with alias 'ex1' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class ShortURLNotFoundError(DAOError):
    """Exception raised when a short URL is not found in the data store."""

    pass


class ShortURLAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a short URL whose alias already exists in the data store."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. locked database, disk I/O errors, corrupt files, etc.
    """

    pass


class DataStoreInitError(DataStoreError):
    """Exception raised when a data store cannot be brought up."""

    pass


class DataStoreOpenError(DataStoreInitError):
    """Exception raised when the database cannot be opened."""

    pass


class DataStoreConnectivityError(DataStoreInitError):
    """Exception raised when the database does not respond to a ping."""

    pass


class SchemaInitError(DataStoreInitError):
    """Exception raised when the database schema cannot be created."""

    pass
