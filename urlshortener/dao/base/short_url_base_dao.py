"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism.

Responsibilities:
    - Provide an interface for creating, resolving and deleting alias to URL mappings.
    - Standardize error handling across data store implementations.
    - Enforce a consistent API for use by the API layer.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from urlshortener.dao.sqlite import ShortURLSQLiteDAO

        >>> dao = ShortURLSQLiteDAO(storage_path=':memory:')

        >>> dao.create('https://example.com/blog/article-123', 'a1b2c3')
        1

        >>> dao.resolve('a1b2c3')
        'https://example.com/blog/article-123'

        >>> dao.delete('a1b2c3')
"""

from abc import ABC, abstractmethod

from urlshortener.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        create(url: str, alias: str) -> int:
            Store a new alias to URL mapping and return its record id.
            Raises ShortURLAlreadyExistsError if the alias is already taken.
            Raises DataStoreError on any other data store failure.

        resolve(alias: str) -> str:
            Return the URL stored under an alias.
            Raises ShortURLNotFoundError if the alias does not exist.
            Raises DataStoreError on any other data store failure.

        get(alias: str) -> ShortURLModel:
            Return the full record stored under an alias.
            Raises ShortURLNotFoundError if the alias does not exist.
            Raises DataStoreError on any other data store failure.

        delete(alias: str) -> None:
            Remove the mapping stored under an alias.
            Raises ShortURLNotFoundError if the alias does not exist.
            Raises DataStoreError on any other data store failure.

    Subclassing:
        Datastore-specific implementations (e.g., ShortURLSQLiteDAO) must
        extend this class and implement all abstract methods.

    NOTE:
        - Records are immutable. There is no update operation.
        - The DAO never retries. Retry policy belongs to the caller.
    """

    @abstractmethod
    def create(self, url: str, alias: str) -> int:
        """Store a new alias to URL mapping.

        Args:
            url (str):
                Destination URL. Validated upstream.

            alias (str):
                Unique short key for the URL.

        Returns:
            int: Identifier assigned to the new record.

        Raises:
            ShortURLAlreadyExistsError:
                If a mapping with the same alias already exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def resolve(self, alias: str) -> str:
        """Look up the URL stored under an alias.

        Args:
            alias (str):
                Exact, case-sensitive alias to look up.

        Returns:
            str: The destination URL.

        Raises:
            ShortURLNotFoundError:
                If no mapping with the given alias exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, alias: str) -> ShortURLModel:
        """Retrieve the full record stored under an alias.

        Raises:
            ShortURLNotFoundError:
                If no mapping with the given alias exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def delete(self, alias: str) -> None:
        """Remove the mapping stored under an alias.

        Args:
            alias (str):
                Alias of the mapping to remove.

        Raises:
            ShortURLNotFoundError:
                If no mapping with the given alias exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
