from dataclasses import dataclass


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a stored alias to URL mapping.

    Attributes:
        id (int):
            Row identifier assigned by the data store on insertion.
        alias (str):
            The unique short key representing the shortened URL.
        url (str):
            The destination URL that the alias resolves to.

    Example:
        >>> record = ShortURLModel(id=1, alias='ex1', url='https://example.com')
        >>> record.alias
        'ex1'
        >>> record.url
        'https://example.com'
    """
    id: int
    alias: str
    url: str
