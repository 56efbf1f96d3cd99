from urlshortener.dao.sqlite.short_url_sqlite_dao import ShortURLSQLiteDAO
from urlshortener.dao.sqlite.mixins import SQLiteClientMixin


__all__ = [
    'ShortURLSQLiteDAO',
    'SQLiteClientMixin',
]
