"""SQL statements for the short URL SQLite schema.

Table "url":
    id      INTEGER PRIMARY KEY   (rowid alias, assigned on insert)
    alias   TEXT NOT NULL UNIQUE
    url     TEXT NOT NULL

Index "idx_alias" on url(alias).

All DDL uses IF NOT EXISTS so the schema script is safe to run against an
already initialized database file.

INSERT and DELETE report the affected id through RETURNING (SQLite 3.35+).
lastrowid and rowcount are connection-wide in SQLite, so they are not
reliable when request threads share one connection.
"""

__all__ = [
    'SCHEMA_SQL',
    'PING_SQL',
    'INSERT_URL_SQL',
    'SELECT_URL_SQL',
    'SELECT_RECORD_SQL',
    'DELETE_URL_SQL',
]


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS url(
    id INTEGER PRIMARY KEY,
    alias TEXT NOT NULL UNIQUE,
    url TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_alias ON url(alias);
"""

# Reads the database header, so a file that isn't a SQLite database fails here
PING_SQL = 'PRAGMA schema_version'

INSERT_URL_SQL = 'INSERT INTO url(url, alias) VALUES(?, ?) RETURNING id'

SELECT_URL_SQL = 'SELECT url FROM url WHERE alias = ?'

SELECT_RECORD_SQL = 'SELECT id, alias, url FROM url WHERE alias = ?'

DELETE_URL_SQL = 'DELETE FROM url WHERE alias = ? RETURNING id'
