# Application environment variables
PROJECT_ROOT_ENV = 'PROJECT_ROOT'
LOG_LEVEL_ENV = 'LOG_LEVEL'

# SQLite: location of the database file and lock wait timeout
STORAGE_PATH_ENV = 'STORAGE_PATH'
SQLITE_TIMEOUT_ENV = 'SQLITE_TIMEOUT_SECONDS'

DEFAULT_STORAGE_FILENAME = 'storage/storage.db'
DEFAULT_SQLITE_TIMEOUT_SECONDS = 5.0

# SQLite: special path for a private, non-persistent database
IN_MEMORY_STORAGE_PATH = ':memory:'
