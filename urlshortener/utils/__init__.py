from urlshortener.utils.config import project_root, storage_path, sqlite_timeout
from urlshortener.utils.logging import initialize_logging


__all__ = [
    'project_root',
    'storage_path',
    'sqlite_timeout',
    'initialize_logging',
]
