"""Unit tests for configuration utilities in config.py

Test coverage includes:

1. Project root resolution
   - Ensures project_root() reads PROJECT_ROOT and falls back to the package directory.

2. Storage configuration
   - Ensures storage_path() reads STORAGE_PATH and falls back to the project root.
   - Ensures sqlite_timeout() parses SQLITE_TIMEOUT_SECONDS and rejects bad values.
"""

from pathlib import Path

import pytest

from urlshortener.utils import config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Start every test without configuration in the environment."""
    for name in ('PROJECT_ROOT', 'STORAGE_PATH', 'SQLITE_TIMEOUT_SECONDS'):
        monkeypatch.delenv(name, raising=False)


# -------------------------------
# 1. Project root resolution
# -------------------------------


def test_project_root_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv('PROJECT_ROOT', str(tmp_path))
    assert config.project_root() == tmp_path


def test_project_root_default():
    """Ensure the fallback is the directory holding the urlshortener package."""
    root = config.project_root()
    assert (root / 'urlshortener' / 'utils' / 'config.py').is_file()


# -------------------------------
# 2. Storage configuration
# -------------------------------


def test_storage_path_from_environment(monkeypatch):
    monkeypatch.setenv('STORAGE_PATH', '/var/lib/urlshortener/storage.db')
    assert config.storage_path() == '/var/lib/urlshortener/storage.db'


def test_storage_path_default(monkeypatch, tmp_path):
    monkeypatch.setenv('PROJECT_ROOT', str(tmp_path))
    assert Path(config.storage_path()) == tmp_path / 'storage' / 'storage.db'


def test_sqlite_timeout_default():
    assert config.sqlite_timeout() == 5.0


def test_sqlite_timeout_from_environment(monkeypatch):
    monkeypatch.setenv('SQLITE_TIMEOUT_SECONDS', '0.25')
    assert config.sqlite_timeout() == 0.25


@pytest.mark.parametrize('value', ['soon', '-1'])
def test_sqlite_timeout_invalid(monkeypatch, value):
    monkeypatch.setenv('SQLITE_TIMEOUT_SECONDS', value)
    with pytest.raises(ValueError, match='Invalid SQLITE_TIMEOUT_SECONDS value'):
        config.sqlite_timeout()
