import io
import sqlite3

import pytest

from tests.utils import FakeConnection


@pytest.fixture
def fake_connection():
    """Auto-commit fake connection recording every submitted statement"""
    return FakeConnection(autocommit=True)


@pytest.fixture
def log_writer():
    return io.StringIO()


@pytest.fixture
def error_log_writer():
    return io.StringIO()


@pytest.fixture
def sqlite_connection():
    """In-memory SQLite connection in auto-commit mode"""
    connection = sqlite3.connect(":memory:", autocommit=True)
    yield connection
    connection.close()


@pytest.fixture
def sqlite_transactional_connection():
    """In-memory SQLite connection with explicit transactions"""
    connection = sqlite3.connect(":memory:", autocommit=False)
    yield connection
    connection.close()


@pytest.fixture
def script_dir(tmp_path):
    """Directory for script files used by CLI tests"""
    directory = tmp_path / "scripts"
    directory.mkdir()
    return directory
