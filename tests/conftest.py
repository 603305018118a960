"""
Shared fixtures for the unit tests.
"""

from unittest.mock import MagicMock

import pytest

from repositories.memory_repo import InMemoryUserRepository
from services.user_service import DefaultUserService


@pytest.fixture
def memory_repo():
    return InMemoryUserRepository()


@pytest.fixture
def user_service(memory_repo):
    return DefaultUserService(memory_repo)


@pytest.fixture
def cursor():
    cur = MagicMock()
    cur.rowcount = 1
    return cur


@pytest.fixture
def conn(cursor):
    """psycopg2 connection whose `with conn.cursor()` yields `cursor`."""
    connection = MagicMock()
    connection.cursor.return_value.__enter__.return_value = cursor
    return connection


@pytest.fixture
def database(conn):
    """Store handle whose `with database.connection()` yields `conn`."""
    db = MagicMock()
    db.connection.return_value.__enter__.return_value = conn
    return db
