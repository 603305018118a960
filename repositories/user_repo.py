"""
repositories/user_repo.py
--------------------------
PostgreSQL adapter for the UserRepository contract.
All SQL queries related to the `users` table live here.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
from psycopg2 import errors

from db.connection import Database
from models.user import User
from repositories.base import UserRepository
from repositories.errors import ConflictError, NotFoundError, StorageError
from utils.logger import get_logger

logger = get_logger(__name__)


class PostgresUserRepository(UserRepository):
    """Repository for CRUD operations on the users table."""

    def __init__(self, database: Database):
        self.db = database

    @contextmanager
    def _cursor(self, email: Optional[str] = None) -> Iterator:
        """
        Run one statement in its own transaction.

        Commits on success; rolls back and translates psycopg2 errors
        into repository errors on failure, including errors raised while
        borrowing the connection from the pool.
        """
        try:
            with self.db.connection() as conn:
                try:
                    with conn.cursor() as cur:
                        yield cur
                    conn.commit()
                except psycopg2.Error:
                    self._rollback(conn)
                    raise
        except errors.UniqueViolation as e:
            logger.warning(f"Duplicate email {email!r}: {e}")
            raise ConflictError("User", "email", email) from e
        except psycopg2.Error as e:
            logger.error(f"Database error on users table: {e}")
            raise StorageError(str(e)) from e

    @staticmethod
    def _rollback(conn) -> None:
        """Roll back, keeping the original error if the connection is already gone."""
        try:
            conn.rollback()
        except psycopg2.Error as e:
            logger.warning(f"Rollback failed: {e}")

    # ── CREATE ────────────────────────────────────────────

    def create(self, user: User) -> None:
        sql = "INSERT INTO users (name, email) VALUES (%s, %s) RETURNING id;"
        with self._cursor(email=user.email) as cur:
            cur.execute(sql, (user.name, user.email))
            row = cur.fetchone()
        user.id = row[0]
        logger.info(f"Created user #{user.id}")

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, user_id: int) -> User:
        sql = "SELECT id, name, email FROM users WHERE id = %s;"
        with self._cursor() as cur:
            cur.execute(sql, (user_id,))
            row = cur.fetchone()
        if row is None:
            raise NotFoundError("User", user_id)
        return self._row_to_user(row)

    def get_by_email(self, email: str) -> User:
        sql = "SELECT id, name, email FROM users WHERE email = %s;"
        with self._cursor() as cur:
            cur.execute(sql, (email,))
            row = cur.fetchone()
        if row is None:
            raise NotFoundError("User", email)
        return self._row_to_user(row)

    # ── UPDATE ────────────────────────────────────────────

    def update(self, user: User) -> None:
        sql = "UPDATE users SET name = %s, email = %s WHERE id = %s;"
        with self._cursor(email=user.email) as cur:
            cur.execute(sql, (user.name, user.email, user.id))
            updated = cur.rowcount > 0
        if not updated:
            raise NotFoundError("User", user.id)
        logger.info(f"Updated user #{user.id}")

    # ── DELETE ────────────────────────────────────────────

    def delete(self, user_id: int) -> None:
        sql = "DELETE FROM users WHERE id = %s;"
        with self._cursor() as cur:
            cur.execute(sql, (user_id,))
            deleted = cur.rowcount > 0
        if not deleted:
            raise NotFoundError("User", user_id)
        logger.info(f"Deleted user #{user_id}")

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_user(row: tuple) -> User:
        """Convert a (id, name, email) row to a User object."""
        return User(id=row[0], name=row[1], email=row[2])
