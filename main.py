"""
main.py
-------
Entry point and composition root.

Responsibilities:
    - Open the database connection pool and create the schema.
    - Build the repository and inject it into the user service.
    - Run one example create and fetch through the service.
"""

import sys

import psycopg2

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from db.connection import Database
from db.init_db import create_tables
from repositories.errors import RepositoryError
from repositories.user_repo import PostgresUserRepository
from services.base import UserService
from services.user_service import DefaultUserService
from utils.logger import get_logger

logger = get_logger(__name__)


def build_user_service(database: Database) -> UserService:
    """Wire a PostgreSQL-backed user service around an open store handle."""
    repo = PostgresUserRepository(database)
    return DefaultUserService(repo)


def main() -> None:
    """Initialize the store, wire the service and exercise it once."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    database = Database(DATABASE_URL, min_conn=DB_POOL_MIN, max_conn=DB_POOL_MAX)
    try:
        database.open()
        create_tables(database)
    except psycopg2.Error as e:
        logger.critical(f"Cannot start without a database: {e}")
        database.close()
        sys.exit(1)

    # ── 2. Dependency injection ───────────────────────────
    user_service = build_user_service(database)

    # ── 3. Example usage ──────────────────────────────────
    try:
        try:
            user = user_service.create_user("John Doe", "john@example.com")
        except RepositoryError as e:
            logger.error(f"Error creating user: {e}")
            return

        try:
            found = user_service.get_user(user.id)
        except RepositoryError as e:
            logger.error(f"Error getting user: {e}")
            return

        print(f"Found user: {found}")
    finally:
        # ── 4. Cleanup ────────────────────────────────────
        database.close()


if __name__ == "__main__":
    main()
