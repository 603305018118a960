"""
repositories/memory_repo.py
----------------------------
In-process adapter for the UserRepository contract.
Used by the test suite and for running the services without PostgreSQL.
"""

import itertools
import threading
from dataclasses import replace

from models.user import User
from repositories.base import UserRepository
from repositories.errors import ConflictError, NotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)


class InMemoryUserRepository(UserRepository):
    """
    Dict-backed user store.

    Mirrors the constraints of the `users` table: ids are assigned from 1
    upwards and never reused, and email is unique. Callers only ever see
    copies of the stored records.
    """

    def __init__(self):
        self._users: dict[int, User] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def count(self) -> int:
        """Number of stored users."""
        with self._lock:
            return len(self._users)

    def _check_email(self, email: str, owner_id=None) -> None:
        for stored in self._users.values():
            if stored.email == email and stored.id != owner_id:
                raise ConflictError("User", "email", email)

    def create(self, user: User) -> None:
        with self._lock:
            self._check_email(user.email)
            new_id = next(self._ids)
            self._users[new_id] = replace(user, id=new_id)
        user.id = new_id
        logger.debug(f"Created user #{new_id}")

    def get_by_id(self, user_id: int) -> User:
        with self._lock:
            stored = self._users.get(user_id)
            if stored is None:
                raise NotFoundError("User", user_id)
            return replace(stored)

    def get_by_email(self, email: str) -> User:
        with self._lock:
            for stored in self._users.values():
                if stored.email == email:
                    return replace(stored)
        raise NotFoundError("User", email)

    def update(self, user: User) -> None:
        with self._lock:
            if user.id not in self._users:
                raise NotFoundError("User", user.id)
            self._check_email(user.email, owner_id=user.id)
            self._users[user.id] = replace(user)
        logger.debug(f"Updated user #{user.id}")

    def delete(self, user_id: int) -> None:
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise NotFoundError("User", user_id)
        logger.debug(f"Deleted user #{user_id}")
