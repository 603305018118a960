"""
services/base.py
----------------
User-facing operations exposed to callers.
"""

from abc import ABC, abstractmethod

from models.user import User


class UserService(ABC):
    """Abstract service for managing users."""

    @abstractmethod
    def create_user(self, name: str, email: str) -> User:
        """Register a new user and return it with its assigned id."""

    @abstractmethod
    def get_user(self, user_id: int) -> User:
        """Fetch a user by id."""

    @abstractmethod
    def find_user_by_email(self, email: str) -> User:
        """Fetch a user by email."""

    @abstractmethod
    def update_user(self, user_id: int, name: str, email: str) -> None:
        """Replace the name and email of an existing user."""

    @abstractmethod
    def delete_user(self, user_id: int) -> None:
        """Remove a user."""
