"""
repositories/base.py
--------------------
Persistence contract for User records, independent of any storage technology.
"""

from abc import ABC, abstractmethod

from models.user import User


class UserRepository(ABC):
    """
    Abstract repository for users.

    Every method either succeeds or raises one of
    NotFoundError, ConflictError or StorageError.
    """

    @abstractmethod
    def create(self, user: User) -> None:
        """
        Persist a new user and write the store-assigned id into `user.id`.

        Raises:
            ConflictError: If the email is already taken.
            StorageError: On any other persistence failure.
        """

    @abstractmethod
    def get_by_id(self, user_id: int) -> User:
        """
        Fetch a user by primary key.

        Raises:
            NotFoundError: If no record has that id.
        """

    @abstractmethod
    def get_by_email(self, email: str) -> User:
        """
        Fetch a user by email.

        Raises:
            NotFoundError: If no record has that email.
        """

    @abstractmethod
    def update(self, user: User) -> None:
        """
        Overwrite name and email of the record identified by `user.id`.

        Raises:
            NotFoundError: If `user.id` does not exist.
            ConflictError: If the new email belongs to a different record.
        """

    @abstractmethod
    def delete(self, user_id: int) -> None:
        """
        Remove a user.

        Raises:
            NotFoundError: If no record has that id.
        """
