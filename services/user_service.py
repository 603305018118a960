"""
services/user_service.py
------------------------
Business logic for managing users.
Delegates all persistence to the injected UserRepository.
"""

from models.user import User
from repositories.base import UserRepository
from services.base import UserService
from utils.logger import get_logger

logger = get_logger(__name__)


class DefaultUserService(UserService):
    """
    Default UserService backed by a single repository.

    Repository errors (NotFoundError, ConflictError, StorageError) are
    propagated to the caller unchanged; nothing is retried or wrapped.
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    def create_user(self, name: str, email: str) -> User:
        """
        Build a User from the given fields and persist it.

        Returns:
            The new User, with `id` filled in by the store.
        """
        user = User(name=name, email=email)
        self.repo.create(user)
        logger.info(f"Registered user #{user.id}")
        return user

    def get_user(self, user_id: int) -> User:
        return self.repo.get_by_id(user_id)

    def find_user_by_email(self, email: str) -> User:
        return self.repo.get_by_email(email)

    def update_user(self, user_id: int, name: str, email: str) -> None:
        """
        Read-modify-write of an existing user.

        The read and the write are separate repository calls with no
        locking between them: concurrent updates on the same id resolve
        as last write wins, and a delete in between surfaces as
        NotFoundError from the write.
        """
        user = self.repo.get_by_id(user_id)
        user.name = name
        user.email = email
        self.repo.update(user)
        logger.info(f"Updated user #{user_id}")

    def delete_user(self, user_id: int) -> None:
        self.repo.delete(user_id)
        logger.info(f"Deleted user #{user_id}")
