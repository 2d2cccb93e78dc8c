"""
services/user_service.py
-------------------------
Business logic for user registration and lookup.
"""

from typing import Optional

from models.user import User
from repositories.user_repo import UserRepository
from utils.exceptions import DuplicateEmailError
from utils.logger import get_logger

logger = get_logger(__name__)


class UserService:
    """Registers users and looks them up by email or id."""

    def __init__(self, repo: Optional[UserRepository] = None):
        self.repo = repo or UserRepository()

    def register(self, name: str, email: str, password: str) -> User:
        """
        Create a user unless the email is already taken.

        Raises:
            DuplicateEmailError: If a user with `email` exists.
        """
        if self.repo.get_user_with_email(email) is not None:
            logger.warning(f"Registration refused, email already in use: {email}")
            raise DuplicateEmailError(email)
        return self.repo.add_user(User(name=name, email=email, password=password))

    def find_by_email(self, email: str) -> Optional[User]:
        return self.repo.get_user_with_email(email)

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.repo.get_user_with_id(user_id)
