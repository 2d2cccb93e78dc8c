"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from models.user import User
from repositories.base import BaseRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository(BaseRepository):
    """Repository for reads and inserts on the users table."""

    def get_user_with_email(self, email: str) -> Optional[User]:
        """
        Fetch a single user by email.

        Returns:
            A User, or None if no user has this email.
        """
        sql = "SELECT * FROM users WHERE email = %s;"
        row = self._fetch_one("get user by email", sql, (email,))
        return User.from_row(row) if row else None

    def get_user_with_id(self, user_id: int) -> Optional[User]:
        """
        Fetch a single user by primary key.

        Returns:
            A User, or None if not found.
        """
        sql = "SELECT * FROM users WHERE id = %s;"
        row = self._fetch_one("get user by id", sql, (user_id,))
        return User.from_row(row) if row else None

    def add_user(self, user: User) -> User:
        """
        Insert a new user.

        Args:
            user: The User to persist; name, email and password are stored verbatim.

        Returns:
            The stored User with its generated `id`.
        """
        sql = """
            INSERT INTO users (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING *;
        """
        row = self._fetch_one("add user", sql, (user.name, user.email, user.password), commit=True)
        saved = User.from_row(row)
        logger.info(f"Added user #{saved.id} ({saved.email})")
        return saved
