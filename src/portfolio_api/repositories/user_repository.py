"""
User Repository

Data access layer for the credential store.
"""

from typing import Any, Dict, Optional

from portfolio_api.core.exceptions import DatabaseException, DuplicateException
from portfolio_api.db.adapter import StorageBackend
from portfolio_api.models.user import User
from portfolio_api.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for registered identities."""

    label = "user"
    plural = "users"
    owner_column = "email"
    insert_columns = ("email", "password")
    required = ("email", "password")

    def __init__(self, storage: StorageBackend):
        super().__init__(User, storage)

    def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        try:
            return self.storage.fetch_one("SELECT * FROM users WHERE email = ?", [email])
        except DatabaseException as e:
            raise DatabaseException("Login failed.", e.details) from e

    def create_user(self, email: str, password_hash: str) -> int:
        """
        Store a new identity.

        Args:
            email: Normalized email
            password_hash: Output of ``core.security.hash_password``

        Returns:
            int: Generated user id

        Raises:
            DuplicateException: If the email is already registered
        """
        try:
            record = self.create({"email": email, "password": password_hash})
        except DuplicateException as e:
            raise DuplicateException("User", "email", email, message="User already exists.") from e
        except DatabaseException as e:
            raise DatabaseException("Failed to create user.", e.details) from e
        return record["id"]
