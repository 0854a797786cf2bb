"""
User repository for database access.

Encapsulates the Supabase queries and row mapping for the ``users`` table.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import BaseRepository, is_valid_id

from .exceptions import UserAlreadyExistsError
from .models import User

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Note: ``users.email`` carries a UNIQUE constraint, so two racing
    registrations cannot both insert; the loser surfaces as
    ``UserAlreadyExistsError`` like a normal duplicate.
    """

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by ID. Malformed IDs simply match nothing."""
        if not is_valid_id(user_id):
            return None

        result = self._db.table("users").select("*").eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by (normalized) email address."""
        result = self._db.table("users").select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def create(self, data: dict[str, Any]) -> User:
        """
        Insert a user record.

        Args:
            data: Dictionary with name, email, password (hash) and avatar.

        Returns:
            Created User with generated ID and timestamp.

        Raises:
            UserAlreadyExistsError: If the email is already taken.
        """
        try:
            result = self._db.table("users").insert(data).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise UserAlreadyExistsError(data.get("email", ""))
            raise
        return self._map_to_user(result.data[0])

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            password=data["password"],
            avatar=data.get("avatar"),
            date=data["date"],
        )
