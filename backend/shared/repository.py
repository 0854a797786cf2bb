"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

import uuid
from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")


def is_valid_id(value: str) -> bool:
    """
    Return True if ``value`` is a row id in canonical UUID form.

    ``uuid.UUID`` also accepts ``urn:uuid:`` prefixes, which Postgres
    rejects as uuid input. Only the hyphenated form the store hands out
    passes.
    """
    value = str(value)
    try:
        return str(uuid.UUID(value)) == value.lower()
    except ValueError:
        return False


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses implement domain-specific data access methods and handle
    dict-to-Pydantic model mapping internally.

    Example:
        class PostRepository(BaseRepository[Post]):
            def get_by_id(self, post_id: str) -> Optional[Post]:
                result = self._db.table("posts").select("*").eq("id", post_id).execute()
                if not result.data:
                    return None
                return self._map_to_post(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db
