"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    The resolved identity of a request.

    Only the auth gate creates this, from a verified token. Route handlers
    receive it via dependency injection and pass ``id`` down to services
    for ownership checks.
    """

    id: str = Field(..., description="User ID taken from the verified token")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
