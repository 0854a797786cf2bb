"""
Agora API package.

Provides the FastAPI application for the Agora social network backend.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
