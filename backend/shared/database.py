"""
Supabase client for the ``users`` and ``posts`` tables.

One process-wide client authenticated with the service-role key. Row
level security is off for these tables; the post service enforces
ownership itself, so this key must never reach a browser.
"""

import logging
from typing import Optional

from supabase import ClientOptions, create_client, Client

from .config import get_settings

logger = logging.getLogger(__name__)

_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Return the shared Supabase client, creating it on first use.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    global _client

    if _client is not None:
        return _client

    settings = get_settings()
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )

    _client = create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
        options=ClientOptions(
            postgrest_client_timeout=settings.supabase_timeout_seconds,
        ),
    )
    logger.info("Supabase client created for %s", settings.supabase_url)
    return _client


def reset_client_cache() -> None:
    """Drop the shared client so the next call builds a new one."""
    global _client
    _client = None
