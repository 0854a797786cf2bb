"""
Logging setup for the API process.

Modules log through ``logging.getLogger(__name__)``; this only configures
the root handler and level once at startup.
"""

import logging

from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from settings (or an explicit level)."""
    settings = get_settings()
    resolved = (level or settings.log_level).upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved)

    # httpx logs every Supabase request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
