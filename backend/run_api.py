#!/usr/bin/env python
"""
Run the Agora API server.

Refuses to start without JWT_SECRET, since every login, registration and
protected route would fail.

Usage:
    python run_api.py
    python run_api.py --reload --port 8000  # Development mode
"""

import argparse
import sys
from typing import Optional

import uvicorn
from rich.console import Console

from shared.config import Settings, get_settings

console = Console()


def check_settings(settings: Settings) -> list[str]:
    """Return the configuration problems that stop the API from serving."""
    problems = []
    if not settings.jwt_secret:
        problems.append("JWT_SECRET is not set")
    if not settings.supabase_url or not settings.supabase_service_role_key:
        problems.append("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must both be set")
    return problems


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run Agora API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    args = parser.parse_args(argv)

    settings = get_settings()

    problems = check_settings(settings)
    if problems:
        for problem in problems:
            console.print(f"[red]✗[/red] {problem}")
        return 1

    host = args.host or settings.host
    port = args.port or settings.port
    console.print(f"[bold]{settings.app_name}[/bold] {settings.app_version} on {host}:{port}")

    uvicorn.run(
        "api:app",
        host=host,
        port=port,
        reload=args.reload or settings.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
