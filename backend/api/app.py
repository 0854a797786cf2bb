"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.logging_config import configure_logging
from .errors import register_exception_handlers
from .routes import health
from modules.auth.routes import router as auth_router, users_router
from modules.posts.routes import router as posts_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    configure_logging()
    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; login and protected routes will fail")
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Social network API: users, posts, likes and comments",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users_router, prefix="/api/users", tags=["users"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(posts_router, prefix="/api/posts", tags=["posts"])

    return app


# Application instance for uvicorn
app = create_app()
