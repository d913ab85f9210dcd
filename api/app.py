"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from .dependencies import get_container
from .errors import register_exception_handlers
from .models.errors import ErrorResponse, ValidationErrorResponse
from .routes import health
from modules.auth.routes import router as auth_router
from modules.blogs.routes import router as blogs_router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic. The token service is built eagerly
    so a production deployment without a signing secret fails at boot
    rather than on the first signin. The password hasher is built too,
    which prepares its dummy_verify secret.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    container = get_container()
    container.token_service
    container.password_hasher
    logger.info(
        f"Starting {settings.app_name} on {settings.host}:{settings.port} "
        f"({settings.environment})"
    )
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Blog posts with account signup, bearer tokens and owner-only edits",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
        responses={
            400: {"model": ValidationErrorResponse, "description": "Validation failed"},
            401: {"model": ErrorResponse, "description": "Missing or invalid token"},
            500: {"model": ErrorResponse, "description": "Server error"},
        },
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
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(blogs_router, prefix="/api/blogs", tags=["blogs"])

    return app


# Application instance for uvicorn
app = create_app()
