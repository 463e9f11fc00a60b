"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.
"""

import logging
import sys
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipebook.infrastructure.persistence.sqlalchemy.database import Databases
from recipebook.presentation.api.exception_handlers import setup_exception_handlers
from recipebook.presentation.api.routers import ping_router, users_router
from recipebook.presentation.api.schemas import HealthResponse
from recipebook_auth import PasswordHashingService
from recipebook_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Sets up logging for the recipe book packages with:
    - Console output with timestamps and module names
    - Configurable log level for our modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    for name in ("recipebook", "recipebook_identity", "recipebook_auth"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
USER_PREFIX = "/user"

OPENAPI_TAGS = [
    {
        "name": "Users",
        "description": """User profiles and account management.

**Profiles:**
- Look up users by name or id
- Show your own profile with your recipe count

**Accounts:**
- Sign up with a unique user name
- Change your password (both fields must match)

Authenticate with HTTP Basic using your user name and password.
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


def _build_lifespan(
    settings: Settings,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan manager."""
        logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)
        databases = Databases.from_settings(settings)
        try:
            await databases.create_tables()
        except ConnectionRefusedError:
            logger.critical("Could not connect to the database.")
            raise SystemExit(1) from None

        app.state.databases = databases
        app.state.password_service = PasswordHashingService(
            rounds=settings.password_hash_rounds,
        )
        yield

        logger.info("Shutting down %s API...", settings.app_name)
        await databases.dispose()
        logger.info("Database connections closed")

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User accounts for the recipe book.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=_build_lifespan(settings),
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(ping_router, tags=["Health"])
    app.include_router(users_router, prefix=USER_PREFIX, tags=["Users"])

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=API_VERSION)

    return app


# Application instance for uvicorn
app = create_app()
