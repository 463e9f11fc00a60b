"""Engines and session makers for the two identity databases.

The user records (and recipes) live in the application database, the
credential directory in its own database. Both URLs may point to the same
server; the stores still use separate sessions and transactions.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from recipebook.infrastructure.persistence.sqlalchemy.models import Base
from recipebook_auth.persistence.sqlalchemy import AuthBase
from recipebook_config.settings import Settings

# Registers users and identity_intents on Base.metadata
from recipebook_identity.infrastructure.persistence.sqlalchemy import models  # noqa: F401

logger = logging.getLogger(__name__)


def _ensure_sqlite_dir(url: str) -> None:
    """Create the parent directory of a file-based SQLite database."""
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)


def create_engine_for(url: str) -> AsyncEngine:
    """Create an async engine, preparing local SQLite paths."""
    _ensure_sqlite_dir(url)
    return create_async_engine(
        url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@dataclass
class Databases:
    """Engines and session makers for the application and the directory."""

    app_engine: AsyncEngine
    directory_engine: AsyncEngine

    def __post_init__(self) -> None:
        self.app_sessions = async_sessionmaker(
            self.app_engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self.directory_sessions = async_sessionmaker(
            self.directory_engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Databases":
        app_engine = create_engine_for(settings.database_url)
        if settings.directory_database_url == settings.database_url:
            directory_engine = app_engine
        else:
            directory_engine = create_engine_for(settings.directory_database_url)
        return cls(app_engine=app_engine, directory_engine=directory_engine)

    async def create_tables(self) -> None:
        """Create all missing tables (idempotent)."""
        logger.info("Ensuring all database tables exist...")
        async with self.app_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with self.directory_engine.begin() as conn:
            await conn.run_sync(AuthBase.metadata.create_all)
        logger.info("Database schema is up to date")

    async def dispose(self) -> None:
        await self.app_engine.dispose()
        if self.directory_engine is not self.app_engine:
            await self.directory_engine.dispose()
