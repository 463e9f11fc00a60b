"""FastAPI dependency injection for the recipe book API.

Provides dependencies for:
- Database sessions (application store and credential directory)
- Authentication (current principal from HTTP Basic credentials)
- Service instances
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from recipebook.infrastructure.persistence.sqlalchemy.database import Databases
from recipebook.infrastructure.persistence.sqlalchemy.repositories import (
    RecipeCatalogSQLAlchemy,
)
from recipebook_auth import (
    CredentialDirectory,
    InvalidCredentialsError,
    PasswordHashingService,
    Role,
)
from recipebook_auth.persistence.sqlalchemy import CredentialDirectorySQLAlchemy
from recipebook_identity import (
    ProfileService,
    UserContext,
    UserIdentityService,
)
from recipebook_identity.infrastructure.persistence.sqlalchemy import (
    IntentRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

# Security scheme for HTTP Basic credentials
security = HTTPBasic(auto_error=False)


# -----------------------------------------------------------------------------
# Database Sessions
# -----------------------------------------------------------------------------


def get_databases(request: Request) -> Databases:
    """Engines created by the application lifespan."""
    return request.app.state.databases


async def get_db_session(
    databases: Databases = Depends(get_databases),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Application database session dependency.

    Yields
    ------
    AsyncSession for user records, intents and recipes
    """
    async with databases.app_sessions() as session:
        yield session


async def get_directory_session(
    databases: Databases = Depends(get_databases),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Credential directory session dependency.

    Kept apart from the application session so the two stores never
    share a transaction.
    """
    async with databases.directory_sessions() as session:
        yield session


# Type aliases for injected sessions
DBSession = Annotated[AsyncSession, Depends(get_db_session)]
DirectorySession = Annotated[AsyncSession, Depends(get_directory_session)]


# -----------------------------------------------------------------------------
# Credential Directory
# -----------------------------------------------------------------------------


def get_password_service(request: Request) -> PasswordHashingService:
    """Get the password hashing service configured at startup."""
    return request.app.state.password_service


def get_credential_directory(
    session: DirectorySession,
    password_service: PasswordHashingService = Depends(get_password_service),
) -> CredentialDirectory:
    return CredentialDirectorySQLAlchemy(session, password_service)


Directory = Annotated[CredentialDirectory, Depends(get_credential_directory)]


# -----------------------------------------------------------------------------
# Current Principal (HTTP Basic)
# -----------------------------------------------------------------------------


async def get_current_principal(
    directory: Directory,
    credentials: HTTPBasicCredentials | None = Depends(security),
) -> UserContext:
    """
    FastAPI dependency to authenticate the caller against the directory.

    Returns
    -------
    The caller's UserContext

    Raises
    ------
    HTTPException
        401 if credentials are missing or do not match
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Basic"},
        )

    try:
        entry = await directory.authenticate(
            credentials.username,
            credentials.password,
        )
    except InvalidCredentialsError as e:
        logger.warning("Failed login for user: %s", credentials.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Basic"},
        ) from e

    return UserContext.create(entry)


async def require_user_role(
    principal: UserContext = Depends(get_current_principal),
) -> UserContext:
    """Require the USER role."""
    if not principal.has_role(Role.USER):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User role required",
        )
    return principal


# Type alias for an authenticated caller holding the USER role
CurrentPrincipal = Annotated[UserContext, Depends(require_user_role)]


# -----------------------------------------------------------------------------
# Application Services
# -----------------------------------------------------------------------------


def get_user_identity_service(
    session: DBSession,
    directory: Directory,
) -> UserIdentityService:
    """
    Get the identity service with both stores wired in.

    The user repository and the intent log share the application session;
    the credential directory has its own.
    """
    return UserIdentityService(
        user_repository=UserRepositorySQLAlchemy(session),
        credential_directory=directory,
        intent_repository=IntentRepositorySQLAlchemy(session),
    )


def get_profile_service(session: DBSession) -> ProfileService:
    return ProfileService(
        user_repository=UserRepositorySQLAlchemy(session),
        recipe_catalog=RecipeCatalogSQLAlchemy(session),
    )


IdentityService = Annotated[UserIdentityService, Depends(get_user_identity_service)]
Profiles = Annotated[ProfileService, Depends(get_profile_service)]
