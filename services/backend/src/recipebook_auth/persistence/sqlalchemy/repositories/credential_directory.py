"""SQLAlchemy implementation of CredentialDirectory.

Every mutation commits its own transaction: the directory is an independent
store and callers cannot roll it back together with their own data.
"""

import logging
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from recipebook.domain.shared.time import utc_now
from recipebook_auth.exceptions import (
    CredentialAlreadyExistsError,
    CredentialNotFoundError,
    InvalidCredentialsError,
)
from recipebook_auth.persistence.sqlalchemy.models import CredentialEntryModel
from recipebook_auth.repositories import CredentialDirectory
from recipebook_auth.schemas import CredentialEntry, Role
from recipebook_auth.services import PasswordHashingService

logger = logging.getLogger(__name__)


class CredentialDirectorySQLAlchemy(CredentialDirectory):
    """SQLAlchemy implementation of the CredentialDirectory interface."""

    def __init__(
        self,
        session: AsyncSession,
        password_service: PasswordHashingService,
    ):
        """Initialize directory with database session.

        Parameters
        ----------
        session
            SQLAlchemy async session bound to the directory database
        password_service
            Hashing service used for stored passwords
        """
        self._session = session
        self._password_service = password_service

    def _to_entry(self, model: CredentialEntryModel) -> CredentialEntry:
        """Map SQLAlchemy model to the directory data transfer object."""
        roles = frozenset(Role(r) for r in model.roles.split(",") if r)
        return CredentialEntry(
            username=model.username,
            password_hash=model.password_hash,
            roles=roles,
        )

    async def _find_model(self, username: str) -> CredentialEntryModel | None:
        stmt = select(CredentialEntryModel).where(
            CredentialEntryModel.username == username,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _get_model(self, username: str) -> CredentialEntryModel:
        model = await self._find_model(username)
        if model is None:
            raise CredentialNotFoundError(username)
        return model

    async def load_by_username(self, username: str) -> CredentialEntry:
        model = await self._get_model(username)
        return self._to_entry(model)

    async def create(
        self,
        username: str,
        password: str,
        roles: Iterable[Role],
    ) -> CredentialEntry:
        if await self._find_model(username) is not None:
            raise CredentialAlreadyExistsError(username)

        model = CredentialEntryModel(
            username=username,
            password_hash=self._password_service.hash(password),
            roles=",".join(sorted(Role(r).value for r in roles)),
        )
        self._session.add(model)
        try:
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            raise CredentialAlreadyExistsError(username) from e

        logger.info("Created credentials for user: %s", username)
        return self._to_entry(model)

    async def change_password(
        self,
        username: str,
        old_password: str,
        new_password: str,
    ) -> None:
        model = await self._get_model(username)
        if not self._password_service.verify(old_password, model.password_hash):
            logger.warning("Password change rejected for user: %s", username)
            raise InvalidCredentialsError

        await self._store_password(model, new_password)
        logger.info("Changed password for user: %s", username)

    async def reset_password(self, username: str, new_password: str) -> None:
        model = await self._get_model(username)
        await self._store_password(model, new_password)
        logger.warning("Reset password for user: %s", username)

    async def authenticate(self, username: str, password: str) -> CredentialEntry:
        model = await self._find_model(username)
        if model is None:
            logger.debug("Authentication for unknown user: %s", username)
            raise InvalidCredentialsError
        if not self._password_service.verify(password, model.password_hash):
            logger.debug("Wrong password for user: %s", username)
            raise InvalidCredentialsError

        if self._password_service.needs_rehash(model.password_hash):
            await self._store_password(model, password)
            logger.info("Upgraded password hash for user: %s", username)
        return self._to_entry(model)

    async def _store_password(
        self,
        model: CredentialEntryModel,
        new_password: str,
    ) -> None:
        model.password_hash = self._password_service.hash(new_password)
        model.updated_at = utc_now()
        await self._session.commit()
