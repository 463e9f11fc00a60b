"""SQLAlchemy implementation of UserRepository.

Writes commit immediately: the user record store is one of two
independent stores and each step of a sign-up must be durable on its own.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from recipebook.domain.shared.time import ensure_tz_aware
from recipebook_identity.domain.user import (
    User,
    UsernameTakenError,
    UserNotFoundError,
    UserRepository,
)
from recipebook_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int) -> User | None:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_name(self, name: str) -> User | None:
        stmt = select(UserModel).where(UserModel.name == name)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def create(self, user: User) -> User:
        if user.is_persisted:
            msg = f"User {user.name} already has id {user.id}"
            raise ValueError(msg)

        model = self._map_to_model(user)
        self._session.add(model)
        try:
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise UsernameTakenError(user.name) from e
            raise

        logger.info("Created user: %s (id: %s)", user.name, model.id)
        return self._map_to_domain(model)

    async def save(self, user: User) -> User:
        if user.id is None:
            msg = f"User {user.name} has not been created yet"
            raise ValueError(msg)

        model = await self._find_model_by_id(user.id)
        if model is None:
            raise UserNotFoundError(user.id)

        self._update_model(model, user)
        await self._session.commit()
        logger.debug("Updated user: %s", user.id)
        return self._map_to_domain(model)

    async def _find_model_by_id(self, user_id: int) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            password=model.password,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            name=user.name,
            email=user.email,
            password=user.password,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.email = user.email
        model.password = user.password
        model.updated_at = user.updated_at
