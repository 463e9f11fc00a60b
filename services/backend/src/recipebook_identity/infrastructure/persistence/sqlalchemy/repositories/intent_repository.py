"""SQLAlchemy implementation of IntentRepository."""

import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from recipebook.domain.shared.time import ensure_tz_aware, utc_now
from recipebook_identity.domain.intent import (
    IdentityIntent,
    IntentKind,
    IntentRepository,
    IntentStatus,
)
from recipebook_identity.infrastructure.persistence.sqlalchemy.models import (
    IdentityIntentModel,
)

logger = logging.getLogger(__name__)


class IntentRepositorySQLAlchemy(IntentRepository):
    """SQLAlchemy implementation of the IntentRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def open(
        self,
        kind: IntentKind,
        username: str,
        user_id: int | None = None,
    ) -> IdentityIntent:
        intent = IdentityIntent(kind=kind, username=username, user_id=user_id)
        self._session.add(self._map_to_model(intent))
        await self._session.commit()
        logger.debug("Opened %s intent %s for %s", kind.value, intent.id, username)
        return intent

    async def mark(
        self,
        intent_id: UUID,
        status: IntentStatus,
        user_id: int | None = None,
        error: str | None = None,
    ) -> None:
        if not self._session.is_active:
            # A failed flush elsewhere in this session must be undone first
            logger.warning("Rolling back failed session before marking intent %s", intent_id)
            await self._session.rollback()

        model = await self._session.get(IdentityIntentModel, intent_id)
        if model is None:
            logger.warning("Cannot mark unknown intent %s", intent_id)
            return

        model.status = status.value
        if user_id is not None:
            model.user_id = user_id
        model.error = error
        model.updated_at = utc_now()
        await self._session.commit()

    async def find_by_id(self, intent_id: UUID) -> IdentityIntent | None:
        model = await self._session.get(IdentityIntentModel, intent_id)
        return self._map_to_domain(model) if model else None

    async def list_unresolved(self, pending_before: datetime) -> list[IdentityIntent]:
        stmt = (
            select(IdentityIntentModel)
            .where(
                or_(
                    IdentityIntentModel.status == IntentStatus.FAILED.value,
                    and_(
                        IdentityIntentModel.status == IntentStatus.PENDING.value,
                        IdentityIntentModel.created_at < pending_before,
                    ),
                ),
            )
            .order_by(IdentityIntentModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    def _map_to_domain(self, model: IdentityIntentModel) -> IdentityIntent:
        return IdentityIntent(
            id=model.id,
            kind=IntentKind(model.kind),
            username=model.username,
            user_id=model.user_id,
            status=IntentStatus(model.status),
            error=model.error,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, intent: IdentityIntent) -> IdentityIntentModel:
        return IdentityIntentModel(
            id=intent.id,
            kind=intent.kind.value,
            username=intent.username,
            user_id=intent.user_id,
            status=intent.status.value,
            error=intent.error,
            created_at=intent.created_at,
            updated_at=intent.updated_at,
        )
