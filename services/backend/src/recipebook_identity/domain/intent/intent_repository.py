"""Intent repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from uuid import UUID

from recipebook_identity.domain.intent.identity_intent import (
    IdentityIntent,
    IntentKind,
    IntentStatus,
)


class IntentRepository(ABC):
    """Repository interface for identity intents."""

    @abstractmethod
    async def open(
        self,
        kind: IntentKind,
        username: str,
        user_id: int | None = None,
    ) -> IdentityIntent:
        """Durably record a new pending intent."""

    @abstractmethod
    async def mark(
        self,
        intent_id: UUID,
        status: IntentStatus,
        user_id: int | None = None,
        error: str | None = None,
    ) -> None:
        """Move an intent to a new status."""

    @abstractmethod
    async def find_by_id(self, intent_id: UUID) -> IdentityIntent | None:
        """Find an intent by its ID."""

    @abstractmethod
    async def list_unresolved(self, pending_before: datetime) -> list[IdentityIntent]:
        """List failed intents and pending intents created before the cut-off."""
