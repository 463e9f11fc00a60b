"""Identity intent entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from recipebook.domain.shared.time import utc_now


class IntentKind(str, Enum):
    """Which two-store operation an intent guards."""

    CREATE_USER = "create_user"
    CHANGE_PASSWORD = "change_password"


class IntentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    ABANDONED = "abandoned"


@dataclass
class IdentityIntent:
    """Durable record of a mutation across both identity stores."""

    kind: IntentKind
    username: str
    user_id: int | None = None
    status: IntentStatus = IntentStatus.PENDING
    error: str | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def needs_repair(self, pending_before: datetime) -> bool:
        """Failed intents, and pending ones older than the cut-off."""
        if self.status == IntentStatus.FAILED:
            return True
        return self.status == IntentStatus.PENDING and self.created_at < pending_before
