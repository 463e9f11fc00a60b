"""SQLAlchemy model for identity intents."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from recipebook.domain.shared.time import utc_now
from recipebook_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase


class IdentityIntentModel(IdentityBase):
    """Intent log for mutations spanning users and credential entries."""

    __tablename__ = "identity_intents"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    kind: Mapped[str] = mapped_column(String(32), nullable=False)
    username: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # No FK: a sign-up intent is written before the user row exists
    user_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default="pending",
        index=True,
    )
    error: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )

    def __repr__(self) -> str:
        return (
            f"<IdentityIntentModel(id={self.id}, kind={self.kind}, "
            f"username={self.username}, status={self.status})>"
        )
