"""SQLAlchemy model for credential entries.

This model stores password hashes and granted roles per username.
"""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from recipebook.domain.shared.time import utc_now
from recipebook_auth.persistence.sqlalchemy.base import AuthBase


class CredentialEntryModel(AuthBase):
    """
    SQLAlchemy model for credential entries.

    Stored apart from the users table; the username is the only link.

    Table: credential_entries
    """

    __tablename__ = "credential_entries"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )

    # Unique constraint settles concurrent sign-ups for the same name
    username: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    # Password hash (bcrypt format, ~60 chars)
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    # Comma-separated role names, e.g. "USER" or "ADMIN,USER"
    roles: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="USER",
    )

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
        return f"<CredentialEntryModel(id={self.id}, username={self.username})>"
