"""Identity schemas and data structures.

These are simple data classes used for transferring identity
data between components.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recipebook_identity.domain.user import User


@dataclass(frozen=True)
class CreateUserRequest:
    """Sign-up command. Fields are validated before they get here."""

    user_name: str
    email: str
    password: str

    def __repr__(self) -> str:
        return f"CreateUserRequest(user_name={self.user_name!r}, email={self.email!r})"


@dataclass(frozen=True)
class ChangePasswordRequest:
    """Password change command for a target user."""

    new_password1: str
    new_password2: str

    def __repr__(self) -> str:
        return "ChangePasswordRequest(new_password1=***, new_password2=***)"

    @property
    def passwords_match(self) -> bool:
        return self.new_password1 == self.new_password2


@dataclass(frozen=True)
class UserProjection:
    """View-safe rendering of a User. Never carries the password.

    Attributes
    ----------
    id
        The store-assigned user ID
    name
        Login name
    email
        Contact address
    created_at
        When the account was created
    """

    id: int
    name: str
    email: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> UserProjection:
        if user.id is None:
            msg = "Cannot project a user that has not been stored"
            raise ValueError(msg)
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
        )


@dataclass(frozen=True)
class ProfileView:
    """A user's profile page data."""

    user: UserProjection
    recipe_count: int | None = None
