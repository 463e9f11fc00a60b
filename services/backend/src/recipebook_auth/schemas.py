"""Credential directory data structures."""

from dataclasses import dataclass, field
from enum import Enum


class Role(str, Enum):
    """Roles a credential entry can be bound to."""

    USER = "USER"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class CredentialEntry:
    """Immutable credential data returned by the directory.

    Attributes
    ----------
    username
        Login name the entry is keyed by
    password_hash
        The bcrypt hash of the current password
    roles
        Roles granted to the username
    """

    username: str
    password_hash: str
    roles: frozenset[Role] = field(default_factory=lambda: frozenset({Role.USER}))

    def has_role(self, role: Role) -> bool:
        """Check whether the entry grants a role."""
        return role in self.roles
