"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass, field

from recipebook_auth import CredentialEntry, Role


@dataclass(frozen=True)
class UserContext:
    """Immutable context for the current authenticated user."""

    username: str
    roles: frozenset[Role] = field(default_factory=lambda: frozenset({Role.USER}))

    @classmethod
    def create(cls, entry: CredentialEntry) -> UserContext:
        return cls(username=entry.username, roles=entry.roles)

    def has_role(self, role: Role) -> bool:
        return role in self.roles

    def __str__(self) -> str:
        return f"UserContext({self.username})"
