"""Tests for CredentialDirectorySQLAlchemy against SQLite."""

import pytest

from recipebook_auth import (
    CredentialAlreadyExistsError,
    CredentialNotFoundError,
    InvalidCredentialsError,
    PasswordHashingService,
    Role,
)
from recipebook_auth.persistence.sqlalchemy import CredentialDirectorySQLAlchemy


@pytest.fixture
def directory(directory_session, password_service):
    return CredentialDirectorySQLAlchemy(directory_session, password_service)


class TestCredentialDirectoryCreate:
    async def test_create_and_load(self, directory):
        created = await directory.create("alice", "pw1", {Role.USER})
        loaded = await directory.load_by_username("alice")

        assert created.username == "alice"
        assert loaded.roles == frozenset({Role.USER})
        assert loaded.password_hash != "pw1"

    async def test_create_with_several_roles(self, directory):
        await directory.create("root", "pw1", [Role.ADMIN, Role.USER])

        entry = await directory.load_by_username("root")

        assert entry.has_role(Role.ADMIN)
        assert entry.has_role(Role.USER)

    async def test_create_duplicate_raises(self, directory):
        await directory.create("alice", "pw1", {Role.USER})

        with pytest.raises(CredentialAlreadyExistsError):
            await directory.create("alice", "pw2", {Role.USER})

    async def test_load_missing_raises_not_found(self, directory):
        with pytest.raises(CredentialNotFoundError) as exc_info:
            await directory.load_by_username("nobody")

        assert exc_info.value.username == "nobody"


class TestCredentialDirectoryPasswords:
    async def test_authenticate(self, directory):
        await directory.create("alice", "pw1", {Role.USER})

        entry = await directory.authenticate("alice", "pw1")

        assert entry.username == "alice"
        with pytest.raises(InvalidCredentialsError):
            await directory.authenticate("alice", "wrong")
        with pytest.raises(InvalidCredentialsError):
            await directory.authenticate("nobody", "pw1")

    async def test_change_password_requires_old_password(self, directory):
        await directory.create("alice", "pw1", {Role.USER})

        with pytest.raises(InvalidCredentialsError):
            await directory.change_password("alice", "wrong", "pw2")

        await directory.change_password("alice", "pw1", "pw2")
        await directory.authenticate("alice", "pw2")

    async def test_change_password_unknown_user(self, directory):
        with pytest.raises(CredentialNotFoundError):
            await directory.change_password("nobody", "pw1", "pw2")

    async def test_reset_password(self, directory):
        await directory.create("alice", "pw1", {Role.USER})

        await directory.reset_password("alice", "pw9")

        await directory.authenticate("alice", "pw9")
        with pytest.raises(InvalidCredentialsError):
            await directory.authenticate("alice", "pw1")

    async def test_authenticate_upgrades_weak_hash(self, directory_session, directory):
        await directory.create("alice", "pw1", {Role.USER})
        old_hash = (await directory.load_by_username("alice")).password_hash

        stronger = CredentialDirectorySQLAlchemy(
            directory_session,
            PasswordHashingService(rounds=5),
        )
        await stronger.authenticate("alice", "pw1")

        new_hash = (await stronger.load_by_username("alice")).password_hash
        assert new_hash != old_hash
        assert new_hash.startswith("$2b$05$")
        await stronger.authenticate("alice", "pw1")
