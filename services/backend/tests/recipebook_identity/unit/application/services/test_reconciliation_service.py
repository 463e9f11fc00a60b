"""Unit tests for ReconciliationService."""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from recipebook_auth import (
    CredentialEntry,
    CredentialNotFoundError,
    InvalidCredentialsError,
    Role,
)
from recipebook_identity import (
    IdentityIntent,
    IntentKind,
    IntentStatus,
    ReconciliationService,
)


def _intent(kind: IntentKind, user_id: int | None = 1) -> IdentityIntent:
    return IdentityIntent(
        kind=kind,
        username="alice",
        user_id=user_id,
        status=IntentStatus.FAILED,
    )


class TestReconciliationService:
    def setup_method(self):
        """Set up test fixtures."""
        self.user_repo = AsyncMock()
        self.directory = AsyncMock()
        self.intent_repo = AsyncMock()

        self.service = ReconciliationService(
            user_repository=self.user_repo,
            credential_directory=self.directory,
            intent_repository=self.intent_repo,
        )

    @pytest.mark.asyncio
    async def test_nothing_to_do(self):
        self.intent_repo.list_unresolved.return_value = []

        report = await self.service.sweep()

        assert report.examined == 0
        self.intent_repo.mark.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_credentials_are_created(self, alice):
        intent = _intent(IntentKind.CREATE_USER)
        self.intent_repo.list_unresolved.return_value = [intent]
        self.user_repo.find_by_id.return_value = alice
        self.directory.load_by_username.side_effect = CredentialNotFoundError("alice")

        report = await self.service.sweep(timedelta(0))

        assert report.repaired == 1
        self.directory.create.assert_awaited_once_with("alice", "pw1", {Role.USER})
        self.intent_repo.mark.assert_awaited_once_with(intent.id, IntentStatus.COMPLETED)

    @pytest.mark.asyncio
    async def test_existing_credentials_are_left_alone(self, alice):
        self.intent_repo.list_unresolved.return_value = [_intent(IntentKind.CREATE_USER)]
        self.user_repo.find_by_id.return_value = alice
        self.directory.load_by_username.return_value = CredentialEntry(
            username="alice",
            password_hash="$2b$04$hash",
        )

        report = await self.service.sweep()

        assert report.repaired == 1
        self.directory.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_intent_without_user_id_looks_up_by_name(self, alice):
        self.intent_repo.list_unresolved.return_value = [
            _intent(IntentKind.CREATE_USER, user_id=None),
        ]
        self.user_repo.find_by_name.return_value = alice
        self.directory.load_by_username.side_effect = CredentialNotFoundError("alice")

        await self.service.sweep()

        self.user_repo.find_by_name.assert_awaited_once_with("alice")
        self.user_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_intent_without_user_record_is_abandoned(self):
        intent = _intent(IntentKind.CREATE_USER, user_id=None)
        self.intent_repo.list_unresolved.return_value = [intent]
        self.user_repo.find_by_name.return_value = None

        report = await self.service.sweep()

        assert report.abandoned == 1
        self.directory.create.assert_not_called()
        self.intent_repo.mark.assert_awaited_once_with(intent.id, IntentStatus.ABANDONED)

    @pytest.mark.asyncio
    async def test_stale_password_is_reset(self, alice):
        self.intent_repo.list_unresolved.return_value = [
            _intent(IntentKind.CHANGE_PASSWORD),
        ]
        self.user_repo.find_by_id.return_value = alice
        self.directory.authenticate.side_effect = InvalidCredentialsError()

        report = await self.service.sweep()

        assert report.repaired == 1
        self.directory.reset_password.assert_awaited_once_with("alice", "pw1")

    @pytest.mark.asyncio
    async def test_current_password_is_left_alone(self, alice):
        self.intent_repo.list_unresolved.return_value = [
            _intent(IntentKind.CHANGE_PASSWORD),
        ]
        self.user_repo.find_by_id.return_value = alice

        report = await self.service.sweep()

        assert report.repaired == 1
        self.directory.reset_password.assert_not_called()

    @pytest.mark.asyncio
    async def test_password_repair_recreates_missing_entry(self, alice):
        self.intent_repo.list_unresolved.return_value = [
            _intent(IntentKind.CHANGE_PASSWORD),
        ]
        self.user_repo.find_by_id.return_value = alice
        self.directory.authenticate.side_effect = InvalidCredentialsError()
        self.directory.reset_password.side_effect = CredentialNotFoundError("alice")

        report = await self.service.sweep()

        assert report.repaired == 1
        self.directory.create.assert_awaited_once_with("alice", "pw1", {Role.USER})

    @pytest.mark.asyncio
    async def test_repair_error_marks_failed_and_continues(self, alice, bob):
        broken = _intent(IntentKind.CREATE_USER, user_id=1)
        fine = _intent(IntentKind.CHANGE_PASSWORD, user_id=2)
        self.intent_repo.list_unresolved.return_value = [broken, fine]
        self.user_repo.find_by_id.side_effect = lambda user_id: (
            alice if user_id == 1 else bob
        )
        self.directory.load_by_username.side_effect = ConnectionError("directory down")

        report = await self.service.sweep()

        assert report.failed == 1
        assert report.repaired == 1
        self.intent_repo.mark.assert_any_await(
            broken.id,
            IntentStatus.FAILED,
            error="directory down",
        )
        self.intent_repo.mark.assert_any_await(fine.id, IntentStatus.COMPLETED)

    @pytest.mark.asyncio
    async def test_foreign_credentials_are_not_adopted(self, alice):
        intent = _intent(IntentKind.CREATE_USER)
        self.intent_repo.list_unresolved.return_value = [intent]
        self.user_repo.find_by_id.return_value = alice
        self.directory.load_by_username.return_value = CredentialEntry(
            username="alice",
            password_hash="$2b$04$hash",
        )
        self.directory.authenticate.side_effect = InvalidCredentialsError()

        report = await self.service.sweep()

        assert report.failed == 1
        self.directory.create.assert_not_called()
        self.directory.reset_password.assert_not_called()
        self.intent_repo.mark.assert_awaited_once_with(
            intent.id,
            IntentStatus.FAILED,
            error="Credentials for alice do not match the user record",
        )

    @pytest.mark.asyncio
    async def test_marking_failure_does_not_stop_the_sweep(self, bob):
        broken = _intent(IntentKind.CREATE_USER, user_id=1)
        fine = _intent(IntentKind.CHANGE_PASSWORD, user_id=2)
        self.intent_repo.list_unresolved.return_value = [broken, fine]
        self.user_repo.find_by_id.side_effect = [
            RuntimeError("session broken"),
            bob,
        ]

        async def mark(intent_id, status, **kwargs):
            if status == IntentStatus.FAILED:
                raise RuntimeError("still broken")

        self.intent_repo.mark.side_effect = mark

        report = await self.service.sweep()

        assert report.failed == 1
        assert report.repaired == 1
        self.intent_repo.mark.assert_any_await(fine.id, IntentStatus.COMPLETED)

    @pytest.mark.asyncio
    async def test_completion_mark_error_counts_as_failed(self, alice):
        intent = _intent(IntentKind.CHANGE_PASSWORD)
        self.intent_repo.list_unresolved.return_value = [intent]
        self.user_repo.find_by_id.return_value = alice
        self.intent_repo.mark.side_effect = [RuntimeError("db hiccup"), None]

        report = await self.service.sweep()

        assert report.failed == 1
        assert report.repaired == 0
        self.intent_repo.mark.assert_awaited_with(
            intent.id,
            IntentStatus.FAILED,
            error="db hiccup",
        )
