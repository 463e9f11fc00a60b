"""Repairs identity intents left behind by partial failures.

A failed sign-up can leave a user record without credentials; a failed
password change can leave the directory on the old password. The user
record is authoritative: the sweep brings the directory in line with it.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta

from recipebook.domain.shared.time import utc_now
from recipebook_auth import (
    CredentialDirectory,
    CredentialNotFoundError,
    InvalidCredentialsError,
    Role,
)
from recipebook_identity.domain.intent import (
    IdentityIntent,
    IntentKind,
    IntentRepository,
    IntentStatus,
)
from recipebook_identity.domain.user import (
    CredentialMismatchError,
    User,
    UserRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class ReconciliationReport:
    """Counts of what one sweep did."""

    repaired: int = 0
    abandoned: int = 0
    failed: int = 0

    @property
    def examined(self) -> int:
        return self.repaired + self.abandoned + self.failed


class ReconciliationService:
    """Sweeps unresolved intents and repairs the credential directory."""

    def __init__(
        self,
        user_repository: UserRepository,
        credential_directory: CredentialDirectory,
        intent_repository: IntentRepository,
    ):
        self._user_repo = user_repository
        self._directory = credential_directory
        self._intent_repo = intent_repository

    async def sweep(self, grace: timedelta = timedelta(minutes=5)) -> ReconciliationReport:
        report = ReconciliationReport()
        cutoff = utc_now() - grace
        intents = [
            intent
            for intent in await self._intent_repo.list_unresolved(cutoff)
            if intent.needs_repair(cutoff)
        ]
        logger.info("Reconciling %d unresolved identity intents", len(intents))

        for intent in intents:
            try:
                status = await self._reconcile(intent)
                await self._intent_repo.mark(intent.id, status)
            except Exception as e:
                logger.exception(
                    "Unable to reconcile %s intent %s for %s",
                    intent.kind.value,
                    intent.id,
                    intent.username,
                )
                await self._keep_failed(intent, e)
                report.failed += 1
                continue

            if status == IntentStatus.ABANDONED:
                report.abandoned += 1
            else:
                report.repaired += 1

        logger.info(
            "Reconciliation done: %d repaired, %d abandoned, %d failed",
            report.repaired,
            report.abandoned,
            report.failed,
        )
        return report

    async def _keep_failed(self, intent: IdentityIntent, error: Exception) -> None:
        try:
            await self._intent_repo.mark(intent.id, IntentStatus.FAILED, error=str(error))
        except Exception:
            # Still unresolved, so the next sweep picks it up again
            logger.exception("Unable to mark intent %s as failed", intent.id)

    async def _reconcile(self, intent: IdentityIntent) -> IntentStatus:
        user = await self._find_user(intent)
        if user is None:
            logger.info(
                "No user record for %s intent %s, abandoning",
                intent.kind.value,
                intent.id,
            )
            return IntentStatus.ABANDONED

        if intent.kind == IntentKind.CREATE_USER:
            await self._ensure_credentials(user)
        else:
            await self._ensure_password(user)
        return IntentStatus.COMPLETED

    async def _find_user(self, intent: IdentityIntent) -> User | None:
        if intent.user_id is not None:
            return await self._user_repo.find_by_id(intent.user_id)
        return await self._user_repo.find_by_name(intent.username)

    async def _ensure_credentials(self, user: User) -> None:
        try:
            await self._directory.load_by_username(user.name)
        except CredentialNotFoundError:
            await self._directory.create(user.name, user.password, {Role.USER})
            logger.warning("Created missing credentials for user %s", user.name)
            return

        # An entry left over from someone else must not be adopted silently
        try:
            await self._directory.authenticate(user.name, user.password)
        except InvalidCredentialsError as e:
            raise CredentialMismatchError(user.name) from e

    async def _ensure_password(self, user: User) -> None:
        try:
            await self._directory.authenticate(user.name, user.password)
        except InvalidCredentialsError:
            try:
                await self._directory.reset_password(user.name, user.password)
            except CredentialNotFoundError:
                await self._directory.create(user.name, user.password, {Role.USER})
                logger.warning("Created missing credentials for user %s", user.name)
                return
            logger.warning("Resynchronised directory password for user %s", user.name)
