"""User identity service.

Coordinates the user record store and the credential directory. Neither
store can be rolled back together with the other, so every mutation is
wrapped in an identity intent that the reconciliation sweep can pick up.
"""

import logging
from enum import Enum

from recipebook_auth import (
    CredentialDirectory,
    CredentialNotFoundError,
    PasswordHashingService,
    Role,
)
from recipebook_identity.domain.intent import (
    IdentityIntent,
    IntentKind,
    IntentRepository,
    IntentStatus,
)
from recipebook_identity.domain.user import User, UsernameTakenError, UserRepository
from recipebook_identity.outcomes import FailureKind, Outcome
from recipebook_identity.schemas import (
    ChangePasswordRequest,
    CreateUserRequest,
    UserProjection,
)

logger = logging.getLogger(__name__)

SIGNUP_ROLES = frozenset({Role.USER})


def _reject_unhashable(password: str) -> Outcome[UserProjection] | None:
    # Both stores must accept the password, so check before writing either
    try:
        PasswordHashingService.validate(password)
    except ValueError as e:
        logger.warning("Rejected password: %s", e)
        return Outcome.fail(FailureKind.UNKNOWN, str(e))
    return None


class UsernameAvailability(str, Enum):
    AVAILABLE = "available"
    TAKEN = "taken"
    UNVERIFIED = "unverified"


class UserIdentityService:
    """Service for user lookups, sign-up and password changes."""

    def __init__(
        self,
        user_repository: UserRepository,
        credential_directory: CredentialDirectory,
        intent_repository: IntentRepository,
    ):
        self._user_repo = user_repository
        self._directory = credential_directory
        self._intent_repo = intent_repository

    async def find_by_name(self, name: str) -> User | None:
        return await self._user_repo.find_by_name(name)

    async def find_by_id(self, user_id: int) -> User | None:
        return await self._user_repo.find_by_id(user_id)

    async def check_username(self, user_name: str) -> UsernameAvailability:
        """Ask the credential directory whether a user name is free.

        Only a definite "not found" counts as available. If the directory
        cannot answer, the name is reported as unverified.
        """
        try:
            await self._directory.load_by_username(user_name)
        except CredentialNotFoundError:
            logger.info("Username %s not found", user_name)
            return UsernameAvailability.AVAILABLE
        except Exception:
            logger.exception("Could not check availability of username %s", user_name)
            return UsernameAvailability.UNVERIFIED
        return UsernameAvailability.TAKEN

    async def create_user(self, request: CreateUserRequest) -> Outcome[UserProjection]:
        user_name = request.user_name
        rejected = _reject_unhashable(request.password)
        if rejected is not None:
            return rejected

        availability = await self.check_username(user_name)
        if availability == UsernameAvailability.TAKEN:
            logger.warning("user name %s already taken, cannot create user", user_name)
            return Outcome.fail(
                FailureKind.USERNAME_TAKEN,
                "Choose a different user name please!",
            )
        if availability == UsernameAvailability.UNVERIFIED:
            return Outcome.fail(
                FailureKind.UNKNOWN,
                "Could not verify that the user name is free, please try again",
            )

        failure_message = f"Unable to create user {user_name}"
        try:
            intent = await self._intent_repo.open(IntentKind.CREATE_USER, user_name)
        except Exception:
            logger.exception("Unable to record sign-up of %s", user_name)
            return Outcome.fail(FailureKind.UNKNOWN, failure_message)

        try:
            user = await self._user_repo.create(
                User.create(
                    name=user_name,
                    email=request.email,
                    password=request.password,
                ),
            )
        except UsernameTakenError:
            logger.warning("user name %s stored concurrently, cannot create user", user_name)
            await self._close_intent(intent, IntentStatus.ABANDONED)
            return Outcome.fail(
                FailureKind.USERNAME_TAKEN,
                "Choose a different user name please!",
            )
        except Exception as e:
            logger.exception("Unable to create user %r", request)
            await self._close_intent(intent, IntentStatus.FAILED, error=str(e))
            return Outcome.fail(FailureKind.UNKNOWN, failure_message)

        try:
            await self._directory.create(user_name, user.password, SIGNUP_ROLES)
        except Exception as e:
            logger.exception(
                "Unable to create credentials for user %s (id=%s)",
                user_name,
                user.id,
            )
            await self._close_intent(
                intent,
                IntentStatus.FAILED,
                user_id=user.id,
                error=str(e),
            )
            return Outcome.fail(FailureKind.UNKNOWN, failure_message)

        await self._close_intent(intent, IntentStatus.COMPLETED, user_id=user.id)
        projection = UserProjection.from_user(user)
        logger.info("successfully created user %s (id=%s)", user_name, user.id)
        return Outcome.ok(projection, f"User {user_name} created successfully")

    async def change_password(
        self,
        user_id: int,
        request: ChangePasswordRequest,
    ) -> Outcome[UserProjection]:
        if not request.passwords_match:
            return Outcome.fail(FailureKind.PASSWORD_MISMATCH, "Passwords do not match!")
        rejected = _reject_unhashable(request.new_password1)
        if rejected is not None:
            return rejected

        try:
            user = await self._user_repo.find_by_id(user_id)
        except Exception:
            logger.exception("Unable to load user %s for password change", user_id)
            return Outcome.fail(
                FailureKind.UNKNOWN,
                f"Unable to change password for user {user_id}",
            )
        if user is None:
            logger.warning("No user found for id %s", user_id)
            return Outcome.fail(FailureKind.NOT_FOUND, "Invalid user provided!")

        previous_password = user.password
        failure_message = f"Unable to change password for user {user.name}"
        try:
            intent = await self._intent_repo.open(
                IntentKind.CHANGE_PASSWORD,
                user.name,
                user_id=user_id,
            )
        except Exception:
            logger.exception("Unable to record password change of user %s", user_id)
            return Outcome.fail(FailureKind.UNKNOWN, failure_message)

        try:
            user.change_password(request.new_password1)
            updated = await self._user_repo.save(user)
        except Exception as e:
            logger.exception("unable to change password for user %s", user_id)
            await self._close_intent(intent, IntentStatus.FAILED, error=str(e))
            return Outcome.fail(FailureKind.UNKNOWN, failure_message)

        try:
            await self._directory.change_password(
                user.name,
                previous_password,
                request.new_password1,
            )
        except Exception as e:
            logger.exception(
                "unable to change directory password for user %s (id=%s)",
                user.name,
                user_id,
            )
            await self._close_intent(intent, IntentStatus.FAILED, error=str(e))
            return Outcome.fail(FailureKind.UNKNOWN, failure_message)

        await self._close_intent(intent, IntentStatus.COMPLETED)
        logger.info("Password changed for user %s (id=%s)", user.name, user_id)
        return Outcome.ok(
            UserProjection.from_user(updated),
            "Password changed successfully!",
        )

    async def _close_intent(
        self,
        intent: IdentityIntent,
        status: IntentStatus,
        user_id: int | None = None,
        error: str | None = None,
    ) -> None:
        # A pending intent is swept up later anyway
        try:
            await self._intent_repo.mark(
                intent.id,
                status,
                user_id=user_id,
                error=error,
            )
        except Exception:
            logger.exception(
                "Unable to mark %s intent %s as %s",
                intent.kind.value,
                intent.id,
                status.value,
            )
