"""Recipe Book Identity - user records and their login credentials.

This module handles all identity-related concerns:
- User records (lookup by name or id, sign-up, password change)
- Keeping user records and the credential directory consistent
- Profile assembly for the user pages
- Repair of partially applied identity changes

Login credentials themselves are stored by recipebook_auth.
"""

from recipebook_identity.application.context import UserContext
from recipebook_identity.application.services import (
    ProfileService,
    ReconciliationReport,
    ReconciliationService,
    UserIdentityService,
    UsernameAvailability,
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
    UsernameTakenError,
    UserNotFoundError,
    UserRepository,
)
from recipebook_identity.outcomes import Failure, FailureKind, Outcome
from recipebook_identity.schemas import (
    ChangePasswordRequest,
    CreateUserRequest,
    ProfileView,
    UserProjection,
)

__all__ = [
    # Domain - User
    "CredentialMismatchError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UsernameTakenError",
    # Domain - Intents
    "IdentityIntent",
    "IntentKind",
    "IntentRepository",
    "IntentStatus",
    # Outcomes
    "Failure",
    "FailureKind",
    "Outcome",
    # Schemas
    "ChangePasswordRequest",
    "CreateUserRequest",
    "ProfileView",
    "UserProjection",
    # Application Context
    "UserContext",
    # Application Services
    "ProfileService",
    "ReconciliationReport",
    "ReconciliationService",
    "UserIdentityService",
    "UsernameAvailability",
]
