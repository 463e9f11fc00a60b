"""Application services for identity management."""

from recipebook_identity.application.services.profile_service import ProfileService
from recipebook_identity.application.services.reconciliation_service import (
    ReconciliationReport,
    ReconciliationService,
)
from recipebook_identity.application.services.user_identity_service import (
    UserIdentityService,
    UsernameAvailability,
)

__all__ = [
    "ProfileService",
    "ReconciliationReport",
    "ReconciliationService",
    "UserIdentityService",
    "UsernameAvailability",
]
