"""Identity intents.

An intent is written before any mutation that spans the user record store
and the credential directory. It is completed once both stores agree and
left failed otherwise, so the reconciliation sweep can repair the pair.
"""

from recipebook_identity.domain.intent.identity_intent import (
    IdentityIntent,
    IntentKind,
    IntentStatus,
)
from recipebook_identity.domain.intent.intent_repository import IntentRepository

__all__ = [
    "IdentityIntent",
    "IntentKind",
    "IntentRepository",
    "IntentStatus",
]
