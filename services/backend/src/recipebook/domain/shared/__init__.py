"""Shared domain components."""

from recipebook.domain.shared.time import utc_now

__all__ = [
    "utc_now",
]
