"""Outcome values returned by identity operations.

Every operation yields either a value or a failure, never both, so the
presentation layer always has something to render.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class FailureKind(str, Enum):
    """Stable failure kinds for callers to branch on."""

    NOT_FOUND = "NOT_FOUND"
    USERNAME_TAKEN = "USERNAME_TAKEN"
    PASSWORD_MISMATCH = "PASSWORD_MISMATCH"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Failure:
    """A distinguished failure plus a message safe to show to users."""

    kind: FailureKind
    message: str


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of an identity operation: a value XOR a failure."""

    value: T | None = None
    failure: Failure | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.failure is None):
            msg = "Outcome needs exactly one of value and failure"
            raise ValueError(msg)

    @classmethod
    def ok(cls, value: T, message: str | None = None) -> Outcome[T]:
        return cls(value=value, message=message)

    @classmethod
    def fail(cls, kind: FailureKind, message: str) -> Outcome[T]:
        return cls(failure=Failure(kind=kind, message=message), message=message)

    @property
    def succeeded(self) -> bool:
        return self.failure is None

    @property
    def kind(self) -> FailureKind | None:
        return self.failure.kind if self.failure else None

    def unwrap(self) -> T:
        """Return the value, raising if the operation failed."""
        if self.value is None:
            msg = f"Operation failed: {self.message}"
            raise ValueError(msg)
        return self.value
