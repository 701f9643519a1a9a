"""Three-way result of running a command."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

NO_REPOSITORY = "no-repository"
NO_RESULTS = "no-results"
USER_CANCELLED = "user-cancelled"


class OutcomeKind(Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass(frozen=True)
class CommandOutcome:
    """What a command did.

    ``cancelled`` covers both a user dismissing a picker and a command
    stopping early because there was nothing to act on; ``reason`` tells
    them apart. ``failed`` carries the exception the command caught.
    """

    kind: OutcomeKind
    value: object = None
    reason: str = ""
    error: BaseException | None = None

    @classmethod
    def completed(cls, value: object = None) -> CommandOutcome:
        return cls(OutcomeKind.COMPLETED, value=value)

    @classmethod
    def cancelled(cls, reason: str = USER_CANCELLED) -> CommandOutcome:
        return cls(OutcomeKind.CANCELLED, reason=reason)

    @classmethod
    def failed(cls, error: BaseException) -> CommandOutcome:
        return cls(OutcomeKind.FAILED, error=error)

    @property
    def is_completed(self) -> bool:
        return self.kind is OutcomeKind.COMPLETED

    @property
    def is_cancelled(self) -> bool:
        return self.kind is OutcomeKind.CANCELLED

    @property
    def is_failed(self) -> bool:
        return self.kind is OutcomeKind.FAILED


__all__ = ["OutcomeKind", "CommandOutcome", "NO_REPOSITORY", "NO_RESULTS", "USER_CANCELLED"]
