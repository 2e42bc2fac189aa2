"""Notification session dataclass."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class SessionKind(enum.Enum):
    NONE = "none"
    ABOVE_HIGH = "above_high"
    BELOW_LOW = "below_low"


@dataclass
class Session:
    """Alert session tracked across ticks.

    ``last_ended_kind`` remembers the most recently finished session so the
    same kind cannot restart until the battery has been seen in the safe zone.
    """

    kind: SessionKind = SessionKind.NONE
    attempts_made: int = 0
    last_ended_kind: SessionKind = SessionKind.NONE

    def is_active(self) -> bool:
        return self.kind is not SessionKind.NONE

    def should_notify(self, max_attempts: int) -> bool:
        return self.attempts_made < max_attempts

    def can_start(self, kind: SessionKind) -> bool:
        return not self.is_active() and self.last_ended_kind is not kind

    def start(self, kind: SessionKind) -> None:
        self.kind = kind
        self.attempts_made = 0

    def increment_attempt(self) -> None:
        self.attempts_made += 1

    def end(self) -> None:
        self.last_ended_kind = self.kind
        self.kind = SessionKind.NONE
        self.attempts_made = 0

    def clear_last_ended(self) -> None:
        self.last_ended_kind = SessionKind.NONE
