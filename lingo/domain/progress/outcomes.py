"""
Attempt outcomes.

Every attempt ends in exactly one outcome. Outcomes are plain return
values, including the blocking ones (InsufficientHearts, PracticeMiss),
so callers branch on them without exception handling.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar


class OutcomeKind(StrEnum):
    FIRST_COMPLETED = "first_completed"
    PRACTICE_COMPLETED = "practice_completed"
    MISSED = "missed"
    PRACTICE_MISS = "practice_miss"
    INSUFFICIENT_HEARTS = "insufficient_hearts"


@dataclass(frozen=True)
class AttemptOutcome:
    """Resulting hearts and points after the attempt (unchanged when nothing was written)."""

    hearts: int
    points: int

    kind: ClassVar[OutcomeKind]
    mutates_state: ClassVar[bool] = True


@dataclass(frozen=True)
class FirstCompleted(AttemptOutcome):
    """Correct first attempt: completion record created, points awarded."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.FIRST_COMPLETED


@dataclass(frozen=True)
class PracticeCompleted(AttemptOutcome):
    """Correct practice attempt: one heart restored, points awarded."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.PRACTICE_COMPLETED


@dataclass(frozen=True)
class Missed(AttemptOutcome):
    """Wrong first attempt: one heart spent."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.MISSED

    @property
    def hearts_remaining(self) -> int:
        return self.hearts


@dataclass(frozen=True)
class PracticeMiss(AttemptOutcome):
    """Wrong practice attempt: free, nothing changes."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.PRACTICE_MISS
    mutates_state: ClassVar[bool] = False


@dataclass(frozen=True)
class InsufficientHearts(AttemptOutcome):
    """First attempt blocked because the learner has no hearts left."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.INSUFFICIENT_HEARTS
    mutates_state: ClassVar[bool] = False
