"""Value objects shared across domain modules."""

from .ids import (
    ChallengeId,
    ChallengeOptionId,
    ChallengeProgressId,
    CourseId,
    LessonId,
    UnitId,
    UserId,
)

__all__ = [
    "ChallengeId",
    "ChallengeOptionId",
    "ChallengeProgressId",
    "CourseId",
    "LessonId",
    "UnitId",
    "UserId",
]
