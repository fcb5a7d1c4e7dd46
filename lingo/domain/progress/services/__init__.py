from .attempt_resolver import AttemptResolution, AttemptResolver
from .heart_policy import HeartPolicy, StandardHeartPolicy, SubscriberExemptHeartPolicy
from .progression_calculator import (
    ChallengeState,
    LessonProgress,
    LessonView,
    ProgressionCalculator,
    ProgressSnapshot,
    UnitProgress,
)

__all__ = [
    "AttemptResolution",
    "AttemptResolver",
    "ChallengeState",
    "HeartPolicy",
    "LessonProgress",
    "LessonView",
    "ProgressSnapshot",
    "ProgressionCalculator",
    "StandardHeartPolicy",
    "SubscriberExemptHeartPolicy",
    "UnitProgress",
]
