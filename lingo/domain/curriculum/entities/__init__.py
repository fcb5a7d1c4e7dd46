from .challenge import Challenge, ChallengeOption, ChallengeType
from .course import Course
from .lesson import Lesson
from .unit import Unit

__all__ = [
    "Challenge",
    "ChallengeOption",
    "ChallengeType",
    "Course",
    "Lesson",
    "Unit",
]
