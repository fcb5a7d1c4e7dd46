from .attempt_schemas import AnswerRequest, AttemptOutcomeResponse, AttemptRequest
from .curriculum_schemas import (
    ChallengeOptionSchema,
    ChallengeSchema,
    CourseDetail,
    CoursesResponse,
    CourseSummary,
    LessonSchema,
    UnitSchema,
)
from .learn_schemas import (
    ChallengeWithCompletion,
    CourseProgressResponse,
    LessonPercentageResponse,
    LessonViewResponse,
    LessonWithCompletion,
    UnitsResponse,
    UnitWithCompletion,
)
from .progress_schemas import (
    LeaderboardEntry,
    LeaderboardResponse,
    SelectActiveCourseRequest,
    SubscriptionResponse,
    SubscriptionSchema,
    UserProgressSchema,
)

__all__ = [
    "AnswerRequest",
    "AttemptOutcomeResponse",
    "AttemptRequest",
    "ChallengeOptionSchema",
    "ChallengeSchema",
    "ChallengeWithCompletion",
    "CourseDetail",
    "CourseProgressResponse",
    "CourseSummary",
    "CoursesResponse",
    "LeaderboardEntry",
    "LeaderboardResponse",
    "LessonPercentageResponse",
    "LessonSchema",
    "LessonViewResponse",
    "LessonWithCompletion",
    "SelectActiveCourseRequest",
    "SubscriptionResponse",
    "SubscriptionSchema",
    "UnitWithCompletion",
    "UnitsResponse",
    "UserProgressSchema",
]
