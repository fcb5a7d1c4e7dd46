"""Domain events raised by progress mutations."""

from dataclasses import dataclass

from lingo.domain.common.domain_event import DomainEvent
from lingo.domain.common.value_objects import ChallengeId, CourseId, LessonId, UserId


@dataclass(frozen=True)
class ActiveCourseSelected(DomainEvent):
    """A learner started or switched their active course."""

    user_id: UserId
    course_id: CourseId


@dataclass(frozen=True)
class ChallengeAttemptResolved(DomainEvent):
    """An attempt changed a learner's hearts, points or completion state."""

    user_id: UserId
    challenge_id: ChallengeId
    lesson_id: LessonId
    outcome: str
