"""Protocol for the read-only curriculum store."""

from typing import Protocol

from lingo.domain.common.value_objects import ChallengeId, CourseId, LessonId
from lingo.domain.curriculum.entities import Challenge, Course, Lesson


class CurriculumRepositoryProtocol(Protocol):
    """Read-only access to courses, units, lessons and challenges, in sequence order."""

    def list_courses(self) -> list[Course]:
        """All courses without their units."""
        ...

    def get_course(self, course_id: CourseId) -> Course | None:
        """A course with units, lessons, challenges and options loaded."""
        ...

    def get_lesson_with_challenges(self, lesson_id: LessonId) -> Lesson | None:
        """A lesson with its challenges and their options loaded."""
        ...

    def get_challenge(self, challenge_id: ChallengeId) -> Challenge | None:
        """A challenge with its options loaded."""
        ...
