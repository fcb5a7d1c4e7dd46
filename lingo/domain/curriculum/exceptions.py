"""Curriculum module domain exceptions."""

from lingo.domain.common.exceptions import EntityNotFoundError


class CourseNotFoundError(EntityNotFoundError):
    """Raised when a course cannot be found."""

    def __init__(self, course_id: int) -> None:
        super().__init__("Course", course_id)


class LessonNotFoundError(EntityNotFoundError):
    """Raised when a lesson cannot be found."""

    def __init__(self, lesson_id: int) -> None:
        super().__init__("Lesson", lesson_id)


class ChallengeNotFoundError(EntityNotFoundError):
    """Raised when a challenge cannot be found."""

    def __init__(self, challenge_id: int) -> None:
        super().__init__("Challenge", challenge_id)


class ChallengeOptionNotFoundError(EntityNotFoundError):
    """Raised when an option does not belong to the challenge being answered."""

    def __init__(self, option_id: int, challenge_id: int) -> None:
        super().__init__("ChallengeOption", option_id)
        self.details["challenge_id"] = challenge_id
        self.challenge_id = challenge_id
