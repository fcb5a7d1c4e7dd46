"""Use case for browsing the curriculum."""

from lingo.application.progress.protocols.curriculum_repository import (
    CurriculumRepositoryProtocol,
)
from lingo.domain.common.value_objects import CourseId
from lingo.domain.curriculum.entities import Course
from lingo.domain.curriculum.exceptions import CourseNotFoundError


class GetCoursesUseCase:
    def __init__(self, curriculum_repository: CurriculumRepositoryProtocol) -> None:
        self.curriculum_repository = curriculum_repository

    def list_courses(self) -> list[Course]:
        return self.curriculum_repository.list_courses()

    def get_course(self, course_id: int) -> Course:
        """
        Get a course with its full unit/lesson/challenge tree.

        Raises:
            CourseNotFoundError: If the course does not exist
        """
        course = self.curriculum_repository.get_course(CourseId(course_id))
        if not course:
            raise CourseNotFoundError(course_id)
        return course
