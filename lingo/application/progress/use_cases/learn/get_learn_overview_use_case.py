"""Use case for the learn dashboard: units of the active course and the resume lesson."""

from dataclasses import dataclass

from lingo.application.progress.protocols.curriculum_repository import (
    CurriculumRepositoryProtocol,
)
from lingo.application.progress.protocols.progress_repository import ProgressRepositoryProtocol
from lingo.application.progress.services.progress_snapshot_service import (
    ProgressSnapshotService,
)
from lingo.domain.common.value_objects import UserId
from lingo.domain.curriculum.entities import Course, Lesson
from lingo.domain.progress.services.progression_calculator import (
    ProgressionCalculator,
    UnitProgress,
)


@dataclass(frozen=True)
class CourseProgress:
    """Where the learner should continue; active_lesson is None once the course is done."""

    course: Course
    active_lesson: Lesson | None

    @property
    def active_lesson_id(self) -> int | None:
        return self.active_lesson.id.value if self.active_lesson else None


class GetLearnOverviewUseCase:
    """Read-only views over the learner's active course."""

    def __init__(
        self,
        progress_repository: ProgressRepositoryProtocol,
        curriculum_repository: CurriculumRepositoryProtocol,
        snapshot_service: ProgressSnapshotService,
        calculator: ProgressionCalculator,
    ) -> None:
        self.progress_repository = progress_repository
        self.curriculum_repository = curriculum_repository
        self.snapshot_service = snapshot_service
        self.calculator = calculator

    def get_units(self, user_id: str) -> list[UnitProgress]:
        """
        Units of the learner's active course with per-lesson completion.

        Returns an empty list when the learner has not selected a course.
        """
        user_id_vo = UserId(user_id)
        course = self._active_course(user_id_vo)
        if course is None:
            return []
        snapshot = self.snapshot_service.for_course(user_id_vo, course)
        return self.calculator.units_with_completion(course, snapshot)

    def get_course_progress(self, user_id: str) -> CourseProgress | None:
        """
        The first uncompleted lesson of the learner's active course.

        Returns None when the learner has not selected a course.
        """
        user_id_vo = UserId(user_id)
        course = self._active_course(user_id_vo)
        if course is None:
            return None
        snapshot = self.snapshot_service.for_course(user_id_vo, course)
        return CourseProgress(
            course=course,
            active_lesson=self.calculator.first_uncompleted_lesson(course, snapshot),
        )

    def _active_course(self, user_id: UserId) -> Course | None:
        progress = self.progress_repository.get_user_progress(user_id)
        if progress is None:
            return None
        return self.curriculum_repository.get_course(progress.active_course_id)
