"""Use case for viewing a lesson with the learner's completion state."""

import structlog

from lingo.application.progress.protocols.curriculum_repository import (
    CurriculumRepositoryProtocol,
)
from lingo.application.progress.protocols.progress_repository import ProgressRepositoryProtocol
from lingo.application.progress.services.progress_snapshot_service import (
    ProgressSnapshotService,
)
from lingo.domain.common.value_objects import LessonId, UserId
from lingo.domain.curriculum.entities import Lesson
from lingo.domain.curriculum.exceptions import CourseNotFoundError, LessonNotFoundError
from lingo.domain.progress.entities.user_progress import UserProgress
from lingo.domain.progress.exceptions import ProgressNotFoundError
from lingo.domain.progress.services.progression_calculator import (
    LessonView,
    ProgressionCalculator,
)
from lingo.exceptions import NotFoundError

logger = structlog.get_logger(__name__)


class GetLessonUseCase:
    """Use case for lesson views and lesson completion percentages."""

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

    def get_lesson_view(self, user_id: str, lesson_id: int | None = None) -> LessonView:
        """
        Get a lesson annotated with the learner's progress.

        Args:
            user_id: ID of the learner
            lesson_id: Lesson to open; the resume lesson of the active course when None

        Returns:
            LessonView with per-challenge completion, percentage and practice flag

        Raises:
            ProgressNotFoundError: If the learner has not selected a course
            LessonNotFoundError: If lesson_id does not exist
            NotFoundError: If lesson_id is None and no lesson is left to resume
        """
        user_id_vo = UserId(user_id)
        progress = self.progress_repository.get_user_progress(user_id_vo)
        if progress is None:
            raise ProgressNotFoundError(user_id)

        lesson = (
            self._resume_lesson(progress)
            if lesson_id is None
            else self.curriculum_repository.get_lesson_with_challenges(LessonId(lesson_id))
        )
        if lesson is None:
            if lesson_id is not None:
                raise LessonNotFoundError(lesson_id)
            raise NotFoundError("No uncompleted lesson left in the active course")

        snapshot = self.snapshot_service.for_lesson(user_id_vo, lesson)
        view = self.calculator.lesson_view(lesson, snapshot)
        logger.debug(
            "lesson_view_loaded",
            user_id=user_id,
            lesson_id=lesson.id.value,
            percentage=view.percentage,
            practice=view.practice,
        )
        return view

    def get_lesson_percentage(self, user_id: str, lesson_id: int | None = None) -> float:
        """
        Completion percentage of a lesson (the resume lesson when lesson_id is None).

        Returns 0 when the learner has no progress or the lesson does not exist.
        """
        user_id_vo = UserId(user_id)
        progress = self.progress_repository.get_user_progress(user_id_vo)
        if progress is None:
            return 0.0

        if lesson_id is None:
            lesson = self._resume_lesson(progress)
        else:
            lesson = self.curriculum_repository.get_lesson_with_challenges(LessonId(lesson_id))
        if lesson is None:
            return 0.0

        snapshot = self.snapshot_service.for_lesson(user_id_vo, lesson)
        return self.calculator.lesson_percentage(lesson, snapshot)

    def _resume_lesson(self, progress: UserProgress) -> Lesson | None:
        course = self.curriculum_repository.get_course(progress.active_course_id)
        if course is None:
            raise CourseNotFoundError(progress.active_course_id.value)
        snapshot = self.snapshot_service.for_course(progress.user_id, course)
        return self.calculator.first_uncompleted_lesson(course, snapshot)
