"""Use case for selecting a learner's active course."""

import structlog

from lingo.application.common.unit_of_work import UnitOfWork
from lingo.application.progress.protocols.curriculum_repository import (
    CurriculumRepositoryProtocol,
)
from lingo.application.progress.protocols.progress_repository import ProgressRepositoryProtocol
from lingo.domain.common.value_objects import CourseId, UserId
from lingo.domain.curriculum.exceptions import CourseNotFoundError
from lingo.domain.progress.entities.user_progress import UserProgress

logger = structlog.get_logger(__name__)


class SelectActiveCourseUseCase:
    """Use case for starting or switching a learner's active course."""

    def __init__(
        self,
        progress_repository: ProgressRepositoryProtocol,
        curriculum_repository: CurriculumRepositoryProtocol,
        uow: UnitOfWork,
        timeout_seconds: float | None = None,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.progress_repository = progress_repository
        self.curriculum_repository = curriculum_repository
        self.uow = uow
        self.timeout_seconds = timeout_seconds

    def select_active_course(
        self,
        user_id: str,
        course_id: int,
        user_name: str | None = None,
        user_image_src: str | None = None,
    ) -> UserProgress:
        """
        Set the learner's active course.

        A learner without progress starts with full hearts and no points. An
        existing learner keeps hearts and points; only the course changes.

        Args:
            user_id: ID of the learner
            course_id: ID of the course to make active
            user_name: Optional display name to store
            user_image_src: Optional avatar to store

        Returns:
            The saved progress

        Raises:
            CourseNotFoundError: If the course does not exist
            TransientRepositoryError: On conflict or timeout; nothing was written
        """
        user_id_vo = UserId(user_id)
        course_id_vo = CourseId(course_id)

        course = self.curriculum_repository.get_course(course_id_vo)
        if not course:
            raise CourseNotFoundError(course_id)

        with self.uow:
            self.uow.begin(self.timeout_seconds)

            progress = self.progress_repository.get_user_progress(user_id_vo, for_update=True)
            created = progress is None
            if progress is None:
                progress = UserProgress.start(user_id_vo, course_id_vo, user_name, user_image_src)
            else:
                progress.select_course(course_id_vo, user_name, user_image_src)

            saved = self.progress_repository.upsert_user_progress(progress)
            self.uow.track(progress)
            self.uow.commit()

        logger.info(
            "active_course_selected",
            user_id=user_id,
            course_id=course_id,
            created=created,
        )
        return saved
