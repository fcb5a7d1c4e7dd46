import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from starlette import status

from lingo.application.progress.use_cases.learn.get_learn_overview_use_case import (
    GetLearnOverviewUseCase,
)
from lingo.application.progress.use_cases.learn.get_lesson_use_case import GetLessonUseCase
from lingo.core import container
from lingo.domain.common import DomainError
from lingo.exceptions import LingoError
from lingo.infrastructure.common.di import inject_use_case
from lingo.infrastructure.identity.dependencies import CurrentUserId
from lingo.infrastructure.progress.schemas import (
    CourseProgressResponse,
    LessonPercentageResponse,
    LessonViewResponse,
    UnitsResponse,
    UnitWithCompletion,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/me", tags=["learn"])


@router.get("/learn/units", response_model=UnitsResponse, status_code=status.HTTP_200_OK)
def get_units(
    user_id: CurrentUserId,
    use_case: GetLearnOverviewUseCase = Depends(
        inject_use_case(container.get_learn_overview_use_case)
    ),
) -> UnitsResponse:
    """Units of the active course with per-lesson completion (empty without a course)."""
    try:
        units = use_case.get_units(user_id)
        return UnitsResponse(units=[UnitWithCompletion.from_domain(u) for u in units])
    except (DomainError, LingoError):
        raise
    except Exception as e:
        logger.error(f"Failed to get units for user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/learn/course-progress",
    response_model=CourseProgressResponse,
    status_code=status.HTTP_200_OK,
)
def get_course_progress(
    user_id: CurrentUserId,
    use_case: GetLearnOverviewUseCase = Depends(
        inject_use_case(container.get_learn_overview_use_case)
    ),
) -> CourseProgressResponse:
    """First uncompleted lesson of the active course."""
    try:
        return CourseProgressResponse.from_domain(use_case.get_course_progress(user_id))
    except (DomainError, LingoError):
        raise
    except Exception as e:
        logger.error(f"Failed to get course progress for user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/learn/lesson-percentage",
    response_model=LessonPercentageResponse,
    status_code=status.HTTP_200_OK,
)
def get_lesson_percentage(
    user_id: CurrentUserId,
    lesson_id: Annotated[int | None, Query(ge=0, description="Lesson to measure")] = None,
    use_case: GetLessonUseCase = Depends(inject_use_case(container.get_lesson_use_case)),
) -> LessonPercentageResponse:
    """
    Completion percentage of a lesson, or of the resume lesson when lesson_id is omitted.

    Returns 0 when the learner has no course or the lesson does not exist.
    """
    try:
        percentage = use_case.get_lesson_percentage(user_id, lesson_id)
        return LessonPercentageResponse(lesson_id=lesson_id, percentage=percentage)
    except (DomainError, LingoError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to get lesson percentage for user {user_id}: {e!s}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/lessons/current",
    response_model=LessonViewResponse,
    status_code=status.HTTP_200_OK,
)
def get_current_lesson(
    user_id: CurrentUserId,
    use_case: GetLessonUseCase = Depends(inject_use_case(container.get_lesson_use_case)),
) -> LessonViewResponse:
    """
    Get the lesson the learner should continue with.

    Raises:
        ProgressNotFoundError: If the learner has not selected a course (404)
        NotFoundError: If every lesson of the course is completed (404)
    """
    try:
        return LessonViewResponse.from_domain(use_case.get_lesson_view(user_id))
    except (DomainError, LingoError):
        raise
    except Exception as e:
        logger.error(f"Failed to get current lesson for user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/lessons/{lesson_id}",
    response_model=LessonViewResponse,
    status_code=status.HTTP_200_OK,
)
def get_lesson(
    lesson_id: Annotated[int, Path(ge=0, description="ID of the lesson")],
    user_id: CurrentUserId,
    use_case: GetLessonUseCase = Depends(inject_use_case(container.get_lesson_use_case)),
) -> LessonViewResponse:
    """
    Get a lesson annotated with the learner's completion state.

    A fully completed lesson is returned as practice with display percentage 0.
    """
    try:
        return LessonViewResponse.from_domain(use_case.get_lesson_view(user_id, lesson_id))
    except (DomainError, LingoError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to get lesson {lesson_id} for user {user_id}: {e!s}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
