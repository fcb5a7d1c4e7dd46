import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path
from starlette import status

from lingo.application.progress.use_cases.courses.get_courses_use_case import GetCoursesUseCase
from lingo.core import container
from lingo.domain.common import DomainError
from lingo.exceptions import LingoError
from lingo.infrastructure.common.di import inject_use_case
from lingo.infrastructure.progress.schemas import CourseDetail, CoursesResponse, CourseSummary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=CoursesResponse, status_code=status.HTTP_200_OK)
def list_courses(
    use_case: GetCoursesUseCase = Depends(inject_use_case(container.get_courses_use_case)),
) -> CoursesResponse:
    """
    List all courses.

    Returns:
        CoursesResponse with every course, without its units
    """
    try:
        courses = use_case.list_courses()
        return CoursesResponse(courses=[CourseSummary.from_domain(c) for c in courses])
    except (DomainError, LingoError):
        raise
    except Exception as e:
        logger.error(f"Failed to list courses: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{course_id}", response_model=CourseDetail, status_code=status.HTTP_200_OK)
def get_course(
    course_id: Annotated[int, Path(ge=0, description="ID of the course")],
    use_case: GetCoursesUseCase = Depends(inject_use_case(container.get_courses_use_case)),
) -> CourseDetail:
    """
    Get a course with its units, lessons and challenges in order.

    Raises:
        CourseNotFoundError: If the course does not exist (404)
    """
    try:
        return CourseDetail.from_domain(use_case.get_course(course_id))
    except (DomainError, LingoError):
        raise
    except Exception as e:
        logger.error(f"Failed to get course {course_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
