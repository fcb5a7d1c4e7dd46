import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from lingo.application.progress.use_cases.courses.select_active_course_use_case import (
    SelectActiveCourseUseCase,
)
from lingo.application.progress.use_cases.users.get_user_progress_use_case import (
    GetUserProgressUseCase,
)
from lingo.core import container
from lingo.domain.common import DomainError
from lingo.exceptions import LingoError
from lingo.infrastructure.common.di import inject_use_case
from lingo.infrastructure.identity.dependencies import CurrentUserId
from lingo.infrastructure.progress.schemas import (
    SelectActiveCourseRequest,
    SubscriptionResponse,
    SubscriptionSchema,
    UserProgressSchema,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/me", tags=["progress"])


@router.put(
    "/progress/active-course",
    response_model=UserProgressSchema,
    status_code=status.HTTP_200_OK,
)
def select_active_course(
    request: SelectActiveCourseRequest,
    user_id: CurrentUserId,
    use_case: SelectActiveCourseUseCase = Depends(
        inject_use_case(container.select_active_course_use_case)
    ),
) -> UserProgressSchema:
    """
    Start or switch the learner's active course.

    A first selection starts the learner with full hearts and no points;
    later selections keep hearts and points.

    Args:
        request: Course to make active and optional display name/avatar
        user_id: Authenticated learner
        use_case: SelectActiveCourseUseCase injected via dependency container

    Returns:
        The saved progress
    """
    try:
        progress = use_case.select_active_course(
            user_id, request.course_id, request.user_name, request.user_image_src
        )
        return UserProgressSchema.from_domain(progress)
    except (DomainError, LingoError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to select course {request.course_id} for user {user_id}: {e!s}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/progress", response_model=UserProgressSchema, status_code=status.HTTP_200_OK)
def get_user_progress(
    user_id: CurrentUserId,
    use_case: GetUserProgressUseCase = Depends(
        inject_use_case(container.get_user_progress_use_case)
    ),
) -> UserProgressSchema:
    """Get the learner's hearts, points and active course."""
    try:
        return UserProgressSchema.from_domain(use_case.get_user_progress(user_id))
    except (DomainError, LingoError):
        raise
    except Exception as e:
        logger.error(f"Failed to get progress for user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/subscription", response_model=SubscriptionResponse, status_code=status.HTTP_200_OK)
def get_user_subscription(
    user_id: CurrentUserId,
    use_case: GetUserProgressUseCase = Depends(
        inject_use_case(container.get_user_progress_use_case)
    ),
) -> SubscriptionResponse:
    """Get the learner's subscription and whether it is active."""
    try:
        subscription_status = use_case.get_user_subscription(user_id)
        if subscription_status is None:
            return SubscriptionResponse(subscription=None)
        return SubscriptionResponse(
            subscription=SubscriptionSchema.from_status(subscription_status)
        )
    except (DomainError, LingoError):
        raise
    except Exception as e:
        logger.error(f"Failed to get subscription for user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
