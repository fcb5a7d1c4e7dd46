import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from lingo.application.progress.use_cases.users.get_user_progress_use_case import (
    GetUserProgressUseCase,
)
from lingo.config import get_settings
from lingo.core import container
from lingo.domain.common import DomainError
from lingo.exceptions import LingoError
from lingo.infrastructure.common.di import inject_use_case
from lingo.infrastructure.identity.dependencies import CurrentUserId
from lingo.infrastructure.progress.schemas import LeaderboardEntry, LeaderboardResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


@router.get("", response_model=LeaderboardResponse, status_code=status.HTTP_200_OK)
def get_leaderboard(
    _user_id: CurrentUserId,
    limit: Annotated[int | None, Query(ge=1, le=100)] = None,
    use_case: GetUserProgressUseCase = Depends(
        inject_use_case(container.get_user_progress_use_case)
    ),
) -> LeaderboardResponse:
    """
    Learners with the most points, best first; ties ordered by user id.

    Args:
        limit: Number of entries (defaults to the configured leaderboard size)
    """
    try:
        top_users = use_case.get_top_users(limit or get_settings().LEADERBOARD_SIZE)
        return LeaderboardResponse(
            entries=[
                LeaderboardEntry(
                    rank=rank,
                    user_id=progress.id.value,
                    user_name=progress.user_name,
                    user_image_src=progress.user_image_src,
                    points=progress.points,
                )
                for rank, progress in enumerate(top_users, start=1)
            ]
        )
    except (DomainError, LingoError):
        raise
    except Exception as e:
        logger.error(f"Failed to get leaderboard: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
