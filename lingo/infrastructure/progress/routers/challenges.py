import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path
from starlette import status

from lingo.application.progress.use_cases.attempts.resolve_attempt_use_case import (
    ResolveAttemptUseCase,
)
from lingo.core import container
from lingo.domain.common import DomainError
from lingo.exceptions import LingoError
from lingo.infrastructure.common.di import inject_use_case
from lingo.infrastructure.identity.dependencies import CurrentUserId
from lingo.infrastructure.progress.schemas import (
    AnswerRequest,
    AttemptOutcomeResponse,
    AttemptRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/me/challenges", tags=["challenges"])


@router.post(
    "/{challenge_id}/attempts",
    response_model=AttemptOutcomeResponse,
    status_code=status.HTTP_200_OK,
)
def resolve_attempt(
    challenge_id: Annotated[int, Path(ge=0, description="ID of the attempted challenge")],
    request: AttemptRequest,
    user_id: CurrentUserId,
    use_case: ResolveAttemptUseCase = Depends(
        inject_use_case(container.resolve_attempt_use_case)
    ),
) -> AttemptOutcomeResponse:
    """
    Resolve an attempt at a challenge.

    Blocking results (no hearts left, wrong practice answer) come back as
    outcomes with status 200; nothing is written for them.

    Args:
        challenge_id: ID of the attempted challenge
        request: Whether the answer was correct
        user_id: Authenticated learner
        use_case: ResolveAttemptUseCase injected via dependency container

    Returns:
        AttemptOutcomeResponse with the outcome and resulting hearts/points

    Raises:
        TransientRepositoryError: On concurrent modification or timeout (503)
    """
    try:
        outcome = use_case.resolve_attempt(user_id, challenge_id, request.correct)
        return AttemptOutcomeResponse.from_domain(outcome)
    except (DomainError, LingoError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to resolve attempt on challenge {challenge_id} for user {user_id}: {e!s}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{challenge_id}/answers",
    response_model=AttemptOutcomeResponse,
    status_code=status.HTTP_200_OK,
)
def submit_answer(
    challenge_id: Annotated[int, Path(ge=0, description="ID of the attempted challenge")],
    request: AnswerRequest,
    user_id: CurrentUserId,
    use_case: ResolveAttemptUseCase = Depends(
        inject_use_case(container.resolve_attempt_use_case)
    ),
) -> AttemptOutcomeResponse:
    """Resolve an attempt by the selected option; correctness is checked server-side."""
    try:
        outcome = use_case.submit_answer(user_id, challenge_id, request.option_id)
        return AttemptOutcomeResponse.from_domain(outcome)
    except (DomainError, LingoError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to submit answer on challenge {challenge_id} for user {user_id}: {e!s}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
