"""Use case for resolving a learner's attempt at a challenge."""

import structlog

from lingo.application.common.unit_of_work import UnitOfWork
from lingo.application.progress.protocols.curriculum_repository import (
    CurriculumRepositoryProtocol,
)
from lingo.application.progress.protocols.progress_repository import ProgressRepositoryProtocol
from lingo.application.progress.protocols.subscription_repository import (
    SubscriptionRepositoryProtocol,
)
from lingo.domain.common.exceptions import InvariantViolationError
from lingo.domain.common.value_objects import ChallengeId, ChallengeOptionId, UserId
from lingo.domain.curriculum.entities.challenge import Challenge
from lingo.domain.curriculum.exceptions import ChallengeNotFoundError
from lingo.domain.progress.exceptions import ProgressNotFoundError
from lingo.domain.progress.outcomes import AttemptOutcome
from lingo.domain.progress.services.attempt_resolver import AttemptResolver

logger = structlog.get_logger(__name__)


class ResolveAttemptUseCase:
    """
    Use case for resolving challenge attempts.

    Reads, decides and writes inside a single transaction. The learner's
    progress row is locked on read and written with a version check, so two
    concurrent attempts by the same learner cannot both act on the same hearts
    value. Any failure before commit leaves stored state untouched.
    """

    def __init__(
        self,
        progress_repository: ProgressRepositoryProtocol,
        curriculum_repository: CurriculumRepositoryProtocol,
        subscription_repository: SubscriptionRepositoryProtocol,
        uow: UnitOfWork,
        attempt_resolver: AttemptResolver,
        timeout_seconds: float | None = None,
    ) -> None:
        """Initialize use case with repository protocols and the attempt resolver."""
        self.progress_repository = progress_repository
        self.curriculum_repository = curriculum_repository
        self.subscription_repository = subscription_repository
        self.uow = uow
        self.attempt_resolver = attempt_resolver
        self.timeout_seconds = timeout_seconds

    def resolve_attempt(
        self,
        user_id: str,
        challenge_id: int,
        correct: bool,
        timeout_seconds: float | None = None,
    ) -> AttemptOutcome:
        """
        Resolve an attempt whose correctness the caller already knows.

        Args:
            user_id: ID of the learner
            challenge_id: ID of the attempted challenge
            correct: Whether the selected option was correct
            timeout_seconds: Bound for each repository call (defaults to the configured one)

        Returns:
            The attempt outcome; InsufficientHearts and PracticeMiss are returned, not raised

        Raises:
            ChallengeNotFoundError: If the challenge does not exist
            ProgressNotFoundError: If the learner has not selected a course
            InvariantViolationError: If the challenge has no single correct option
            TransientRepositoryError: On conflict or timeout; nothing was written
        """
        challenge = self._load_challenge(ChallengeId(challenge_id))
        self._check_correct_option(challenge)
        return self._resolve(UserId(user_id), challenge, correct, timeout_seconds)

    def submit_answer(
        self,
        user_id: str,
        challenge_id: int,
        option_id: int,
        timeout_seconds: float | None = None,
    ) -> AttemptOutcome:
        """
        Resolve an attempt from the selected option.

        Raises:
            ChallengeOptionNotFoundError: If the option is not part of the challenge
            (plus everything resolve_attempt raises)
        """
        challenge = self._load_challenge(ChallengeId(challenge_id))
        self._check_correct_option(challenge)
        correct = challenge.is_correct_answer(ChallengeOptionId(option_id))
        return self._resolve(UserId(user_id), challenge, correct, timeout_seconds)

    def _load_challenge(self, challenge_id: ChallengeId) -> Challenge:
        challenge = self.curriculum_repository.get_challenge(challenge_id)
        if not challenge:
            raise ChallengeNotFoundError(challenge_id.value)
        return challenge

    def _check_correct_option(self, challenge: Challenge) -> None:
        try:
            challenge.correct_option()
        except InvariantViolationError:
            logger.error(
                "challenge_without_single_correct_option",
                challenge_id=challenge.id.value,
                lesson_id=challenge.lesson_id.value,
            )
            raise

    def _resolve(
        self,
        user_id: UserId,
        challenge: Challenge,
        correct: bool,
        timeout_seconds: float | None,
    ) -> AttemptOutcome:
        with self.uow:
            self.uow.begin(timeout_seconds or self.timeout_seconds)

            progress = self.progress_repository.get_user_progress(user_id, for_update=True)
            if progress is None:
                raise ProgressNotFoundError(user_id.value)

            record = self.progress_repository.get_challenge_progress(user_id, challenge.id)
            subscription = self.subscription_repository.get_subscription(user_id)
            subscription_active = subscription.is_active() if subscription else False

            resolution = self.attempt_resolver.resolve(
                progress=progress,
                challenge=challenge,
                record=record,
                correct=correct,
                subscription_active=subscription_active,
            )

            if not resolution.mutates_state:
                # Releases the row lock
                self.uow.rollback()
            else:
                if resolution.record_to_insert is not None:
                    self.progress_repository.insert_challenge_progress(resolution.record_to_insert)
                if resolution.record_to_update is not None:
                    self.progress_repository.update_challenge_progress(
                        resolution.record_to_update.id, completed=True
                    )
                self.progress_repository.upsert_user_progress(progress)
                self.uow.track(progress)
                self.uow.commit()

        logger.info(
            "attempt_resolved",
            user_id=user_id.value,
            challenge_id=challenge.id.value,
            lesson_id=challenge.lesson_id.value,
            correct=correct,
            practice=record is not None,
            outcome=resolution.outcome.kind.value,
            hearts=resolution.outcome.hearts,
            points=resolution.outcome.points,
        )
        return resolution.outcome
