"""
Domain service resolving a challenge attempt.

The resolver is the progress state machine. Given the learner's progress,
the existing completion record (if any) and whether the selected answer was
correct, it applies the hearts/points rules to the aggregate and reports
which completion record has to be written. It performs no I/O; the caller
reads its inputs and persists its result inside one transaction.
"""

from dataclasses import dataclass

from lingo.domain.common.exceptions import InvariantViolationError
from lingo.domain.curriculum.entities.challenge import Challenge
from lingo.domain.progress.entities.challenge_progress import ChallengeProgress
from lingo.domain.progress.entities.user_progress import UserProgress
from lingo.domain.progress.outcomes import (
    AttemptOutcome,
    FirstCompleted,
    InsufficientHearts,
    Missed,
    PracticeCompleted,
    PracticeMiss,
)
from lingo.domain.progress.services.heart_policy import HeartPolicy, StandardHeartPolicy


@dataclass(frozen=True)
class AttemptResolution:
    """Outcome plus the completion record the caller must insert or update."""

    outcome: AttemptOutcome
    record_to_insert: ChallengeProgress | None = None
    record_to_update: ChallengeProgress | None = None

    @property
    def mutates_state(self) -> bool:
        return self.outcome.mutates_state


class AttemptResolver:
    """Stateless state machine for hearts, points and challenge completion."""

    def __init__(self, heart_policy: HeartPolicy | None = None) -> None:
        self.heart_policy = heart_policy or StandardHeartPolicy()

    def resolve(
        self,
        progress: UserProgress,
        challenge: Challenge,
        record: ChallengeProgress | None,
        correct: bool,
        subscription_active: bool = False,
    ) -> AttemptResolution:
        """
        Apply one attempt to the learner's progress.

        An existing record, completed or not, makes the attempt a practice attempt.
        Practice never costs hearts; a correct practice answer restores one heart.
        A first attempt requires at least one heart (unless the heart policy
        exempts the learner) and a wrong one spends a heart.

        Args:
            progress: Learner progress read inside the current transaction
            challenge: The attempted challenge
            record: Existing completion record for (learner, challenge), if any
            correct: Whether the selected option was the correct one
            subscription_active: Fed to the heart policy

        Returns:
            AttemptResolution; progress has already been mutated when the
            outcome mutates state

        Raises:
            InvariantViolationError: If the record belongs to another learner or challenge
        """
        if record is not None and (
            record.user_id != progress.id or record.challenge_id != challenge.id
        ):
            raise InvariantViolationError(
                "ChallengeProgress",
                f"record {record.id} does not belong to user {progress.id} "
                f"and challenge {challenge.id}",
            )

        is_practice = record is not None
        consumes_hearts = self.heart_policy.consumes_hearts(progress, subscription_active)

        if not correct:
            if is_practice:
                return AttemptResolution(PracticeMiss(progress.hearts, progress.points))
            if consumes_hearts and not progress.has_hearts:
                return AttemptResolution(InsufficientHearts(progress.hearts, progress.points))
            if consumes_hearts:
                progress.lose_heart()
            outcome: AttemptOutcome = Missed(progress.hearts, progress.points)
            progress.record_attempt(challenge.id, challenge.lesson_id, outcome.kind)
            return AttemptResolution(outcome)

        if record is not None:
            record.mark_completed()
            progress.regain_heart()
            progress.award_points()
            outcome = PracticeCompleted(progress.hearts, progress.points)
            progress.record_attempt(challenge.id, challenge.lesson_id, outcome.kind)
            return AttemptResolution(outcome, record_to_update=record)

        if consumes_hearts and not progress.has_hearts:
            return AttemptResolution(InsufficientHearts(progress.hearts, progress.points))

        new_record = ChallengeProgress.create_completed(progress.id, challenge.id)
        progress.award_points()
        outcome = FirstCompleted(progress.hearts, progress.points)
        progress.record_attempt(challenge.id, challenge.lesson_id, outcome.kind)
        return AttemptResolution(outcome, record_to_insert=new_record)
