"""ChallengeProgress entity: the per-(user, challenge) completion record."""

from dataclasses import dataclass

from lingo.domain.common.entity import Entity
from lingo.domain.common.value_objects import ChallengeId, ChallengeProgressId, UserId


@dataclass(eq=False)
class ChallengeProgress(Entity[ChallengeProgressId]):
    """
    Completion record of one challenge for one learner.

    Business Rules:
    - At most one record per (user_id, challenge_id)
    - Its existence alone marks later attempts as practice
    - Completion is monotone: once completed, always completed
    """

    id: ChallengeProgressId
    user_id: UserId
    challenge_id: ChallengeId
    completed: bool = False

    @property
    def is_new(self) -> bool:
        return self.id.value == 0

    def mark_completed(self) -> None:
        """Mark completed (idempotent)."""
        self.completed = True

    @classmethod
    def create_completed(cls, user_id: UserId, challenge_id: ChallengeId) -> "ChallengeProgress":
        """Create the record for a correct first attempt (ID is 0 until persisted)."""
        return cls(
            id=ChallengeProgressId.generate(),
            user_id=user_id,
            challenge_id=challenge_id,
            completed=True,
        )

    @classmethod
    def create_with_id(
        cls,
        id: ChallengeProgressId,
        user_id: UserId,
        challenge_id: ChallengeId,
        completed: bool,
    ) -> "ChallengeProgress":
        """Reconstitute a record from persistence."""
        return cls(id=id, user_id=user_id, challenge_id=challenge_id, completed=completed)
