"""Protocol for the progress repository."""

from typing import Protocol

from lingo.domain.common.value_objects import ChallengeId, ChallengeProgressId, UserId
from lingo.domain.progress.entities.challenge_progress import ChallengeProgress
from lingo.domain.progress.entities.user_progress import UserProgress


class ProgressRepositoryProtocol(Protocol):
    """
    Protocol for per-user progress and per-(user, challenge) completion records.

    Implementations never commit; all writes of one call to a use case are
    committed together by the Unit of Work.
    """

    def get_user_progress(
        self, user_id: UserId, *, for_update: bool = False
    ) -> UserProgress | None:
        """
        Get a learner's aggregate progress.

        Args:
            user_id: The learner
            for_update: Lock the row until the transaction ends

        Returns:
            UserProgress if the learner has selected a course, None otherwise
        """
        ...

    def upsert_user_progress(self, progress: UserProgress) -> UserProgress:
        """
        Insert or update a learner's aggregate progress.

        Updates are compare-and-set against the version that was read.

        Returns:
            Saved progress with the new version
        """
        ...

    def get_challenge_progress(
        self, user_id: UserId, challenge_id: ChallengeId
    ) -> ChallengeProgress | None:
        """Get the completion record for (user, challenge), if any."""
        ...

    def insert_challenge_progress(self, record: ChallengeProgress) -> ChallengeProgress:
        """
        Insert a new completion record.

        Returns:
            Saved record with its database id
        """
        ...

    def update_challenge_progress(
        self, record_id: ChallengeProgressId, completed: bool
    ) -> ChallengeProgress:
        """
        Set the completed flag of an existing record.

        Raises:
            ValueError: If the record does not exist
        """
        ...

    def list_challenge_progress(
        self, user_id: UserId, challenge_ids: list[ChallengeId] | None = None
    ) -> list[ChallengeProgress]:
        """
        List a learner's completion records.

        Args:
            user_id: The learner
            challenge_ids: Restrict to these challenges (all when None)
        """
        ...

    def list_top_users(self, limit: int) -> list[UserProgress]:
        """Learners ordered by points descending, then by user id."""
        ...
