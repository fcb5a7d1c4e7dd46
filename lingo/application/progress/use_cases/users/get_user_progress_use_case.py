"""Use case for reading learner progress, subscription status and the leaderboard."""

from dataclasses import dataclass

from lingo.application.progress.protocols.progress_repository import ProgressRepositoryProtocol
from lingo.application.progress.protocols.subscription_repository import (
    SubscriptionRepositoryProtocol,
)
from lingo.domain.common.value_objects import UserId
from lingo.domain.progress.entities.user_progress import UserProgress
from lingo.domain.progress.entities.user_subscription import UserSubscription
from lingo.domain.progress.exceptions import ProgressNotFoundError


@dataclass(frozen=True)
class SubscriptionStatus:
    subscription: UserSubscription
    is_active: bool


class GetUserProgressUseCase:
    """Read-only access to aggregate learner state."""

    def __init__(
        self,
        progress_repository: ProgressRepositoryProtocol,
        subscription_repository: SubscriptionRepositoryProtocol,
    ) -> None:
        self.progress_repository = progress_repository
        self.subscription_repository = subscription_repository

    def get_user_progress(self, user_id: str) -> UserProgress:
        """
        Get the learner's hearts, points and active course.

        Raises:
            ProgressNotFoundError: If the learner has not selected a course
        """
        progress = self.progress_repository.get_user_progress(UserId(user_id))
        if progress is None:
            raise ProgressNotFoundError(user_id)
        return progress

    def get_user_subscription(self, user_id: str) -> SubscriptionStatus | None:
        subscription = self.subscription_repository.get_subscription(UserId(user_id))
        if subscription is None:
            return None
        return SubscriptionStatus(subscription=subscription, is_active=subscription.is_active())

    def get_top_users(self, limit: int) -> list[UserProgress]:
        """Learners with the most points, best first."""
        if limit < 1:
            return []
        return self.progress_repository.list_top_users(limit)
