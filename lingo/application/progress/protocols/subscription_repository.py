"""Protocol for reading subscriptions."""

from typing import Protocol

from lingo.domain.common.value_objects import UserId
from lingo.domain.progress.entities.user_subscription import UserSubscription


class SubscriptionRepositoryProtocol(Protocol):
    def get_subscription(self, user_id: UserId) -> UserSubscription | None:
        """The learner's subscription, if one was ever purchased."""
        ...
