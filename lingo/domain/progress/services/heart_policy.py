"""Policies deciding whether an attempt spends hearts."""

from typing import Protocol

from lingo.domain.progress.entities.user_progress import UserProgress


class HeartPolicy(Protocol):
    """Hook consulted by the attempt resolver before spending or checking hearts."""

    def consumes_hearts(self, progress: UserProgress, subscription_active: bool) -> bool:
        """Return True if first attempts by this learner spend and require hearts."""
        ...


class StandardHeartPolicy:
    """Every learner spends hearts, subscribers included."""

    def consumes_hearts(self, progress: UserProgress, subscription_active: bool) -> bool:
        return True


class SubscriberExemptHeartPolicy:
    """Learners with an active subscription have unlimited hearts."""

    def consumes_hearts(self, progress: UserProgress, subscription_active: bool) -> bool:
        return not subscription_active
