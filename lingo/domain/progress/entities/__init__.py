from .challenge_progress import ChallengeProgress
from .user_progress import MAX_HEARTS, POINTS_PER_CHALLENGE, UserProgress
from .user_subscription import UserSubscription

__all__ = [
    "MAX_HEARTS",
    "POINTS_PER_CHALLENGE",
    "ChallengeProgress",
    "UserProgress",
    "UserSubscription",
]
