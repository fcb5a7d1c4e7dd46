from .curriculum_repository import CurriculumRepository
from .progress_repository import ProgressRepository
from .subscription_repository import SubscriptionRepository

__all__ = ["CurriculumRepository", "ProgressRepository", "SubscriptionRepository"]
