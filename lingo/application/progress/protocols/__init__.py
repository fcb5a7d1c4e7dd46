from .curriculum_repository import CurriculumRepositoryProtocol
from .progress_notifier import ProgressNotifierProtocol
from .progress_repository import ProgressRepositoryProtocol
from .subscription_repository import SubscriptionRepositoryProtocol

__all__ = [
    "CurriculumRepositoryProtocol",
    "ProgressNotifierProtocol",
    "ProgressRepositoryProtocol",
    "SubscriptionRepositoryProtocol",
]
