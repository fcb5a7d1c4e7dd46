from .curriculum_mapper import CurriculumMapper
from .progress_mapper import ProgressMapper
from .subscription_mapper import SubscriptionMapper

__all__ = ["CurriculumMapper", "ProgressMapper", "SubscriptionMapper"]
