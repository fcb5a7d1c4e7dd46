"""Pydantic schemas for learner progress API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from lingo.application.progress.use_cases.users.get_user_progress_use_case import (
    SubscriptionStatus,
)
from lingo.domain.progress.entities.user_progress import UserProgress


class SelectActiveCourseRequest(BaseModel):
    """Schema for starting or switching the active course."""

    course_id: int = Field(..., ge=0, description="ID of the course to make active")
    user_name: str | None = Field(
        None, min_length=1, max_length=255, description="Display name to store"
    )
    user_image_src: str | None = Field(None, min_length=1, description="Avatar to store")


class UserProgressSchema(BaseModel):
    """Schema for a learner's aggregate progress."""

    user_id: str
    user_name: str
    user_image_src: str
    active_course_id: int
    hearts: int = Field(..., ge=0, le=5)
    points: int = Field(..., ge=0)

    @classmethod
    def from_domain(cls, progress: UserProgress) -> "UserProgressSchema":
        return cls(
            user_id=progress.id.value,
            user_name=progress.user_name,
            user_image_src=progress.user_image_src,
            active_course_id=progress.active_course_id.value,
            hearts=progress.hearts,
            points=progress.points,
        )


class SubscriptionSchema(BaseModel):
    """Schema for a learner's subscription and its derived status."""

    user_id: str
    stripe_price_id: str | None = None
    stripe_current_period_end: datetime
    is_active: bool

    @classmethod
    def from_status(cls, status: SubscriptionStatus) -> "SubscriptionSchema":
        subscription = status.subscription
        return cls(
            user_id=subscription.id.value,
            stripe_price_id=subscription.stripe_price_id,
            stripe_current_period_end=subscription.stripe_current_period_end,
            is_active=status.is_active,
        )


class SubscriptionResponse(BaseModel):
    """Subscription of the learner; null when they never subscribed."""

    subscription: SubscriptionSchema | None = None


class LeaderboardEntry(BaseModel):
    """Schema for one leaderboard row."""

    rank: int = Field(..., ge=1)
    user_id: str
    user_name: str
    user_image_src: str
    points: int


class LeaderboardResponse(BaseModel):
    """Schema for the top learners by points."""

    entries: list[LeaderboardEntry] = Field(..., description="Best first")
