"""Repository for UserSubscription domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from lingo.domain.common.value_objects import UserId
from lingo.domain.progress.entities.user_subscription import UserSubscription
from lingo.infrastructure.progress.mappers.subscription_mapper import SubscriptionMapper
from lingo.models import UserSubscription as UserSubscriptionORM


class SubscriptionRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = SubscriptionMapper()

    def get_subscription(self, user_id: UserId) -> UserSubscription | None:
        stmt = select(UserSubscriptionORM).where(UserSubscriptionORM.user_id == user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None
