"""Mapper for UserSubscription ORM → Domain conversion."""

from lingo.domain.common.value_objects import UserId
from lingo.domain.progress.entities.user_subscription import UserSubscription
from lingo.models import UserSubscription as UserSubscriptionORM


class SubscriptionMapper:
    def to_domain(self, orm_model: UserSubscriptionORM) -> UserSubscription:
        return UserSubscription(
            id=UserId(orm_model.user_id),
            stripe_price_id=orm_model.stripe_price_id,
            stripe_current_period_end=orm_model.stripe_current_period_end,
        )
