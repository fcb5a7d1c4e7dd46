"""UserSubscription entity (read-only from the progress core's point of view)."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from lingo.domain.common.entity import Entity
from lingo.domain.common.value_objects import UserId

SUBSCRIPTION_GRACE_PERIOD = timedelta(days=1)


@dataclass(frozen=True, eq=False)
class UserSubscription(Entity[UserId]):
    """Paid plan of a learner, keyed by user id."""

    id: UserId
    stripe_price_id: str | None
    stripe_current_period_end: datetime

    def is_active(self, now: datetime | None = None) -> bool:
        """Active while a price is set and the period end plus one day is still ahead."""
        if not self.stripe_price_id:
            return False
        now = now or datetime.now(UTC)
        period_end = self.stripe_current_period_end
        if period_end.tzinfo is None:
            period_end = period_end.replace(tzinfo=UTC)
        return period_end + SUBSCRIPTION_GRACE_PERIOD > now
