"""Tests for UserSubscription.is_active."""

from datetime import UTC, datetime, timedelta

from lingo.domain.common.value_objects import UserId
from lingo.domain.progress.entities import UserSubscription

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def _subscription(period_end: datetime, price_id: str | None = "price_1") -> UserSubscription:
    return UserSubscription(
        id=UserId("u1"), stripe_price_id=price_id, stripe_current_period_end=period_end
    )


class TestUserSubscription:
    def test_active_within_period(self) -> None:
        assert _subscription(NOW + timedelta(days=10)).is_active(NOW)

    def test_active_during_one_day_grace(self) -> None:
        assert _subscription(NOW - timedelta(hours=23)).is_active(NOW)

    def test_inactive_after_grace(self) -> None:
        assert not _subscription(NOW - timedelta(days=1, seconds=1)).is_active(NOW)

    def test_inactive_without_price(self) -> None:
        assert not _subscription(NOW + timedelta(days=10), price_id=None).is_active(NOW)

    def test_naive_period_end_is_treated_as_utc(self) -> None:
        naive_end = (NOW + timedelta(hours=1)).replace(tzinfo=None)
        assert _subscription(naive_end).is_active(NOW)
