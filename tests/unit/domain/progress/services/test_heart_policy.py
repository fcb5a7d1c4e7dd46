"""Tests for heart policies."""

from lingo.domain.common.value_objects import CourseId, UserId
from lingo.domain.progress.entities import UserProgress
from lingo.domain.progress.services import StandardHeartPolicy, SubscriberExemptHeartPolicy


class TestHeartPolicies:
    def test_standard_policy_always_consumes(self) -> None:
        progress = UserProgress(UserId("u1"), CourseId(1))
        policy = StandardHeartPolicy()
        assert policy.consumes_hearts(progress, subscription_active=False)
        assert policy.consumes_hearts(progress, subscription_active=True)

    def test_subscriber_exempt_policy(self) -> None:
        progress = UserProgress(UserId("u1"), CourseId(1))
        policy = SubscriberExemptHeartPolicy()
        assert policy.consumes_hearts(progress, subscription_active=False)
        assert not policy.consumes_hearts(progress, subscription_active=True)
