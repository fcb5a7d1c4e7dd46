"""Tests for the AttemptResolver domain service."""

import pytest

from lingo.domain.common.exceptions import InvariantViolationError
from lingo.domain.common.value_objects import (
    ChallengeId,
    ChallengeOptionId,
    ChallengeProgressId,
    CourseId,
    LessonId,
    UserId,
)
from lingo.domain.curriculum.entities import Challenge, ChallengeOption, ChallengeType
from lingo.domain.progress.entities import ChallengeProgress, UserProgress
from lingo.domain.progress.events import ChallengeAttemptResolved
from lingo.domain.progress.outcomes import (
    FirstCompleted,
    InsufficientHearts,
    Missed,
    OutcomeKind,
    PracticeCompleted,
    PracticeMiss,
)
from lingo.domain.progress.services import AttemptResolver, SubscriberExemptHeartPolicy

USER = UserId("user_1")


def _progress(hearts: int = 5, points: int = 0) -> UserProgress:
    return UserProgress.create_with_id(
        id=USER,
        active_course_id=CourseId(1),
        hearts=hearts,
        points=points,
        user_name="User",
        user_image_src="/mascot.svg",
        version=1,
    )


def _challenge(challenge_id: int = 1) -> Challenge:
    return Challenge(
        id=ChallengeId(challenge_id),
        lesson_id=LessonId(1),
        type=ChallengeType.SELECT,
        question="Hello?",
        order=1,
        options=(
            ChallengeOption(ChallengeOptionId(11), ChallengeId(challenge_id), "hola", True),
            ChallengeOption(ChallengeOptionId(12), ChallengeId(challenge_id), "no", False),
        ),
    )


def _record(completed: bool = True, user_id: UserId = USER, challenge_id: int = 1):
    return ChallengeProgress.create_with_id(
        id=ChallengeProgressId(7),
        user_id=user_id,
        challenge_id=ChallengeId(challenge_id),
        completed=completed,
    )


class TestFirstAttempts:
    def test_wrong_first_attempt_spends_a_heart(self) -> None:
        """Scenario A: hearts=5, wrong first attempt → hearts=4, Missed."""
        progress = _progress(hearts=5)
        resolution = AttemptResolver().resolve(progress, _challenge(), None, correct=False)

        assert isinstance(resolution.outcome, Missed)
        assert resolution.outcome.hearts_remaining == 4
        assert progress.hearts == 4
        assert progress.points == 0
        assert resolution.record_to_insert is None
        assert resolution.mutates_state

    def test_correct_first_attempt_without_hearts_is_blocked(self) -> None:
        """Scenario B: hearts=0, correct first attempt → InsufficientHearts, no change."""
        progress = _progress(hearts=0, points=30)
        resolution = AttemptResolver().resolve(progress, _challenge(), None, correct=True)

        assert isinstance(resolution.outcome, InsufficientHearts)
        assert progress.points == 30
        assert progress.hearts == 0
        assert resolution.record_to_insert is None
        assert not resolution.mutates_state
        assert progress.pending_events == []

    def test_wrong_first_attempt_without_hearts_is_blocked(self) -> None:
        progress = _progress(hearts=0)
        resolution = AttemptResolver().resolve(progress, _challenge(), None, correct=False)

        assert isinstance(resolution.outcome, InsufficientHearts)
        assert progress.hearts == 0

    def test_correct_first_attempt_creates_completed_record(self) -> None:
        """Scenario E: hearts=5, correct first attempt → +10 points, record inserted."""
        progress = _progress(hearts=5, points=20)
        resolution = AttemptResolver().resolve(progress, _challenge(), None, correct=True)

        assert isinstance(resolution.outcome, FirstCompleted)
        assert progress.points == 30
        assert progress.hearts == 5
        record = resolution.record_to_insert
        assert record is not None
        assert record.completed is True
        assert record.user_id == USER
        assert record.challenge_id == ChallengeId(1)
        assert record.is_new

    def test_correct_first_attempt_with_one_heart_keeps_it(self) -> None:
        progress = _progress(hearts=1)
        resolution = AttemptResolver().resolve(progress, _challenge(), None, correct=True)

        assert isinstance(resolution.outcome, FirstCompleted)
        assert progress.hearts == 1


class TestPracticeAttempts:
    def test_wrong_practice_attempt_is_free(self) -> None:
        """Scenario C: hearts=0, wrong practice attempt → PracticeMiss, hearts unchanged."""
        progress = _progress(hearts=0, points=10)
        resolution = AttemptResolver().resolve(progress, _challenge(), _record(), correct=False)

        assert isinstance(resolution.outcome, PracticeMiss)
        assert progress.hearts == 0
        assert progress.points == 10
        assert not resolution.mutates_state

    def test_correct_practice_attempt_restores_a_heart(self) -> None:
        """Scenario D: hearts=3, correct practice attempt → hearts=4, +10 points."""
        progress = _progress(hearts=3, points=50)
        record = _record()
        resolution = AttemptResolver().resolve(progress, _challenge(), record, correct=True)

        assert isinstance(resolution.outcome, PracticeCompleted)
        assert progress.hearts == 4
        assert progress.points == 60
        assert resolution.record_to_update is record
        assert resolution.record_to_insert is None

    def test_correct_practice_attempt_with_full_hearts_stays_at_max(self) -> None:
        progress = _progress(hearts=5)
        AttemptResolver().resolve(progress, _challenge(), _record(), correct=True)

        assert progress.hearts == 5
        assert progress.points == 10

    def test_correct_practice_attempt_without_hearts_is_allowed(self) -> None:
        progress = _progress(hearts=0)
        resolution = AttemptResolver().resolve(progress, _challenge(), _record(), correct=True)

        assert isinstance(resolution.outcome, PracticeCompleted)
        assert progress.hearts == 1

    def test_uncompleted_record_counts_as_practice(self) -> None:
        record = _record(completed=False)
        progress = _progress(hearts=2)
        resolution = AttemptResolver().resolve(progress, _challenge(), record, correct=True)

        assert isinstance(resolution.outcome, PracticeCompleted)
        assert record.completed is True
        assert progress.hearts == 3

    def test_repeated_practice_keeps_rewarding(self) -> None:
        """Each correct practice answer grants a heart and points, never a new record."""
        progress = _progress(hearts=1)
        record = _record()
        resolver = AttemptResolver()
        for _ in range(3):
            resolution = resolver.resolve(progress, _challenge(), record, correct=True)
            assert resolution.record_to_insert is None

        assert record.completed is True
        assert progress.hearts == 4
        assert progress.points == 30


class TestResolverInvariants:
    def test_hearts_stay_in_bounds_over_any_sequence(self) -> None:
        progress = _progress(hearts=2)
        resolver = AttemptResolver()
        record = None
        for step in range(40):
            correct = step % 3 == 0
            resolution = resolver.resolve(progress, _challenge(), record, correct=correct)
            if resolution.record_to_insert is not None:
                record = resolution.record_to_insert
            assert 0 <= progress.hearts <= 5

    def test_points_never_decrease(self) -> None:
        progress = _progress(hearts=5)
        resolver = AttemptResolver()
        previous = progress.points
        for step in range(20):
            record = _record() if step % 2 else None
            resolver.resolve(progress, _challenge(), record, correct=step % 4 != 1)
            assert progress.points >= previous
            previous = progress.points

    def test_record_of_another_user_is_rejected(self) -> None:
        with pytest.raises(InvariantViolationError):
            AttemptResolver().resolve(
                _progress(), _challenge(), _record(user_id=UserId("other")), correct=True
            )

    def test_record_of_another_challenge_is_rejected(self) -> None:
        with pytest.raises(InvariantViolationError):
            AttemptResolver().resolve(
                _progress(), _challenge(), _record(challenge_id=2), correct=True
            )

    def test_mutating_outcome_records_event(self) -> None:
        progress = _progress()
        AttemptResolver().resolve(progress, _challenge(), None, correct=True)

        events = progress.collect_events()
        assert len(events) == 1
        event = events[0]
        assert isinstance(event, ChallengeAttemptResolved)
        assert event.lesson_id == LessonId(1)
        assert event.outcome == OutcomeKind.FIRST_COMPLETED


class TestSubscriberExemptHeartPolicy:
    def test_active_subscriber_is_not_blocked_without_hearts(self) -> None:
        resolver = AttemptResolver(SubscriberExemptHeartPolicy())
        progress = _progress(hearts=0)
        resolution = resolver.resolve(
            progress, _challenge(), None, correct=True, subscription_active=True
        )

        assert isinstance(resolution.outcome, FirstCompleted)
        assert progress.points == 10

    def test_active_subscriber_keeps_hearts_on_miss(self) -> None:
        resolver = AttemptResolver(SubscriberExemptHeartPolicy())
        progress = _progress(hearts=3)
        resolution = resolver.resolve(
            progress, _challenge(), None, correct=False, subscription_active=True
        )

        assert isinstance(resolution.outcome, Missed)
        assert progress.hearts == 3

    def test_inactive_subscriber_follows_standard_rules(self) -> None:
        resolver = AttemptResolver(SubscriberExemptHeartPolicy())
        progress = _progress(hearts=0)
        resolution = resolver.resolve(
            progress, _challenge(), None, correct=True, subscription_active=False
        )

        assert isinstance(resolution.outcome, InsufficientHearts)

    def test_standard_policy_ignores_subscription(self) -> None:
        progress = _progress(hearts=0)
        resolution = AttemptResolver().resolve(
            progress, _challenge(), None, correct=True, subscription_active=True
        )

        assert isinstance(resolution.outcome, InsufficientHearts)
