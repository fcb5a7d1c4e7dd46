"""Tests for the UserProgress aggregate."""

import pytest

from lingo.domain.common.exceptions import InvariantViolationError, ValidationError
from lingo.domain.common.value_objects import CourseId, UserId
from lingo.domain.progress.entities import MAX_HEARTS, POINTS_PER_CHALLENGE, UserProgress
from lingo.domain.progress.events import ActiveCourseSelected


class TestUserProgress:
    def test_start_gives_full_hearts_and_no_points(self) -> None:
        progress = UserProgress.start(UserId("u1"), CourseId(1))

        assert progress.hearts == MAX_HEARTS
        assert progress.points == 0
        assert progress.user_name == "User"
        assert progress.user_image_src == "/mascot.svg"
        events = progress.collect_events()
        assert len(events) == 1
        assert isinstance(events[0], ActiveCourseSelected)

    def test_select_course_keeps_hearts_and_points(self) -> None:
        progress = UserProgress(UserId("u1"), CourseId(1), hearts=2, points=40)
        progress.select_course(CourseId(2), user_name="Ana")

        assert progress.active_course_id == CourseId(2)
        assert progress.hearts == 2
        assert progress.points == 40
        assert progress.user_name == "Ana"
        assert progress.user_image_src == "/mascot.svg"

    def test_hearts_are_clamped(self) -> None:
        progress = UserProgress(UserId("u1"), CourseId(1), hearts=0)
        progress.lose_heart()
        assert progress.hearts == 0

        progress = UserProgress(UserId("u1"), CourseId(1), hearts=MAX_HEARTS)
        progress.regain_heart()
        assert progress.hearts == MAX_HEARTS

    def test_award_points_defaults_to_challenge_reward(self) -> None:
        progress = UserProgress(UserId("u1"), CourseId(1))
        progress.award_points()
        assert progress.points == POINTS_PER_CHALLENGE

    @pytest.mark.parametrize("amount", [0, -10])
    def test_award_points_rejects_non_positive_amounts(self, amount: int) -> None:
        progress = UserProgress(UserId("u1"), CourseId(1), points=10)
        with pytest.raises(ValidationError):
            progress.award_points(amount)
        assert progress.points == 10

    @pytest.mark.parametrize(("hearts", "points"), [(-1, 0), (6, 0), (5, -1)])
    def test_out_of_range_state_is_rejected(self, hearts: int, points: int) -> None:
        with pytest.raises(InvariantViolationError):
            UserProgress(UserId("u1"), CourseId(1), hearts=hearts, points=points)

    def test_empty_user_id_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            UserId("")
