"""Tests for the Challenge entity."""

import pytest

from lingo.domain.common.exceptions import InvariantViolationError
from lingo.domain.common.value_objects import ChallengeId, ChallengeOptionId, LessonId
from lingo.domain.curriculum.entities import Challenge, ChallengeOption, ChallengeType
from lingo.domain.curriculum.exceptions import ChallengeOptionNotFoundError


def _challenge(*correct_flags: bool) -> Challenge:
    return Challenge(
        id=ChallengeId(1),
        lesson_id=LessonId(1),
        type=ChallengeType.ASSIST,
        question="Hello?",
        order=1,
        options=tuple(
            ChallengeOption(ChallengeOptionId(10 + index), ChallengeId(1), f"option {index}", flag)
            for index, flag in enumerate(correct_flags)
        ),
    )


class TestChallenge:
    def test_correct_option_is_the_single_correct_one(self) -> None:
        challenge = _challenge(False, True, False)
        assert challenge.correct_option().id == ChallengeOptionId(11)

    @pytest.mark.parametrize("flags", [(False, False), (True, True), ()])
    def test_not_exactly_one_correct_option_is_a_data_defect(self, flags) -> None:
        with pytest.raises(InvariantViolationError):
            _challenge(*flags).correct_option()

    def test_is_correct_answer(self) -> None:
        challenge = _challenge(True, False)
        assert challenge.is_correct_answer(ChallengeOptionId(10)) is True
        assert challenge.is_correct_answer(ChallengeOptionId(11)) is False

    def test_unknown_option_is_not_found(self) -> None:
        with pytest.raises(ChallengeOptionNotFoundError):
            _challenge(True, False).is_correct_answer(ChallengeOptionId(99))
