"""Challenge and challenge option entities."""

from dataclasses import dataclass
from enum import StrEnum

from lingo.domain.common.entity import Entity
from lingo.domain.common.exceptions import InvariantViolationError
from lingo.domain.common.value_objects import ChallengeId, ChallengeOptionId, LessonId
from lingo.domain.curriculum.exceptions import ChallengeOptionNotFoundError


class ChallengeType(StrEnum):
    """How a challenge is presented. Resolution does not depend on it."""

    SELECT = "SELECT"
    ASSIST = "ASSIST"


@dataclass(frozen=True, eq=False)
class ChallengeOption(Entity[ChallengeOptionId]):
    """One selectable answer of a challenge."""

    id: ChallengeOptionId
    challenge_id: ChallengeId
    text: str
    correct: bool
    image_src: str | None = None
    audio_src: str | None = None


@dataclass(frozen=True, eq=False)
class Challenge(Entity[ChallengeId]):
    """
    A single question inside a lesson.

    Business Rules:
    - Exactly one option is correct; anything else is a curriculum data defect
    - Options are only meaningful for the challenge they belong to
    """

    id: ChallengeId
    lesson_id: LessonId
    type: ChallengeType
    question: str
    order: int
    options: tuple[ChallengeOption, ...] = ()

    def correct_option(self) -> ChallengeOption:
        """
        Return the single correct option.

        Raises:
            InvariantViolationError: If the challenge has zero or several correct options
        """
        correct = [option for option in self.options if option.correct]
        if len(correct) != 1:
            raise InvariantViolationError(
                "Challenge",
                f"challenge {self.id} must have exactly one correct option, found {len(correct)}",
            )
        return correct[0]

    def find_option(self, option_id: ChallengeOptionId) -> ChallengeOption:
        for option in self.options:
            if option.id == option_id:
                return option
        raise ChallengeOptionNotFoundError(option_id.value, self.id.value)

    def is_correct_answer(self, option_id: ChallengeOptionId) -> bool:
        """
        Check a selected option against the correct one.

        Raises:
            ChallengeOptionNotFoundError: If the option is not part of this challenge
            InvariantViolationError: If the challenge has no single correct option
        """
        selected = self.find_option(option_id)
        return selected.id == self.correct_option().id
