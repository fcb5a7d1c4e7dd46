"""Lesson entity."""

from dataclasses import dataclass

from lingo.domain.common.entity import Entity
from lingo.domain.common.value_objects import ChallengeId, LessonId, UnitId

from .challenge import Challenge


@dataclass(frozen=True, eq=False)
class Lesson(Entity[LessonId]):
    """An ordered group of challenges inside a unit."""

    id: LessonId
    unit_id: UnitId
    title: str
    order: int
    challenges: tuple[Challenge, ...] = ()

    def __post_init__(self) -> None:
        """Keep challenges in sequence order."""
        object.__setattr__(
            self, "challenges", tuple(sorted(self.challenges, key=lambda c: c.order))
        )

    @property
    def challenge_ids(self) -> list[ChallengeId]:
        return [challenge.id for challenge in self.challenges]

    @property
    def is_empty(self) -> bool:
        return not self.challenges
