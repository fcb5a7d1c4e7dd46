"""Unit entity."""

from dataclasses import dataclass

from lingo.domain.common.entity import Entity
from lingo.domain.common.value_objects import CourseId, UnitId

from .lesson import Lesson


@dataclass(frozen=True, eq=False)
class Unit(Entity[UnitId]):
    """An ordered group of lessons inside a course."""

    id: UnitId
    course_id: CourseId
    title: str
    description: str
    order: int
    lessons: tuple[Lesson, ...] = ()

    def __post_init__(self) -> None:
        """Keep lessons in sequence order."""
        object.__setattr__(
            self, "lessons", tuple(sorted(self.lessons, key=lambda lesson: lesson.order))
        )
