"""Course entity, the root of a curriculum snapshot."""

from collections.abc import Iterator
from dataclasses import dataclass

from lingo.domain.common.entity import Entity
from lingo.domain.common.value_objects import CourseId

from .lesson import Lesson
from .unit import Unit


@dataclass(frozen=True, eq=False)
class Course(Entity[CourseId]):
    """
    A course with its ordered units.

    A Course loaded with units is an immutable snapshot for the duration of a
    request; lesson order across the course is unit order, then lesson order.
    """

    id: CourseId
    title: str
    image_src: str
    units: tuple[Unit, ...] = ()

    def __post_init__(self) -> None:
        """Keep units in sequence order."""
        object.__setattr__(self, "units", tuple(sorted(self.units, key=lambda unit: unit.order)))

    def iter_lessons(self) -> Iterator[Lesson]:
        """Yield every lesson in unit-then-lesson order."""
        for unit in self.units:
            yield from unit.lessons
