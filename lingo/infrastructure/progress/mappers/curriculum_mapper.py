"""Mapper for curriculum ORM → Domain conversion."""

from lingo.domain.common.value_objects import (
    ChallengeId,
    ChallengeOptionId,
    CourseId,
    LessonId,
    UnitId,
)
from lingo.domain.curriculum.entities import (
    Challenge,
    ChallengeOption,
    ChallengeType,
    Course,
    Lesson,
    Unit,
)
from lingo.models import Challenge as ChallengeORM
from lingo.models import ChallengeOption as ChallengeOptionORM
from lingo.models import Course as CourseORM
from lingo.models import Lesson as LessonORM
from lingo.models import Unit as UnitORM


class CurriculumMapper:
    """Builds immutable curriculum snapshots from ORM rows (read-only, no to_orm)."""

    def course_to_domain(self, orm_model: CourseORM, include_units: bool = True) -> Course:
        return Course(
            id=CourseId(orm_model.id),
            title=orm_model.title,
            image_src=orm_model.image_src,
            units=tuple(self.unit_to_domain(unit) for unit in orm_model.units)
            if include_units
            else (),
        )

    def unit_to_domain(self, orm_model: UnitORM) -> Unit:
        return Unit(
            id=UnitId(orm_model.id),
            course_id=CourseId(orm_model.course_id),
            title=orm_model.title,
            description=orm_model.description,
            order=orm_model.order,
            lessons=tuple(self.lesson_to_domain(lesson) for lesson in orm_model.lessons),
        )

    def lesson_to_domain(self, orm_model: LessonORM) -> Lesson:
        return Lesson(
            id=LessonId(orm_model.id),
            unit_id=UnitId(orm_model.unit_id),
            title=orm_model.title,
            order=orm_model.order,
            challenges=tuple(self.challenge_to_domain(c) for c in orm_model.challenges),
        )

    def challenge_to_domain(self, orm_model: ChallengeORM) -> Challenge:
        return Challenge(
            id=ChallengeId(orm_model.id),
            lesson_id=LessonId(orm_model.lesson_id),
            type=ChallengeType(orm_model.type),
            question=orm_model.question,
            order=orm_model.order,
            options=tuple(self.option_to_domain(option) for option in orm_model.options),
        )

    def option_to_domain(self, orm_model: ChallengeOptionORM) -> ChallengeOption:
        return ChallengeOption(
            id=ChallengeOptionId(orm_model.id),
            challenge_id=ChallengeId(orm_model.challenge_id),
            text=orm_model.text,
            correct=orm_model.correct,
            image_src=orm_model.image_src,
            audio_src=orm_model.audio_src,
        )
