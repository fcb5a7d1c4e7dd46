"""Read-only repository for the curriculum tree."""

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from lingo.domain.common.value_objects import ChallengeId, CourseId, LessonId
from lingo.domain.curriculum.entities import Challenge, Course, Lesson
from lingo.infrastructure.progress.mappers.curriculum_mapper import CurriculumMapper
from lingo.models import Challenge as ChallengeORM
from lingo.models import Course as CourseORM
from lingo.models import Lesson as LessonORM
from lingo.models import Unit as UnitORM


class CurriculumRepository:
    """Loads courses, units, lessons and challenges in sequence order."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CurriculumMapper()

    def list_courses(self) -> list[Course]:
        stmt = select(CourseORM).order_by(CourseORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.course_to_domain(orm, include_units=False) for orm in orm_models]

    def get_course(self, course_id: CourseId) -> Course | None:
        """
        Get a course with its whole tree eagerly loaded.

        Args:
            course_id: The course ID

        Returns:
            Course entity if found, None otherwise
        """
        stmt = (
            select(CourseORM)
            .where(CourseORM.id == course_id.value)
            .options(
                selectinload(CourseORM.units)
                .selectinload(UnitORM.lessons)
                .selectinload(LessonORM.challenges)
                .selectinload(ChallengeORM.options)
            )
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.course_to_domain(orm_model) if orm_model else None

    def get_lesson_with_challenges(self, lesson_id: LessonId) -> Lesson | None:
        stmt = (
            select(LessonORM)
            .where(LessonORM.id == lesson_id.value)
            .options(selectinload(LessonORM.challenges).selectinload(ChallengeORM.options))
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.lesson_to_domain(orm_model) if orm_model else None

    def get_challenge(self, challenge_id: ChallengeId) -> Challenge | None:
        stmt = (
            select(ChallengeORM)
            .where(ChallengeORM.id == challenge_id.value)
            .options(selectinload(ChallengeORM.options))
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.challenge_to_domain(orm_model) if orm_model else None
