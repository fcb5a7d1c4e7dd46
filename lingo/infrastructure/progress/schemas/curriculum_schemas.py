"""Pydantic schemas for curriculum API responses."""

from pydantic import BaseModel, Field

from lingo.domain.curriculum.entities import Challenge, ChallengeOption, Course, Lesson, Unit


class ChallengeOptionSchema(BaseModel):
    """Schema for a selectable answer."""

    id: int
    text: str
    correct: bool
    image_src: str | None = None
    audio_src: str | None = None

    @classmethod
    def from_domain(cls, option: ChallengeOption) -> "ChallengeOptionSchema":
        return cls(
            id=option.id.value,
            text=option.text,
            correct=option.correct,
            image_src=option.image_src,
            audio_src=option.audio_src,
        )


class ChallengeSchema(BaseModel):
    """Schema for a challenge with its options."""

    id: int
    lesson_id: int
    type: str = Field(..., description="SELECT or ASSIST")
    question: str
    order: int
    options: list[ChallengeOptionSchema] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, challenge: Challenge) -> "ChallengeSchema":
        return cls(
            id=challenge.id.value,
            lesson_id=challenge.lesson_id.value,
            type=challenge.type.value,
            question=challenge.question,
            order=challenge.order,
            options=[ChallengeOptionSchema.from_domain(o) for o in challenge.options],
        )


class LessonSchema(BaseModel):
    """Schema for a lesson with its challenges."""

    id: int
    unit_id: int
    title: str
    order: int
    challenges: list[ChallengeSchema] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, lesson: Lesson) -> "LessonSchema":
        return cls(
            id=lesson.id.value,
            unit_id=lesson.unit_id.value,
            title=lesson.title,
            order=lesson.order,
            challenges=[ChallengeSchema.from_domain(c) for c in lesson.challenges],
        )


class UnitSchema(BaseModel):
    """Schema for a unit with its lessons."""

    id: int
    course_id: int
    title: str
    description: str
    order: int
    lessons: list[LessonSchema] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, unit: Unit) -> "UnitSchema":
        return cls(
            id=unit.id.value,
            course_id=unit.course_id.value,
            title=unit.title,
            description=unit.description,
            order=unit.order,
            lessons=[LessonSchema.from_domain(lesson) for lesson in unit.lessons],
        )


class CourseSummary(BaseModel):
    """Minimal course schema for course listings."""

    id: int
    title: str
    image_src: str

    @classmethod
    def from_domain(cls, course: Course) -> "CourseSummary":
        return cls(id=course.id.value, title=course.title, image_src=course.image_src)


class CourseDetail(CourseSummary):
    """Schema for a course with its whole curriculum tree."""

    units: list[UnitSchema] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, course: Course) -> "CourseDetail":
        return cls(
            id=course.id.value,
            title=course.title,
            image_src=course.image_src,
            units=[UnitSchema.from_domain(unit) for unit in course.units],
        )


class CoursesResponse(BaseModel):
    """Schema for list of courses response."""

    courses: list[CourseSummary] = Field(..., description="List of courses")
