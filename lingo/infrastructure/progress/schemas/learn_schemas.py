"""Pydantic schemas for the learn dashboard and lesson views."""

from pydantic import BaseModel, Field

from lingo.application.progress.use_cases.learn.get_learn_overview_use_case import CourseProgress
from lingo.domain.progress.services.progression_calculator import LessonView, UnitProgress
from lingo.infrastructure.progress.schemas.curriculum_schemas import (
    ChallengeOptionSchema,
    CourseSummary,
)


class LessonWithCompletion(BaseModel):
    """Lesson summary with its derived completion flag."""

    id: int
    title: str
    order: int
    completed: bool


class UnitWithCompletion(BaseModel):
    """Unit with per-lesson completion."""

    id: int
    title: str
    description: str
    order: int
    lessons: list[LessonWithCompletion]

    @classmethod
    def from_domain(cls, unit_progress: UnitProgress) -> "UnitWithCompletion":
        unit = unit_progress.unit
        return cls(
            id=unit.id.value,
            title=unit.title,
            description=unit.description,
            order=unit.order,
            lessons=[
                LessonWithCompletion(
                    id=lp.lesson.id.value,
                    title=lp.lesson.title,
                    order=lp.lesson.order,
                    completed=lp.completed,
                )
                for lp in unit_progress.lessons
            ],
        )


class UnitsResponse(BaseModel):
    """Units of the active course; empty when no course is selected."""

    units: list[UnitWithCompletion]


class CourseProgressResponse(BaseModel):
    """Resume point of the active course."""

    course: CourseSummary | None = None
    active_lesson_id: int | None = Field(
        None, description="First uncompleted lesson; null when the course is done"
    )

    @classmethod
    def from_domain(cls, course_progress: CourseProgress | None) -> "CourseProgressResponse":
        if course_progress is None:
            return cls()
        return cls(
            course=CourseSummary.from_domain(course_progress.course),
            active_lesson_id=course_progress.active_lesson_id,
        )


class LessonPercentageResponse(BaseModel):
    """Completion percentage of a lesson; 0 when there is nothing to measure."""

    lesson_id: int | None = Field(None, description="Requested lesson; null for the resume lesson")
    percentage: float = Field(..., ge=0, le=100)


class ChallengeWithCompletion(BaseModel):
    """Challenge of a lesson view annotated with completion."""

    id: int
    type: str
    question: str
    order: int
    completed: bool
    options: list[ChallengeOptionSchema]


class LessonViewResponse(BaseModel):
    """A lesson as presented to the learner."""

    id: int
    unit_id: int
    title: str
    challenges: list[ChallengeWithCompletion]
    percentage: float = Field(..., ge=0, le=100, description="Real completion ratio")
    display_percentage: float = Field(
        ..., ge=0, le=100, description="Restarts at 0 when the lesson is replayed as practice"
    )
    practice: bool
    resume_index: int = Field(..., ge=0, description="Index of the first uncompleted challenge")

    @classmethod
    def from_domain(cls, view: LessonView) -> "LessonViewResponse":
        return cls(
            id=view.lesson.id.value,
            unit_id=view.lesson.unit_id.value,
            title=view.lesson.title,
            challenges=[
                ChallengeWithCompletion(
                    id=state.challenge.id.value,
                    type=state.challenge.type.value,
                    question=state.challenge.question,
                    order=state.challenge.order,
                    completed=state.completed,
                    options=[ChallengeOptionSchema.from_domain(o) for o in state.challenge.options],
                )
                for state in view.challenges
            ],
            percentage=view.percentage,
            display_percentage=view.display_percentage,
            practice=view.practice,
            resume_index=view.resume_index,
        )
