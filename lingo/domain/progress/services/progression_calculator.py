"""
Domain service deriving completion views from a progress snapshot.

All functions are pure: they take a curriculum snapshot (Course, Lesson)
and a ProgressSnapshot of the learner's completed challenges, and never
touch storage. Lesson and unit completion are always derived, never stored.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from lingo.domain.common.value_objects import ChallengeId, UserId
from lingo.domain.curriculum.entities import Challenge, Course, Lesson, Unit
from lingo.domain.progress.entities.challenge_progress import ChallengeProgress


@dataclass(frozen=True)
class ProgressSnapshot:
    """The set of challenges a learner has completed, read once per request."""

    user_id: UserId
    completed_challenge_ids: frozenset[ChallengeId]

    @classmethod
    def from_records(
        cls, user_id: UserId, records: Iterable[ChallengeProgress]
    ) -> "ProgressSnapshot":
        return cls(
            user_id=user_id,
            completed_challenge_ids=frozenset(
                record.challenge_id
                for record in records
                if record.completed and record.user_id == user_id
            ),
        )

    def is_completed(self, challenge_id: ChallengeId) -> bool:
        return challenge_id in self.completed_challenge_ids


@dataclass(frozen=True)
class LessonProgress:
    lesson: Lesson
    completed: bool


@dataclass(frozen=True)
class UnitProgress:
    unit: Unit
    lessons: list[LessonProgress]


@dataclass(frozen=True)
class ChallengeState:
    challenge: Challenge
    completed: bool


@dataclass(frozen=True)
class LessonView:
    """
    A lesson as presented to the learner.

    ``percentage`` is the real completion ratio. A fully completed lesson is
    replayed as practice, so ``display_percentage`` restarts at 0 and
    ``practice`` is set.
    """

    lesson: Lesson
    challenges: list[ChallengeState]
    percentage: float
    display_percentage: float
    practice: bool
    resume_index: int


class ProgressionCalculator:
    """Stateless domain service for completion, percentage and resume lesson."""

    @staticmethod
    def challenge_completed(challenge: Challenge, snapshot: ProgressSnapshot) -> bool:
        return snapshot.is_completed(challenge.id)

    @classmethod
    def lesson_completed(cls, lesson: Lesson, snapshot: ProgressSnapshot) -> bool:
        """A lesson is completed iff it has challenges and every one of them is completed."""
        if lesson.is_empty:
            return False
        return all(cls.challenge_completed(challenge, snapshot) for challenge in lesson.challenges)

    @classmethod
    def lesson_percentage(cls, lesson: Lesson | None, snapshot: ProgressSnapshot) -> float:
        """Share of completed challenges, 0 for a missing or empty lesson."""
        if lesson is None or lesson.is_empty:
            return 0.0
        completed = sum(
            1 for challenge in lesson.challenges if cls.challenge_completed(challenge, snapshot)
        )
        return 100 * completed / len(lesson.challenges)

    @classmethod
    def units_with_completion(
        cls, course: Course, snapshot: ProgressSnapshot
    ) -> list[UnitProgress]:
        """Units of the course in order, each lesson annotated with its completion."""
        return [
            UnitProgress(
                unit=unit,
                lessons=[
                    LessonProgress(lesson=lesson, completed=cls.lesson_completed(lesson, snapshot))
                    for lesson in unit.lessons
                ],
            )
            for unit in course.units
        ]

    @classmethod
    def first_uncompleted_lesson(cls, course: Course, snapshot: ProgressSnapshot) -> Lesson | None:
        """
        First lesson, in unit-then-lesson order, with a challenge not yet completed.

        Lessons without challenges are skipped: they have nothing to resume.
        Returns None when every challenge of the course is completed.
        """
        for lesson in course.iter_lessons():
            if any(
                not cls.challenge_completed(challenge, snapshot) for challenge in lesson.challenges
            ):
                return lesson
        return None

    @classmethod
    def lesson_view(cls, lesson: Lesson, snapshot: ProgressSnapshot) -> LessonView:
        states = [
            ChallengeState(
                challenge=challenge, completed=cls.challenge_completed(challenge, snapshot)
            )
            for challenge in lesson.challenges
        ]
        percentage = cls.lesson_percentage(lesson, snapshot)
        practice = cls.lesson_completed(lesson, snapshot)
        resume_index = next(
            (index for index, state in enumerate(states) if not state.completed), 0
        )
        return LessonView(
            lesson=lesson,
            challenges=states,
            percentage=percentage,
            display_percentage=0.0 if practice else percentage,
            practice=practice,
            resume_index=resume_index,
        )
