"""
UserProgress aggregate root.

One record per learner holding the active course and the two gameplay
resources: hearts (spent on wrong first attempts) and points (earned on
every correct answer).
"""

from dataclasses import dataclass

from lingo.domain.common.aggregate_root import AggregateRoot
from lingo.domain.common.exceptions import InvariantViolationError, ValidationError
from lingo.domain.common.value_objects import ChallengeId, CourseId, LessonId, UserId
from lingo.domain.progress.events import ActiveCourseSelected, ChallengeAttemptResolved

MAX_HEARTS = 5
POINTS_PER_CHALLENGE = 10
DEFAULT_USER_NAME = "User"
DEFAULT_USER_IMAGE_SRC = "/mascot.svg"


@dataclass(eq=False)
class UserProgress(AggregateRoot[UserId]):
    """
    Aggregate state of a single learner.

    Business Rules:
    - 0 <= hearts <= MAX_HEARTS at all times; changes are clamped
    - points >= 0 and never decrease
    - Switching course keeps hearts and points
    - version is the optimistic-concurrency counter owned by persistence
    """

    id: UserId
    active_course_id: CourseId
    hearts: int = MAX_HEARTS
    points: int = 0
    user_name: str = DEFAULT_USER_NAME
    user_image_src: str = DEFAULT_USER_IMAGE_SRC
    version: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not 0 <= self.hearts <= MAX_HEARTS:
            raise InvariantViolationError(
                "UserProgress", f"hearts must be between 0 and {MAX_HEARTS}, got {self.hearts}"
            )
        if self.points < 0:
            raise InvariantViolationError(
                "UserProgress", f"points must be non-negative, got {self.points}"
            )

    @property
    def user_id(self) -> UserId:
        return self.id

    @property
    def has_hearts(self) -> bool:
        return self.hearts > 0

    # Command methods
    def lose_heart(self) -> None:
        """Spend one heart, never going below zero."""
        self.hearts = max(self.hearts - 1, 0)

    def regain_heart(self) -> None:
        """Restore one heart, never going above MAX_HEARTS."""
        self.hearts = min(self.hearts + 1, MAX_HEARTS)

    def award_points(self, amount: int = POINTS_PER_CHALLENGE) -> None:
        """
        Add points.

        Raises:
            ValidationError: If amount is not positive (points never decrease)
        """
        if amount <= 0:
            raise ValidationError("Points award must be positive", field="amount", value=amount)
        self.points += amount

    def select_course(
        self,
        course_id: CourseId,
        user_name: str | None = None,
        user_image_src: str | None = None,
    ) -> None:
        """Switch the active course, carrying hearts and points over."""
        self.active_course_id = course_id
        if user_name:
            self.user_name = user_name
        if user_image_src:
            self.user_image_src = user_image_src
        self._record_event(ActiveCourseSelected(user_id=self.id, course_id=course_id))

    def record_attempt(self, challenge_id: ChallengeId, lesson_id: LessonId, outcome: str) -> None:
        """Record that an attempt on a challenge changed this learner's state."""
        self._record_event(
            ChallengeAttemptResolved(
                user_id=self.id,
                challenge_id=challenge_id,
                lesson_id=lesson_id,
                outcome=outcome,
            )
        )

    # Factory methods
    @classmethod
    def start(
        cls,
        user_id: UserId,
        course_id: CourseId,
        user_name: str | None = None,
        user_image_src: str | None = None,
    ) -> "UserProgress":
        """Create progress for a learner picking their first course."""
        progress = cls(
            id=user_id,
            active_course_id=course_id,
            user_name=user_name or DEFAULT_USER_NAME,
            user_image_src=user_image_src or DEFAULT_USER_IMAGE_SRC,
        )
        progress._record_event(ActiveCourseSelected(user_id=user_id, course_id=course_id))
        return progress

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        active_course_id: CourseId,
        hearts: int,
        points: int,
        user_name: str,
        user_image_src: str,
        version: int,
    ) -> "UserProgress":
        """Reconstitute progress from persistence."""
        return cls(
            id=id,
            active_course_id=active_course_id,
            hearts=hearts,
            points=points,
            user_name=user_name,
            user_image_src=user_image_src,
            version=version,
        )
