"""Application service loading progress snapshots for the progression calculator."""

from lingo.application.progress.protocols.progress_repository import ProgressRepositoryProtocol
from lingo.domain.common.value_objects import ChallengeId, UserId
from lingo.domain.curriculum.entities import Course, Lesson
from lingo.domain.progress.services.progression_calculator import ProgressSnapshot


class ProgressSnapshotService:
    """Reads a learner's completion records once and freezes them into a snapshot."""

    def __init__(self, progress_repository: ProgressRepositoryProtocol) -> None:
        self.progress_repository = progress_repository

    def for_course(self, user_id: UserId, course: Course) -> ProgressSnapshot:
        challenge_ids = [cid for lesson in course.iter_lessons() for cid in lesson.challenge_ids]
        return self._load(user_id, challenge_ids)

    def for_lesson(self, user_id: UserId, lesson: Lesson) -> ProgressSnapshot:
        return self._load(user_id, lesson.challenge_ids)

    def _load(self, user_id: UserId, challenge_ids: list[ChallengeId]) -> ProgressSnapshot:
        if not challenge_ids:
            return ProgressSnapshot(user_id=user_id, completed_challenge_ids=frozenset())
        records = self.progress_repository.list_challenge_progress(user_id, challenge_ids)
        return ProgressSnapshot.from_records(user_id, records)
