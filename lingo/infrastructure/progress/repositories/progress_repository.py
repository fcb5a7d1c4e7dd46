"""Repository for UserProgress and ChallengeProgress domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from lingo.domain.common.value_objects import ChallengeId, ChallengeProgressId, UserId
from lingo.domain.progress.entities.challenge_progress import ChallengeProgress
from lingo.domain.progress.entities.user_progress import UserProgress
from lingo.exceptions import TransactionConflictError
from lingo.infrastructure.progress.mappers.progress_mapper import ProgressMapper
from lingo.models import ChallengeProgress as ChallengeProgressORM
from lingo.models import UserProgress as UserProgressORM


class ProgressRepository:
    """Repository for per-user progress. Flushes, never commits."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ProgressMapper()

    def get_user_progress(
        self, user_id: UserId, *, for_update: bool = False
    ) -> UserProgress | None:
        """
        Get a learner's aggregate progress.

        Args:
            user_id: The learner
            for_update: Lock the row until the transaction ends (ignored on SQLite)

        Returns:
            UserProgress entity if found, None otherwise
        """
        stmt = select(UserProgressORM).where(UserProgressORM.user_id == user_id.value)
        if for_update:
            # Refresh the identity map so the locked values are the ones we decide on
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.user_progress_to_domain(orm_model) if orm_model else None

    def upsert_user_progress(self, progress: UserProgress) -> UserProgress:
        """
        Insert or update a learner's aggregate progress.

        Raises:
            TransactionConflictError: If the row changed since it was read
        """
        orm_model = self.db.get(UserProgressORM, progress.id.value)
        if orm_model is None:
            orm_model = self.mapper.user_progress_to_orm(progress)
            self.db.add(orm_model)
        else:
            if orm_model.version != progress.version:
                raise TransactionConflictError(progress.id.value)
            self.mapper.user_progress_to_orm(progress, orm_model)

        # Stale versions surface here as StaleDataError, duplicate inserts as IntegrityError
        self.db.flush()
        self.db.refresh(orm_model)
        return self.mapper.user_progress_to_domain(orm_model)

    def get_challenge_progress(
        self, user_id: UserId, challenge_id: ChallengeId
    ) -> ChallengeProgress | None:
        stmt = select(ChallengeProgressORM).where(
            ChallengeProgressORM.user_id == user_id.value,
            ChallengeProgressORM.challenge_id == challenge_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.challenge_progress_to_domain(orm_model) if orm_model else None

    def insert_challenge_progress(self, record: ChallengeProgress) -> ChallengeProgress:
        """
        Insert a new completion record.

        A concurrent insert for the same (user, challenge) fails the flush with
        IntegrityError, which the Unit of Work reports as a conflict.
        """
        orm_model = self.mapper.challenge_progress_to_orm(record)
        self.db.add(orm_model)
        self.db.flush()
        return self.mapper.challenge_progress_to_domain(orm_model)

    def update_challenge_progress(
        self, record_id: ChallengeProgressId, completed: bool
    ) -> ChallengeProgress:
        orm_model = self.db.get(ChallengeProgressORM, record_id.value)
        if orm_model is None:
            raise ValueError(f"Challenge progress with id {record_id.value} not found")
        orm_model.completed = completed
        self.db.flush()
        return self.mapper.challenge_progress_to_domain(orm_model)

    def list_challenge_progress(
        self, user_id: UserId, challenge_ids: list[ChallengeId] | None = None
    ) -> list[ChallengeProgress]:
        stmt = select(ChallengeProgressORM).where(ChallengeProgressORM.user_id == user_id.value)
        if challenge_ids is not None:
            stmt = stmt.where(
                ChallengeProgressORM.challenge_id.in_([cid.value for cid in challenge_ids])
            )
        orm_models = self.db.execute(stmt.order_by(ChallengeProgressORM.id)).scalars().all()
        return [self.mapper.challenge_progress_to_domain(orm) for orm in orm_models]

    def list_top_users(self, limit: int) -> list[UserProgress]:
        stmt = (
            select(UserProgressORM)
            .order_by(UserProgressORM.points.desc(), UserProgressORM.user_id)
            .limit(limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.user_progress_to_domain(orm) for orm in orm_models]
