"""Integration tests for transactional guarantees of progress writes."""

from collections.abc import Generator
from pathlib import Path

import pytest
from sqlalchemy.orm import Session, sessionmaker

from lingo import models
from lingo.application.progress.use_cases.attempts.resolve_attempt_use_case import (
    ResolveAttemptUseCase,
)
from lingo.database import Base, build_engine
from lingo.domain.common.value_objects import ChallengeId, UserId
from lingo.domain.progress.entities import ChallengeProgress, UserProgress
from lingo.domain.progress.services import AttemptResolver
from lingo.exceptions import TransactionConflictError
from lingo.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from lingo.infrastructure.progress.repositories import (
    CurriculumRepository,
    ProgressRepository,
    SubscriptionRepository,
)
from tests.conftest import (
    CHALLENGE_HELLO_ID,
    DEFAULT_USER_ID,
    create_test_progress,
    seed_curriculum,
)

USER = UserId(DEFAULT_USER_ID)


class FailingProgressRepository(ProgressRepository):
    """Fails on the last write of an attempt, after the completion record was flushed."""

    def upsert_user_progress(self, progress: UserProgress) -> UserProgress:
        raise RuntimeError("progress store went away")


def _use_case(db: Session, progress_repository: ProgressRepository) -> ResolveAttemptUseCase:
    return ResolveAttemptUseCase(
        progress_repository=progress_repository,
        curriculum_repository=CurriculumRepository(db),
        subscription_repository=SubscriptionRepository(db),
        uow=SQLAlchemyUnitOfWork(db),
        attempt_resolver=AttemptResolver(),
    )


class TestAtomicAttempt:
    def test_failure_after_first_write_leaves_no_trace(self, curriculum: Session) -> None:
        create_test_progress(curriculum, hearts=5, points=0)
        use_case = _use_case(curriculum, FailingProgressRepository(curriculum))

        with pytest.raises(RuntimeError):
            use_case.resolve_attempt(DEFAULT_USER_ID, CHALLENGE_HELLO_ID, correct=True)

        curriculum.expire_all()
        assert curriculum.query(models.ChallengeProgress).count() == 0
        stored = curriculum.get(models.UserProgress, DEFAULT_USER_ID)
        assert stored is not None
        assert stored.points == 0

    def test_successful_attempt_bumps_version(self, curriculum: Session) -> None:
        create_test_progress(curriculum)
        use_case = _use_case(curriculum, ProgressRepository(curriculum))

        use_case.resolve_attempt(DEFAULT_USER_ID, CHALLENGE_HELLO_ID, correct=False)

        curriculum.expire_all()
        stored = curriculum.get(models.UserProgress, DEFAULT_USER_ID)
        assert stored is not None
        assert stored.version == 2


class TestChallengeProgressUniqueness:
    def test_duplicate_record_is_a_conflict(self, curriculum: Session) -> None:
        create_test_progress(curriculum)
        repository = ProgressRepository(curriculum)
        uow = SQLAlchemyUnitOfWork(curriculum)

        with uow:
            repository.insert_challenge_progress(
                ChallengeProgress.create_completed(USER, ChallengeId(CHALLENGE_HELLO_ID))
            )
            uow.commit()

        with pytest.raises(TransactionConflictError):
            with uow:
                repository.insert_challenge_progress(
                    ChallengeProgress.create_completed(USER, ChallengeId(CHALLENGE_HELLO_ID))
                )
                uow.commit()

        assert curriculum.query(models.ChallengeProgress).count() == 1


@pytest.fixture
def file_sessions(tmp_path: Path) -> Generator[sessionmaker[Session], None, None]:
    """Session factory over a file database so two sessions use two connections."""
    engine = build_engine(f"sqlite:///{tmp_path / 'progress.db'}")
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    with factory() as session:
        seed_curriculum(session)
        create_test_progress(session, hearts=5)
    yield factory
    engine.dispose()


class TestConcurrentAttempts:
    def test_stale_write_is_rejected(self, file_sessions: sessionmaker[Session]) -> None:
        """Two requests read hearts=5; only the first write may land."""
        first, second = file_sessions(), file_sessions()
        try:
            first_repo, second_repo = ProgressRepository(first), ProgressRepository(second)
            first_view = first_repo.get_user_progress(USER, for_update=True)
            second_view = second_repo.get_user_progress(USER, for_update=True)
            assert first_view is not None
            assert second_view is not None

            first_view.lose_heart()
            first_repo.upsert_user_progress(first_view)
            first.commit()

            second_view.lose_heart()
            second_uow = SQLAlchemyUnitOfWork(second)
            with pytest.raises(TransactionConflictError):
                with second_uow:
                    second_repo.upsert_user_progress(second_view)
                    second_uow.commit()
        finally:
            first.close()
            second.close()

        with file_sessions() as check:
            stored = check.get(models.UserProgress, DEFAULT_USER_ID)
            assert stored is not None
            assert stored.hearts == 4

    def test_outdated_progress_is_rejected_before_writing(
        self, file_sessions: sessionmaker[Session]
    ) -> None:
        """A progress object read before a concurrent commit cannot be saved."""
        session, other = file_sessions(), file_sessions()
        try:
            repository = ProgressRepository(session)
            outdated = repository.get_user_progress(USER)
            assert outdated is not None

            other_repo = ProgressRepository(other)
            fresh = other_repo.get_user_progress(USER, for_update=True)
            assert fresh is not None
            fresh.award_points()
            other_repo.upsert_user_progress(fresh)
            other.commit()

            # Re-reading with a lock refreshes the identity map to the new version
            repository.get_user_progress(USER, for_update=True)
            outdated.award_points()
            with pytest.raises(TransactionConflictError):
                repository.upsert_user_progress(outdated)
            session.rollback()
        finally:
            session.close()
            other.close()

        with file_sessions() as check:
            stored = check.get(models.UserProgress, DEFAULT_USER_ID)
            assert stored is not None
            assert stored.points == 10
