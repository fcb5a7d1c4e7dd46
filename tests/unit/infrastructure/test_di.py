"""Tests for building use cases on request-scoped sessions."""

from concurrent.futures import ThreadPoolExecutor

from sqlalchemy.orm import Session

from lingo.application.progress.use_cases.attempts.resolve_attempt_use_case import (
    ResolveAttemptUseCase,
)
from lingo.core import container
from lingo.infrastructure.common.di import inject_use_case

WORKERS = 8
BUILDS_PER_WORKER = 300


def _build_on_own_session(_worker: int) -> int:
    """Build use cases on a private session; return how many got another session."""
    dependency = inject_use_case(container.resolve_attempt_use_case)
    own = Session()
    mismatched = 0
    try:
        for _ in range(BUILDS_PER_WORKER):
            use_case: ResolveAttemptUseCase = dependency(own)
            sessions = (
                use_case.uow.db,
                use_case.progress_repository.db,
                use_case.curriculum_repository.db,
                use_case.subscription_repository.db,
            )
            if any(session is not own for session in sessions):
                mismatched += 1
    finally:
        own.close()
    return mismatched


class TestInjectUseCase:
    def test_use_case_is_built_on_the_request_session(self) -> None:
        own = Session()
        try:
            use_case = inject_use_case(container.resolve_attempt_use_case)(own)
            assert use_case.uow.db is own
            assert use_case.progress_repository.db is own
        finally:
            own.close()

    def test_override_is_reset_after_build(self) -> None:
        own = Session()
        try:
            inject_use_case(container.get_courses_use_case)(own)
        finally:
            own.close()
        assert not container.db.overridden

    def test_concurrent_requests_never_share_sessions(self) -> None:
        with ThreadPoolExecutor(max_workers=WORKERS) as executor:
            mismatched = sum(executor.map(_build_on_own_session, range(WORKERS)))

        assert mismatched == 0
        assert not container.db.overridden
