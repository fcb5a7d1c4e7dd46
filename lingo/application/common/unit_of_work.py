"""
Unit of Work interface.

The Unit of Work wraps one business transaction: every repository write
made inside it becomes visible together on commit or not at all.

Example:
    class SelectActiveCourseUseCase:
        def select_active_course(self, user_id: str, course_id: int) -> UserProgress:
            with self.uow:
                progress = self.progress_repository.get_user_progress(...)
                progress.select_course(...)
                self.progress_repository.upsert_user_progress(progress)
                self.uow.track(progress)
                self.uow.commit()
            return progress
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from types import TracebackType
from typing import Self

from lingo.domain.common import AggregateRoot, DomainEvent


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    The Unit of Work:
    - Manages database transactions with an optional time bound
    - Ensures atomicity of operations
    - Collects domain events from tracked aggregates and dispatches them
      after a successful commit
    - Can be used as a context manager

    Infrastructure layer provides concrete implementations
    (e.g., SQLAlchemyUnitOfWork).
    """

    @abstractmethod
    def begin(self, timeout_seconds: float | None = None) -> None:
        """
        Start the transaction.

        Args:
            timeout_seconds: Upper bound for any single statement or lock wait
        """
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """
        Commit the current transaction.

        This persists all changes made within the unit of work.
        After commit, domain events are dispatched.
        """
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Rollback the current transaction.

        This discards all changes made within the unit of work.
        """
        raise NotImplementedError

    @abstractmethod
    def track(self, aggregate: AggregateRoot) -> None:  # type: ignore[type-arg]
        """Register an aggregate whose events are dispatched after commit."""
        raise NotImplementedError

    @abstractmethod
    def register_event_handler(self, handler: Callable[[DomainEvent], None]) -> None:
        """Register a handler to be called for each domain event after commit."""
        raise NotImplementedError

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise, do nothing
        (commit must be called explicitly).
        """
        if exc_type is not None:
            self.rollback()
