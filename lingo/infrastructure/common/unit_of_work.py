"""SQLAlchemy implementation of the Unit of Work port."""

from collections.abc import Callable
from types import TracebackType

import structlog
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from lingo.application.common.unit_of_work import UnitOfWork
from lingo.domain.common import AggregateRoot, DomainEvent
from lingo.exceptions import RepositoryTimeoutError, TransactionConflictError

logger = structlog.get_logger(__name__)

EventHandler = Callable[[DomainEvent], None]


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of Work over a request-scoped SQLAlchemy session.

    Database failures raised anywhere inside the ``with`` block are rolled
    back and translated: version mismatches and uniqueness races become
    TransactionConflictError, statement or lock timeouts become
    RepositoryTimeoutError. Both are retryable and leave no partial writes.
    """

    def __init__(self, db: Session, event_handlers: list[EventHandler] | None = None) -> None:
        self.db = db
        self._handlers: list[EventHandler] = list(event_handlers or [])
        self._tracked: list[AggregateRoot] = []  # type: ignore[type-arg]
        self._timeout_seconds: float | None = None

    def begin(self, timeout_seconds: float | None = None) -> None:
        self._tracked.clear()
        self._timeout_seconds = timeout_seconds
        if timeout_seconds is None:
            return
        if self.db.get_bind().dialect.name == "postgresql":
            # SET LOCAL does not accept bind parameters; the value is an int
            timeout_ms = max(int(timeout_seconds * 1000), 1)
            self.db.execute(text(f"SET LOCAL statement_timeout = {timeout_ms}"))
            self.db.execute(text(f"SET LOCAL lock_timeout = {timeout_ms}"))

    def commit(self) -> None:
        self.db.commit()
        events = [event for aggregate in self._tracked for event in aggregate.collect_events()]
        self._tracked.clear()
        self._dispatch(events)

    def rollback(self) -> None:
        self.db.rollback()
        for aggregate in self._tracked:
            aggregate.collect_events()
        self._tracked.clear()

    def track(self, aggregate: AggregateRoot) -> None:  # type: ignore[type-arg]
        if aggregate not in self._tracked:
            self._tracked.append(aggregate)

    def register_event_handler(self, handler: EventHandler) -> None:
        self._handlers.append(handler)

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            return
        self.rollback()
        if isinstance(exc_val, StaleDataError | IntegrityError):
            logger.warning("transaction_conflict", error=str(exc_val))
            raise TransactionConflictError() from exc_val
        if isinstance(exc_val, OperationalError):
            logger.warning(
                "transaction_timeout", timeout_seconds=self._timeout_seconds, error=str(exc_val)
            )
            raise RepositoryTimeoutError(self._timeout_seconds) from exc_val

    def _dispatch(self, events: list[DomainEvent]) -> None:
        for event in events:
            for handler in self._handlers:
                try:
                    handler(event)
                except Exception:
                    # Delivery is best-effort; the transaction has already committed
                    logger.exception(
                        "domain_event_handler_failed",
                        event_type=event.event_type,
                        event_id=str(event.event_id),
                    )
