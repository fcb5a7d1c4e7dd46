"""Protocol for the progress notification collaborator."""

from typing import Protocol

from lingo.domain.common import DomainEvent


class ProgressNotifierProtocol(Protocol):
    """
    Receives progress events after a successful commit.

    Delivery is best-effort: a failing notifier never undoes or fails the
    mutation that produced the event.
    """

    def notify(self, event: DomainEvent) -> None: ...
