"""Notifier that announces which cached progression views went stale."""

import structlog

from lingo.domain.common import DomainEvent
from lingo.domain.progress.events import ActiveCourseSelected, ChallengeAttemptResolved

logger = structlog.get_logger(__name__)

COURSE_SELECTION_VIEWS = ("/courses", "/learn")
ATTEMPT_VIEWS = ("/learn", "/lesson", "/quests", "/leaderboard")


class ProgressNotifier:
    """
    Translates progress events into view-invalidation notices.

    There is no cache of our own to purge; the notices are emitted as structured
    log events that an edge cache or frontend revalidation hook can consume.
    """

    def notify(self, event: DomainEvent) -> None:
        if not isinstance(event, ActiveCourseSelected | ChallengeAttemptResolved):
            return
        logger.info(
            "progress_views_invalidated",
            event_type=event.event_type,
            user_id=event.user_id.value,
            paths=list(self.invalidated_paths(event)),
        )

    @staticmethod
    def invalidated_paths(event: DomainEvent) -> tuple[str, ...]:
        if isinstance(event, ChallengeAttemptResolved):
            return (*ATTEMPT_VIEWS, f"/lesson/{event.lesson_id.value}")
        if isinstance(event, ActiveCourseSelected):
            return COURSE_SELECTION_VIEWS
        return ()
