from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from lingo.application.progress.services.progress_snapshot_service import (
    ProgressSnapshotService,
)
from lingo.application.progress.use_cases.attempts.resolve_attempt_use_case import (
    ResolveAttemptUseCase,
)
from lingo.application.progress.use_cases.courses.get_courses_use_case import GetCoursesUseCase
from lingo.application.progress.use_cases.courses.select_active_course_use_case import (
    SelectActiveCourseUseCase,
)
from lingo.application.progress.use_cases.learn.get_learn_overview_use_case import (
    GetLearnOverviewUseCase,
)
from lingo.application.progress.use_cases.learn.get_lesson_use_case import GetLessonUseCase
from lingo.application.progress.use_cases.users.get_user_progress_use_case import (
    GetUserProgressUseCase,
)
from lingo.config import get_settings
from lingo.domain.progress.services.attempt_resolver import AttemptResolver
from lingo.domain.progress.services.heart_policy import (
    HeartPolicy,
    StandardHeartPolicy,
    SubscriberExemptHeartPolicy,
)
from lingo.domain.progress.services.progression_calculator import ProgressionCalculator
from lingo.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from lingo.infrastructure.progress.repositories import (
    CurriculumRepository,
    ProgressRepository,
    SubscriptionRepository,
)
from lingo.infrastructure.progress.services.progress_notifier import ProgressNotifier


def select_heart_policy(subscriber_unlimited_hearts: bool) -> HeartPolicy:
    if subscriber_unlimited_hearts:
        return SubscriberExemptHeartPolicy()
    return StandardHeartPolicy()


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    db = providers.Dependency(instance_of=Session)
    settings = providers.Callable(get_settings)

    # Repositories
    progress_repository = providers.Factory(ProgressRepository, db=db)
    curriculum_repository = providers.Factory(CurriculumRepository, db=db)
    subscription_repository = providers.Factory(SubscriptionRepository, db=db)

    # Collaborators
    progress_notifier = providers.Singleton(ProgressNotifier)
    unit_of_work = providers.Factory(
        SQLAlchemyUnitOfWork,
        db=db,
        event_handlers=providers.List(progress_notifier.provided.notify),
    )

    # Domain services
    heart_policy = providers.Callable(
        select_heart_policy,
        subscriber_unlimited_hearts=settings.provided.SUBSCRIBER_UNLIMITED_HEARTS,
    )
    attempt_resolver = providers.Factory(AttemptResolver, heart_policy=heart_policy)
    progression_calculator = providers.Singleton(ProgressionCalculator)

    # Application services
    progress_snapshot_service = providers.Factory(
        ProgressSnapshotService,
        progress_repository=progress_repository,
    )

    # Use cases
    get_courses_use_case = providers.Factory(
        GetCoursesUseCase,
        curriculum_repository=curriculum_repository,
    )
    select_active_course_use_case = providers.Factory(
        SelectActiveCourseUseCase,
        progress_repository=progress_repository,
        curriculum_repository=curriculum_repository,
        uow=unit_of_work,
        timeout_seconds=settings.provided.TRANSACTION_TIMEOUT_SECONDS,
    )
    resolve_attempt_use_case = providers.Factory(
        ResolveAttemptUseCase,
        progress_repository=progress_repository,
        curriculum_repository=curriculum_repository,
        subscription_repository=subscription_repository,
        uow=unit_of_work,
        attempt_resolver=attempt_resolver,
        timeout_seconds=settings.provided.TRANSACTION_TIMEOUT_SECONDS,
    )
    get_learn_overview_use_case = providers.Factory(
        GetLearnOverviewUseCase,
        progress_repository=progress_repository,
        curriculum_repository=curriculum_repository,
        snapshot_service=progress_snapshot_service,
        calculator=progression_calculator,
    )
    get_lesson_use_case = providers.Factory(
        GetLessonUseCase,
        progress_repository=progress_repository,
        curriculum_repository=curriculum_repository,
        snapshot_service=progress_snapshot_service,
        calculator=progression_calculator,
    )
    get_user_progress_use_case = providers.Factory(
        GetUserProgressUseCase,
        progress_repository=progress_repository,
        subscription_repository=subscription_repository,
    )


container = Container()
