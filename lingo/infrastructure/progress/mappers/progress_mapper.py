"""Mapper for progress ORM ↔ Domain conversion."""

from lingo.domain.common.value_objects import (
    ChallengeId,
    ChallengeProgressId,
    CourseId,
    UserId,
)
from lingo.domain.progress.entities.challenge_progress import ChallengeProgress
from lingo.domain.progress.entities.user_progress import UserProgress
from lingo.models import ChallengeProgress as ChallengeProgressORM
from lingo.models import UserProgress as UserProgressORM


class ProgressMapper:
    """Mapper for UserProgress and ChallengeProgress ORM ↔ Domain conversion."""

    def user_progress_to_domain(self, orm_model: UserProgressORM) -> UserProgress:
        """Convert ORM model to domain entity."""
        return UserProgress.create_with_id(
            id=UserId(orm_model.user_id),
            active_course_id=CourseId(orm_model.active_course_id),
            hearts=orm_model.hearts,
            points=orm_model.points,
            user_name=orm_model.user_name,
            user_image_src=orm_model.user_image_src,
            version=orm_model.version,
        )

    def user_progress_to_orm(
        self, domain_entity: UserProgress, orm_model: UserProgressORM | None = None
    ) -> UserProgressORM:
        """Convert domain entity to ORM model (version is managed by the mapper config)."""
        if orm_model:
            # Update existing
            orm_model.active_course_id = domain_entity.active_course_id.value
            orm_model.hearts = domain_entity.hearts
            orm_model.points = domain_entity.points
            orm_model.user_name = domain_entity.user_name
            orm_model.user_image_src = domain_entity.user_image_src
            return orm_model

        # Create new
        return UserProgressORM(
            user_id=domain_entity.id.value,
            active_course_id=domain_entity.active_course_id.value,
            hearts=domain_entity.hearts,
            points=domain_entity.points,
            user_name=domain_entity.user_name,
            user_image_src=domain_entity.user_image_src,
        )

    def challenge_progress_to_domain(self, orm_model: ChallengeProgressORM) -> ChallengeProgress:
        """Convert ORM model to domain entity."""
        return ChallengeProgress.create_with_id(
            id=ChallengeProgressId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            challenge_id=ChallengeId(orm_model.challenge_id),
            completed=orm_model.completed,
        )

    def challenge_progress_to_orm(self, domain_entity: ChallengeProgress) -> ChallengeProgressORM:
        """Convert a new domain entity to ORM model."""
        return ChallengeProgressORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            user_id=domain_entity.user_id.value,
            challenge_id=domain_entity.challenge_id.value,
            completed=domain_entity.completed,
        )
