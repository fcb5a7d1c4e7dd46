"""Progress module domain exceptions."""

from lingo.domain.common.exceptions import EntityNotFoundError


class ProgressNotFoundError(EntityNotFoundError):
    """Raised when a user has no progress record (no course selected yet)."""

    def __init__(self, user_id: str) -> None:
        super().__init__("UserProgress", user_id)
