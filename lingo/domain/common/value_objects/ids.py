from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Opaque user identifier issued by the identity provider."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("UserId must be a non-empty string")


@dataclass(frozen=True)
class CourseId(EntityId):
    """Strongly-typed course identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("CourseId must be non-negative")


@dataclass(frozen=True)
class UnitId(EntityId):
    """Strongly-typed unit identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("UnitId must be non-negative")


@dataclass(frozen=True)
class LessonId(EntityId):
    """Strongly-typed lesson identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("LessonId must be non-negative")


@dataclass(frozen=True)
class ChallengeId(EntityId):
    """Strongly-typed challenge identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("ChallengeId must be non-negative")


@dataclass(frozen=True)
class ChallengeOptionId(EntityId):
    """Strongly-typed challenge option identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("ChallengeOptionId must be non-negative")


@dataclass(frozen=True)
class ChallengeProgressId(EntityId):
    """Strongly-typed challenge progress identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("ChallengeProgressId must be non-negative")

    @classmethod
    def generate(cls) -> "ChallengeProgressId":
        return cls(0)  # Database assigns real ID
