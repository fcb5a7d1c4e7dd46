"""
Base class for Value Objects.

Value Objects are immutable and compared by their attributes, never by
identity. Two ``PointsAward(10)`` instances are interchangeable.

Example:
    @dataclass(frozen=True)
    class PointsAward(ValueObject):
        amount: int

        def __post_init__(self) -> None:
            if self.amount <= 0:
                raise ValidationError("Points award must be positive")
"""


class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Subclasses are decorated with @dataclass(frozen=True) and validate
    themselves in __post_init__.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.__dict__.items())))

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in self.__dict__.items())
        return f"{self.__class__.__name__}({attrs})"

    def to_primitive(self) -> object:
        """Convert to a primitive for serialization (single-value VOs unwrap)."""
        values = list(self.__dict__.values())
        if len(values) == 1:
            return values[0]
        return dict(self.__dict__)
