"""Database models."""

from datetime import datetime
from typing import Any

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lingo.database import Base
from lingo.domain.curriculum.entities.challenge import ChallengeType


class Course(Base):
    """Course model, the root of the curriculum tree."""

    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    image_src: Mapped[str] = mapped_column(Text, nullable=False)

    units: Mapped[list["Unit"]] = relationship(
        back_populates="course", cascade="all, delete-orphan", order_by="Unit.order"
    )

    def __repr__(self) -> str:
        """String representation of Course."""
        return f"<Course(id={self.id}, title='{self.title}')>"


class Unit(Base):
    """Unit model, an ordered section of a course."""

    __tablename__ = "units"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    course_id: Mapped[int] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"), index=True, nullable=False
    )
    order: Mapped[int] = mapped_column(Integer, nullable=False)

    course: Mapped["Course"] = relationship(back_populates="units")
    lessons: Mapped[list["Lesson"]] = relationship(
        back_populates="unit", cascade="all, delete-orphan", order_by="Lesson.order"
    )

    def __repr__(self) -> str:
        """String representation of Unit."""
        return f"<Unit(id={self.id}, course_id={self.course_id}, order={self.order})>"


class Lesson(Base):
    """Lesson model, an ordered group of challenges."""

    __tablename__ = "lessons"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    unit_id: Mapped[int] = mapped_column(
        ForeignKey("units.id", ondelete="CASCADE"), index=True, nullable=False
    )
    order: Mapped[int] = mapped_column(Integer, nullable=False)

    unit: Mapped["Unit"] = relationship(back_populates="lessons")
    challenges: Mapped[list["Challenge"]] = relationship(
        back_populates="lesson", cascade="all, delete-orphan", order_by="Challenge.order"
    )

    def __repr__(self) -> str:
        """String representation of Lesson."""
        return f"<Lesson(id={self.id}, unit_id={self.unit_id}, order={self.order})>"


class Challenge(Base):
    """Challenge model, a single question of a lesson."""

    __tablename__ = "challenges"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    lesson_id: Mapped[int] = mapped_column(
        ForeignKey("lessons.id", ondelete="CASCADE"), index=True, nullable=False
    )
    type: Mapped[ChallengeType] = mapped_column(
        Enum(ChallengeType, name="type"), nullable=False
    )
    question: Mapped[str] = mapped_column(Text, nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False)

    lesson: Mapped["Lesson"] = relationship(back_populates="challenges")
    options: Mapped[list["ChallengeOption"]] = relationship(
        back_populates="challenge", cascade="all, delete-orphan", order_by="ChallengeOption.id"
    )

    def __repr__(self) -> str:
        """String representation of Challenge."""
        return f"<Challenge(id={self.id}, lesson_id={self.lesson_id}, type={self.type})>"


class ChallengeOption(Base):
    """Selectable answer of a challenge."""

    __tablename__ = "challenge_options"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    challenge_id: Mapped[int] = mapped_column(
        ForeignKey("challenges.id", ondelete="CASCADE"), index=True, nullable=False
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    correct: Mapped[bool] = mapped_column(Boolean, nullable=False)
    image_src: Mapped[str | None] = mapped_column(Text, nullable=True)
    audio_src: Mapped[str | None] = mapped_column(Text, nullable=True)

    challenge: Mapped["Challenge"] = relationship(back_populates="options")

    def __repr__(self) -> str:
        """String representation of ChallengeOption."""
        return f"<ChallengeOption(id={self.id}, challenge_id={self.challenge_id})>"


class UserProgress(Base):
    """Per-user hearts, points and active course."""

    __tablename__ = "user_progress"

    user_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_name: Mapped[str] = mapped_column(Text, nullable=False, default="User")
    user_image_src: Mapped[str] = mapped_column(Text, nullable=False, default="/mascot.svg")
    active_course_id: Mapped[int] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"), nullable=False
    )
    hearts: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    active_course: Mapped["Course"] = relationship()

    __table_args__ = (
        CheckConstraint("hearts >= 0 AND hearts <= 5", name="ck_user_progress_hearts"),
        CheckConstraint("points >= 0", name="ck_user_progress_points"),
    )

    # UPDATE ... WHERE version = <read version>; zero matched rows raises StaleDataError
    __mapper_args__: dict[str, Any] = {"version_id_col": version}

    def __repr__(self) -> str:
        """String representation of UserProgress."""
        return f"<UserProgress(user_id={self.user_id}, hearts={self.hearts}, points={self.points})>"


class ChallengeProgress(Base):
    """Completion record of one challenge for one user."""

    __tablename__ = "challenge_progress"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    challenge_id: Mapped[int] = mapped_column(
        ForeignKey("challenges.id", ondelete="CASCADE"), index=True, nullable=False
    )
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (
        UniqueConstraint("user_id", "challenge_id", name="uq_challenge_progress_user_challenge"),
    )

    def __repr__(self) -> str:
        """String representation of ChallengeProgress."""
        return (
            f"<ChallengeProgress(user_id={self.user_id}, challenge_id={self.challenge_id}, "
            f"completed={self.completed})>"
        )


class UserSubscription(Base):
    """Paid subscription of a user, written by the payment collaborator."""

    __tablename__ = "user_subscriptions"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    stripe_customer_id: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    stripe_subscription_id: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    stripe_price_id: Mapped[str] = mapped_column(Text, nullable=False)
    stripe_current_period_end: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of UserSubscription."""
        return f"<UserSubscription(user_id={self.user_id}, price={self.stripe_price_id})>"
