"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from datetime import datetime
from typing import Any

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-at-least-32-bytes")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from lingo import models  # noqa: E402
from lingo.database import Base, build_engine, get_db  # noqa: E402
from lingo.domain.curriculum.entities import ChallengeType  # noqa: E402
from lingo.infrastructure.identity.token_service import create_access_token  # noqa: E402
from lingo.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Single shared connection, so endpoints running in worker threads see the same database
test_engine = build_engine(TEST_DATABASE_URL)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

DEFAULT_USER_ID = "user_1"

# Seeded curriculum ids
SPANISH_COURSE_ID = 1
FRENCH_COURSE_ID = 2
EMPTY_COURSE_ID = 3
LESSON_GREETINGS_ID = 1  # challenges 1, 2
LESSON_NUMBERS_ID = 2  # challenge 3
LESSON_EMPTY_ID = 3  # no challenges
LESSON_FRENCH_ID = 4  # challenges 4, 5 (5 has two correct options)
CHALLENGE_HELLO_ID = 1
CHALLENGE_BYE_ID = 2
CHALLENGE_ONE_ID = 3
CHALLENGE_BONJOUR_ID = 4
CHALLENGE_BROKEN_ID = 5


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def auth_headers(user_id: str = DEFAULT_USER_ID) -> dict[str, str]:
    """Authorization header carrying an access token for user_id."""
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
def headers() -> dict[str, str]:
    return auth_headers()


def _challenge(
    id: int, lesson_id: int, order: int, question: str, answers: list[tuple[str, bool]]
) -> models.Challenge:
    challenge = models.Challenge(
        id=id, lesson_id=lesson_id, type=ChallengeType.SELECT, question=question, order=order
    )
    challenge.options = [
        models.ChallengeOption(id=id * 10 + index, text=text, correct=correct)
        for index, (text, correct) in enumerate(answers, start=1)
    ]
    return challenge


def seed_curriculum(db_session: Session) -> None:
    """
    Seed a small curriculum.

    Spanish: unit 1 holds "Greetings" (challenges 1, 2), "Numbers" (challenge 3)
    and an empty lesson. French: one lesson with a valid challenge 4 and a
    defective challenge 5 with two correct options. Option ids are
    challenge_id * 10 + position, the first option being the correct one.
    """
    spanish = models.Course(id=SPANISH_COURSE_ID, title="Spanish", image_src="/es.svg")
    french = models.Course(id=FRENCH_COURSE_ID, title="French", image_src="/fr.svg")
    empty = models.Course(id=EMPTY_COURSE_ID, title="Latin", image_src="/la.svg")

    unit_1 = models.Unit(
        id=1, course_id=SPANISH_COURSE_ID, title="Unit 1", description="Basics", order=1
    )
    unit_2 = models.Unit(
        id=2, course_id=FRENCH_COURSE_ID, title="Unité 1", description="Bases", order=1
    )

    # Inserted out of order to check that reads sort by the order column
    greetings = models.Lesson(id=LESSON_GREETINGS_ID, unit_id=1, title="Greetings", order=1)
    numbers = models.Lesson(id=LESSON_NUMBERS_ID, unit_id=1, title="Numbers", order=3)
    empty_lesson = models.Lesson(id=LESSON_EMPTY_ID, unit_id=1, title="Coming soon", order=2)
    french_lesson = models.Lesson(id=LESSON_FRENCH_ID, unit_id=2, title="Salutations", order=1)

    db_session.add_all([spanish, french, empty, unit_1, unit_2])
    db_session.add_all([numbers, empty_lesson, greetings, french_lesson])
    db_session.flush()

    challenges = [
        (CHALLENGE_BYE_ID, LESSON_GREETINGS_ID, 2, "Bye?", [("adiós", True), ("sí", False)]),
        (CHALLENGE_HELLO_ID, LESSON_GREETINGS_ID, 1, "Hi?", [("hola", True), ("no", False)]),
        (CHALLENGE_ONE_ID, LESSON_NUMBERS_ID, 1, "One?", [("uno", True), ("dos", False)]),
        (CHALLENGE_BONJOUR_ID, LESSON_FRENCH_ID, 1, "Hi?", [("salut", True), ("non", False)]),
        (CHALLENGE_BROKEN_ID, LESSON_FRENCH_ID, 2, "Yes?", [("oui", True), ("si", True)]),
    ]
    db_session.add_all([_challenge(*row) for row in challenges])
    db_session.commit()


@pytest.fixture
def curriculum(db_session: Session) -> Session:
    seed_curriculum(db_session)
    return db_session


def create_test_progress(
    db_session: Session,
    user_id: str = DEFAULT_USER_ID,
    course_id: int = SPANISH_COURSE_ID,
    hearts: int = 5,
    points: int = 0,
    user_name: str = "User",
) -> models.UserProgress:
    """Create a UserProgress row directly in the database."""
    progress = models.UserProgress(
        user_id=user_id,
        active_course_id=course_id,
        hearts=hearts,
        points=points,
        user_name=user_name,
        user_image_src="/mascot.svg",
    )
    db_session.add(progress)
    db_session.commit()
    db_session.refresh(progress)
    return progress


def create_test_completion(
    db_session: Session,
    challenge_id: int,
    user_id: str = DEFAULT_USER_ID,
    completed: bool = True,
) -> models.ChallengeProgress:
    """Create a ChallengeProgress row directly in the database."""
    record = models.ChallengeProgress(
        user_id=user_id, challenge_id=challenge_id, completed=completed
    )
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record


def create_test_subscription(
    db_session: Session,
    period_end: datetime,
    user_id: str = DEFAULT_USER_ID,
    price_id: str = "price_monthly",
) -> models.UserSubscription:
    """Create a UserSubscription row directly in the database."""
    subscription = models.UserSubscription(
        user_id=user_id,
        stripe_customer_id=f"cus_{user_id}",
        stripe_subscription_id=f"sub_{user_id}",
        stripe_price_id=price_id,
        stripe_current_period_end=period_end,
    )
    db_session.add(subscription)
    db_session.commit()
    return subscription
