"""Integration tests for the leaderboard and subscription status."""

from datetime import UTC, datetime, timedelta

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from tests.conftest import create_test_progress, create_test_subscription


class TestLeaderboard:
    def test_ordered_by_points_then_user_id(
        self, client: TestClient, curriculum: Session, headers: dict[str, str]
    ) -> None:
        create_test_progress(curriculum, user_id="carol", points=30)
        create_test_progress(curriculum, user_id="bob", points=50)
        create_test_progress(curriculum, user_id="alice", points=30)

        response = client.get("/api/v1/leaderboard", headers=headers)

        assert response.status_code == status.HTTP_200_OK
        entries = response.json()["entries"]
        assert [(e["rank"], e["user_id"], e["points"]) for e in entries] == [
            (1, "bob", 50),
            (2, "alice", 30),
            (3, "carol", 30),
        ]

    def test_limit(self, client: TestClient, curriculum: Session, headers: dict[str, str]) -> None:
        for index in range(5):
            create_test_progress(curriculum, user_id=f"user_{index}", points=index * 10)

        response = client.get("/api/v1/leaderboard", params={"limit": 2}, headers=headers)

        assert [e["user_id"] for e in response.json()["entries"]] == ["user_4", "user_3"]

    def test_invalid_limit_returns_422(
        self, client: TestClient, curriculum: Session, headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/leaderboard", params={"limit": 0}, headers=headers)

        assert response.status_code == 422


class TestSubscription:
    def test_no_subscription(
        self, client: TestClient, curriculum: Session, headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/me/subscription", headers=headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"subscription": None}

    def test_active_subscription(
        self, client: TestClient, curriculum: Session, headers: dict[str, str]
    ) -> None:
        create_test_subscription(curriculum, period_end=datetime.now(UTC) + timedelta(days=20))

        response = client.get("/api/v1/me/subscription", headers=headers)

        subscription = response.json()["subscription"]
        assert subscription["stripe_price_id"] == "price_monthly"
        assert subscription["is_active"] is True

    def test_expired_subscription(
        self, client: TestClient, curriculum: Session, headers: dict[str, str]
    ) -> None:
        create_test_subscription(curriculum, period_end=datetime.now(UTC) - timedelta(days=3))

        response = client.get("/api/v1/me/subscription", headers=headers)

        assert response.json()["subscription"]["is_active"] is False
