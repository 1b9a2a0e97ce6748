"""End-to-end tests for the feature voting API.

Run against the in-memory container through FastAPI's TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from featurevote.domain.service import UserService
from featurevote.interface.api.app import create_app
from tests.conftest import make_user
from tests.di import build_test_container

USERS = [
    ("alice@example.com", "Alice Johnson"),
    ("bob@example.com", "Bob Smith"),
    ("charlie@example.com", "Charlie Brown"),
]


async def seed_users(container) -> None:
    async with container() as request_container:
        user_service = await request_container.get(UserService)
        for email, name in USERS:
            await user_service.save(make_user(email, name))


@pytest.fixture
def client():
    """Create test client over a seeded in-memory container."""
    container = build_test_container()
    with TestClient(create_app(container=container)) as test_client:
        test_client.portal.call(seed_users, container)
        yield test_client


def create_feature(client, title: str, email: str = "alice@example.com") -> dict:
    response = client.post(
        "/features",
        json={
            "title": title,
            "description": f"{title} for every study session",
            "createdByEmail": email,
        },
    )
    assert response.status_code == 201
    return response.json()["data"]


def vote(client, feature_id: str, email: str):
    return client.post(f"/features/{feature_id}/vote", json={"userEmail": email})


class TestHealth:
    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["status"] == "healthy"


class TestFeatureEndpoints:
    """Tests for /features."""

    def test_list_features_empty(self, client):
        response = client.get("/features")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}

    def test_create_feature(self, client):
        data = create_feature(client, "Dark Mode Support")

        assert data["title"] == "Dark Mode Support"
        assert data["voteCount"] == 0
        assert data["createdBy"]["email"] == "alice@example.com"

    def test_create_feature_validation_error(self, client):
        """A too-short title is rejected with per-field details."""
        response = client.post(
            "/features",
            json={
                "title": "Dark",
                "description": "Add a dark theme for late-night study sessions",
                "createdByEmail": "alice@example.com",
            },
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["details"][0]["field"] == "title"

    def test_create_feature_unknown_user(self, client):
        response = client.post(
            "/features",
            json={
                "title": "Dark Mode Support",
                "description": "Add a dark theme for late-night study sessions",
                "createdByEmail": "nobody@example.com",
            },
        )

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_get_feature_with_votes(self, client):
        feature = create_feature(client, "Dark Mode Support")
        vote(client, feature["id"], "bob@example.com")

        response = client.get(f"/features/{feature['id']}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["voteCount"] == 1
        assert len(data["votes"]) == 1
        assert data["createdBy"]["name"] == "Alice Johnson"

    def test_get_feature_invalid_id(self, client):
        response = client.get("/features/not-a-uuid")

        assert response.status_code == 400

    def test_get_feature_not_found(self, client):
        response = client.get("/features/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 404


class TestVoteFlow:
    """The one-vote-per-user flow over HTTP."""

    def test_cast_revote_move_and_remove(self, client):
        """A full vote lifecycle keeps the ranking consistent."""
        dark = create_feature(client, "Dark Mode Support")
        calendar = create_feature(client, "Calendar Integration")

        # Cast
        response = vote(client, dark["id"], "bob@example.com")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["action"] == "created"
        assert data["feature"]["voteCount"] == 1

        # Same feature again
        data = vote(client, dark["id"], "bob@example.com").json()["data"]
        assert data["action"] == "unchanged"
        assert data["feature"]["voteCount"] == 1

        # Move
        data = vote(client, calendar["id"], "bob@example.com").json()["data"]
        assert data["action"] == "moved"
        assert data["feature"]["id"] == calendar["id"]

        ranking = client.get("/features").json()["data"]
        assert [(f["id"], f["voteCount"]) for f in ranking] == [
            (calendar["id"], 1),
            (dark["id"], 0),
        ]
        assert [f["rank"] for f in ranking] == [1, 2]

        # Remove
        response = client.request(
            "DELETE", f"/features/{calendar['id']}/vote", json={"userEmail": "bob@example.com"}
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["message"] == "Vote removed successfully"
        assert data["feature"]["voteCount"] == 0

        # Remove again
        response = client.request(
            "DELETE", f"/features/{calendar['id']}/vote", json={"userEmail": "bob@example.com"}
        )
        assert response.status_code == 404

    def test_votes_from_several_users_are_counted(self, client):
        feature = create_feature(client, "Dark Mode Support")

        for email, _ in USERS:
            assert vote(client, feature["id"], email).status_code == 200

        ranking = client.get("/features").json()["data"]
        assert ranking[0]["voteCount"] == len(USERS)

    def test_vote_unknown_feature(self, client):
        response = vote(client, "00000000-0000-0000-0000-000000000000", "bob@example.com")

        assert response.status_code == 404
        assert "Feature not found" in response.json()["error"]

    def test_vote_unknown_user(self, client):
        feature = create_feature(client, "Dark Mode Support")

        response = vote(client, feature["id"], "nobody@example.com")

        assert response.status_code == 404

    def test_vote_invalid_payload(self, client):
        feature = create_feature(client, "Dark Mode Support")

        response = client.post(f"/features/{feature['id']}/vote", json={"userEmail": "bob"})

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "userEmail"


class TestVoteAndUserQueries:
    """Tests for /votes and /users."""

    def test_list_votes_filtered_by_email(self, client):
        dark = create_feature(client, "Dark Mode Support")
        calendar = create_feature(client, "Calendar Integration")
        vote(client, dark["id"], "alice@example.com")
        vote(client, calendar["id"], "bob@example.com")

        response = client.get("/votes", params={"userEmail": "bob@example.com"})

        assert response.status_code == 200
        votes = response.json()["data"]
        assert len(votes) == 1
        assert votes[0]["user"]["email"] == "bob@example.com"
        assert votes[0]["feature"]["id"] == calendar["id"]

    def test_list_votes_filtered_by_feature(self, client):
        dark = create_feature(client, "Dark Mode Support")
        vote(client, dark["id"], "alice@example.com")
        vote(client, dark["id"], "bob@example.com")

        votes = client.get("/votes", params={"featureId": dark["id"]}).json()["data"]

        assert {v["user"]["email"] for v in votes} == {"alice@example.com", "bob@example.com"}

    def test_get_user(self, client):
        dark = create_feature(client, "Dark Mode Support")
        vote(client, dark["id"], "alice@example.com")

        response = client.get("/users/alice@example.com")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Alice Johnson"
        assert [f["id"] for f in data["features"]] == [dark["id"]]
        assert data["vote"]["featureId"] == dark["id"]

    def test_get_unknown_user(self, client):
        response = client.get("/users/nobody@example.com")

        assert response.status_code == 404
        assert response.json()["success"] is False
