"""Unit tests for the error envelope handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from featurevote.domain.error import (
    ConflictError,
    NotFoundError,
    TransactionAbortedError,
    ValidationError,
)
from featurevote.interface.error import register_exception_handlers


class Payload(BaseModel):
    title: str = Field(min_length=5)


@pytest.fixture
def client():
    """App whose routes raise each error the handlers cover."""
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/not-found")
    async def not_found():
        raise NotFoundError("Feature", "abc")

    @app.get("/invalid")
    async def invalid():
        raise ValidationError("title", "too short")

    @app.get("/conflict")
    async def conflict():
        raise ConflictError("Vote already exists")

    @app.get("/aborted")
    async def aborted():
        raise TransactionAbortedError("deadlock detected")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    @app.post("/payload")
    async def payload(body: Payload):
        return {"ok": True}

    return TestClient(app, raise_server_exceptions=False)


class TestErrorHandlers:
    """Each domain error maps to its status code inside the envelope."""

    def test_not_found_is_404(self, client):
        response = client.get("/not-found")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Feature not found: abc"}

    def test_domain_validation_is_400_with_details(self, client):
        response = client.get("/invalid")

        assert response.status_code == 400
        assert response.json()["details"] == [{"field": "title", "message": "too short"}]

    def test_request_validation_is_400_with_field_names(self, client):
        response = client.post("/payload", json={"title": "abc"})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Validation failed"
        assert [d["field"] for d in body["details"]] == ["title"]

    def test_conflict_is_409(self, client):
        response = client.get("/conflict")

        assert response.status_code == 409
        assert response.json()["error"] == "Vote already exists"

    def test_transaction_aborted_is_503(self, client):
        response = client.get("/aborted")

        assert response.status_code == 503
        assert "retry" in response.json()["error"]

    def test_unexpected_error_is_500_without_details(self, client):
        response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}

    def test_unknown_route_uses_envelope(self, client):
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert response.json()["success"] is False
