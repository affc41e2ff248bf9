"""Unit tests for the API exception handlers."""

from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from pact.domain.error import (
    AuthenticationError,
    ConflictError,
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from pact.interface.api.error_handlers import register_error_handlers


class Payload(BaseModel):
    count: int


def build_client() -> TestClient:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/validation")
    async def validation():
        raise ValidationError("Users cannot exclude themselves")

    @app.get("/conflict")
    async def conflict():
        raise ConflictError("Invite code ABCD2345 is exhausted", reason="exhausted")

    @app.get("/invalid-state")
    async def invalid_state():
        raise InvalidStateError("partnership", "p-1", "completed", "cancelled")

    @app.get("/not-found")
    async def not_found():
        raise NotFoundError("Partnership", "p-1")

    @app.get("/forbidden")
    async def forbidden():
        raise NotAuthorizedError("run matching", "u-1")

    @app.get("/unauthenticated")
    async def unauthenticated():
        raise AuthenticationError("Invalid username or password")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("password=hunter2")

    @app.post("/payload")
    async def payload(body: Payload):
        return body

    return TestClient(app, raise_server_exceptions=False)


class TestErrorHandlers:
    """Domain errors map onto statuses with a JSON error envelope."""

    def test_validation_error_is_400(self):
        response = build_client().get("/validation")

        assert response.status_code == 400
        assert response.json() == {
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Users cannot exclude themselves",
            }
        }

    def test_conflict_is_409_with_reason(self):
        response = build_client().get("/conflict")

        assert response.status_code == 409
        error = response.json()["error"]
        assert error["code"] == "CONFLICT"
        assert error["reason"] == "exhausted"

    def test_invalid_state_is_409(self):
        response = build_client().get("/invalid-state")

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "INVALID_STATE"

    def test_not_found_is_404(self):
        response = build_client().get("/not-found")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Partnership not found: p-1"

    def test_not_authorized_is_403(self):
        response = build_client().get("/forbidden")

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "NOT_AUTHORIZED"

    def test_authentication_error_is_401(self):
        response = build_client().get("/unauthenticated")

        assert response.status_code == 401
        assert response.json()["error"] == {
            "code": "NOT_AUTHENTICATED",
            "message": "Invalid username or password",
        }

    def test_unexpected_error_is_500_without_details(self):
        response = build_client().get("/boom")

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "INTERNAL_ERROR"
        assert "hunter2" not in response.text

    def test_request_validation_is_400_with_fields(self):
        response = build_client().post("/payload", json={"count": "many"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"][0]["field"] == "body.count"
