"""API tests for the email verifications endpoint.

Tests the HTTP request/response cycle for:
- POST /api/v1/email-verifications

Architecture:
- Uses real app with dependency overrides
- Stub handlers return each handler result
"""

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.core.container import get_verify_email_handler
from src.core.result import Failure, Success
from src.main import app


class StubVerifyEmailHandler:
    """Stub handler returning a fixed result."""

    def __init__(self, result):
        self.result = result

    async def handle(self, cmd):
        return self.result


@pytest.fixture(autouse=True)
def override_dependencies():
    """Clear dependency overrides after each test."""
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """Create TestClient for API tests using real app."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.api
class TestCreateEmailVerification:
    """Tests for POST /api/v1/email-verifications."""

    def test_success_returns_201(self, client):
        """Should return 201 Created with the confirmation message."""
        stub = StubVerifyEmailHandler(Success(value=uuid7()))
        app.dependency_overrides[get_verify_email_handler] = lambda: stub

        response = client.post(
            "/api/v1/email-verifications", json={"token": "verify.abc12345"}
        )

        assert response.status_code == 201
        assert response.json() == {"message": "Email verified!"}

    @pytest.mark.parametrize(
        ("error", "status_code", "detail"),
        [
            ("invalid_token", 400, "Invalid token!"),
            ("token_not_found", 404, "Token does not exist!"),
            ("token_expired", 400, "Token has expired!"),
            ("email_not_found", 404, "Email does not exist!"),
        ],
    )
    def test_failures(self, client, error, status_code, detail):
        """Should map each failure to its status and message."""
        stub = StubVerifyEmailHandler(Failure(error=error))
        app.dependency_overrides[get_verify_email_handler] = lambda: stub

        response = client.post(
            "/api/v1/email-verifications", json={"token": "verify.abc12345"}
        )

        assert response.status_code == status_code
        data = response.json()
        assert data["detail"] == detail
        assert data["type"].endswith(f"/errors/{error}")

    def test_missing_token_returns_422(self, client):
        """Should return a validation problem when the token is missing."""
        response = client.post("/api/v1/email-verifications", json={})

        assert response.status_code == 422
        data = response.json()
        assert data["type"].endswith("/errors/validation-failed")
        assert any(err["field"] == "token" for err in data["errors"])
