"""API tests for the sessions endpoint.

Tests the HTTP request/response cycle for credential login:
- POST /api/v1/sessions

Architecture:
- Uses real app with dependency overrides
- Stub handlers test the outcome -> status mapping
- Full-flow tests run the real handlers over fresh in-memory stores
"""

from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.application.dtos.auth_dtos import LoginResponse
from src.core.container import (
    get_account_repository,
    get_login_user_handler,
    get_token_repository,
)
from src.core.result import Failure, Success
from src.domain.entities.session import Session
from src.domain.enums.login_outcome import LoginOutcome
from src.domain.enums.token_kind import TokenKind
from src.main import app
from tests.conftest import PASSWORD, create_account, stored_tokens


# =============================================================================
# Test Doubles - Stub handlers
# =============================================================================


class StubLoginUserHandler:
    """Stub handler returning a fixed result and recording commands."""

    def __init__(self, result):
        self.result = result
        self.commands = []

    async def handle(self, cmd):
        self.commands.append(cmd)
        return self.result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def override_dependencies():
    """Clear dependency overrides after each test."""
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """Create TestClient for API tests using real app."""
    return TestClient(app, raise_server_exceptions=False)


def use_handler(result) -> StubLoginUserHandler:
    stub = StubLoginUserHandler(result)
    app.dependency_overrides[get_login_user_handler] = lambda: stub
    return stub


# =============================================================================
# Tests: outcome mapping
# =============================================================================


@pytest.mark.api
class TestCreateSessionSuccess:
    """Tests for non-error outcomes."""

    def test_login_successful_returns_201_with_token(self, client):
        """Should return 201 Created with the access token."""
        expires_at = datetime(2030, 1, 1, tzinfo=UTC)
        stub = use_handler(
            Success(
                value=LoginResponse(
                    outcome=LoginOutcome.LOGIN_SUCCESSFUL,
                    session=Session(
                        account_id=uuid7(),
                        email="a@x.com",
                        access_token="jwt.token.value",
                        expires_at=expires_at,
                    ),
                )
            )
        )

        response = client.post(
            "/api/v1/sessions", json={"email": "a@x.com", "password": "p1"}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["outcome"] == "login_successful"
        assert data["message"] == "Login successful!"
        assert data["access_token"] == "jwt.token.value"
        assert data["token_type"] == "bearer"
        assert stub.commands[0].email == "a@x.com"
        assert stub.commands[0].code is None

    @pytest.mark.parametrize(
        ("outcome", "message"),
        [
            (LoginOutcome.CONFIRMATION_EMAIL_SENT, "Confirmation email sent!"),
            (LoginOutcome.TWO_FACTOR_REQUIRED, "Two-factor code sent!"),
        ],
    )
    def test_challenge_returns_202(self, client, outcome, message):
        """Should return 202 Accepted when another step is needed."""
        use_handler(Success(value=LoginResponse(outcome=outcome)))

        response = client.post(
            "/api/v1/sessions", json={"email": "a@x.com", "password": "p1"}
        )

        assert response.status_code == 202
        assert response.json() == {"outcome": outcome.value, "message": message}

    def test_code_forwarded_to_handler(self, client):
        stub = use_handler(
            Success(value=LoginResponse(outcome=LoginOutcome.TWO_FACTOR_REQUIRED))
        )

        client.post(
            "/api/v1/sessions",
            json={"email": "b@x.com", "password": "p1", "code": "482913"},
        )

        assert stub.commands[0].code == "482913"


@pytest.mark.api
class TestCreateSessionErrors:
    """Tests for error outcomes (RFC 7807 bodies)."""

    @pytest.mark.parametrize(
        ("outcome", "status_code", "detail"),
        [
            (LoginOutcome.INVALID_FIELDS, 422, "Invalid fields!"),
            (LoginOutcome.ACCOUNT_NOT_FOUND, 401, "Account does not exist!"),
            (LoginOutcome.INVALID_CODE, 401, "Invalid code!"),
            (LoginOutcome.CODE_EXPIRED, 401, "Code expired!"),
            (LoginOutcome.INVALID_CREDENTIALS, 401, "Invalid credentials!"),
            (LoginOutcome.UNKNOWN_ERROR, 500, "Something went wrong!"),
        ],
    )
    def test_error_outcome_mapping(self, client, outcome, status_code, detail):
        """Should map each error outcome to its status and message."""
        use_handler(Failure(error=outcome))

        response = client.post(
            "/api/v1/sessions", json={"email": "a@x.com", "password": "p1"}
        )

        assert response.status_code == status_code
        data = response.json()
        assert data["status"] == status_code
        assert data["detail"] == detail
        assert data["type"].endswith(f"/errors/{outcome.value}")
        assert data["instance"] == "/api/v1/sessions"

    def test_trace_id_header_present(self, client):
        use_handler(Failure(error=LoginOutcome.INVALID_CODE))

        response = client.post(
            "/api/v1/sessions", json={"email": "a@x.com", "password": "p1"}
        )

        assert response.headers["X-Trace-Id"] == response.json()["trace_id"]

    def test_non_json_body_returns_422(self, client):
        """Should reject a body that is not JSON before reaching the handler."""
        stub = use_handler(Failure(error=LoginOutcome.UNKNOWN_ERROR))

        response = client.post(
            "/api/v1/sessions",
            content="email=a@x.com",
            headers={"Content-Type": "text/plain"},
        )

        assert response.status_code == 422
        assert response.json()["detail"] == "Invalid fields!"
        assert stub.commands == []


# =============================================================================
# Tests: full flow over in-memory stores
# =============================================================================


@pytest.mark.api
class TestCreateSessionFlow:
    """Login scenarios through the real handlers."""

    @pytest.fixture(autouse=True)
    def stores(self, account_repo, token_repo):
        app.dependency_overrides[get_account_repository] = lambda: account_repo
        app.dependency_overrides[get_token_repository] = lambda: token_repo

    def test_empty_body_is_invalid_fields(self, client, account_repo):
        """Should answer invalid fields for missing email and password."""
        response = client.post("/api/v1/sessions", json={})

        assert response.status_code == 422
        assert response.json()["type"].endswith("/errors/invalid_fields")

    def test_unverified_then_verified_login(self, client, account_repo, token_repo):
        """Should send a verification link, verify, then log in."""
        account_repo.add(create_account(verified=False))

        first = client.post(
            "/api/v1/sessions", json={"email": "a@x.com", "password": PASSWORD}
        )
        token = stored_tokens(token_repo)[0]
        verified = client.post(
            "/api/v1/email-verifications", json={"token": token.token}
        )
        login = client.post(
            "/api/v1/sessions", json={"email": "a@x.com", "password": PASSWORD}
        )

        assert first.status_code == 202
        assert token.kind == TokenKind.VERIFICATION
        assert verified.status_code == 201
        assert login.status_code == 201
        assert login.json()["access_token"]

    def test_two_factor_login(self, client, account_repo, token_repo):
        """Should ask for a code, then accept it once."""
        account_repo.add(create_account(email="b@x.com", two_factor=True))

        challenge = client.post(
            "/api/v1/sessions", json={"email": "b@x.com", "password": PASSWORD}
        )
        code = stored_tokens(token_repo)[0].token
        login = client.post(
            "/api/v1/sessions",
            json={"email": "b@x.com", "password": PASSWORD, "code": code},
        )
        replay = client.post(
            "/api/v1/sessions",
            json={"email": "b@x.com", "password": PASSWORD, "code": code},
        )

        assert challenge.status_code == 202
        assert challenge.json()["outcome"] == "two_factor_required"
        assert login.status_code == 201
        assert replay.status_code == 401
        assert replay.json()["detail"] == "Invalid code!"

    def test_wrong_password(self, client, account_repo):
        account_repo.add(create_account())

        response = client.post(
            "/api/v1/sessions", json={"email": "a@x.com", "password": "nope"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials!"
