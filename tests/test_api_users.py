"""
Tests for the users API endpoints.

Tests FastAPI routes against an in-memory repository or mocked ports.
Validates status codes, response bodies, and error mapping.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.container import Container
from app.domain.users.errors import InternalError
from app.domain.users.ports import UserReadRepository, UserWriteRepository
from app.main import create_app

NEW_USER = {"username": "newuser", "password": "newpassword"}


def _client_with_failing_storage(settings: Settings) -> TestClient:
    """Build a client whose repositories always raise InternalError."""
    write_repo = AsyncMock(spec=UserWriteRepository)
    write_repo.save.side_effect = InternalError("connection refused")
    read_repo = AsyncMock(spec=UserReadRepository)
    read_repo.find_by_id.side_effect = InternalError("connection refused")
    return TestClient(create_app(settings=settings, container=Container(write_repo, read_repo)))


class TestCreateUserEndpoint:
    """Tests for POST /users."""

    def test_create_returns_201_with_empty_body(self, client: TestClient) -> None:
        response = client.post("/users", json=NEW_USER)

        assert response.status_code == 201
        assert response.content == b""

    def test_duplicate_username_returns_500(self, client: TestClient) -> None:
        """Second create with the same username fails, whatever the password."""
        first = client.post("/users", json=NEW_USER)
        second = client.post(
            "/users", json={"username": "newuser", "password": "anotherpassword"}
        )

        assert first.status_code == 201
        assert second.status_code == 500
        assert second.json() == {"message": "internal server error"}

    def test_identical_payload_twice_returns_500(self, client: TestClient) -> None:
        assert client.post("/users", json=NEW_USER).status_code == 201
        assert client.post("/users", json=NEW_USER).status_code == 500

    def test_malformed_json_returns_422(self, client: TestClient) -> None:
        response = client.post(
            "/users",
            content=b'{"username": "newuser", ',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert response.json() == {"message": "unprocessable entity"}

    @pytest.mark.parametrize(
        "payload",
        [
            {"username": "newuser"},
            {"password": "newpassword"},
            {"username": 1, "password": "newpassword"},
            {"username": "newuser", "password": None},
        ],
    )
    def test_structurally_invalid_body_returns_422(
        self, client: TestClient, payload: dict
    ) -> None:
        response = client.post("/users", json=payload)

        assert response.status_code == 422

    def test_storage_failure_returns_500(self, test_settings: Settings) -> None:
        client = _client_with_failing_storage(test_settings)

        response = client.post("/users", json=NEW_USER)

        assert response.status_code == 500
        assert response.json() == {"message": "internal server error"}


class TestGetUserEndpoint:
    """Tests for GET /users/{id}."""

    def test_created_user_is_readable(self, client: TestClient) -> None:
        """A created user can be fetched by its assigned id."""
        client.post("/users", json=NEW_USER)

        response = client.get("/users/1")

        assert response.status_code == 200
        assert response.json() == {
            "id": 1,
            "username": "newuser",
            "password": "newpassword",
        }

    def test_repeated_reads_are_byte_identical(self, client: TestClient) -> None:
        client.post("/users", json=NEW_USER)

        first = client.get("/users/1")
        second = client.get("/users/1")

        assert first.content == second.content

    def test_missing_user_returns_404(self, client: TestClient) -> None:
        response = client.get("/users/99999")

        assert response.status_code == 404
        assert response.json() == {"message": "not found"}

    @pytest.mark.parametrize("raw_id", ["abc", "1.5", "99999999999999999999"])
    def test_malformed_id_returns_400(self, client: TestClient, raw_id: str) -> None:
        """Undecodable ids are client errors, distinct from not found."""
        response = client.get(f"/users/{raw_id}")

        assert response.status_code == 400
        assert response.json() == {"message": "bad request"}

    def test_negative_id_is_looked_up(self, client: TestClient) -> None:
        """Negative ids are valid integers and simply not found."""
        response = client.get("/users/-5")

        assert response.status_code == 404

    def test_storage_failure_returns_500(self, test_settings: Settings) -> None:
        client = _client_with_failing_storage(test_settings)

        response = client.get("/users/1")

        assert response.status_code == 500
        assert response.json() == {"message": "internal server error"}


class TestUnexpectedErrors:
    """Tests for exceptions outside the domain taxonomy."""

    def test_unexpected_exception_returns_500_with_headers(
        self, test_settings: Settings
    ) -> None:
        """A non-domain exception still gets the standard body and headers."""
        read_repo = AsyncMock(spec=UserReadRepository)
        read_repo.find_by_id.side_effect = RuntimeError("boom")
        write_repo = AsyncMock(spec=UserWriteRepository)
        app = create_app(settings=test_settings, container=Container(write_repo, read_repo))
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/users/1")

        assert response.status_code == 500
        assert response.json() == {"message": "internal server error"}
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["Cache-Control"] == "no-store"


class TestRouting:
    """Tests for routes outside the users API."""

    def test_undefined_route_returns_404(self, client: TestClient) -> None:
        assert client.get("/not-found").status_code == 404

    def test_docs_hidden_outside_debug(self, client: TestClient) -> None:
        assert client.get("/docs").status_code == 404
        assert client.get("/openapi.json").status_code == 404

    def test_trailing_slash_post_does_not_create(self, client: TestClient) -> None:
        """POST /users/ is left to the framework and stores nothing."""
        response = client.post("/users/", json=NEW_USER, follow_redirects=False)

        assert response.status_code != 201
        assert client.get("/users/1").status_code == 404


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self, client: TestClient) -> None:
        """Headers are set on success and error responses alike."""
        for response in (client.get("/users/1"), client.get("/not-found")):
            assert response.headers["X-Content-Type-Options"] == "nosniff"
            assert response.headers["X-Frame-Options"] == "DENY"
            assert response.headers["Cache-Control"] == "no-store"


class TestRateLimiting:
    """Tests for rate limiting behavior."""

    def test_rate_limit_returns_429(self, test_settings: Settings) -> None:
        """Exceeding the default limit returns HTTP 429 with the error shape."""
        settings = test_settings.model_copy(
            update={"rate_limit_enabled": True, "rate_limit_default": "2/minute"}
        )
        client = TestClient(create_app(settings=settings))

        with client:
            responses = [client.get("/users/1") for _ in range(3)]

        assert [r.status_code for r in responses] == [404, 404, 429]
        assert responses[2].json() == {"message": "rate limit exceeded"}
        assert responses[2].headers["X-Frame-Options"] == "DENY"

    def test_limit_applies_to_create(self, test_settings: Settings) -> None:
        """POST /users is limited like GET, before any storage call."""
        settings = test_settings.model_copy(
            update={"rate_limit_enabled": True, "rate_limit_default": "2/minute"}
        )
        client = TestClient(create_app(settings=settings))

        with client:
            statuses = [
                client.post("/users", json=NEW_USER).status_code for _ in range(3)
            ]

        assert statuses == [201, 500, 429]

    def test_disabled_limiter_never_rejects(self, client: TestClient) -> None:
        statuses = {client.get("/users/1").status_code for _ in range(5)}

        assert statuses == {404}


class TestLifespan:
    """Tests for Container construction at startup."""

    def test_memory_backend_built_on_startup(self, test_settings: Settings) -> None:
        app = create_app(settings=test_settings)

        with TestClient(app) as client:
            assert client.post("/users", json=NEW_USER).status_code == 201
            assert client.get("/users/1").json()["username"] == "newuser"
