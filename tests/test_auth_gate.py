"""Tests for bearer-token authorization on protected routes."""

from datetime import UTC, datetime, timedelta

import pytest

from mesto.config import Settings
from mesto.services.auth import TokenService
from mesto.services.cards import CardService

PROTECTED_ROUTES = [
    ("get", "/users"),
    ("get", "/users/me"),
    ("get", "/users/5f8d0d55b54764421b7156c9"),
    ("patch", "/users/me"),
    ("patch", "/users/me/avatar"),
    ("get", "/cards"),
    ("post", "/cards"),
    ("delete", "/cards/5f8d0d55b54764421b7156c9"),
    ("put", "/cards/5f8d0d55b54764421b7156c9/likes"),
    ("delete", "/cards/5f8d0d55b54764421b7156c9/likes"),
]


@pytest.mark.parametrize(("method", "path"), PROTECTED_ROUTES)
def test_protected_routes_require_token(client, method, path):
    """Test that endpoints require authentication."""
    response = client.request(method, path)
    assert response.status_code == 401
    assert response.json() == {"message": "Authorization required"}


def test_missing_header_never_reaches_handler(client, monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("handler must not run")

    monkeypatch.setattr(CardService, "list_cards", fail)
    response = client.get("/cards")
    assert response.status_code == 401


def test_invalid_body_without_token_is_unauthorized(client):
    response = client.patch("/users/me", json={"name": "x"})
    assert response.status_code == 401


@pytest.mark.parametrize("scheme", ["Token", "bearer", "Basic"])
def test_wrong_scheme_rejected(client, auth_headers, scheme):
    token = auth_headers["Authorization"].removeprefix("Bearer ")
    response = client.get("/users/me", headers={"Authorization": f"{scheme} {token}"})
    assert response.status_code == 401


def test_garbage_token_rejected(client):
    response = client.get("/users/me", headers={"Authorization": "Bearer not.a.token"})
    assert response.status_code == 401
    assert response.json()["message"] == "Authorization required"


def test_expired_token_rejected(client, auth_headers):
    token_service = TokenService(Settings(_env_file=None))
    token = token_service.issue(
        auth_headers.user_id, issued_at=datetime.now(UTC) - timedelta(days=8)
    )
    response = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_signed_with_other_secret_rejected(client, auth_headers):
    token_service = TokenService(
        Settings(_env_file=None, environment="production", jwt_secret="another-secret")
    )
    token = token_service.issue(auth_headers.user_id)
    response = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_valid_token_passes(client, auth_headers):
    response = client.get("/users/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == auth_headers.user_id


def test_public_routes_do_not_require_token(client):
    response = client.post(
        "/signup", json={"email": "public@example.com", "password": "password123"}
    )
    assert response.status_code == 201
    response = client.post(
        "/signin", json={"email": "public@example.com", "password": "password123"}
    )
    assert response.status_code == 200
