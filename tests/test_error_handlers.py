"""Tests for the global error handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from mesto.api.error_handlers import register_error_handlers
from mesto.errors import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    MestoError,
    NotFoundError,
    UnauthorizedError,
)


@pytest.fixture
def error_client():
    """A bare app with the error handlers and routes that raise."""
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/raise/{kind}")
    async def raise_error(kind: str):
        errors = {
            "bad-request": BadRequestError("Bad input"),
            "unauthorized": UnauthorizedError(),
            "forbidden": ForbiddenError(),
            "not-found": NotFoundError("Nothing here"),
            "conflict": ConflictError(),
            "base": MestoError("internal detail"),
        }
        if kind in errors:
            raise errors[kind]
        raise RuntimeError("database password is hunter2")

    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.mark.parametrize(
    ("kind", "status_code", "message"),
    [
        ("bad-request", 400, "Bad input"),
        ("unauthorized", 401, "Authorization required"),
        ("forbidden", 403, "Not enough permissions"),
        ("not-found", 404, "Nothing here"),
        ("conflict", 409, "Resource already exists"),
    ],
)
def test_known_errors_map_to_status(error_client, kind, status_code, message):
    response = error_client.get(f"/raise/{kind}")
    assert response.status_code == status_code
    assert response.json() == {"message": message}


def test_unknown_error_is_generic_500(error_client, caplog):
    response = error_client.get("/raise/boom")
    assert response.status_code == 500
    assert response.json() == {"message": "An error occurred on the server"}
    assert "hunter2" not in response.text
    assert "RuntimeError" in caplog.text


def test_base_error_does_not_leak_message(error_client):
    response = error_client.get("/raise/base")
    assert response.status_code == 500
    assert response.json() == {"message": "An error occurred on the server"}


def test_method_not_allowed_keeps_status(error_client):
    response = error_client.post("/raise/boom")
    assert response.status_code == 405
    assert response.json() == {"message": "Method Not Allowed"}


def test_unmatched_route(error_client):
    response = error_client.get("/nowhere")
    assert response.status_code == 404
    assert response.json() == {"message": "Page not found"}
