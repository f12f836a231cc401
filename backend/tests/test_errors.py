"""Tests for error normalisation and the service endpoints."""

import pytest

from conftest import API
from scrolljob.utils import exceptions
from scrolljob.utils.exceptions import (
    InternalServerError,
    InvalidIdentifierError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
    create_error_response,
)


@pytest.mark.parametrize(
    "error, status_code",
    [
        (ValidationError("bad"), 400),
        (UnauthorizedError(), 401),
        (NotFoundError("Job"), 404),
        (InvalidIdentifierError("Job"), 400),
        (InternalServerError(), 500),
    ],
)
def test_error_status_codes(error, status_code):
    assert error.status_code == status_code


def test_error_envelope():
    assert create_error_response("Job not found") == {
        "status": "error",
        "message": "Job not found",
        "data": None,
    }


def test_unknown_route(client):
    response = client.get(f"{API}/unknown")

    assert response.status_code == 404
    assert response.json() == {"status": "error", "message": "Route not found", "data": None}


def test_unexpected_store_failure_is_500(client, job_store, monkeypatch):
    async def broken_find(*args, **kwargs):
        raise RuntimeError("connection reset")

    monkeypatch.setattr(job_store, "find", broken_find)

    response = client.get(f"{API}/jobs")

    assert response.status_code == 500
    assert response.json() == {"status": "error", "message": "Internal server error", "data": None}


def test_stack_included_in_development(client, app_settings, monkeypatch):
    app_settings.ENVIRONMENT = "development"
    monkeypatch.setattr(exceptions, "get_settings", lambda: app_settings)

    response = client.get(f"{API}/jobs/bad-id")

    assert response.status_code == 400
    assert "stack" in response.json()


def test_malformed_json_body(client):
    response = client.post(
        f"{API}/jobs",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["status"] == "error"


def test_root(client):
    body = client.get("/").json()

    assert body["status"] == "success"
    assert body["message"] == "ScrollJob API is running"
    assert body["data"]["version"] == "v1"


def test_health_without_database(client):
    body = client.get("/health").json()

    assert body["message"] == "Health check passed"
    assert body["data"]["database"] == "disconnected"
