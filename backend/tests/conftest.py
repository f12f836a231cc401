"""Test configuration and fixtures."""

import os
import re
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

os.environ["TESTING"] = "true"  # Disable rate limiting in tests
os.environ.setdefault("ENVIRONMENT", "production")

from scrolljob.config import get_settings, settings  # noqa: E402
from scrolljob.main import app  # noqa: E402 - must set env vars before importing
from scrolljob.services.resource_store import JobStore, NewsStore  # noqa: E402
from scrolljob.utils.dependencies import get_job_store, get_news_store  # noqa: E402
from scrolljob.utils.exceptions import InvalidIdentifierError, NotFoundError  # noqa: E402

API = "/api/v1"
ADMIN_KEY = "s3cret-admin-key"


class FakeStoreMixin:
    """In-memory replacement for the beanie persistence calls.

    Field normalisation still goes through the real `fields_model`, so the
    trimming, lowercasing and defaults under test are the production ones.
    """

    def __init__(self):
        self.records = {}
        self.writes = 0
        self._ticks = 0

    def _now(self):
        self._ticks += 1
        return datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=self._ticks)

    async def create(self, fields):
        values = self.fields_model(**fields).model_dump()
        now = self._now()
        record = SimpleNamespace(id=ObjectId(), created_at=now, updated_at=now, **values)
        self.records[str(record.id)] = record
        self.writes += 1
        return record

    async def find_by_id(self, entity_id):
        if not ObjectId.is_valid(entity_id):
            raise InvalidIdentifierError(self.resource_name, self.invalid_id_message)
        record = self.records.get(str(entity_id))
        if record is None:
            raise NotFoundError(self.resource_name)
        return record

    async def find(self, filters, sort=None, limit=50, skip=0):
        matches = [record for record in self.records.values() if self._matches(record, filters)]
        matches.sort(key=lambda record: record.created_at, reverse=True)
        return matches[skip:skip + limit], len(matches)

    async def apply_changes(self, document, fields):
        for name, value in fields.items():
            setattr(document, name, value)
        document.updated_at = self._now()
        self.writes += 1
        return document

    @staticmethod
    def _matches(record, filters):
        for key, expected in filters.items():
            if key == "$text":
                haystack = f"{record.title} {record.company}".lower()
                if not any(term in haystack for term in expected["$search"].lower().split()):
                    return False
            elif isinstance(expected, dict) and "$regex" in expected:
                if not re.search(expected["$regex"], getattr(record, key), re.IGNORECASE):
                    return False
            elif getattr(record, key) != expected:
                return False
        return True


class FakeJobStore(FakeStoreMixin, JobStore):
    pass


class FakeNewsStore(FakeStoreMixin, NewsStore):
    pass


@pytest.fixture
def job_store():
    return FakeJobStore()


@pytest.fixture
def news_store():
    return FakeNewsStore()


@pytest.fixture
def app_settings():
    """Settings copy with the admin gate open; tests may set ADMIN_KEY."""
    return settings.model_copy(update={"ADMIN_KEY": ""})


@pytest.fixture
def client(job_store, news_store, app_settings):
    """Test client with the stores and settings overridden."""
    app.dependency_overrides[get_job_store] = lambda: job_store
    app.dependency_overrides[get_news_store] = lambda: news_store
    app.dependency_overrides[get_settings] = lambda: app_settings
    # No context manager: the lifespan would connect to MongoDB
    test_client = TestClient(app, raise_server_exceptions=False)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def gated(app_settings):
    """Enables the admin gate and returns the matching headers."""
    app_settings.ADMIN_KEY = ADMIN_KEY
    return {app_settings.ADMIN_KEY_HEADER: ADMIN_KEY}


@pytest.fixture
def job_payload():
    return {
        "title": "Backend Engineer",
        "company": "  Acme Corp ",
        "applyLink": "https://acme.example.com/jobs/1",
    }


@pytest.fixture
def create_job(client, job_payload):
    """Creates a job through the API and returns its response data."""

    def _create(**overrides):
        response = client.post(f"{API}/jobs", json={**job_payload, **overrides})
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create


@pytest.fixture
def create_news(client):
    def _create(**overrides):
        payload = {"title": "Hiring is up", "summary": "Q3 numbers are in", **overrides}
        response = client.post(f"{API}/news", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create
