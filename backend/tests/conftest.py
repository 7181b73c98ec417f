"""
Pytest configuration and shared fixtures.

The Mongo handle is backed by mongomock-motor and injected through create_app,
so the lifespan never opens a real connection.
"""

import pytest
from typing import Any, Dict, List
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.core.security import create_access_token
from app.database.mongo import MongoDatabase
from app.main import create_app

USER_A = "user-a"
USER_B = "user-b"


def auth_headers(user_id: str) -> Dict[str, str]:
    token = create_access_token({"sub": user_id})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def database() -> MongoDatabase:
    return MongoDatabase(client=AsyncMongoMockClient(), db_name="jobs_test")


@pytest.fixture
def client(database):
    app = create_app(database=database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_a_headers() -> Dict[str, str]:
    return auth_headers(USER_A)


@pytest.fixture
def user_b_headers() -> Dict[str, str]:
    return auth_headers(USER_B)


@pytest.fixture
def skills(client, user_a_headers) -> List[Dict[str, Any]]:
    """Two registered skills."""
    created = []
    for name, category in [("Python", "language"), ("MongoDB", "database")]:
        response = client.post("/skills", json={"name": name, "category": category}, headers=user_a_headers)
        assert response.status_code == 201
        created.append(response.json())
    return created


@pytest.fixture
def job_payload(skills) -> Dict[str, Any]:
    """Valid job payload referencing both skills."""
    return {
        "title": "Backend Engineer",
        "description": "Build and run the jobs API",
        "company": "Acme",
        "location": "Seoul",
        "salary": 50000000,
        "employmentType": "full-time",
        "skills": [skill["_id"] for skill in skills],
    }


@pytest.fixture
def create_job(client, user_a_headers, job_payload):
    """Factory that posts a job as user A and returns the response body."""

    def _create(**overrides) -> Dict[str, Any]:
        headers = overrides.pop("headers", user_a_headers)
        response = client.post("/jobs", json={**job_payload, **overrides}, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


class StubCollection:
    """Collection double that returns a canned result, or raises it if it is an exception."""

    def __init__(self, **outcomes: Any):
        self.outcomes = outcomes
        self.calls: List[tuple] = []

    def _resolve(self, name: str, *args, **kwargs) -> Any:
        self.calls.append((name, args, kwargs))
        outcome = self.outcomes[name]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def aggregate(self, *args, **kwargs):
        return self._resolve("aggregate", *args, **kwargs)

    def find(self, *args, **kwargs):
        return self._resolve("find", *args, **kwargs)

    async def find_one(self, *args, **kwargs):
        return self._resolve("find_one", *args, **kwargs)

    async def count_documents(self, *args, **kwargs):
        return self._resolve("count_documents", *args, **kwargs)

    async def insert_one(self, *args, **kwargs):
        return self._resolve("insert_one", *args, **kwargs)

    async def update_one(self, *args, **kwargs):
        return self._resolve("update_one", *args, **kwargs)

    async def delete_one(self, *args, **kwargs):
        return self._resolve("delete_one", *args, **kwargs)

    async def bulk_write(self, *args, **kwargs):
        return self._resolve("bulk_write", *args, **kwargs)


@pytest.fixture
def stub_collection(monkeypatch):
    """Replace one MongoDatabase collection (jobs/skills/statistics) for the rest of the test."""

    def _install(name: str, **outcomes: Any) -> StubCollection:
        stub = StubCollection(**outcomes)
        monkeypatch.setattr(MongoDatabase, name, property(lambda self: stub))
        return stub

    return _install
