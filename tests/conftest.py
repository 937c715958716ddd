"""
Shared fixtures: an app backed by mongomock.
"""

import mongomock
import pytest
from fastapi.testclient import TestClient

from placement_portal.core.config import Settings
from placement_portal.db.mongodb import MongoStore
from placement_portal.main import create_app
from tests.payloads import make_job_notification


@pytest.fixture
def store():
    return MongoStore(mongomock.MongoClient(), "placement_portal_test")


@pytest.fixture
def settings():
    return Settings(mongodb_db="placement_portal_test", lock_terminal_status=False)


@pytest.fixture
def client(store, settings):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def created_job(client) -> dict:
    response = client.post("/api/job-notifications", json=make_job_notification())
    assert response.status_code == 201
    return response.json()["data"]
