"""
Reviewer workflow: approve / reject / hold.
"""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from placement_portal.core.config import Settings
from placement_portal.main import create_app
from tests.payloads import make_job_notification

BASE = "/api/job-notifications"


def _parse(stamp: str) -> datetime:
    return datetime.fromisoformat(stamp.replace("Z", "+00:00"))


def test_approve_sets_review_fields(client, created_job):
    before = client.get(f"{BASE}/{created_job['id']}").json()["data"]

    response = client.patch(
        f"{BASE}/{created_job['id']}/approve",
        json={"reviewerName": "  Placement Officer ", "reviewNotes": "Looks good"},
    )
    assert response.status_code == 200
    after = response.json()["data"]

    assert after["status"] == "Approved"
    assert after["reviewedBy"] == "Placement Officer"
    assert after["reviewNotes"] == "Looks good"
    assert _parse(after["lastUpdated"]) > _parse(before["lastUpdated"])


def test_repeated_transitions_keep_advancing_last_updated(client, created_job):
    url = f"{BASE}/{created_job['id']}"
    first = client.patch(f"{url}/hold", json={"reviewerName": "A"}).json()["data"]
    second = client.patch(f"{url}/approve", json={"reviewerName": "B"}).json()["data"]
    assert _parse(second["lastUpdated"]) > _parse(first["lastUpdated"])
    assert second["reviewedBy"] == "B"


def test_reject_requires_reason(client, created_job):
    url = f"{BASE}/{created_job['id']}"
    response = client.patch(f"{url}/reject", json={"reviewerName": "Officer", "reviewNotes": "   "})

    assert response.status_code == 400
    assert response.json()["message"] == "Rejection reason is required"
    assert response.json()["errors"] == {"reviewNotes": "Please provide a reason for rejection"}
    assert client.get(url).json()["data"]["status"] == "Pending"


def test_reject_with_reason(client, created_job):
    response = client.patch(
        f"{BASE}/{created_job['id']}/reject",
        json={"reviewerName": "Officer", "reviewNotes": "Package below the institute minimum"},
    )
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "Rejected"


@pytest.mark.parametrize("action", ["approve", "reject", "hold"])
def test_reviewer_name_is_required(client, created_job, action):
    response = client.patch(f"{BASE}/{created_job['id']}/{action}", json={"reviewNotes": "note"})
    assert response.status_code == 400
    assert response.json()["errors"] == {"reviewerName": "Reviewer name cannot be empty"}


def test_missing_body_is_treated_as_missing_reviewer(client, created_job):
    response = client.patch(f"{BASE}/{created_job['id']}/hold")
    assert response.status_code == 400
    assert "reviewerName" in response.json()["errors"]


def test_review_notes_length_cap(client, created_job):
    response = client.patch(
        f"{BASE}/{created_job['id']}/hold",
        json={"reviewerName": "Officer", "reviewNotes": "x" * 1001},
    )
    assert response.status_code == 400
    assert "reviewNotes" in response.json()["errors"]


def test_invalid_and_unknown_ids(client):
    assert client.patch(f"{BASE}/xyz/approve", json={"reviewerName": "A"}).status_code == 400
    assert client.patch(f"{BASE}/64b7f0c2a1b2c3d4e5f60718/approve",
                        json={"reviewerName": "A"}).status_code == 404


def test_terminal_status_can_be_reviewed_again_by_default(client, created_job):
    url = f"{BASE}/{created_job['id']}"
    client.patch(f"{url}/approve", json={"reviewerName": "A"})
    response = client.patch(f"{url}/hold", json={"reviewerName": "B"})
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "On Hold"


def test_locked_terminal_status(store):
    app = create_app(settings=Settings(lock_terminal_status=True), store=store)
    with TestClient(app) as locked:
        created = locked.post(BASE, json=make_job_notification()).json()["data"]
        url = f"{BASE}/{created['id']}"
        assert locked.patch(f"{url}/approve", json={"reviewerName": "A"}).status_code == 200

        response = locked.patch(f"{url}/reject", json={"reviewerName": "B", "reviewNotes": "Changed our mind"})
        assert response.status_code == 409
        assert locked.get(url).json()["data"]["status"] == "Approved"
