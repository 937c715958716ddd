"""
Job notification endpoints: create, read, update, soft delete, listings.
"""

import inspect

from placement_portal.api.routes import api_router
from placement_portal.schemas.vocabularies import ORGANIZATION_TYPES
from tests.payloads import make_job_notification

BASE = "/api/job-notifications"


# ============================================================
# CREATE
# ============================================================

def test_create_returns_summary(client):
    response = client.post(BASE, json=make_job_notification(email="HR@Acme.com"))
    assert response.status_code == 201

    body = response.json()
    assert body["success"] is True
    assert body["timestamp"].endswith("Z")
    assert set(body["data"]) == {"id", "email", "companyName", "applicationId", "submissionDate"}
    assert body["data"]["email"] == "hr@acme.com"
    assert body["data"]["applicationId"].startswith("JNF")


def test_created_record_starts_pending(client, created_job):
    record = client.get(f"{BASE}/{created_job['id']}").json()["data"]
    assert record["status"] == "Pending"
    assert record["isActive"] is True
    assert record["reviewedBy"] == ""
    assert record["minHires"] == 5


def test_create_sanitizes_text(client):
    response = client.post(BASE, json=make_job_notification(companyName="  Acme    Corporation  "))
    assert response.json()["data"]["companyName"] == "Acme Corporation"


def test_create_with_missing_field_is_400(client, store):
    body = make_job_notification()
    del body["jobTitle"]
    response = client.post(BASE, json=body)

    assert response.status_code == 400
    payload = response.json()
    assert payload["success"] is False
    assert payload["message"] == "Validation failed. Please check the errors below."
    assert "jobTitle" in payload["errors"]
    assert store.job_notifications.count_documents({}) == 0


def test_duplicate_email_is_409_and_first_record_is_kept(client, created_job):
    response = client.post(BASE, json=make_job_notification(email="HR@ACME.COM", companyName="Other Co"))
    assert response.status_code == 409
    assert "email" in response.json()["errors"]

    record = client.get(f"{BASE}/{created_job['id']}").json()["data"]
    assert record["companyName"] == "Acme Corporation"


def test_selection_rounds_against_total_rounds(client):
    rounds = ["Aptitude Test", "Group Discussion", "Personal Interview", "HR Round"]
    response = client.post(BASE, json=make_job_notification(totalRounds=3, selectionRounds=rounds))
    assert response.status_code == 400
    assert "selectionRounds" in response.json()["errors"]

    response = client.post(BASE, json=make_job_notification(totalRounds=3, selectionRounds=rounds[:3]))
    assert response.status_code == 201


def test_malformed_json_is_400(client):
    response = client.post(BASE, content="{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert "body" in response.json()["errors"]


# ============================================================
# READ
# ============================================================

def test_get_with_invalid_id_is_400(client):
    response = client.get(f"{BASE}/not-an-id")
    assert response.status_code == 400
    assert response.json()["errors"] == {"id": "Invalid ID format"}


def test_get_unknown_id_is_404(client):
    response = client.get(f"{BASE}/64b7f0c2a1b2c3d4e5f60718")
    assert response.status_code == 404
    assert response.json()["success"] is False


def test_get_by_application_id(client, created_job):
    response = client.get(f"{BASE}/application/{created_job['applicationId']}")
    assert response.status_code == 200
    assert response.json()["data"]["id"] == created_job["id"]

    assert client.get(f"{BASE}/application/JNF000").status_code == 404


# ============================================================
# UPDATE / DELETE
# ============================================================

def test_update_allowed_fields(client, created_job):
    response = client.put(f"{BASE}/{created_job['id']}", json={"jobTitle": "  Associate   Engineer "})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["jobTitle"] == "Associate Engineer"
    assert data["status"] == "Pending"


def test_update_with_disallowed_field_changes_nothing(client, created_job):
    response = client.put(f"{BASE}/{created_job['id']}", json={"jobTitle": "SDE", "status": "Approved"})
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid update fields"

    record = client.get(f"{BASE}/{created_job['id']}").json()["data"]
    assert record["jobTitle"] == "Graduate Engineer Trainee"
    assert record["status"] == "Pending"


def test_update_with_invalid_value(client, created_job):
    response = client.put(f"{BASE}/{created_job['id']}", json={"headHREmail": "nope"})
    assert response.status_code == 400
    assert response.json()["errors"] == {"headHREmail": "Valid Head HR email is required"}


def test_soft_delete_keeps_record(client, created_job):
    notification_id = created_job["id"]
    client.patch(f"{BASE}/{notification_id}/approve", json={"reviewerName": "Placement Officer"})
    assert client.get(f"{BASE}/status/active").json()["data"]["pagination"]["totalItems"] == 1

    response = client.delete(f"{BASE}/{notification_id}")
    assert response.status_code == 200
    assert response.json()["data"]["isActive"] is False

    record = client.get(f"{BASE}/{notification_id}")
    assert record.status_code == 200
    assert record.json()["data"]["isActive"] is False
    assert client.get(f"{BASE}/status/active").json()["data"]["pagination"]["totalItems"] == 0


def test_delete_unknown_id_is_404(client):
    assert client.delete(f"{BASE}/64b7f0c2a1b2c3d4e5f60718").status_code == 404


# ============================================================
# LISTINGS
# ============================================================

def test_list_filters_by_status_and_company(client):
    for i, name in enumerate(["Acme Corporation", "Globex Systems", "Acme Labs"]):
        client.post(BASE, json=make_job_notification(email=f"hr{i}@example.com", companyName=name))

    data = client.get(BASE, params={"companyName": "acme"}).json()["data"]
    assert {item["companyName"] for item in data["items"]} == {"Acme Corporation", "Acme Labs"}

    data = client.get(BASE, params={"status": "Approved"}).json()["data"]
    assert data["items"] == []


def test_list_rejects_unknown_status_and_sort(client):
    response = client.get(BASE, params={"status": "Archived", "sortBy": "password"})
    assert response.status_code == 400
    assert set(response.json()["errors"]) == {"status", "sortBy"}


def test_company_search_matches_literally(client):
    client.post(BASE, json=make_job_notification(companyName="Acme (India) Pvt"))

    assert client.get(f"{BASE}/company/(India)").status_code == 200
    assert client.get(f"{BASE}/company/.*").status_code == 404


def test_pending_listing(client, created_job):
    data = client.get(f"{BASE}/status/pending").json()["data"]
    assert [item["id"] for item in data["items"]] == [created_job["id"]]

    client.patch(f"{BASE}/{created_job['id']}/hold", json={"reviewerName": "Officer"})
    assert client.get(f"{BASE}/status/pending").json()["data"]["items"] == []


def test_form_options_match_validators(client):
    data = client.get("/api/forms/job-notification/options").json()["data"]
    assert data["typeOfOrganization"] == ORGANIZATION_TYPES


def test_write_handlers_run_in_threadpool():
    """Handlers that call pymongo directly are plain functions, so FastAPI runs them off the event loop."""
    write_routes = [
        route for route in api_router.routes
        if route.methods & {"POST", "PUT", "PATCH", "DELETE"} and not route.path.startswith("/forms")
    ]
    assert write_routes
    for route in write_routes:
        assert not inspect.iscoroutinefunction(route.endpoint), route.path
