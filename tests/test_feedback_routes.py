"""
Course feedback and placement feedback endpoints.
"""

from tests.payloads import make_course_feedback, make_placement_feedback

COURSE = "/api/student-feedback"
PLACEMENT = "/api/placement-feedback"


# ============================================================
# COURSE FEEDBACK
# ============================================================

def test_create_course_feedback(client, store):
    response = client.post(COURSE, json=make_course_feedback(email="Priya@Student.EDU"))
    assert response.status_code == 201

    data = response.json()["data"]
    assert set(data) == {"id", "studentId", "courseCode", "createdAt"}

    stored = store.student_feedback.find_one({"studentId": "21CS001"})
    assert stored["email"] == "priya@student.edu"
    assert stored["libraryFacilities"] == "Not Applicable"


def test_duplicate_course_feedback_is_409(client):
    first = client.post(COURSE, json=make_course_feedback()).json()["data"]

    response = client.post(COURSE, json=make_course_feedback(strengths="A different but long enough comment."))
    assert response.status_code == 409
    assert response.json()["errors"] == {"duplicateId": first["id"]}


def test_same_course_next_year_is_allowed(client):
    client.post(COURSE, json=make_course_feedback())
    response = client.post(COURSE, json=make_course_feedback(academicYear="2025-26"))
    assert response.status_code == 201


def test_invalid_course_feedback(client, store):
    response = client.post(COURSE, json=make_course_feedback(ratingTeaching=0, semester="9"))
    assert response.status_code == 400
    assert {"ratingTeaching", "semester"} <= set(response.json()["errors"])
    assert store.student_feedback.count_documents({}) == 0


def test_list_course_feedback_with_filters(client):
    client.post(COURSE, json=make_course_feedback())
    client.post(COURSE, json=make_course_feedback(studentId="21CS002", courseCode="CS302",
                                                  facultyName="Prof. Iyer", semester="6"))

    data = client.get(COURSE, params={"facultyName": "iyer"}).json()["data"]
    assert [item["courseCode"] for item in data["items"]] == ["CS302"]

    data = client.get(COURSE, params={"semester": "5"}).json()["data"]
    assert data["pagination"]["totalItems"] == 1

    data = client.get(COURSE, params={"sortBy": "courseCode"}).json()["data"]
    assert [item["courseCode"] for item in data["items"]] == ["CS301", "CS302"]


def test_course_feedback_rejects_unknown_sort(client):
    response = client.get(COURSE, params={"sortBy": "email"})
    assert response.status_code == 400
    assert "sortBy" in response.json()["errors"]


# ============================================================
# PLACEMENT FEEDBACK
# ============================================================

def test_create_placement_feedback(client):
    response = client.post(PLACEMENT, json=make_placement_feedback())
    assert response.status_code == 201
    assert set(response.json()["data"]) == {"id", "enrollmentNumber", "companyName", "createdAt"}


def test_duplicate_placement_feedback_is_409(client):
    first = client.post(PLACEMENT, json=make_placement_feedback()).json()["data"]
    response = client.post(PLACEMENT, json=make_placement_feedback(positionApplied="Data Analyst"))
    assert response.status_code == 409
    assert response.json()["errors"]["duplicateId"] == first["id"]


def test_selected_offer_requires_details(client):
    response = client.post(PLACEMENT, json=make_placement_feedback(offerStatus="Selected"))
    assert response.status_code == 400
    assert set(response.json()["errors"]) == {"packageOffered", "joiningDate"}


def test_list_placement_feedback(client):
    client.post(PLACEMENT, json=make_placement_feedback())
    client.post(PLACEMENT, json=make_placement_feedback(enrollmentNumber="EN2021IT007",
                                                        branch="Information Technology",
                                                        companyName="Globex Systems"))

    data = client.get(PLACEMENT, params={"companyName": "globex"}).json()["data"]
    assert [item["enrollmentNumber"] for item in data["items"]] == ["EN2021IT007"]

    data = client.get(PLACEMENT, params={"branch": "Information Technology"}).json()["data"]
    assert data["pagination"]["totalItems"] == 1


def test_feedback_cannot_be_updated_or_deleted(client):
    created = client.post(COURSE, json=make_course_feedback()).json()["data"]
    assert client.put(f"{COURSE}/{created['id']}", json={}).status_code in (404, 405)
    assert client.delete(f"{COURSE}/{created['id']}").status_code in (404, 405)
