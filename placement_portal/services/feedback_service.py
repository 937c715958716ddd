"""
Feedback Services - write-once student submissions.

Collections:
1. student_feedback    - course / faculty feedback
2. placement_feedback  - recruitment experience with a company

One submission per student per subject per academic year; the check is an
explicit lookup, not a unique index. No update or delete is exposed.
"""

import logging
from typing import Optional

from pymongo.collection import Collection

from placement_portal.core.errors import ConflictError, ValidationError
from placement_portal.db.mongodb import MongoStore
from placement_portal.services.query import build_filter, paginate, parse_sort
from placement_portal.utils.documents import utcnow
from placement_portal.validation.feedback import validate_course_feedback, validate_placement_feedback
from placement_portal.validation.pagination import validate_pagination, validate_sort

logger = logging.getLogger(__name__)


class _FeedbackService:
    collection: Collection
    duplicate_key: tuple = ()
    sortable_fields: list = []
    default_sort = "-createdAt"
    duplicate_message = "Feedback already submitted"

    def _insert_once(self, data: dict) -> dict:
        key = {field: data[field] for field in self.duplicate_key}
        existing = self.collection.find_one(key, {"_id": 1})
        if existing:
            raise ConflictError(self.duplicate_message, {"duplicateId": str(existing["_id"])})

        now = utcnow()
        doc = {**data, "createdAt": now, "updatedAt": now}
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    async def _list(self, page, limit, sort_by, exact=None, contains=None) -> dict:
        page_num, limit_num, errors = validate_pagination(page, limit)
        if errors:
            raise ValidationError("Invalid pagination parameters", errors)

        sort_by = sort_by or self.default_sort
        errors = validate_sort(sort_by, self.sortable_fields)
        if errors:
            raise ValidationError("Invalid search parameters", errors)

        query = build_filter(exact=exact, contains=contains)
        return await paginate(self.collection, query, parse_sort(sort_by), page_num, limit_num)


class CourseFeedbackService(_FeedbackService):
    """
    Course feedback: one per (studentId, courseCode, academicYear).
    """
    duplicate_key = ("studentId", "courseCode", "academicYear")
    sortable_fields = ["createdAt", "ratingOverall", "studentName", "courseCode"]
    duplicate_message = "Feedback already submitted for this course by this student"

    def __init__(self, store: MongoStore):
        self.collection = store.student_feedback

    def create(self, body) -> dict:
        is_valid, errors, model = validate_course_feedback(body)
        if not is_valid:
            raise ValidationError(errors=errors)

        doc = self._insert_once(model.model_dump())
        logger.info("Course feedback created: %s (%s, %s)", doc["_id"], doc["studentId"], doc["courseCode"])
        return {
            "id": str(doc["_id"]),
            "studentId": doc["studentId"],
            "courseCode": doc["courseCode"],
            "createdAt": doc["createdAt"],
        }

    async def list_all(
        self,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        department: Optional[str] = None,
        semester: Optional[str] = None,
        academic_year: Optional[str] = None,
        course_code: Optional[str] = None,
        faculty_name: Optional[str] = None,
        sort_by: Optional[str] = None
    ) -> dict:
        return await self._list(
            page, limit, sort_by,
            exact={
                "department": department,
                "semester": semester,
                "academicYear": academic_year,
                "courseCode": course_code,
            },
            contains={"facultyName": faculty_name},
        )


class PlacementFeedbackService(_FeedbackService):
    """
    Placement feedback: one per (enrollmentNumber, companyName, academicYear).
    """
    duplicate_key = ("enrollmentNumber", "companyName", "academicYear")
    sortable_fields = ["createdAt", "companyName", "overallExperience"]
    duplicate_message = "Feedback already submitted for this company by this student"

    def __init__(self, store: MongoStore):
        self.collection = store.placement_feedback

    def create(self, body) -> dict:
        is_valid, errors, model = validate_placement_feedback(body)
        if not is_valid:
            raise ValidationError(errors=errors)

        doc = self._insert_once(model.model_dump())
        logger.info("Placement feedback created: %s (%s, %s)", doc["_id"], doc["enrollmentNumber"], doc["companyName"])
        return {
            "id": str(doc["_id"]),
            "enrollmentNumber": doc["enrollmentNumber"],
            "companyName": doc["companyName"],
            "createdAt": doc["createdAt"],
        }

    async def list_all(
        self,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        branch: Optional[str] = None,
        academic_year: Optional[str] = None,
        company_name: Optional[str] = None,
        offer_status: Optional[str] = None,
        sort_by: Optional[str] = None
    ) -> dict:
        return await self._list(
            page, limit, sort_by,
            exact={"branch": branch, "academicYear": academic_year, "offerStatus": offer_status},
            contains={"companyName": company_name},
        )
