"""
Job Notification Service - Record Store for company submissions.

Collection: job_notifications

Operations:
- create          validate -> sanitize -> duplicate check -> insert
- get / get_by_application_id
- update          allow-listed fields only, whole request fails otherwise
- soft_delete     isActive=false, record kept for audit
- list_all / list_by_company / list_active / list_pending   (paginated)

Status is never written here except the initial Pending; see
workflow_service for approve / reject / hold.
"""

import logging
import random
import string
import time
from datetime import datetime
from typing import Optional

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from placement_portal.core.errors import ConflictError, NotFoundError, ValidationError
from placement_portal.db.mongodb import MongoStore
from placement_portal.services.query import build_filter, paginate, parse_sort
from placement_portal.services.sanitizer import sanitize_job_notification
from placement_portal.utils.documents import later_than, parse_object_id, serialize_doc, utcnow
from placement_portal.validation.common import parse_int
from placement_portal.validation.job_notification import (
    validate_job_notification,
    validate_job_notification_update,
)
from placement_portal.validation.pagination import validate_pagination, validate_sort
from placement_portal.schemas.vocabularies import JOB_STATUSES

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = ["submissionDate", "companyName", "email"]
DEFAULT_SORT = "-submissionDate"

# Everything a company submits; unknown keys in the payload are dropped
SUBMITTED_FIELDS = (
    "email", "companyName", "aboutCompany", "correspondenceAddress", "dateOfEstablishment",
    "numberOfEmployees", "socialMediaLink", "website", "typeOfOrganization", "mncHeadOffice",
    "natureOfBusiness",
    "headHRName", "headHRContact", "headHREmail", "firstContactName", "firstContactEmail",
    "firstContactPhone", "secondContactName", "secondContactEmail", "secondContactPhone",
    "jobProfile", "jobTitle", "jobDescription", "minHires", "expectedHires", "jobLocation",
    "requiredSkills",
    "eligibleDegrees", "eligibleBTechDepartments", "eligibleMTechDepartments",
    "eligiblePhDDepartments",
    "jobDesignationBTech", "jobDescBTech", "jobDesignationMTech", "jobDescMTech",
    "jobDesignationPhD", "jobDescPhD",
    "cgpaCutoff", "backlogEligibility", "modeOfSelection", "selectionRounds", "totalRounds",
    "syllabus",
)

OPTIONAL_TEXT_FIELDS = ("socialMediaLink", "mncHeadOffice", "syllabus")


def generate_application_id() -> str:
    """'JNF' + epoch millis + 5 random base-36 characters, e.g. JNF1718000000000K3X9Q"""
    suffix = "".join(random.choices(string.ascii_uppercase + string.digits, k=5))
    return f"JNF{int(time.time() * 1000)}{suffix}"


def _to_datetime(value) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def _coerce_types(data: dict) -> dict:
    """Store counts as ints and the establishment date as a BSON date."""
    for field in ("minHires", "expectedHires", "totalRounds"):
        if field in data:
            data[field] = parse_int(data[field])
    if "numberOfEmployees" in data:
        data["numberOfEmployees"] = parse_int(data["numberOfEmployees"]) if data["numberOfEmployees"] not in (None, "") else None
    if "dateOfEstablishment" in data:
        data["dateOfEstablishment"] = _to_datetime(data["dateOfEstablishment"])
    return data


def _duplicate_field(exc: DuplicateKeyError) -> str:
    details = exc.details or {}
    for key in ("keyPattern", "keyValue"):
        if details.get(key):
            return next(iter(details[key]))
    if "applicationId" in str(exc):
        return "applicationId"
    return "email"


class JobNotificationService:
    """
    Handles job notification storage and lookup.
    """

    def __init__(self, store: MongoStore):
        self.collection = store.job_notifications

    # ------------------------------------------------------------
    # CREATE
    # ------------------------------------------------------------

    def create(self, body) -> dict:
        """
        Create a job notification in Pending status.

        Raises:
            ValidationError: payload failed field checks
            ConflictError: email already registered
        """
        is_valid, errors = validate_job_notification(body)
        if not is_valid:
            raise ValidationError(errors=errors)

        data = sanitize_job_notification({k: body[k] for k in SUBMITTED_FIELDS if k in body})
        for field in OPTIONAL_TEXT_FIELDS:
            data.setdefault(field, "")
        _coerce_types(data)

        if self.collection.find_one({"email": data["email"]}, {"_id": 1}):
            raise ConflictError(
                "Email already registered. Please use a different email address.",
                {"email": "This email is already registered in the system"}
            )

        now = utcnow()
        doc = {
            **data,
            "status": "Pending",
            "reviewedBy": "",
            "reviewNotes": "",
            "isActive": True,
            "applicationId": generate_application_id(),
            "submissionDate": now,
            "lastUpdated": now,
            "createdAt": now,
            "updatedAt": now,
        }

        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError as exc:
            field = _duplicate_field(exc)
            raise ConflictError(
                f"{field} already exists in the system",
                {field: f"This {field} is already registered"}
            )

        doc["_id"] = result.inserted_id
        logger.info("Job notification created: %s (%s)", result.inserted_id, doc["applicationId"])
        return serialize_doc(doc)

    # ------------------------------------------------------------
    # READ
    # ------------------------------------------------------------

    def get_document(self, notification_id: str) -> dict:
        """Raw document by ObjectId string."""
        oid = parse_object_id(notification_id)
        if oid is None:
            raise ValidationError("Invalid job notification ID", {"id": "Invalid ID format"})

        doc = self.collection.find_one({"_id": oid})
        if doc is None:
            raise NotFoundError("Job notification not found")
        return doc

    def get(self, notification_id: str) -> dict:
        return serialize_doc(self.get_document(notification_id))

    def get_by_application_id(self, application_id: str) -> dict:
        doc = self.collection.find_one({"applicationId": application_id})
        if doc is None:
            raise NotFoundError(
                "Job notification not found",
                {"applicationId": "Application ID does not exist"}
            )
        return serialize_doc(doc)

    # ------------------------------------------------------------
    # UPDATE / DELETE
    # ------------------------------------------------------------

    def update(self, notification_id: str, updates) -> dict:
        """
        Update allow-listed fields.

        Any key outside the allow-list rejects the whole request before
        anything is written.
        """
        current = self.get_document(notification_id)

        is_valid, errors = validate_job_notification_update(current, updates)
        if not is_valid:
            message = "Invalid update fields" if "fields" in errors else "Validation failed. Please check the errors below."
            raise ValidationError(message, errors)

        changes = _coerce_types(sanitize_job_notification(updates))
        stamp = later_than(current.get("lastUpdated"))
        changes.update({"lastUpdated": stamp, "updatedAt": stamp})

        doc = self.collection.find_one_and_update(
            {"_id": current["_id"]},
            {"$set": changes},
            return_document=ReturnDocument.AFTER
        )
        if doc is None:
            raise NotFoundError("Job notification not found")

        logger.info("Job notification updated: %s fields=%s", notification_id, sorted(updates))
        return serialize_doc(doc)

    def soft_delete(self, notification_id: str) -> dict:
        current = self.get_document(notification_id)
        stamp = later_than(current.get("lastUpdated"))

        doc = self.collection.find_one_and_update(
            {"_id": current["_id"]},
            {"$set": {"isActive": False, "lastUpdated": stamp, "updatedAt": stamp}},
            return_document=ReturnDocument.AFTER
        )
        if doc is None:
            raise NotFoundError("Job notification not found")

        logger.info("Job notification deactivated: %s", notification_id)
        return serialize_doc(doc)

    # ------------------------------------------------------------
    # LISTINGS
    # ------------------------------------------------------------

    @staticmethod
    def _page_params(page: Optional[str], limit: Optional[str]):
        page_num, limit_num, errors = validate_pagination(page, limit)
        if errors:
            raise ValidationError("Invalid pagination parameters", errors)
        return page_num, limit_num

    async def list_all(
        self,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        status: Optional[str] = None,
        company_name: Optional[str] = None,
        sort_by: Optional[str] = None
    ) -> dict:
        """All notifications (including inactive) for the review dashboard."""
        page_num, limit_num = self._page_params(page, limit)
        sort_by = sort_by or DEFAULT_SORT

        errors = {}
        if status and status not in JOB_STATUSES:
            errors["status"] = f"Status must be one of: {', '.join(JOB_STATUSES)}"
        if company_name and len(company_name) > 200:
            errors["companyName"] = "Company name search cannot exceed 200 characters"
        errors.update(validate_sort(sort_by, SORTABLE_FIELDS))
        if errors:
            raise ValidationError("Invalid search parameters", errors)

        query = build_filter(exact={"status": status}, contains={"companyName": company_name})
        return await paginate(self.collection, query, parse_sort(sort_by), page_num, limit_num)

    async def list_by_company(self, company_name: str, page: Optional[str] = None,
                              limit: Optional[str] = None) -> dict:
        if not company_name or not company_name.strip():
            raise ValidationError("Company name is required", {"companyName": "Company name cannot be empty"})
        page_num, limit_num = self._page_params(page, limit)

        query = build_filter(contains={"companyName": company_name.strip()}, base={"isActive": True})
        result = await paginate(self.collection, query, parse_sort(DEFAULT_SORT), page_num, limit_num)
        if not result["items"]:
            raise NotFoundError("No jobs found for this company")
        return result

    async def list_active(self, page: Optional[str] = None, limit: Optional[str] = None) -> dict:
        """Approved and not soft-deleted."""
        page_num, limit_num = self._page_params(page, limit)
        query = {"isActive": True, "status": "Approved"}
        return await paginate(self.collection, query, parse_sort(DEFAULT_SORT), page_num, limit_num)

    async def list_pending(self, page: Optional[str] = None, limit: Optional[str] = None) -> dict:
        """Awaiting review and not soft-deleted."""
        page_num, limit_num = self._page_params(page, limit)
        query = {"isActive": True, "status": "Pending"}
        return await paginate(self.collection, query, parse_sort(DEFAULT_SORT), page_num, limit_num)
