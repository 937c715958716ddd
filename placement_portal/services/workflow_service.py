"""
Status Workflow - reviewer-driven transitions for job notifications.

    Pending ──► Under Review / Approved / Rejected / On Hold
    Under Review, On Hold ──► Approved / Rejected / On Hold

Each operation records the reviewer, the notes and a fresh lastUpdated.
Calling an operation again simply overwrites the previous review. With
settings.lock_terminal_status enabled, Approved and Rejected become final.

Writes are last-write-wins; concurrent reviews of one record are not serialised.
"""

import logging
from typing import Optional

from pymongo import ReturnDocument

from placement_portal.core.errors import ConflictError, NotFoundError, ValidationError
from placement_portal.db.mongodb import MongoStore
from placement_portal.utils.documents import later_than, parse_object_id, serialize_doc

logger = logging.getLogger(__name__)

APPROVED = "Approved"
REJECTED = "Rejected"
ON_HOLD = "On Hold"

TERMINAL_STATUSES = (APPROVED, REJECTED)
MAX_NOTES_LENGTH = 1000


class WorkflowService:
    """
    approve / reject / put_on_hold, keyed by the notification's id.
    """

    def __init__(self, store: MongoStore, lock_terminal_status: bool = False):
        self.collection = store.job_notifications
        self.lock_terminal_status = lock_terminal_status

    def approve(self, notification_id: str, reviewer_name: Optional[str], notes: Optional[str] = None) -> dict:
        return self._transition(notification_id, APPROVED, reviewer_name, notes)

    def reject(self, notification_id: str, reviewer_name: Optional[str], notes: Optional[str] = None) -> dict:
        """A rejection must carry a reason."""
        return self._transition(notification_id, REJECTED, reviewer_name, notes, notes_required=True)

    def put_on_hold(self, notification_id: str, reviewer_name: Optional[str], notes: Optional[str] = None) -> dict:
        return self._transition(notification_id, ON_HOLD, reviewer_name, notes)

    # ------------------------------------------------------------

    def _transition(
        self,
        notification_id: str,
        target: str,
        reviewer_name: Optional[str],
        notes: Optional[str],
        notes_required: bool = False
    ) -> dict:
        oid = parse_object_id(notification_id)
        if oid is None:
            raise ValidationError("Invalid job notification ID", {"id": "Invalid ID format"})

        if not isinstance(reviewer_name, str) or not reviewer_name.strip():
            raise ValidationError("Reviewer name is required", {"reviewerName": "Reviewer name cannot be empty"})

        notes = notes.strip() if isinstance(notes, str) else ""
        if notes_required and not notes:
            raise ValidationError("Rejection reason is required",
                                  {"reviewNotes": "Please provide a reason for rejection"})
        if len(notes) > MAX_NOTES_LENGTH:
            raise ValidationError(errors={"reviewNotes": f"Review notes cannot exceed {MAX_NOTES_LENGTH} characters"})

        current = self.collection.find_one({"_id": oid})
        if current is None:
            raise NotFoundError("Job notification not found")

        previous = current.get("status")
        if self.lock_terminal_status and previous in TERMINAL_STATUSES:
            raise ConflictError(
                f"Job notification is already {previous}",
                {"status": f"Cannot move a {previous} notification to {target}"}
            )

        stamp = later_than(current.get("lastUpdated"))
        doc = self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": {
                "status": target,
                "reviewedBy": reviewer_name.strip(),
                "reviewNotes": notes,
                "lastUpdated": stamp,
                "updatedAt": stamp,
            }},
            return_document=ReturnDocument.AFTER
        )
        if doc is None:
            raise NotFoundError("Job notification not found")

        logger.info("Job notification %s: %s -> %s by %s", notification_id, previous, target, reviewer_name.strip())
        return serialize_doc(doc)
