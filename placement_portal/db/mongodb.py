"""
MongoDB Connection Utility

MongoDB stores:
- Job notifications submitted by companies
- Course feedback submitted by students
- Placement (recruitment) feedback submitted by students

The client is created once by the application lifespan and handed to
routes through the get_store dependency. Nothing here connects lazily.
"""
import logging
from typing import Optional

from fastapi import Request
from pymongo import MongoClient, ASCENDING, DESCENDING
from pymongo.collection import Collection
from pymongo.database import Database

from placement_portal.core.config import Settings

logger = logging.getLogger(__name__)


# Collection name constants (avoid typos)
COLLECTIONS = {
    "job_notifications": "job_notifications",
    "student_feedback": "student_feedback",
    "placement_feedback": "placement_feedback",
}


class MongoStore:
    """
    Owns one MongoClient and the portal database.

    Usage:
        store = MongoStore.from_settings(settings)
        store.collection("job_notifications").find_one(...)
        store.close()
    """

    def __init__(self, client: MongoClient, db_name: str):
        self.client = client
        self.db: Database = client[db_name]

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoStore":
        return cls(MongoClient(settings.mongodb_uri), settings.mongodb_db)

    def collection(self, name: str) -> Collection:
        return self.db[COLLECTIONS[name]]

    @property
    def job_notifications(self) -> Collection:
        return self.collection("job_notifications")

    @property
    def student_feedback(self) -> Collection:
        return self.collection("student_feedback")

    @property
    def placement_feedback(self) -> Collection:
        return self.collection("placement_feedback")

    def ping(self) -> bool:
        """
        Test if MongoDB is reachable.
        Returns True if connection successful, False otherwise.
        """
        try:
            self.client.admin.command("ping")
            return True
        except Exception as e:
            logger.warning("MongoDB connection failed: %s", e)
            return False

    def init_indexes(self) -> None:
        """
        Create indexes for uniqueness and listing performance.
        Call this once during app startup.
        """
        jobs = self.job_notifications
        jobs.create_index("email", unique=True)
        jobs.create_index("applicationId", unique=True)
        jobs.create_index("companyName")
        jobs.create_index([("submissionDate", DESCENDING)])
        jobs.create_index("status")

        # Duplicate feedback is rejected by an explicit lookup, so these are not unique
        feedback = self.student_feedback
        feedback.create_index([
            ("studentId", ASCENDING),
            ("courseCode", ASCENDING),
            ("academicYear", ASCENDING)
        ])
        feedback.create_index([("department", ASCENDING), ("semester", ASCENDING)])
        feedback.create_index([("createdAt", DESCENDING)])
        feedback.create_index("facultyName")

        placement = self.placement_feedback
        placement.create_index([
            ("enrollmentNumber", ASCENDING),
            ("companyName", ASCENDING),
            ("academicYear", ASCENDING)
        ])
        placement.create_index([("createdAt", DESCENDING)])

        logger.info("MongoDB indexes created successfully")

    def close(self) -> None:
        self.client.close()


def get_store(request: Request) -> MongoStore:
    """FastAPI dependency - the store attached to the running app."""
    store: Optional[MongoStore] = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("MongoStore is not initialised; is the app lifespan running?")
    return store
