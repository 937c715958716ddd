"""
Document helpers shared by the services.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

from bson import ObjectId


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: Optional[dict]) -> Optional[dict]:
    """Mongo document -> API shape: _id becomes a string id."""
    if doc is None:
        return None
    doc = dict(doc)
    if "_id" in doc:
        doc["id"] = str(doc.pop("_id"))
    return doc


def serialize_docs(docs: list) -> List[dict]:
    return [serialize_doc(doc) for doc in docs]


def parse_object_id(value: str) -> Optional[ObjectId]:
    """ObjectId for a valid 24-hex string, None otherwise."""
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


# ============================================================
# TIMESTAMPS
# BSON dates are naive UTC with millisecond precision
# ============================================================

def utcnow() -> datetime:
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def later_than(previous: Optional[datetime]) -> datetime:
    """Current time, bumped so it is strictly after previous."""
    now = utcnow()
    if previous is not None:
        if previous.tzinfo is not None:
            previous = previous.astimezone(timezone.utc).replace(tzinfo=None)
        if now <= previous:
            now = previous.replace(microsecond=(previous.microsecond // 1000) * 1000) + timedelta(milliseconds=1)
    return now
