"""
Sanitizer - normalises accepted input before it is stored.

Runs strictly after validation. Only free-text and email fields are
touched; arrays, numbers and enum values are stored as validated.
"""

import re
from typing import Any, Iterable

WHITESPACE_RUN = re.compile(r"\s+")

# Free-text fields whose whitespace is collapsed
JOB_NOTIFICATION_TEXT_FIELDS = (
    "companyName",
    "aboutCompany",
    "correspondenceAddress",
    "headHRName",
    "firstContactName",
    "secondContactName",
    "jobProfile",
    "jobTitle",
)

JOB_NOTIFICATION_EMAIL_FIELDS = (
    "email",
    "headHREmail",
    "firstContactEmail",
    "secondContactEmail",
)


def sanitize_string(value: str) -> str:
    """'  Acme   Corp \\n' -> 'Acme Corp'. Idempotent."""
    return WHITESPACE_RUN.sub(" ", value.strip())


def sanitize_email(value: str) -> str:
    return value.strip().lower()


def _apply(data: dict, fields: Iterable[str], fn) -> None:
    for field in fields:
        value: Any = data.get(field)
        if isinstance(value, str):
            data[field] = fn(value)


def sanitize_job_notification(body: dict) -> dict:
    """Return a sanitized copy of a validated job notification payload."""
    data = dict(body)
    _apply(data, JOB_NOTIFICATION_TEXT_FIELDS, sanitize_string)
    _apply(data, JOB_NOTIFICATION_EMAIL_FIELDS, sanitize_email)
    return data
