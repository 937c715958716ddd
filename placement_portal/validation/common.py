"""
Field-level checks shared by every validator.

Each check writes at most one message into the errors dict under the
field's own key. Inputs come straight from request JSON, so nothing here
assumes a value has the expected type.
"""

import re
from typing import Any, Dict, List, Optional

Errors = Dict[str, str]

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_REGEX = re.compile(r"^[+]?[0-9\s\-()]{10,15}$")
URL_REGEX = re.compile(r"^https?://.+")
INT_REGEX = re.compile(r"^\s*[+-]?\d+\s*$")


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and bool(EMAIL_REGEX.match(value))


def is_valid_phone(value: Any) -> bool:
    return isinstance(value, str) and bool(PHONE_REGEX.match(value))


def is_valid_url(value: Any) -> bool:
    return isinstance(value, str) and bool(URL_REGEX.match(value))


def is_blank(value: Any) -> bool:
    """True for missing, non-string or whitespace-only values."""
    return not isinstance(value, str) or not value.strip()


def parse_int(value: Any) -> Optional[int]:
    """Integer from an int or a base-10 numeric string; None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and INT_REGEX.match(value):
        return int(value)
    return None


def check_text(
    errors: Errors,
    body: dict,
    field: str,
    label: str,
    min_len: Optional[int] = None,
    max_len: Optional[int] = None,
    required: bool = True,
    required_message: Optional[str] = None,
) -> None:
    """Presence and length check for a free-text field."""
    value = body.get(field)

    if value is None or value == "":
        if required:
            errors[field] = required_message or f"{label} is required"
        return

    if is_blank(value):
        errors[field] = required_message or f"{label} is required"
        return

    if max_len is not None and len(value) > max_len:
        errors[field] = f"{label} cannot exceed {max_len} characters"
    elif min_len is not None and len(value) < min_len:
        errors[field] = f"{label} must be at least {min_len} characters"


def check_email(errors: Errors, body: dict, field: str, message: str) -> None:
    if not is_valid_email(body.get(field)):
        errors[field] = message


def check_phone(errors: Errors, body: dict, field: str, message: str) -> None:
    if not is_valid_phone(body.get(field)):
        errors[field] = message


def check_choice(errors: Errors, body: dict, field: str, choices: List[str], message: str) -> None:
    """Single value must be one of choices."""
    value = body.get(field)
    if not isinstance(value, str) or value not in choices:
        errors[field] = message


def check_multi_choice(
    errors: Errors,
    body: dict,
    field: str,
    choices: List[str],
    empty_message: str,
    invalid_message: str,
) -> None:
    """Non-empty list whose every element is one of choices."""
    value = body.get(field)
    if not isinstance(value, list) or len(value) == 0:
        errors[field] = empty_message
    elif any(not isinstance(item, str) or item not in choices for item in value):
        errors[field] = invalid_message
