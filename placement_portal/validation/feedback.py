"""
Feedback validators.

Both feedback variants are described by pydantic models in
placement_portal.schemas.schemas. Here the model errors are flattened into
the field -> message map the forms display, and the placement form's
conditional rules (offer details, contact phone) are added on top.
"""

from typing import Optional, Tuple, Type

from pydantic import BaseModel, ValidationError as PydanticValidationError

from placement_portal.schemas.schemas import CourseFeedbackCreate, PlacementFeedbackCreate
from placement_portal.validation.common import Errors, is_blank, is_valid_phone, is_valid_url


def _message_for(error: dict) -> str:
    kind = error["type"]
    ctx = error.get("ctx") or {}

    if kind == "missing":
        return "This field is required"
    if kind == "string_too_short":
        if ctx.get("min_length") == 1:
            return "This field is required"
        return f"Must be at least {ctx['min_length']} characters"
    if kind == "string_too_long":
        return f"Cannot exceed {ctx['max_length']} characters"
    if kind == "literal_error":
        return f"Must be one of: {ctx['expected']}"
    if kind in ("greater_than_equal", "less_than_equal", "int_parsing", "int_from_float"):
        return "Rating must be a whole number between 1 and 5"
    if kind == "value_error":
        return str(ctx.get("error", error["msg"]))
    return error["msg"]


def flatten_errors(exc: PydanticValidationError) -> Errors:
    """First error per top-level field, keyed by field name."""
    errors: Errors = {}
    for error in exc.errors():
        loc = error.get("loc") or ("body",)
        field = ".".join(str(part) for part in loc)
        errors.setdefault(field, _message_for(error))
    return errors


def _validate_model(model: Type[BaseModel], body) -> Tuple[Optional[BaseModel], Errors]:
    if not isinstance(body, dict):
        return None, {"body": "Request body must be a JSON object"}
    try:
        return model.model_validate(body), {}
    except PydanticValidationError as exc:
        return None, flatten_errors(exc)


def validate_course_feedback(body) -> Tuple[bool, Errors, Optional[CourseFeedbackCreate]]:
    """
    Returns:
        (is_valid, errors, model) - model is None when invalid
    """
    model, errors = _validate_model(CourseFeedbackCreate, body)
    return not errors, errors, model


def _placement_conditionals(body: dict) -> Errors:
    errors: Errors = {}

    if body.get("offerStatus") == "Selected":
        if is_blank(body.get("packageOffered")):
            errors["packageOffered"] = "Package offered is required"
        if is_blank(body.get("joiningDate")):
            errors["joiningDate"] = "Joining date is required"

    phone = body.get("alternatePhone")
    if body.get("canBeContacted") == "Yes" and is_blank(phone):
        errors["alternatePhone"] = "Phone number is required"
    elif not is_blank(phone) and not is_valid_phone(phone.strip()):
        errors["alternatePhone"] = "Invalid phone format"

    linkedin = body.get("linkedinProfile")
    if not is_blank(linkedin) and not is_valid_url(linkedin.strip()):
        errors["linkedinProfile"] = "Invalid LinkedIn URL"

    return errors


def validate_placement_feedback(body) -> Tuple[bool, Errors, Optional[PlacementFeedbackCreate]]:
    """
    Returns:
        (is_valid, errors, model) - model is None when invalid
    """
    model, errors = _validate_model(PlacementFeedbackCreate, body)
    if isinstance(body, dict):
        for field, message in _placement_conditionals(body).items():
            errors.setdefault(field, message)
    if errors:
        return False, errors, None
    return True, errors, model
