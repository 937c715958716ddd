"""
Form Routes - the HTML forms validate through the same functions as the API.

POST /forms/job-notification/validate
POST /forms/student-feedback/validate
POST /forms/placement-feedback/validate
GET  /forms/job-notification/options    - dropdown vocabularies

Validation here never writes anything. A payload that passes may still be
rejected on submit (duplicate email or duplicate feedback).
"""

from typing import Any, Dict

from fastapi import APIRouter, Body

from placement_portal.core.responses import send_response
from placement_portal.schemas.vocabularies import job_notification_options
from placement_portal.validation.feedback import validate_course_feedback, validate_placement_feedback
from placement_portal.validation.job_notification import validate_job_notification

router = APIRouter(prefix="/forms", tags=["Forms"])


def _result(is_valid: bool, errors: dict):
    message = "Form is valid" if is_valid else "Validation failed. Please check the errors below."
    return send_response(200, message, {"isValid": is_valid, "errors": errors})


@router.post("/job-notification/validate")
async def validate_job_notification_form(payload: Dict[str, Any] = Body(...)):
    is_valid, errors = validate_job_notification(payload)
    return _result(is_valid, errors)


@router.post("/student-feedback/validate")
async def validate_course_feedback_form(payload: Dict[str, Any] = Body(...)):
    is_valid, errors, _ = validate_course_feedback(payload)
    return _result(is_valid, errors)


@router.post("/placement-feedback/validate")
async def validate_placement_feedback_form(payload: Dict[str, Any] = Body(...)):
    is_valid, errors, _ = validate_placement_feedback(payload)
    return _result(is_valid, errors)


@router.get("/job-notification/options")
async def get_job_notification_options():
    return send_response(200, "Form options retrieved successfully", job_notification_options())
