"""
Feedback Routes

POST /student-feedback     - Submit course feedback (once per course per year)
GET  /student-feedback     - List course feedback with filters
POST /placement-feedback   - Submit recruitment feedback (once per company per year)
GET  /placement-feedback   - List placement feedback with filters

Feedback is write-once: no update or delete endpoints.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query

from placement_portal.api.deps import get_course_feedback_service, get_placement_feedback_service
from placement_portal.core.responses import send_response
from placement_portal.services.feedback_service import CourseFeedbackService, PlacementFeedbackService

router = APIRouter(tags=["Feedback"])


@router.post("/student-feedback", status_code=201)
def create_course_feedback(
    payload: Dict[str, Any] = Body(...),
    service: CourseFeedbackService = Depends(get_course_feedback_service)
):
    created = service.create(payload)
    return send_response(201, "Feedback submitted successfully", created)


@router.get("/student-feedback")
async def list_course_feedback(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    department: Optional[str] = Query(None),
    semester: Optional[str] = Query(None),
    academicYear: Optional[str] = Query(None),
    courseCode: Optional[str] = Query(None),
    facultyName: Optional[str] = Query(None, description="Case-insensitive substring"),
    sortBy: Optional[str] = Query(None, description="e.g. -createdAt"),
    service: CourseFeedbackService = Depends(get_course_feedback_service)
):
    result = await service.list_all(
        page, limit,
        department=department,
        semester=semester,
        academic_year=academicYear,
        course_code=courseCode,
        faculty_name=facultyName,
        sort_by=sortBy
    )
    return send_response(200, "Feedbacks retrieved successfully", result)


@router.post("/placement-feedback", status_code=201)
def create_placement_feedback(
    payload: Dict[str, Any] = Body(...),
    service: PlacementFeedbackService = Depends(get_placement_feedback_service)
):
    created = service.create(payload)
    return send_response(201, "Placement feedback submitted successfully", created)


@router.get("/placement-feedback")
async def list_placement_feedback(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    branch: Optional[str] = Query(None),
    academicYear: Optional[str] = Query(None),
    companyName: Optional[str] = Query(None, description="Case-insensitive substring"),
    offerStatus: Optional[str] = Query(None),
    sortBy: Optional[str] = Query(None),
    service: PlacementFeedbackService = Depends(get_placement_feedback_service)
):
    result = await service.list_all(
        page, limit,
        branch=branch,
        academic_year=academicYear,
        company_name=companyName,
        offer_status=offerStatus,
        sort_by=sortBy
    )
    return send_response(200, "Placement feedbacks retrieved successfully", result)
