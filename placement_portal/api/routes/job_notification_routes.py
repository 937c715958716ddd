"""
Job Notification Routes

POST   /job-notifications                          - Company submits a notification
GET    /job-notifications                          - Review dashboard listing (filters, sort)
GET    /job-notifications/{id}                     - Get by database id
PUT    /job-notifications/{id}                     - Update allow-listed fields
DELETE /job-notifications/{id}                     - Soft delete (isActive=false)
PATCH  /job-notifications/{id}/approve|reject|hold - Reviewer workflow
GET    /job-notifications/application/{applicationId}
GET    /job-notifications/company/{company_name}   - Active notifications of a company
GET    /job-notifications/status/active|pending
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query

from placement_portal.api.deps import get_job_service, get_workflow_service
from placement_portal.core.responses import send_response
from placement_portal.schemas.schemas import ReviewAction
from placement_portal.services.job_notification_service import JobNotificationService
from placement_portal.services.workflow_service import WorkflowService

router = APIRouter(prefix="/job-notifications", tags=["Job Notifications"])


@router.post("", status_code=201)
def create_job_notification(
    payload: Dict[str, Any] = Body(...),
    service: JobNotificationService = Depends(get_job_service)
):
    """Submit a job notification. Starts in Pending status."""
    record = service.create(payload)
    return send_response(
        201,
        "Job notification created successfully. Our team will review and contact you soon.",
        {
            "id": record["id"],
            "email": record["email"],
            "companyName": record["companyName"],
            "applicationId": record["applicationId"],
            "submissionDate": record["submissionDate"],
        }
    )


@router.get("")
async def list_job_notifications(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    companyName: Optional[str] = Query(None, description="Case-insensitive substring"),
    sortBy: Optional[str] = Query(None, description="e.g. -submissionDate"),
    service: JobNotificationService = Depends(get_job_service)
):
    """List all job notifications, including inactive ones."""
    result = await service.list_all(page, limit, status, companyName, sortBy)
    return send_response(200, "Job notifications retrieved successfully", result)


@router.get("/status/active")
async def list_active_jobs(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    service: JobNotificationService = Depends(get_job_service)
):
    """Approved notifications that have not been deleted."""
    result = await service.list_active(page, limit)
    return send_response(200, "Active jobs retrieved successfully", result)


@router.get("/status/pending")
async def list_pending_jobs(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    service: JobNotificationService = Depends(get_job_service)
):
    """Notifications still waiting for a reviewer."""
    result = await service.list_pending(page, limit)
    return send_response(200, "Pending jobs retrieved successfully", result)


@router.get("/application/{application_id}")
def get_by_application_id(
    application_id: str,
    service: JobNotificationService = Depends(get_job_service)
):
    record = service.get_by_application_id(application_id)
    return send_response(200, "Job notification retrieved successfully", record)


@router.get("/company/{company_name}")
async def list_company_jobs(
    company_name: str,
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    service: JobNotificationService = Depends(get_job_service)
):
    """Active notifications whose company name contains company_name."""
    result = await service.list_by_company(company_name, page, limit)
    return send_response(200, "Company jobs retrieved successfully", result)


@router.get("/{notification_id}")
def get_job_notification(
    notification_id: str,
    service: JobNotificationService = Depends(get_job_service)
):
    record = service.get(notification_id)
    return send_response(200, "Job notification retrieved successfully", record)


@router.put("/{notification_id}")
def update_job_notification(
    notification_id: str,
    updates: Dict[str, Any] = Body(...),
    service: JobNotificationService = Depends(get_job_service)
):
    """Update company-editable fields. Status and review fields are not editable here."""
    record = service.update(notification_id, updates)
    return send_response(200, "Job notification updated successfully", record)


@router.delete("/{notification_id}")
def delete_job_notification(
    notification_id: str,
    service: JobNotificationService = Depends(get_job_service)
):
    """Soft delete: the record stays retrievable by id with isActive=false."""
    record = service.soft_delete(notification_id)
    return send_response(200, "Job notification deleted successfully", record)


# ============================================================
# REVIEW WORKFLOW
# ============================================================

@router.patch("/{notification_id}/approve")
def approve_job_notification(
    notification_id: str,
    action: Optional[ReviewAction] = Body(None),
    workflow: WorkflowService = Depends(get_workflow_service)
):
    action = action or ReviewAction()
    record = workflow.approve(notification_id, action.reviewerName, action.reviewNotes)
    return send_response(200, "Job notification approved successfully", record)


@router.patch("/{notification_id}/reject")
def reject_job_notification(
    notification_id: str,
    action: Optional[ReviewAction] = Body(None),
    workflow: WorkflowService = Depends(get_workflow_service)
):
    """Reject with a mandatory reason in reviewNotes."""
    action = action or ReviewAction()
    record = workflow.reject(notification_id, action.reviewerName, action.reviewNotes)
    return send_response(200, "Job notification rejected successfully", record)


@router.patch("/{notification_id}/hold")
def hold_job_notification(
    notification_id: str,
    action: Optional[ReviewAction] = Body(None),
    workflow: WorkflowService = Depends(get_workflow_service)
):
    action = action or ReviewAction()
    record = workflow.put_on_hold(notification_id, action.reviewerName, action.reviewNotes)
    return send_response(200, "Job notification put on hold successfully", record)
