"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from placement_portal.api.routes.job_notification_routes import router as job_notification_router
from placement_portal.api.routes.feedback_routes import router as feedback_router
from placement_portal.api.routes.form_routes import router as form_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(job_notification_router)
api_router.include_router(feedback_router)
api_router.include_router(form_router)
