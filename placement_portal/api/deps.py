"""
FastAPI dependencies - services built per request from the app's store.
"""

from fastapi import Depends, Request

from placement_portal.core.config import Settings, get_settings
from placement_portal.db.mongodb import MongoStore, get_store
from placement_portal.services.feedback_service import CourseFeedbackService, PlacementFeedbackService
from placement_portal.services.job_notification_service import JobNotificationService
from placement_portal.services.workflow_service import WorkflowService


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_job_service(store: MongoStore = Depends(get_store)) -> JobNotificationService:
    return JobNotificationService(store)


def get_workflow_service(
    store: MongoStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings)
) -> WorkflowService:
    return WorkflowService(store, lock_terminal_status=settings.lock_terminal_status)


def get_course_feedback_service(store: MongoStore = Depends(get_store)) -> CourseFeedbackService:
    return CourseFeedbackService(store)


def get_placement_feedback_service(store: MongoStore = Depends(get_store)) -> PlacementFeedbackService:
    return PlacementFeedbackService(store)
