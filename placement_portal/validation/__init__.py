"""
Validation module - shared by the API routes and the form endpoints.

Every validator returns (is_valid, errors) and never raises:
- job_notification: section validators for company submissions
- feedback: course and placement feedback (pydantic-backed)
- pagination: page/limit/sortBy query parameters
"""
