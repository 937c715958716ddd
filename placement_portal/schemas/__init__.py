"""
Schemas module - Request/Response schemas for API endpoints.

- vocabularies: fixed dropdown values shared by forms and validators
- schemas: pydantic models for feedback bodies, review actions and responses
"""
