"""
Error taxonomy.

Services raise these; exception handlers in main.py turn them into the
standard response envelope.

- ValidationError -> 400, field -> message map
- ConflictError   -> 409, offending field named in the map
- NotFoundError   -> 404
- StorageError    -> 500, detail only shown in debug mode
"""

from typing import Dict, Optional


class PortalError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, errors: Optional[Dict[str, str]] = None):
        self.message = message or self.default_message
        self.errors = errors or {}
        super().__init__(self.message)


class ValidationError(PortalError):
    status_code = 400
    default_message = "Validation failed. Please check the errors below."


class ConflictError(PortalError):
    status_code = 409
    default_message = "Record already exists"


class NotFoundError(PortalError):
    status_code = 404
    default_message = "Record not found"


class StorageError(PortalError):
    status_code = 500
    default_message = "Storage is unavailable. Please try again later."
