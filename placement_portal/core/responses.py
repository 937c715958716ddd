"""
Response envelope shared by every endpoint:

    {success, message, data?, errors?, timestamp}

success is derived from the status code (< 400).
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T10:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def build_envelope(
    status_code: int,
    message: str,
    data: Any = None,
    errors: Optional[Dict[str, str]] = None
) -> dict:
    body = {
        "success": status_code < 400,
        "message": message,
        "timestamp": utc_timestamp(),
    }
    if data is not None:
        body["data"] = data
    if errors:
        body["errors"] = errors
    return body


def send_response(
    status_code: int,
    message: str,
    data: Any = None,
    errors: Optional[Dict[str, str]] = None
) -> JSONResponse:
    """Render the envelope as a JSONResponse (datetimes become ISO strings)."""
    body = build_envelope(status_code, message, data, errors)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))
