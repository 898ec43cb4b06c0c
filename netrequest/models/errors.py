"""Pydantic models for structured error payloads returned by APIs.

Two shapes are seen in the wild:

    {"status": "error", "message": "not found", "code": 404}
    {"errors": [{"message": "...", "type": "..."}]}
"""

from pydantic import BaseModel


class StatusErrorResponse(BaseModel):
    """Error payload with a status string, message and numeric code."""

    status: str
    message: str
    code: int


class ErrorDetail(BaseModel):
    """Single entry of an `ErrorListResponse`."""

    message: str | None = None
    type: str | None = None


class ErrorListResponse(BaseModel):
    """Error payload carrying a list of error details.

    The list may be absent or empty.
    """

    errors: list[ErrorDetail] | None = None


ErrorPayload = StatusErrorResponse | ErrorListResponse


def payload_message(payload: BaseModel | None) -> str:
    """Return the human-readable message carried by an error payload."""
    if isinstance(payload, StatusErrorResponse):
        return payload.message
    if isinstance(payload, ErrorListResponse):
        if payload.errors:
            return payload.errors[0].message or ""
        return ""
    message = getattr(payload, "message", None)
    return message if isinstance(message, str) else ""
