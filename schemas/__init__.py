"""
Pydantic schemas for request/response validation.
"""

from schemas.confirmation import (
    SubmissionRequest,
    SendEmailRequest,
    EmailSendResult,
    ConfirmationResponse,
    ErrorResponse,
)

__all__ = [
    # Request schemas
    "SubmissionRequest",
    "SendEmailRequest",

    # Result / response schemas
    "EmailSendResult",
    "ConfirmationResponse",
    "ErrorResponse",
]
