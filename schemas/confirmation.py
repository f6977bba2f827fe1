"""
Pydantic schemas for the send-confirmation endpoint.

These models validate the lead-capture submission, describe the request
handed to the email provider and shape the JSON responses.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr


# ===================================================================
# REQUEST SCHEMAS
# ===================================================================

class SubmissionRequest(BaseModel):
    """
    Request body for POST /send-confirmation

    All three fields are required non-empty strings. The email address is
    only checked for presence.
    """

    name: StrictStr = Field(..., min_length=1, description="Submitter's name")
    email: StrictStr = Field(..., min_length=1, description="Recipient address for the welcome email")
    industry: StrictStr = Field(..., min_length=1, description="Industry the submitter works in")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ava",
                "email": "ava@example.com",
                "industry": "fintech"
            }
        }
    )


class SendEmailRequest(BaseModel):
    """Structured send request accepted by the email provider client."""

    from_: str = Field(..., alias="from", description="Sender identity, e.g. 'Team <team@example.com>'")
    to: List[str] = Field(..., min_length=1, description="Recipient addresses")
    subject: str
    html: str

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict:
        """Provider wire format (uses the 'from' key)."""
        return self.model_dump(by_alias=True)


# ===================================================================
# RESULT / RESPONSE SCHEMAS
# ===================================================================

class EmailSendResult(BaseModel):
    """Outcome of one send call to the email provider."""

    success: bool
    message_id: Optional[str] = None
    error_message: Optional[str] = None


class ConfirmationResponse(BaseModel):
    """Response body for a successful send (HTTP 200)."""

    success: bool = True
    email_id: Optional[str] = Field(default=None, serialization_alias="emailId")

    def to_body(self) -> dict:
        """JSON body; emailId is omitted when the provider returned none."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ErrorResponse(BaseModel):
    """Response body for 400 and 500 errors."""

    error: str
