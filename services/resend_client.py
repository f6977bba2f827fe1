"""
Resend transactional email API client.

Thin async wrapper over POST /emails. Provider rejections come back as an
unsuccessful EmailSendResult; transport errors propagate to the caller.
"""

from typing import Optional

import httpx
import logfire

from config.settings import Settings
from schemas.confirmation import EmailSendResult, SendEmailRequest


class ResendClient:
    """Client for the Resend email API."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """Initialize client from settings (API key, base URL, timeout)."""
        self.api_key = settings.resend_api_key
        self.timeout = settings.resend_timeout
        self.url = f"{settings.resend_base_url.rstrip('/')}/emails"
        self.transport = transport

    async def send(self, request: SendEmailRequest) -> EmailSendResult:
        """
        Send one email.

        Args:
            request: Sender, recipients, subject and HTML body

        Returns:
            EmailSendResult with the provider message id on success, or the
            provider's error message on rejection

        Raises:
            httpx.HTTPError: If the request cannot be completed
        """
        if not self.api_key:
            logfire.error("Resend API key missing, cannot send email")
            return EmailSendResult(success=False, error_message="RESEND_API_KEY is not configured")

        logfire.info("Sending email via Resend", to=request.to, subject=request.subject)

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(
                self.url,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                json=request.to_payload(),
            )

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        logfire.info("Email response", status_code=response.status_code, response=data)

        if response.is_error:
            error_message = data.get("message") or f"HTTP {response.status_code}"
            logfire.error(
                "Resend rejected email",
                status_code=response.status_code,
                error=error_message,
                error_name=data.get("name")
            )
            return EmailSendResult(success=False, error_message=error_message)

        return EmailSendResult(success=True, message_id=data.get("id"))
