"""
Form-submission client for the send-confirmation endpoint.

submit_signup() reduces every outcome of the network call to either
SubmissionSuccess or SubmissionFailure. SignupForm only marks itself
submitted (and clears its inputs) for a SubmissionSuccess; every failure
keeps the user's input intact.
"""

from dataclasses import dataclass
from typing import Optional, Union

import httpx
import logfire


@dataclass(frozen=True)
class SubmissionSuccess:
    """The endpoint accepted the submission and the email was sent."""
    email_id: Optional[str] = None


@dataclass(frozen=True)
class SubmissionFailure:
    """Transport error, non-2xx status, or an error payload."""
    message: str


SubmissionOutcome = Union[SubmissionSuccess, SubmissionFailure]


def interpret_response(status_code: int, payload: object) -> SubmissionOutcome:
    """Map an HTTP status and decoded JSON payload to an outcome."""
    if not isinstance(payload, dict):
        return SubmissionFailure(message=f"Unexpected response (HTTP {status_code})")

    if payload.get("error"):
        return SubmissionFailure(message=str(payload["error"]))

    if not 200 <= status_code < 300:
        return SubmissionFailure(message=f"HTTP {status_code}")

    if payload.get("success") is not True:
        return SubmissionFailure(message="Submission was not confirmed")

    email_id = payload.get("emailId")
    return SubmissionSuccess(email_id=str(email_id) if email_id is not None else None)


async def submit_signup(
    endpoint_url: str,
    name: str,
    email: str,
    industry: str,
    *,
    timeout: float = 30.0,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> SubmissionOutcome:
    """
    POST one submission to the send-confirmation endpoint.

    Args:
        endpoint_url: Full URL of the send-confirmation route
        name: Submitter's name
        email: Submitter's email address
        industry: Submitter's industry
        timeout: Request timeout in seconds
        transport: Optional httpx transport (tests pass httpx.MockTransport)

    Returns:
        SubmissionSuccess or SubmissionFailure. Never raises.
    """
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.post(
                endpoint_url,
                json={"name": name, "email": email, "industry": industry},
            )
    except httpx.HTTPError as e:
        logfire.error("Signup submission failed", error=str(e), error_type=type(e).__name__)
        return SubmissionFailure(message=str(e) or "Network error")

    try:
        payload = response.json()
    except ValueError:
        payload = None

    outcome = interpret_response(response.status_code, payload)
    if isinstance(outcome, SubmissionFailure):
        logfire.warning(
            "Signup submission rejected",
            status_code=response.status_code,
            error=outcome.message
        )
    return outcome


@dataclass
class SignupForm:
    """Client-side form state."""

    name: str = ""
    email: str = ""
    industry: str = ""
    submitted: bool = False
    error: Optional[str] = None

    def apply(self, outcome: SubmissionOutcome) -> None:
        """Update state from an outcome; only success flips submitted."""
        if isinstance(outcome, SubmissionSuccess):
            self.submitted = True
            self.error = None
            self.name = ""
            self.email = ""
            self.industry = ""
        else:
            self.error = outcome.message

    async def submit(
        self,
        endpoint_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> SubmissionOutcome:
        outcome = await submit_signup(
            endpoint_url,
            self.name,
            self.email,
            self.industry,
            transport=transport,
        )
        self.apply(outcome)
        return outcome
