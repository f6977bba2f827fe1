"""
Live check against a deployed send-confirmation endpoint.

Skipped unless API_BASE_URL is set. A successful run sends a real email to
TEST_RECIPIENT_EMAIL.

Usage:
    API_BASE_URL=https://example.com TEST_RECIPIENT_EMAIL=me@example.com \
        pytest tests/integration -m integration -v
"""

import os

import httpx
import pytest

from client.signup_form import SignupForm, SubmissionFailure, SubmissionSuccess

API_BASE_URL = os.getenv("API_BASE_URL", "")
TEST_RECIPIENT_EMAIL = os.getenv("TEST_RECIPIENT_EMAIL", "")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not API_BASE_URL, reason="API_BASE_URL not set"),
]


def endpoint() -> str:
    return f"{API_BASE_URL.rstrip('/')}/send-confirmation"


@pytest.mark.asyncio
async def test_preflight():
    async with httpx.AsyncClient(timeout=10.0) as client:
        response = await client.options(endpoint())

    assert response.status_code in (200, 204)
    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.asyncio
async def test_invalid_submission_keeps_form():
    form = SignupForm(name="", email="nobody@example.com", industry="fintech")

    outcome = await form.submit(endpoint())

    assert outcome == SubmissionFailure(message="Invalid JSON input")
    assert form.submitted is False
    assert form.email == "nobody@example.com"


@pytest.mark.asyncio
@pytest.mark.skipif(not TEST_RECIPIENT_EMAIL, reason="TEST_RECIPIENT_EMAIL not set")
async def test_valid_submission_sends_email():
    form = SignupForm(name="Integration Test", email=TEST_RECIPIENT_EMAIL, industry="fintech")

    outcome = await form.submit(endpoint())

    assert isinstance(outcome, SubmissionSuccess), outcome
    assert form.submitted is True
