"""
Test suite for the Resend email client.

Run with:
    pytest tests/test_resend_client.py -v
"""

import json

import httpx
import pytest

from config.settings import Settings
from schemas.confirmation import SendEmailRequest
from services.resend_client import ResendClient


@pytest.fixture
def send_request():
    return SendEmailRequest(
        from_="Innovation Community <testing-email@lovable.dev>",
        to=["ava@example.com"],
        subject="Welcome to the Innovation Revolution, Ava! 🚀",
        html="<p>Hi Ava</p>",
    )


@pytest.fixture
def resend_settings():
    return Settings(_env_file=None, resend_api_key="re_test", resend_base_url="https://resend.test")


@pytest.mark.asyncio
@pytest.mark.unit
async def test_send_success_returns_message_id(resend_settings, send_request):
    captured = []

    def handler(request):
        captured.append(request)
        return httpx.Response(200, json={"id": "49a3999c-0ce1-4ea6-ab68-afcd6dc2e794"})

    client = ResendClient(resend_settings, transport=httpx.MockTransport(handler))
    result = await client.send(send_request)

    assert result.success is True
    assert result.message_id == "49a3999c-0ce1-4ea6-ab68-afcd6dc2e794"
    assert result.error_message is None

    request = captured[0]
    assert str(request.url) == "https://resend.test/emails"
    assert request.headers["Authorization"] == "Bearer re_test"
    assert json.loads(request.content) == {
        "from": "Innovation Community <testing-email@lovable.dev>",
        "to": ["ava@example.com"],
        "subject": "Welcome to the Innovation Revolution, Ava! 🚀",
        "html": "<p>Hi Ava</p>",
    }


@pytest.mark.asyncio
@pytest.mark.unit
async def test_provider_rejection_carries_provider_message(resend_settings, send_request):
    body = {"statusCode": 422, "name": "validation_error", "message": "Invalid `to` field."}
    client = ResendClient(
        resend_settings,
        transport=httpx.MockTransport(lambda request: httpx.Response(422, json=body))
    )

    result = await client.send(send_request)

    assert result.success is False
    assert result.message_id is None
    assert result.error_message == "Invalid `to` field."


@pytest.mark.asyncio
@pytest.mark.unit
async def test_provider_rejection_without_json_uses_status(resend_settings, send_request):
    client = ResendClient(
        resend_settings,
        transport=httpx.MockTransport(lambda request: httpx.Response(503, text="unavailable"))
    )

    result = await client.send(send_request)

    assert result.success is False
    assert result.error_message == "HTTP 503"


@pytest.mark.asyncio
@pytest.mark.unit
async def test_missing_api_key_fails_without_request(send_request):
    def handler(request):
        raise AssertionError("No request expected without an API key")

    client = ResendClient(
        Settings(_env_file=None, resend_api_key=""),
        transport=httpx.MockTransport(handler)
    )

    result = await client.send(send_request)

    assert result.success is False
    assert result.error_message == "RESEND_API_KEY is not configured"


@pytest.mark.asyncio
@pytest.mark.unit
async def test_transport_error_propagates(resend_settings, send_request):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = ResendClient(resend_settings, transport=httpx.MockTransport(handler))

    with pytest.raises(httpx.ConnectError):
        await client.send(send_request)
