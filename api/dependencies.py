"""Collaborator dependencies for the send-confirmation route.

Tests replace these through ``app.dependency_overrides`` to inject fake
credentials or fake collaborators.
"""

from fastapi import Depends

from config.settings import Settings, get_settings
from services.content_generator import ContentGenerator
from services.resend_client import ResendClient


def get_content_generator(settings: Settings = Depends(get_settings)) -> ContentGenerator:
    """Build the OpenAI-backed content generator for this request."""
    return ContentGenerator(settings)


def get_email_sender(settings: Settings = Depends(get_settings)) -> ResendClient:
    """Build the Resend client for this request."""
    return ResendClient(settings)
