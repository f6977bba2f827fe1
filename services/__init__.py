"""
Services module for external integrations and business logic.
"""

from services.content_generator import ContentGenerator, fallback_content
from services.exceptions import EmailSendError, WelcomeEmailError
from services.resend_client import ResendClient
from services.welcome_email import send_welcome_email

__all__ = [
    "ContentGenerator",
    "fallback_content",
    "EmailSendError",
    "WelcomeEmailError",
    "ResendClient",
    "send_welcome_email",
]
