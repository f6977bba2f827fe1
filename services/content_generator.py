"""
Personalized welcome copy via the OpenAI chat completions API.

The generator never raises: any failure (missing key, transport error,
non-JSON body, missing completion) falls back to a fixed template built
from the submitter's name and industry, so the welcome email can always
be sent.
"""

import json
from typing import Any, Optional

import httpx
import logfire

from config.settings import Settings

SYSTEM_PROMPT = (
    "You are an expert at writing exciting, personalized welcome emails for an innovation "
    "community. Create super short, energetic content that gets people excited about "
    "revolutionizing their industry. Keep it under 150 words total."
)

TEMPERATURE = 0.8
MAX_TOKENS = 200


def fallback_content(name: str, industry: str) -> str:
    """Deterministic welcome copy used whenever generation is unavailable."""
    return (
        f"Hi {name}! 🚀 Welcome to our innovation community! We're thrilled to have someone "
        f"from the {industry} industry join us. Get ready to discover cutting-edge insights, "
        f"connect with fellow innovators, and unlock new opportunities that will transform how "
        f"you work. This is just the beginning of your innovation journey!"
    )


def create_user_prompt(name: str, industry: str) -> str:
    return (
        f"Create a personalized welcome email for {name} who works in the {industry} industry. "
        f"Focus on how this innovation community will help them revolutionize their specific "
        f"industry. Be enthusiastic and inspiring. Include industry-specific opportunities and "
        f"innovations they could be part of."
    )


def extract_completion(data: Any) -> Optional[str]:
    """Return choices[0].message.content if it is a string, else None."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) else None


class ContentGenerator:
    """Client for the chat completions endpoint with a guaranteed fallback."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the generator.

        Args:
            settings: Application settings (API key, base URL, model, timeout)
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.api_key = settings.openai_api_key
        self.model = settings.openai_model
        self.timeout = settings.openai_timeout
        self.url = f"{settings.openai_base_url.rstrip('/')}/chat/completions"
        self.transport = transport

    def build_payload(self, name: str, industry: str) -> dict:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": create_user_prompt(name, industry)},
            ],
            "temperature": TEMPERATURE,
            "max_tokens": MAX_TOKENS,
        }

    async def generate(self, name: str, industry: str) -> str:
        """
        Generate a welcome paragraph for one submitter.

        Args:
            name: Submitter's name
            industry: Submitter's industry

        Returns:
            The completion text when it is present and non-blank, otherwise
            fallback_content(name, industry). Never raises.
        """
        with logfire.span("content_generator.generate", industry=industry):
            if not self.api_key:
                logfire.warning("OPENAI_API_KEY not set, using fallback content")
                return fallback_content(name, industry)

            try:
                async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                    response = await client.post(
                        self.url,
                        headers={
                            "Authorization": f"Bearer {self.api_key}",
                            "Content-Type": "application/json",
                        },
                        json=self.build_payload(name, industry),
                    )

                raw_text = response.text
                logfire.info(
                    "OpenAI raw response",
                    status_code=response.status_code,
                    raw_response=raw_text
                )

                if response.is_error:
                    # Auth and quota failures land here; the email still goes out
                    logfire.error(
                        "OpenAI request failed, content will fall back",
                        status_code=response.status_code
                    )

                content = extract_completion(json.loads(raw_text))
                if content and content.strip():
                    logfire.info("Personalized content generated", length=len(content))
                    return content

                logfire.warning("OpenAI response had no usable completion, using fallback content")
                return fallback_content(name, industry)

            except Exception as e:
                logfire.error(
                    "Error generating content",
                    error=str(e),
                    error_type=type(e).__name__,
                    _exc_info=True
                )
                return fallback_content(name, industry)
