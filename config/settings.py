"""Application configuration using Pydantic Settings."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# NOTE: logfire.configure() is not called here. Logfire is configured once at
# application startup (main.py via observability/logfire_config.py) or in the
# pytest hooks (conftest.py).


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Both provider credentials are optional: a missing OpenAI key degrades to
    the fallback welcome copy, a missing Resend key makes the send fail.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment: development, staging, production")
    debug: bool = Field(default=False, description="Debug mode")

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")

    # OpenAI (personalized welcome copy)
    openai_api_key: str = Field(default="", description="OpenAI API key; empty means fallback copy only")
    openai_base_url: str = Field(default="https://api.openai.com/v1", description="Chat completions API base URL")
    openai_model: str = Field(default="gpt-3.5-turbo", description="Chat completions model")
    openai_timeout: float = Field(default=30.0, description="Chat completions request timeout (seconds)")

    # Resend (transactional email)
    resend_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("resend_api_key", "resend_public_key"),
        description="Resend API key"
    )
    resend_base_url: str = Field(default="https://api.resend.com", description="Resend API base URL")
    resend_timeout: float = Field(default=30.0, description="Resend request timeout (seconds)")
    email_from: str = Field(
        default="Innovation Community <testing-email@lovable.dev>",
        description="Sender identity for welcome emails"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Observability
    logfire_token: str = Field(default="", description="Logfire observability token")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def openai_configured(self) -> bool:
        return bool(self.openai_api_key)

    @property
    def resend_configured(self) -> bool:
        return bool(self.resend_api_key)


# Create a singleton instance
settings = Settings()


def get_settings() -> Settings:
    """Return the singleton settings instance (FastAPI dependency)."""
    return settings
