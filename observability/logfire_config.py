"""
Logfire configuration and initialization.

Logfire provides structured logging and tracing for the welcome email
function.

Environment Variables:
    LOGFIRE_TOKEN: Logfire project token (optional; logs stay local without it)
    ENVIRONMENT: deployment environment (development, staging, production)
"""
import os
from typing import Optional

import logfire


class LogfireConfig:
    """
    Logfire configuration singleton.

    Ensures Logfire is initialized only once per process.
    """

    _initialized = False

    @classmethod
    def initialize(cls, token: Optional[str] = None, environment: Optional[str] = None) -> None:
        """
        Initialize Logfire.

        Args:
            token: Logfire project token (or set LOGFIRE_TOKEN env var)
            environment: Deployment environment (or set ENVIRONMENT env var)

        Note:
            Without a token, spans and logs are kept local and nothing is
            sent to the Logfire backend.
        """
        if cls._initialized:
            return

        token = token or os.getenv("LOGFIRE_TOKEN") or None

        logfire.configure(
            token=token,
            service_name="welcome-email",
            environment=environment or os.getenv("ENVIRONMENT", "development"),
            send_to_logfire="if-token-present",
        )

        cls._initialized = True

    @classmethod
    def is_initialized(cls) -> bool:
        """
        Check if Logfire has been initialized.

        Returns:
            True if initialized, False otherwise
        """
        return cls._initialized
