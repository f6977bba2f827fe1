"""
Main FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import Dict, Union

from fastapi import FastAPI
import logfire

from config import settings
from observability.logfire_config import LogfireConfig
from api.routes import confirmation_router


SERVICE_NAME = "welcome-email"
VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Initialize Logfire first so we can use structured logging
    LogfireConfig.initialize(token=settings.logfire_token, environment=settings.environment)

    logfire.info(
        "Starting Welcome Email Server",
        environment=settings.environment,
        debug=settings.debug,
    )

    if not settings.openai_configured:
        logfire.warning(
            "OpenAI API key not configured, welcome emails will use fallback content",
            hint="Set OPENAI_API_KEY in .env file",
        )
    if not settings.resend_configured:
        logfire.error(
            "Resend API key not configured, email sends will fail",
            hint="Set RESEND_API_KEY in .env file",
        )

    yield

    # Shutdown
    logfire.info("Shutting down Welcome Email Server")


# Initialize FastAPI app
app = FastAPI(
    title="Welcome Email API",
    description="Lead-capture confirmation emails with personalized welcome copy",
    version=VERSION,
    lifespan=lifespan,
    debug=settings.debug,
)


# ============================================================================
# Health Check Endpoints
# ============================================================================

@app.get("/health", tags=["Health"])
async def health_check() -> Dict[str, Union[str, bool]]:
    """
    Health check endpoint for load balancers and monitoring.

    Returns:
        dict: Health status and which provider credentials are present
    """
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": VERSION,
        "environment": settings.environment,
        "openai_configured": settings.openai_configured,
        "resend_configured": settings.resend_configured,
    }


@app.get("/", tags=["Root"])
async def root() -> Dict[str, str]:
    """
    Root endpoint - API information.

    Returns:
        dict: Basic API information
    """
    return {
        "name": "Welcome Email API",
        "version": VERSION,
        "description": "Sends personalized welcome emails for lead-capture submissions",
        "docs": "/docs",
        "health": "/health",
    }


# ============================================================================
# API Routers
# ============================================================================

# Lead-capture confirmation endpoint (public, CORS-open)
app.include_router(confirmation_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
