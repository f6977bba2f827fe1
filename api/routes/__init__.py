"""
API route handlers.
"""

from api.routes.confirmation import router as confirmation_router

__all__ = ["confirmation_router"]
