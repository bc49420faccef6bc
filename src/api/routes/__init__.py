"""API route modules."""

from .health import router as health_router
from .monthly import router as monthly_router

__all__ = ["health_router", "monthly_router"]
