"""API routers."""

from .analysis import router as analysis_router
from .status import fallback_router
from .status import router as status_router

__all__ = ["analysis_router", "status_router", "fallback_router"]
