"""API route modules."""

from api.routes.metrics import router as metrics_router
from api.routes.status import router as status_router

__all__ = ["metrics_router", "status_router"]
