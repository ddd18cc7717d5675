"""API routers."""

from .attribution import router as attribution_router
from .care_plans import router as care_plans_router
from .health import router as health_router

__all__ = [
    "attribution_router",
    "care_plans_router",
    "health_router",
]
