"""API routers."""

from .equipment_search import router as equipment_search_router
from .health import router as health_router
from .manpower_search import router as manpower_search_router

__all__ = [
    "equipment_search_router",
    "health_router",
    "manpower_search_router",
]
