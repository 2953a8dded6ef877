# API endpoints and routers

from .auth_endpoints import router as auth_router
from .trips_endpoints import router as trips_router
from .stats_endpoints import router as stats_router
from .settings_endpoints import router as settings_router
from .health_endpoints import router as health_router

__all__ = [
    "auth_router",
    "trips_router",
    "stats_router",
    "settings_router",
    "health_router",
]
