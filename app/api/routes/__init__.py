"""Routes package: exports every FastAPI router."""

from .age import router as age_router
from .creator import router as creator_router
from .diary import router as diary_router
from .health import router as health_router
from .profiles import router as profiles_router
from .saved import router as saved_router
from .strategies import router as strategies_router
from .uploads import router as uploads_router

__all__ = [
    "age_router", "creator_router", "diary_router", "health_router",
    "profiles_router", "saved_router", "strategies_router", "uploads_router",
]
