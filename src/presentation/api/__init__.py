"""
API Routers - FastAPI endpoint definitions.
"""

from src.presentation.api.auth import router as auth_router
from src.presentation.api.discussions import router as discussions_router
from src.presentation.api.comments import router as comments_router
from src.presentation.api.health import router as health_router
from src.presentation.api.metrics import router as metrics_router

__all__ = [
    "auth_router",
    "discussions_router",
    "comments_router",
    "health_router",
    "metrics_router",
]
