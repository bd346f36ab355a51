"""Route dependencies (auth)."""

from src.presentation.dependencies.auth import (
    AuthUser,
    create_access_token,
    get_current_user,
)

__all__ = ["AuthUser", "create_access_token", "get_current_user"]
