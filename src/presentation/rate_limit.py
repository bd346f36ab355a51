"""Shared slowapi limiter. Registered on app.state by the app factory."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from src.config.settings import Config

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=Config.RATELIMIT_STORAGE_URI,
    enabled=Config.RATELIMIT_ENABLED,
)
