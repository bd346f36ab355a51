"""Security adapters - credential hashing."""

from src.infrastructure.security.werkzeug_password_hasher import WerkzeugPasswordHasher

__all__ = ["WerkzeugPasswordHasher"]
