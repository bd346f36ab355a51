"""
Authentication Dependency for FastAPI.

- Issues HS256 JWTs after register/login
- Extracts and validates the JWT from the Authorization header (Bearer scheme)
- Raises HTTPException 401 if unauthorized

Config needed (from src.config.settings):
- SERVICE_AUTH_SECRET
- SERVICE_AUTH_ISSUER
- SERVICE_AUTH_AUDIENCE
- ACCESS_TOKEN_TTL_MINUTES
"""

import jwt
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from src.domain.entities.user import User
from src.domain.value_objects.user_id import UserId
from src.config.settings import Config


@dataclass
class AuthUser:
    id: UserId
    username: str

    def __post_init__(self):
        if not self.id or not self.username:
            raise ValueError("AuthUser must have both id and username defined.")


security = HTTPBearer(auto_error=False)


def create_access_token(user: User) -> str:
    """Sign a token carrying the user's id (sub) and username."""
    now = datetime.now(timezone.utc)
    claims = {
        "sub": str(user.id.value),
        "username": user.username.value,
        "iat": now,
        "exp": now + timedelta(minutes=Config.ACCESS_TOKEN_TTL_MINUTES),
        "iss": Config.SERVICE_AUTH_ISSUER,
        "aud": Config.SERVICE_AUTH_AUDIENCE,
    }
    return jwt.encode(claims, Config.SERVICE_AUTH_SECRET, algorithm="HS256")


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> AuthUser:
    """
    Extract and validate user from JWT token.

    Raises:
        HTTPException 401 if token is missing, invalid, expired, or missing required claims
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
        )

    try:
        claims = jwt.decode(
            credentials.credentials,
            Config.SERVICE_AUTH_SECRET,
            algorithms=["HS256"],
            audience=Config.SERVICE_AUTH_AUDIENCE,
            issuer=Config.SERVICE_AUTH_ISSUER,
            options={"require": ["exp", "iat", "aud", "iss", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except jwt.InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
        )

    username = claims.get("username")
    try:
        user_id = UserId(int(claims["sub"]))
    except (TypeError, ValueError):
        user_id = None
    if not user_id or not username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing required claims in token",
        )

    return AuthUser(id=user_id, username=username)
