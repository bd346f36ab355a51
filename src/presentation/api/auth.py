"""
Auth API Router - registration and login.

Both endpoints answer with a signed token and the public user fields:
    {"token": "<jwt>", "user": {"id": 1, "username": "alice"}}
"""

from logging import getLogger
from fastapi import APIRouter, HTTPException, Request, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from src.application.commands.auth import (
    AuthenticateUserCommand,
    AuthenticateUserHandler,
    RegisterUserCommand,
    RegisterUserHandler,
)
from src.application.dto.auth import UserDTO
from src.config.settings import Config
from src.domain.exceptions import (
    AuthenticationError,
    DomainValidationError,
    UsernameTakenError,
)
from src.presentation.dependencies.auth import create_access_token
from src.presentation.rate_limit import limiter

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CredentialsRequest(BaseModel):
    username: str
    password: str


class AuthResponse(BaseModel):
    token: str
    user: UserDTO


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/auth", tags=["auth"])


# ==================== ENDPOINTS ====================


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(Config.AUTH_RATE_LIMIT)
@inject
async def register(
    request: Request,
    body: CredentialsRequest,
    handler: FromDishka[RegisterUserHandler],
):
    """Create an account and return a token for it."""
    try:
        user = await handler.execute(
            RegisterUserCommand(username=body.username, password=body.password)
        )
    except UsernameTakenError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return AuthResponse(token=create_access_token(user), user=UserDTO.from_entity(user))


@router.post(
    "/login",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
)
@limiter.limit(Config.AUTH_RATE_LIMIT)
@inject
async def login(
    request: Request,
    body: CredentialsRequest,
    handler: FromDishka[AuthenticateUserHandler],
):
    """Exchange username and password for a token."""
    try:
        user = await handler.execute(
            AuthenticateUserCommand(username=body.username, password=body.password)
        )
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)) from e

    logger.info(f"Login successful: {user.id.value} {user.username.value}")
    return AuthResponse(token=create_access_token(user), user=UserDTO.from_entity(user))
