"""Authentication commands."""

from .register_user import RegisterUserCommand, RegisterUserHandler
from .authenticate_user import AuthenticateUserCommand, AuthenticateUserHandler

__all__ = [
    "RegisterUserCommand",
    "RegisterUserHandler",
    "AuthenticateUserCommand",
    "AuthenticateUserHandler",
]
