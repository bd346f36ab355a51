"""Authenticate User Command - verify a username/password pair."""

import logging
from dataclasses import dataclass

from src.application.common.interfaces import Command, CommandHandler
from src.domain.entities.user import User
from src.domain.exceptions import AuthenticationError
from src.domain.ports.password_hasher import PasswordHasher
from src.domain.ports.repositories import UserRepository
from src.domain.value_objects.username import Username

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticateUserCommand(Command[User]):
    username: str
    password: str


class AuthenticateUserHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        self._user_repository = user_repository
        self._password_hasher = password_hasher

    async def execute(self, command: AuthenticateUserCommand) -> User:
        """
        Raises:
            AuthenticationError: unknown username or wrong password (same message for both)
        """
        try:
            username = Username(command.username)
        except ValueError:
            raise AuthenticationError() from None

        user = await self._user_repository.get_by_username(username)
        if not user or not self._password_hasher.verify(user.password_hash, command.password):
            logger.info(f"Failed login for {username.value}")
            raise AuthenticationError()

        return user
