"""Register User Command."""

import logging
from dataclasses import dataclass

from src.application.common.interfaces import Command, CommandHandler
from src.domain.entities.user import User
from src.domain.exceptions import DomainValidationError, UsernameTakenError
from src.domain.ports.password_hasher import PasswordHasher
from src.domain.ports.repositories import UserRepository
from src.domain.value_objects.username import Username

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_LENGTH = 128


@dataclass(frozen=True)
class RegisterUserCommand(Command[User]):
    username: str
    password: str


class RegisterUserHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        self._user_repository = user_repository
        self._password_hasher = password_hasher

    async def execute(self, command: RegisterUserCommand) -> User:
        try:
            username = Username(command.username)
        except ValueError as e:
            raise DomainValidationError(str(e)) from e

        if not MIN_PASSWORD_LENGTH <= len(command.password) <= MAX_PASSWORD_LENGTH:
            raise DomainValidationError(
                f"Password must be {MIN_PASSWORD_LENGTH}-{MAX_PASSWORD_LENGTH} characters"
            )

        if await self._user_repository.get_by_username(username):
            raise UsernameTakenError(username.value)

        password_hash = self._password_hasher.hash(command.password)
        user = await self._user_repository.add(username, password_hash)
        logger.info(f"Registered user {user.id.value} ({user.username.value})")
        return user
