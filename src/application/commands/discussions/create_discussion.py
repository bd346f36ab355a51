"""
Create Discussion Command.

- Command: @dataclass(frozen=True) holding input data
- Handler: receives repositories via __init__ (DI)
- Returns: the stored Discussion (storage assigns id and created_at)
"""

import logging
import math
from dataclasses import dataclass

from src.application.common.interfaces import Command, CommandHandler
from src.domain.entities.discussion import Discussion
from src.domain.exceptions import AuthenticationError, DomainValidationError
from src.domain.ports.repositories import DiscussionRepository, UserRepository
from src.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateDiscussionCommand(Command[Discussion]):
    user_id: UserId
    start_number: float


class CreateDiscussionHandler(CommandHandler[Discussion]):
    def __init__(
        self,
        discussion_repository: DiscussionRepository,
        user_repository: UserRepository,
    ):
        self._discussion_repository = discussion_repository
        self._user_repository = user_repository

    async def execute(self, command: CreateDiscussionCommand) -> Discussion:
        if not math.isfinite(command.start_number):
            raise DomainValidationError("Start number must be a finite number")

        # Tokens can outlive their user (e.g. after a database reset)
        user = await self._user_repository.get_by_id(command.user_id)
        if not user:
            raise AuthenticationError("User not found")

        discussion = await self._discussion_repository.add(
            command.user_id, command.start_number
        )
        logger.info(
            f"Discussion {discussion.id.value} created by {user.username.value} "
            f"starting at {discussion.start_number}"
        )
        return discussion
