"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class CreateDiscussionCommand(Command[Discussion]):
        user_id: UserId
        start_number: float

    class CreateDiscussionHandler(CommandHandler[Discussion]):
        def __init__(self, discussion_repository: DiscussionRepository):
            self._discussion_repository = discussion_repository

        async def execute(self, command: CreateDiscussionCommand) -> Discussion:
            return await self._discussion_repository.add(
                command.user_id, command.start_number
            )
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...


class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
